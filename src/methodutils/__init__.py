"""methodutils - functional-style utilities for method calls.
"""

__version__ = "0.1.0"

from .constants import Direction, INWARD, OUTWARD
from .errors import (
    MethodUtilsError,
    UnknownMethod,
    CycleDetected,
    NullReceiver,
    InvalidMethodName,
    UnknownClass,
    DuplicateClass,
)
from .sentinel import ABSENT, isAbsent
from .hierarchy import Hierarchy, HostHierarchy, DEFAULT_HIERARCHY
from .registry import ClassRegistry, RegisteredClass, RegistryInstance
from .graph import InheritanceGraph
from .linearize import VisitationRecord, build_record, linearize, visitation_order
from .invoke import invoke
from .modifiers import possibly, inwardly, outwardly

__all__ = [
    "possibly",
    "inwardly",
    "outwardly",
    "linearize",
    "visitation_order",
    "build_record",
    "invoke",
    "VisitationRecord",
    "Direction",
    "INWARD",
    "OUTWARD",
    "ABSENT",
    "isAbsent",
    "Hierarchy",
    "HostHierarchy",
    "DEFAULT_HIERARCHY",
    "ClassRegistry",
    "RegisteredClass",
    "RegistryInstance",
    "InheritanceGraph",
    "MethodUtilsError",
    "UnknownMethod",
    "CycleDetected",
    "NullReceiver",
    "InvalidMethodName",
    "UnknownClass",
    "DuplicateClass",
    "__version__",
]
