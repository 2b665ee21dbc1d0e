"""
Invocation of a method on every class of a linearized hierarchy.
"""

__all__ = ["invoke"]

import logging

from .constants import Direction
from .hierarchy import resolveHierarchy

LOG = logging.getLogger(__name__)


def invoke(ordered_classes, direction, method_name, receiver, args=(), kwargs=None, hierarchy=None):
    """
    Run the local definition of method_name on each class that has one.

    Inward traversals walk ordered_classes front to back, outward ones back
    to front. Classes without a local definition are skipped. Return values
    are discarded, and an exception from any implementation propagates at
    once, leaving the remaining classes unvisited.

    Args:
        ordered_classes: Sequence produced by linearize().
        direction: Direction the sequence was linearized in.
        method_name: Name of the method to run.
        receiver: Object (or class) passed as the first argument.
        args: Positional arguments for every implementation.
        kwargs: Keyword arguments for every implementation.
        hierarchy: Hierarchy to consult (HostHierarchy by default).
    """
    hierarchy = resolveHierarchy(hierarchy)
    if kwargs is None:
        kwargs = {}

    if Direction(direction) is Direction.OUTWARD:
        ordered_classes = reversed(ordered_classes)

    for cls in ordered_classes:
        if not hierarchy.defines_locally(cls, method_name):
            continue
        LOG.debug("invoking %r.%s", cls, method_name)
        hierarchy.invoke_local(cls, method_name, receiver, args, kwargs)
