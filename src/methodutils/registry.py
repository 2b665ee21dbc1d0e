"""
Explicit class registry for hierarchies that are not Python classes.

A ClassRegistry holds named classes, their declared superclasses and their
local method tables. It implements the Hierarchy collaborator interface, so
inwardly(), outwardly() and possibly() work on registered classes exactly
as they do on Python classes.

Superclass names are resolved when a traversal asks for them, not when a
class is defined. A class may therefore name a superclass that is defined
later, and a registry can describe a cyclic graph, which the linearizer
rejects with CycleDetected.
"""

__all__ = ["ClassRegistry", "RegisteredClass", "RegistryInstance"]

import logging

from .errors import DuplicateClass, NullReceiver, UnknownClass
from .hierarchy import Hierarchy
from .sentinel import ABSENT

LOG = logging.getLogger(__name__)


class RegisteredClass(object):
    """
    A single class definition held by a ClassRegistry.

    Attributes:
        name: The class name.
        bases: Names of the direct superclasses, in declared order.
        methods: Mapping of method name to function. Functions are called
            with the receiver as their first argument.
    """

    __slots__ = ("name", "bases", "methods")

    def __init__(self, name, bases=(), methods=None):
        self.name = name
        self.bases = tuple(bases)
        self.methods = dict(methods or {})

    def __repr__(self):
        return "<RegisteredClass %s(%s)>" % (self.name, ", ".join(self.bases))


class RegistryInstance(object):
    """
    A receiver whose class lives in a ClassRegistry.

    Keyword arguments given at creation become attributes, which gives the
    registered methods somewhere to keep state.
    """

    def __init__(self, class_name, /, **attrs):
        if "_class_name" in attrs:
            raise TypeError("_class_name cannot be set as an instance attribute")
        self.__dict__.update(attrs)
        self._class_name = class_name

    def __repr__(self):
        return "<%s instance>" % self._class_name


class ClassRegistry(Hierarchy):
    """
    Registry of named classes usable as a Hierarchy.

    Classes are identified by name. A receiver is either a RegistryInstance
    created by instance(), or a registered class name for class-level calls.
    """

    __slots__ = ("names",)

    def __init__(self):
        self.names = {}

    def define(self, name, bases=(), methods=None):
        """
        Register a new class.

        Args:
            name: The class name.
            bases: Names of the direct superclasses, in declared order.
            methods: Optional mapping of method name to function.

        Returns:
            RegisteredClass: The new definition.

        Raises:
            DuplicateClass: If name is already registered.
        """
        if name in self.names:
            raise DuplicateClass("class %r is already defined" % (name,))
        node = RegisteredClass(name, bases, methods)
        self.names[name] = node
        LOG.debug("defined %r", node)
        return node

    def get(self, name):
        """
        Raises:
            UnknownClass: If name was never defined.
        """
        try:
            return self.names[name]
        except KeyError:
            raise UnknownClass("class %r is not defined" % (name,)) from None

    def add_method(self, name, method_name, func):
        self.get(name).methods[method_name] = func

    def instance(self, name, /, **attrs):
        """Create a receiver of the registered class name."""
        self.get(name)
        return RegistryInstance(name, **attrs)

    def __contains__(self, name):
        return name in self.names

    def __len__(self):
        return len(self.names)

    def class_of(self, receiver):
        if receiver is None:
            raise NullReceiver("cannot traverse the hierarchy of None")
        if isinstance(receiver, RegistryInstance):
            name = receiver._class_name
        else:
            name = receiver
        self.get(name)
        return name

    def direct_superclasses(self, cls):
        return self.get(cls).bases

    def defines_locally(self, cls, method_name):
        return method_name in self.get(cls).methods

    def invoke_local(self, cls, method_name, receiver, args, kwargs):
        return self.get(cls).methods[method_name](receiver, *args, **kwargs)

    def resolve(self, cls, method_name):
        """
        Find the class that ordinary dispatch would take method_name from.

        The search is depth-first and left to right over declared
        superclasses, and the first class defining the method wins.

        Returns:
            The defining class name, or None.
        """
        seen = set()
        stack = [cls]
        while stack:
            current = stack.pop()
            if current in seen:
                continue
            seen.add(current)

            if self.defines_locally(current, method_name):
                return current
            stack.extend(reversed(self.direct_superclasses(current)))
        return None

    def resolve_and_invoke(self, receiver, method_name, args, kwargs):
        owner = self.resolve(self.class_of(receiver), method_name)
        if owner is None:
            LOG.debug("%r has no method %s", receiver, method_name)
            return ABSENT
        return self.invoke_local(owner, method_name, receiver, args, kwargs)
