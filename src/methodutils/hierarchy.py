"""
Collaborator interfaces between the traversal and an object system.

The linearizer and the invoker never look at classes directly. They ask a
Hierarchy four questions:

- which class a receiver belongs to
- which direct superclasses a class declares, in declared order
- whether a class itself (not a superclass) defines a method
- how to run that local definition against a receiver

possibly() asks a fifth one: resolve a method by ordinary dispatch and run
it, or report ABSENT.

HostHierarchy answers them for ordinary Python classes. ClassRegistry (in
methodutils.registry) answers them for hand-built class graphs.
"""

__all__ = ["Hierarchy", "HostHierarchy", "DEFAULT_HIERARCHY", "resolveHierarchy"]

import inspect
import logging

from .constants import DEFAULT_EXCLUDED_CLASSES
from .errors import NullReceiver
from .sentinel import ABSENT

LOG = logging.getLogger(__name__)


def isMethod(impl):
    """
    Return True if a class __dict__ entry is a method definition.

    Functions, builtin method descriptors and staticmethod or classmethod
    objects count. Nested classes and other callables do not.
    """
    if isinstance(impl, (staticmethod, classmethod)):
        return True
    return inspect.isroutine(impl)


class Hierarchy(object):
    """
    Abstract collaborator consulted by the traversal.

    Implementations must be safe to query from several threads at once;
    the traversal itself keeps no state between calls.
    """

    __slots__ = ()

    def class_of(self, receiver):
        """
        Return the class a traversal for receiver starts at.

        Args:
            receiver: Instance or class the wrapped method was called on.

        Returns:
            The root class identity.

        Raises:
            NullReceiver: If receiver is None.
        """
        raise NotImplementedError

    def direct_superclasses(self, cls):
        """Return the direct superclasses of cls in declared order."""
        raise NotImplementedError

    def defines_locally(self, cls, method_name):
        """Return True if cls itself defines method_name."""
        raise NotImplementedError

    def invoke_local(self, cls, method_name, receiver, args, kwargs):
        """Run the definition of method_name found on cls itself."""
        raise NotImplementedError

    def resolve_and_invoke(self, receiver, method_name, args, kwargs):
        """
        Call method_name on receiver through ordinary dispatch.

        Returns:
            Whatever the method returned, or ABSENT if the receiver has no
            such method.
        """
        raise NotImplementedError


class HostHierarchy(Hierarchy):
    """
    Hierarchy over native Python classes.

    Superclasses come from __bases__, local definitions from the class
    __dict__, and ordinary dispatch is getattr() on the receiver.

    Attributes:
        exclude: Classes never reported as superclasses.
    """

    __slots__ = ("exclude",)

    def __init__(self, exclude=DEFAULT_EXCLUDED_CLASSES):
        self.exclude = frozenset(exclude)

    def __repr__(self):
        return "%s(exclude=%r)" % (type(self).__name__, sorted(c.__name__ for c in self.exclude))

    def class_of(self, receiver):
        if receiver is None:
            raise NullReceiver("cannot traverse the hierarchy of None")
        if isinstance(receiver, type):
            return receiver
        return type(receiver)

    def direct_superclasses(self, cls):
        return tuple(base for base in cls.__bases__ if base not in self.exclude)

    def defines_locally(self, cls, method_name):
        return isMethod(vars(cls).get(method_name))

    def invoke_local(self, cls, method_name, receiver, args, kwargs):
        impl = vars(cls)[method_name]

        if isinstance(impl, staticmethod):
            return impl.__func__(*args, **kwargs)
        elif isinstance(impl, classmethod):
            owner = receiver if isinstance(receiver, type) else type(receiver)
            return impl.__func__(owner, *args, **kwargs)
        else:
            return impl(receiver, *args, **kwargs)

    def resolve_and_invoke(self, receiver, method_name, args, kwargs):
        if receiver is None:
            raise NullReceiver("cannot call %r on None" % (method_name,))

        # Plain functions found on a class receiver take the class itself as
        # their first argument.
        if isinstance(receiver, type):
            impl = inspect.getattr_static(receiver, method_name, ABSENT)
            if isMethod(impl) and not isinstance(impl, (staticmethod, classmethod)):
                return impl(receiver, *args, **kwargs)

        method = getattr(receiver, method_name, ABSENT)
        if method is ABSENT or not callable(method):
            LOG.debug("%r has no method %s", receiver, method_name)
            return ABSENT
        return method(*args, **kwargs)


DEFAULT_HIERARCHY = HostHierarchy()


def resolveHierarchy(hierarchy):
    """Return hierarchy, or the shared HostHierarchy if it is None."""
    if hierarchy is None:
        return DEFAULT_HIERARCHY
    return hierarchy
