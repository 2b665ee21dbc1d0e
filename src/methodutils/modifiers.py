"""
Method call modifiers.

Each factory takes a method name and returns a plain function whose first
argument is the receiver. It can be called directly,

    possibly("bounce")(ball, "10 metres")

or stored on a class, where it binds like any other method:

    class Ball(object):
        bounce_if_you_can = possibly("bounce")
        setup_all = outwardly("setup")

possibly() makes one ordinary call if the method exists. inwardly() and
outwardly() call the method once for *every* class in the hierarchy of the
receiver that defines it, not just the first one found.
"""

__all__ = ["possibly", "inwardly", "outwardly"]

from .constants import Direction
from .errors import InvalidMethodName, NullReceiver
from .hierarchy import resolveHierarchy
from .invoke import invoke
from .linearize import linearize


def checkMethodName(method_name):
    """
    Raises:
        InvalidMethodName: Unless method_name is a non-empty string.
    """
    if not isinstance(method_name, str) or not method_name:
        raise InvalidMethodName(method_name)
    return method_name


def _decorate(func, prefix, method_name, direction, hierarchy):
    func.__name__ = func.__qualname__ = "%s_%s" % (prefix, method_name)
    func.method_name = method_name
    func.direction = direction
    func.hierarchy = hierarchy
    return func


def possibly(method_name, hierarchy=None):
    """
    Call method_name on the receiver if it has such a method.

    The method is found by ordinary dispatch. If the receiver has no such
    method the call returns ABSENT; otherwise it returns whatever the method
    returned, None included.

    Args:
        method_name: Name of the method to call.
        hierarchy: Hierarchy to dispatch through (HostHierarchy by default).

    Returns:
        function: (receiver, *args, **kwargs) -> result or ABSENT.
    """
    checkMethodName(method_name)
    hierarchy = resolveHierarchy(hierarchy)

    def possiblyCall(receiver, *args, **kwargs):
        if receiver is None:
            raise NullReceiver("cannot call %r on None" % (method_name,))
        return hierarchy.resolve_and_invoke(receiver, method_name, args, kwargs)

    return _decorate(possiblyCall, "possibly", method_name, None, hierarchy)


def _traversal(method_name, direction, hierarchy):
    checkMethodName(method_name)
    hierarchy = resolveHierarchy(hierarchy)

    def traverse(receiver, *args, **kwargs):
        root = hierarchy.class_of(receiver)
        classes = linearize(root, direction, hierarchy)
        invoke(classes, direction, method_name, receiver, args, kwargs, hierarchy)

    return _decorate(traverse, direction.value + "ly", method_name, direction, hierarchy)


def inwardly(method_name, hierarchy=None):
    """
    Call method_name once on every class in the hierarchy that defines it.

    The search starts at the class of the receiver (or at the receiver, if
    it is a class) and moves towards its superclasses. With multiple
    inheritance, superclasses are searched in declared order, and a
    superclass reached along several paths is searched only after every
    subclass that uses it.

    Args:
        method_name: Name of the method to call.
        hierarchy: Hierarchy to traverse (HostHierarchy by default).

    Returns:
        function: (receiver, *args, **kwargs) -> None.
    """
    return _traversal(method_name, Direction.INWARD, hierarchy)


def outwardly(method_name, hierarchy=None):
    """
    Call method_name once on every class in the hierarchy that defines it.

    The search starts at the base-most superclasses and moves outwards,
    finishing at the class of the receiver. A superclass reached along
    several paths is searched before every subclass that uses it.

    Args:
        method_name: Name of the method to call.
        hierarchy: Hierarchy to traverse (HostHierarchy by default).

    Returns:
        function: (receiver, *args, **kwargs) -> None.
    """
    return _traversal(method_name, Direction.OUTWARD, hierarchy)
