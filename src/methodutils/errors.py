"""
Exception classes for hierarchy traversal and guarded dispatch.

All errors are raised synchronously at the point of detection. Exceptions
raised by the invoked method implementations themselves are never wrapped;
they reach the caller unchanged.
"""

__all__ = [
    "MethodUtilsError",
    "UnknownMethod",
    "CycleDetected",
    "NullReceiver",
    "InvalidMethodName",
    "UnknownClass",
    "DuplicateClass",
]


class MethodUtilsError(Exception):
    """Base class for every error raised by methodutils."""
    pass


class UnknownMethod(MethodUtilsError, AttributeError):
    """
    Exception for a method that cannot be found.

    Neither the traversal wrappers nor possibly() raise this: a class that
    does not define the method simply does not take part, and possibly()
    reports absence through the ABSENT sentinel.
    """
    pass


class CycleDetected(MethodUtilsError):
    """
    Exception raised when a superclass graph loops back on itself.

    Ordinary Python classes cannot form a cycle, so this is only seen with
    hand-built hierarchies such as a ClassRegistry.

    Attributes:
        cycle: Classes forming the cycle, in superclass order.
    """

    def __init__(self, cycle):
        self.cycle = list(cycle)
        MethodUtilsError.__init__(
            self,
            "cyclic superclass graph: %s"
            % " -> ".join(_className(c) for c in self.cycle + self.cycle[:1]),
        )


class NullReceiver(MethodUtilsError, TypeError):
    """Exception raised when a wrapped method is called on None."""
    pass


class InvalidMethodName(MethodUtilsError, ValueError):
    """
    Exception raised by a factory given an unusable method name.

    Attributes:
        method_name: The rejected value.
    """

    def __init__(self, method_name):
        self.method_name = method_name
        MethodUtilsError.__init__(
            self, "expected a method name, got %r instead" % (method_name,)
        )


class UnknownClass(MethodUtilsError, LookupError):
    """Exception raised by a ClassRegistry for a name it never defined."""
    pass


class DuplicateClass(MethodUtilsError):
    """Exception raised when a ClassRegistry name is defined twice."""
    pass


def _className(cls):
    return getattr(cls, "__qualname__", None) or str(cls)
