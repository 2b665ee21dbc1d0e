"""
The ABSENT sentinel returned by possibly() when a method does not exist.

ABSENT is built with a singleton metaclass: defining the class creates its
one instance, and the class name is bound to that instance rather than to
the class. It is falsy, distinct from None, and copies and unpickles as
itself.
"""

__all__ = ("ABSENT", "isAbsent")


class singletonMetaclass(type):
    """
    Metaclass that replaces a class definition by its only instance.

    The class itself is renamed with a "Type" suffix so that reprs and
    tracebacks still say which object they are talking about.
    """

    def __new__(self, name, bases, d):
        if "__repr__" not in d:
            def __repr__(self):
                return name
            d["__repr__"] = __repr__

        if "__reduce__" not in d:
            # Pickled by reference to the module global of the same name.
            def __reduce__(self):
                return name
            d["__reduce__"] = __reduce__

        cls = type.__new__(self, name + "Type", bases, d)
        return cls()


class ABSENT(object, metaclass=singletonMetaclass):
    """
    Result of possibly() when the receiver has no such method.

    A method that runs and returns None produces None, never ABSENT.
    """

    __slots__ = ()

    def __bool__(self):
        return False


def isAbsent(value):
    """Return True if value is the ABSENT sentinel."""
    return value is ABSENT
