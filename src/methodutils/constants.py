"""
Constants shared by the linearizer, the invoker and the collaborators.

**Directions:**
- INWARD: start at the receiver's class and move towards its superclasses
- OUTWARD: start at the base-most superclasses and end at the receiver's class
"""

import enum


class Direction(enum.Enum):
    """Orientation of a hierarchy traversal."""

    INWARD = "inward"
    OUTWARD = "outward"

    def __repr__(self):
        return "Direction.%s" % self.name


INWARD = Direction.INWARD
OUTWARD = Direction.OUTWARD

# Left out of HostHierarchy superclass lists unless configured otherwise.
DEFAULT_EXCLUDED_CLASSES = frozenset([object])
