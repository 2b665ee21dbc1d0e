"""
Hierarchy linearization for inwardly() and outwardly().

The traversal is a queue walk that starts at the root class. Each class
taken off the front of the queue is appended to a VisitationRecord. The
first time a class is sighted its direct superclasses are pushed onto the
front of the queue: in declared order for an inward walk, reversed for an
outward one. A class sighted again is not expanded a second time; instead
its earlier entry is invalidated, so the class ends up at the position of
its *last* sighting.

Keeping the last sighting is what orders reconverging branches. A
superclass shared by several subclasses is only reached after every one of
those subclasses has been placed, so inwardly() never runs a superclass
before a subclass that uses it, and outwardly() (which walks the reversed
record) never runs a subclass before a superclass it uses.

For the diamond

    Main1(Base1, Base2)    Main2(Base2, Base3)    TopLevel(Main1, Main2)

the inward order is TopLevel, Main1, Base1, Main2, Base2, Base3 and the
outward order is Base1, Base2, Main1, Base3, Main2, TopLevel.

This is not a replacement for the C3 MRO; it is only used by the traversal
wrappers.
"""

__all__ = ["VisitationRecord", "build_record", "linearize", "visitation_order"]

import collections
import logging

from .constants import Direction
from .errors import MethodUtilsError
from .graph import InheritanceGraph
from .hierarchy import resolveHierarchy

LOG = logging.getLogger(__name__)

_INVALID = object()


class VisitationRecord(object):
    """
    Ordered sightings of classes produced by one linearization run.

    Superseded sightings are invalidated in place rather than removed, so
    recorded positions stay meaningful while the record is being built.
    A record belongs to a single call and is never reused.
    """

    __slots__ = ("_entries", "_positions")

    def __init__(self):
        self._entries = []
        self._positions = {}

    def append(self, cls):
        """
        Record a sighting of cls.

        Returns:
            int: Position of the new entry.
        """
        self._entries.append(cls)
        return len(self._entries) - 1

    def invalidate(self, position):
        if self._entries[position] is _INVALID:
            raise MethodUtilsError("position %d is already invalidated" % position)
        self._entries[position] = _INVALID

    def seen(self, cls):
        return cls in self._positions

    def position_of(self, cls):
        """Return the live position of cls, or None if it was never sighted."""
        return self._positions.get(cls)

    def mark(self, cls, position):
        self._positions[cls] = position

    @property
    def sightings(self):
        """Number of sightings, superseded ones included."""
        return len(self._entries)

    def live(self):
        """Return the classes of all live entries, in record order."""
        return [cls for cls in self._entries if cls is not _INVALID]

    def __iter__(self):
        return iter(self.live())

    def __len__(self):
        return len(self._positions)

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self.live())


def build_record(root, direction, hierarchy=None):
    """
    Build the VisitationRecord for root.

    Args:
        root: Class the traversal starts from.
        direction: Direction.INWARD or Direction.OUTWARD.
        hierarchy: Hierarchy to consult (HostHierarchy by default).

    Returns:
        VisitationRecord: The completed record.

    Raises:
        CycleDetected: If the superclass graph of root is cyclic.
    """
    hierarchy = resolveHierarchy(hierarchy)
    direction = Direction(direction)

    graph = InheritanceGraph.from_root(root, hierarchy)
    graph.check_acyclic()

    visited = VisitationRecord()
    queue = collections.deque([root])

    while queue:
        cls = queue.popleft()
        position = visited.append(cls)

        if visited.seen(cls):
            visited.invalidate(visited.position_of(cls))
            visited.mark(cls, position)
            continue

        visited.mark(cls, position)
        bases = list(graph.superclasses_of(cls))
        if direction is Direction.OUTWARD:
            bases.reverse()
        # extendleft() pushes one at a time, so feed it back to front.
        queue.extendleft(reversed(bases))

    return visited


def linearize(root, direction, hierarchy=None):
    """
    Compute the deduplicated class sequence for root.

    The sequence always starts with root. For an outward traversal it is
    the sequence built with reversed superclass order; the invoker walks
    it back to front.

    Returns:
        list: Every class of the superclass closure of root, exactly once.
    """
    classes = build_record(root, direction, hierarchy).live()
    LOG.debug("linearized %r %s: %r", root, Direction(direction).value, classes)
    return classes


def visitation_order(root, direction, hierarchy=None):
    """Return the classes in the order a traversal will visit them."""
    direction = Direction(direction)
    classes = linearize(root, direction, hierarchy)
    if direction is Direction.OUTWARD:
        classes.reverse()
    return classes
