"""
Inheritance graph of a class and everything above it.

InheritanceGraph records the superclass closure of one root class as a
networkx DiGraph with an edge from every class to each of its direct
superclasses. The linearizer builds one before every traversal to refuse
cyclic graphs up front; it is also useful on its own for inspecting a
hierarchy.
"""

__all__ = ["InheritanceGraph"]

import networkx as nx

from .errors import CycleDetected
from .hierarchy import resolveHierarchy


class InheritanceGraph(object):
    """
    Superclass closure of a root class.

    Attributes:
        root: The class the closure was computed from.
        graph: networkx DiGraph, edges point from subclass to superclass.
    """

    def __init__(self, root):
        self.root = root
        self.graph = nx.DiGraph()
        self.graph.add_node(root)
        self._bases = {}

    @classmethod
    def from_root(cls, root, hierarchy=None):
        """
        Walk the direct superclasses of root until the closure is complete.

        Every class is expanded once, so the walk terminates even when the
        superclass graph is cyclic.

        Args:
            root: Class to start from.
            hierarchy: Hierarchy to consult (HostHierarchy by default).

        Returns:
            InheritanceGraph: The populated graph.
        """
        hierarchy = resolveHierarchy(hierarchy)
        result = cls(root)

        pending = [root]
        while pending:
            current = pending.pop()
            if current in result._bases:
                continue

            bases = tuple(hierarchy.direct_superclasses(current))
            result._bases[current] = bases
            for base in bases:
                result.graph.add_edge(current, base)
                if base not in result._bases:
                    pending.append(base)

        return result

    def __len__(self):
        return self.graph.number_of_nodes()

    def __contains__(self, cls):
        return self.graph.has_node(cls)

    @property
    def classes(self):
        return list(self.graph.nodes)

    def superclasses_of(self, cls):
        """Return the direct superclasses of cls in declared order."""
        return self._bases[cls]

    def ancestors_of(self, cls):
        """Return every class reachable from cls through superclass edges."""
        return nx.descendants(self.graph, cls)

    def is_acyclic(self):
        return nx.is_directed_acyclic_graph(self.graph)

    def find_cycle(self):
        """
        Return the classes forming a superclass cycle.

        Returns:
            list: Classes in superclass order, or an empty list if the graph
            is acyclic.
        """
        try:
            edges = nx.find_cycle(self.graph, source=self.root)
        except nx.NetworkXNoCycle:
            return []
        return [subclass for subclass, superclass in edges]

    def check_acyclic(self):
        """
        Raises:
            CycleDetected: If the superclass graph contains a cycle.
        """
        if not self.is_acyclic():
            raise CycleDetected(self.find_cycle())
