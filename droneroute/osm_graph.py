"""Graphs of named map nodes built from OpenStreetMap data."""

from __future__ import annotations

from collections.abc import Sequence

from droneroute.graph import Graph, GraphNode
from droneroute.point3 import Point3


class OSMNode(GraphNode):
    """A map node with a fixed location and directed links to neighbours."""

    def __init__(self, location: Point3, name: str) -> None:
        self.location = location
        self._name = name
        self._neighbours: list[GraphNode] = []

    def add_neighbour(self, other: GraphNode) -> None:
        """Add a directed link from this node to ``other``."""
        self._neighbours.append(other)

    @property
    def name(self) -> str:
        return self._name

    @property
    def neighbors(self) -> Sequence[GraphNode]:
        return self._neighbours

    @property
    def position(self) -> list[float]:
        return self.location.to_list()

    def __repr__(self) -> str:
        return f"OSMNode({self.location!r}, {self._name!r})"


class OSMGraph(Graph):
    """A graph of uniquely named nodes with directed edges."""

    def __init__(self) -> None:
        self._nodes: list[OSMNode] = []
        self._lookup: dict[str, OSMNode] = {}

    def add_node(self, node: OSMNode) -> None:
        """Add a node; a name that is already present raises ValueError."""
        if node.name in self._lookup:
            raise ValueError(f"duplicate node: {node.name}")
        self._lookup[node.name] = node
        self._nodes.append(node)

    def add_edge(self, name1: str, name2: str) -> None:
        """Add a directed edge between two existing nodes."""
        first = self.node_named(name1)
        second = self.node_named(name2)
        first.add_neighbour(second)

    def node_named(self, name: str) -> OSMNode:
        """Return the node with this name; raise KeyError if there is none."""
        try:
            return self._lookup[name]
        except KeyError:
            raise KeyError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._lookup

    def __len__(self) -> int:
        return len(self._nodes)

    def get_node(self, name: str) -> OSMNode | None:
        return self._lookup.get(name)

    @property
    def nodes(self) -> Sequence[OSMNode]:
        return self._nodes