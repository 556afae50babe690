"""Abstract graph of named, positioned nodes."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

from droneroute.bounding_box import BoundingBox
from droneroute.distance import DistanceFunction, EuclideanDistance

if TYPE_CHECKING:
    from droneroute.pathing import RoutingStrategy


class GraphNode(ABC):
    """A named node with a position and outgoing neighbours."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The node's unique name."""

    @property
    @abstractmethod
    def neighbors(self) -> Sequence[GraphNode]:
        """Nodes reachable from this one."""

    @property
    @abstractmethod
    def position(self) -> list[float]:
        """The node's coordinates."""


class Graph(ABC):
    """A graph of nodes that can answer spatial and routing queries."""

    @abstractmethod
    def get_node(self, name: str) -> GraphNode | None:
        """Return the node with the given name, or None."""

    @property
    @abstractmethod
    def nodes(self) -> Sequence[GraphNode]:
        """All nodes in the graph."""

    def bounding_box(self) -> BoundingBox:
        """Return the smallest box that holds every node position."""
        box = BoundingBox()
        for node in self.nodes:
            pos = list(node.position)
            if not box.min:
                box.min = list(pos)
                box.max = list(pos)
                continue
            for j, value in enumerate(pos):
                box.min[j] = min(box.min[j], value)
                box.max[j] = max(box.max[j], value)
        return box

    def nearest_node(
        self, point: Sequence[float], distance: DistanceFunction
    ) -> GraphNode | None:
        """Return the node closest to ``point``, the first one on ties."""
        closest = None
        best = math.inf
        for node in self.nodes:
            d = distance.calculate(node.position, point)
            if d < best:
                closest = node
                best = d
        return closest

    def get_path(
        self,
        src: Sequence[float],
        dest: Sequence[float],
        strategy: RoutingStrategy,
    ) -> list[list[float]]:
        """Route between the nodes nearest ``src`` and ``dest``.

        The result starts with the start node's position and ends with the
        end node's position, with the strategy's route in between.
        """
        euclidean = EuclideanDistance()
        start = self.nearest_node(src, euclidean)
        end = self.nearest_node(dest, euclidean)
        if start is None or end is None:
            raise ValueError("cannot route in a graph with no nodes")
        names = strategy.find_path(self, start.name, end.name)
        path = [list(start.position)]
        for name in names:
            node = self.get_node(name)
            if node is None:
                raise KeyError(name)
            path.append(list(node.position))
        path.append(list(end.position))
        return path