"""Route search strategies over a graph of named nodes."""

from __future__ import annotations

import heapq
import itertools
import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import TYPE_CHECKING, Callable

from droneroute.distance import DistanceFunction, EuclideanDistance

if TYPE_CHECKING:
    from droneroute.graph import Graph, GraphNode

logger = logging.getLogger(__name__)

# A route is kept as a linked chain (name, parent) so extending it is cheap.
_Chain = tuple


def _unwind(chain: _Chain | None) -> list[str]:
    names = []
    while chain is not None:
        name, chain = chain
        names.append(name)
    names.reverse()
    return names


def _check_endpoints(graph: Graph, start: str, goal: str) -> GraphNode:
    if graph.get_node(start) is None:
        raise ValueError(f"'from' node not found in graph: {start}")
    terminal = graph.get_node(goal)
    if terminal is None:
        raise ValueError(f"'to' node not found in graph: {goal}")
    return terminal


def _lookup(graph: Graph, name: str) -> GraphNode | None:
    node = graph.get_node(name)
    if node is None:
        logger.warning("Encountered node not in graph, named: %s; ignoring", name)
    return node


def _uninformed_search(
    graph: Graph, start: str, goal: str, take: Callable[[deque], _Chain]
) -> list[str]:
    """Expand routes from a frontier, taking the next one with ``take``."""
    _check_endpoints(graph, start, goal)
    visited = {start}
    frontier: deque = deque([(start, None)])

    while frontier:
        chain = take(frontier)
        node = _lookup(graph, chain[0])
        if node is None:
            continue
        for nxt in node.neighbors:
            next_name = nxt.name
            if next_name == goal:
                return _unwind((next_name, chain))
            if next_name not in visited:
                visited.add(next_name)
                frontier.append((next_name, chain))
    return []


class RoutingStrategy(ABC):
    """Finds a sequence of node names leading from one node to another."""

    @abstractmethod
    def find_path(self, graph: Graph, start: str, goal: str) -> list[str]:
        """Return the node names from ``start`` to ``goal``, or [] if unreachable."""


class AStar(RoutingStrategy):
    """Best-first search ordered by travelled cost plus a heuristic estimate."""

    def __init__(
        self,
        cost: DistanceFunction | None = None,
        heuristic: DistanceFunction | None = None,
    ) -> None:
        self.cost = cost if cost is not None else EuclideanDistance()
        self.heuristic = heuristic if heuristic is not None else EuclideanDistance()

    def find_path(self, graph: Graph, start: str, goal: str) -> list[str]:
        terminal = _check_endpoints(graph, start, goal)
        order = itertools.count()
        frontier = [(0.0, next(order), 0.0, (start, None))]
        visited: set[str] = set()

        while frontier:
            _, _, travelled, chain = heapq.heappop(frontier)
            name = chain[0]
            if name in visited:
                continue
            visited.add(name)
            if name == goal:
                return _unwind(chain)

            node = _lookup(graph, name)
            if node is None:
                continue
            for nxt in node.neighbors:
                distance = travelled + self.cost.calculate(node.position, nxt.position)
                estimate = self.heuristic.calculate(nxt.position, terminal.position)
                heapq.heappush(
                    frontier,
                    (distance + estimate, next(order), distance, (nxt.name, chain)),
                )
        return []


class BreadthFirstSearch(RoutingStrategy):
    """Explores routes in order of how many hops they take."""

    def find_path(self, graph: Graph, start: str, goal: str) -> list[str]:
        return _uninformed_search(graph, start, goal, deque.popleft)


class DepthFirstSearch(RoutingStrategy):
    """Explores the most recently found route first."""

    def find_path(self, graph: Graph, start: str, goal: str) -> list[str]:
        return _uninformed_search(graph, start, goal, deque.pop)