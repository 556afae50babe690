"""Flight paths between positions, straight or routed over a map graph."""

from __future__ import annotations

from collections.abc import Sequence

from droneroute.graph import Graph
from droneroute.pathing import AStar, BreadthFirstSearch, DepthFirstSearch, RoutingStrategy


def _coordinates(position: Sequence[float]) -> list[float]:
    if len(position) < 3:
        raise ValueError(f"a position needs three coordinates, got {len(position)}")
    return [float(position[0]), float(position[1]), float(position[2])]


def _routed_path(
    position: Sequence[float],
    destination: Sequence[float],
    graph: Graph,
    strategy: RoutingStrategy,
) -> list[list[float]]:
    return graph.get_path(_coordinates(position), _coordinates(destination), strategy)


def beeline_path(
    position: Sequence[float], destination: Sequence[float]
) -> list[list[float]]:
    """Return the straight two-point path from ``position`` to ``destination``."""
    return [_coordinates(position), _coordinates(destination)]


def astar_path(
    position: Sequence[float], destination: Sequence[float], graph: Graph
) -> list[list[float]]:
    """Route over ``graph`` with A* search using Euclidean cost and heuristic."""
    return _routed_path(position, destination, graph, AStar())


def bfs_path(
    position: Sequence[float], destination: Sequence[float], graph: Graph
) -> list[list[float]]:
    """Route over ``graph`` with breadth-first search."""
    return _routed_path(position, destination, graph, BreadthFirstSearch())


def dfs_path(
    position: Sequence[float], destination: Sequence[float], graph: Graph
) -> list[list[float]]:
    """Route over ``graph`` with depth-first search."""
    return _routed_path(position, destination, graph, DepthFirstSearch())