"""Graphs built from the vertices and faces of Wavefront OBJ meshes."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from itertools import islice

from droneroute.osm_graph import OSMGraph, OSMNode
from droneroute.point3 import Point3


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


class ObjGraph(OSMGraph):
    """A graph whose nodes are mesh vertices and whose edges are face sides.

    Vertices are named "1", "2", ... in file order; a vertex ``(x, y, z)``
    is placed at ``(x, z, -y)``. Each triangular face links its three
    vertices in both directions. A file that cannot be opened gives an
    empty graph.
    """

    def __init__(self, path: str | os.PathLike | None = None) -> None:
        super().__init__()
        self._vertex_count = 0
        if path is None:
            return
        try:
            with open(path, encoding="utf-8") as handle:
                self._read(handle)
        except OSError:
            return

    def _read(self, lines: Iterable[str]) -> None:
        tokens = _tokens(lines)
        for token in tokens:
            if token == "v":
                values = list(islice(tokens, 3))
                if len(values) < 3:
                    return
                try:
                    x, y, z = (float(v) for v in values)
                except ValueError:
                    return
                self._vertex_count += 1
                self.add_node(OSMNode(Point3(x, z, -y), str(self._vertex_count)))
            elif token == "f":
                corners = list(islice(tokens, 3))
                if len(corners) < 3:
                    return
                a, b, c = corners
                for first, second in ((a, b), (b, a), (b, c), (c, b), (c, a), (a, c)):
                    self.add_edge(first, second)


def parse_obj(lines: Iterable[str]) -> ObjGraph:
    """Build a graph from the lines of an OBJ document."""
    graph = ObjGraph()
    graph._read(lines)
    return graph


class ObjGraphFactory:
    """Creates graphs from files with the ``.obj`` extension."""

    def create(self, path: str | os.PathLike) -> ObjGraph | None:
        """Load the file if it is an OBJ file; otherwise return None."""
        if not os.fspath(path).endswith(".obj"):
            return None
        return ObjGraph(path)