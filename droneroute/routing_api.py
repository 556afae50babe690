"""Entry point for loading routing graphs from map files."""

from __future__ import annotations

import os
from typing import Protocol

from droneroute.graph import Graph
from droneroute.obj_graph import ObjGraphFactory
from droneroute.osm_parser import OSMGraphFactory


class _GraphFactory(Protocol):
    def create(self, path: str | os.PathLike) -> Graph | None: ...


class RoutingAPI:
    """Loads graphs by asking each registered factory in turn."""

    def __init__(self) -> None:
        self._factories: list[_GraphFactory] = [OSMGraphFactory(), ObjGraphFactory()]

    def load_from_file(self, path: str | os.PathLike) -> Graph | None:
        """Return the first graph a factory creates from ``path``, or None."""
        for factory in self._factories:
            graph = factory.create(path)
            if graph is not None:
                return graph
        return None

    def add_factory(self, factory: _GraphFactory) -> None:
        """Register another factory, consulted after the existing ones."""
        self._factories.append(factory)