"""Loading road graphs from OpenStreetMap XML files."""

from __future__ import annotations

import logging
import math
import os
import xml.etree.ElementTree as ET
from collections import Counter
from collections.abc import Mapping
from itertools import pairwise
from typing import IO

from droneroute.graph import Graph
from droneroute.osm_graph import OSMGraph, OSMNode
from droneroute.point3 import Point3

logger = logging.getLogger(__name__)

_NODE_HEIGHT = 264.0
_EARTH_MERIDIAN_CIRCUMFERENCE = 40008000.0
_EARTH_EQUATOR_CIRCUMFERENCE = 40075160.0
_PI = 3.14159


def connected_components(graph: Graph) -> dict[str, int]:
    """Map each node name to the index of the component reachable from it."""
    components: dict[str, int] = {}
    index = 0
    for root in graph.nodes:
        if root.name in components:
            continue
        stack = [root]
        while stack:
            node = stack.pop()
            if node.name in components:
                continue
            components[node.name] = index
            stack.extend(reversed(node.neighbors))
        index += 1
    return components


def filter_graph(graph: Graph, keep: Mapping[str, bool]) -> OSMGraph:
    """Copy the nodes marked True in ``keep`` and the edges between them.

    Every node of ``graph`` must appear in ``keep``; otherwise KeyError.
    """
    result = OSMGraph()
    for name, include in keep.items():
        if not include:
            continue
        node = graph.get_node(name)
        if node is None:
            raise KeyError(name)
        result.add_node(OSMNode(Point3.from_sequence(node.position), node.name))

    for node in graph.nodes:
        if node.name not in keep:
            raise KeyError(node.name)
        if not keep[node.name]:
            continue
        for other in node.neighbors:
            if other.name not in keep:
                raise KeyError(node.name)
            if keep[other.name]:
                result.add_edge(node.name, other.name)
    return result


def largest_connected_component(graph: Graph) -> OSMGraph:
    """Return a copy of the graph holding only its largest component."""
    components = connected_components(graph)
    sizes = Counter(components.values())
    if not sizes:
        raise ValueError("graph has no nodes")
    largest = max(sizes, key=sizes.__getitem__)
    return filter_graph(
        graph, {name: index == largest for name, index in components.items()}
    )


def without_lonely_nodes(graph: Graph) -> OSMGraph:
    """Return a copy of the graph without nodes that have no neighbours."""
    result = OSMGraph()
    for node in graph.nodes:
        if node.neighbors:
            result.add_node(OSMNode(Point3.from_sequence(node.position), node.name))
    for node in graph.nodes:
        for other in node.neighbors:
            result.add_edge(node.name, other.name)
    return result


def _as_radians(degrees: float) -> float:
    return degrees * _PI / 180.0


def _project(lat: float, lon: float, center_lat: float, center_lon: float) -> Point3:
    latitude_circumference = _EARTH_EQUATOR_CIRCUMFERENCE * math.cos(
        _as_radians(center_lat)
    )
    x = (lon - center_lon) * latitude_circumference / 360.0
    z = -(lat - center_lat) * _EARTH_MERIDIAN_CIRCUMFERENCE / 360.0
    return Point3(x, _NODE_HEIGHT, z)


def _read_bounds(root: ET.Element) -> tuple[float, float]:
    bounds = root.find("bounds")
    if bounds is None:
        raise ValueError("OSM document has no bounds element")
    try:
        minlat = float(bounds.get("minlat"))
        minlon = float(bounds.get("minlon"))
        maxlat = float(bounds.get("maxlat"))
        maxlon = float(bounds.get("maxlon"))
    except (TypeError, ValueError) as exc:
        raise ValueError("malformed bounds element") from exc
    return minlat + (maxlat - minlat) / 2.0, minlon + (maxlon - minlon) / 2.0


def _read_nodes(root: ET.Element, graph: OSMGraph) -> None:
    center_lat, center_lon = _read_bounds(root)
    for element in root.findall("node"):
        node_id = element.get("id")
        lat = element.get("lat")
        lon = element.get("lon")
        if node_id is None:
            logger.warning("Improperly formed node missing id; continuing")
            continue
        if lat is None:
            logger.warning("Improperly formed node %s missing lat; continuing", node_id)
            continue
        if lon is None:
            logger.warning("Improperly formed node %s missing lon; continuing", node_id)
            continue
        if node_id in graph:
            logger.warning("Attempted to add duplicate node %s", node_id)
        location = _project(float(lat), float(lon), center_lat, center_lon)
        graph.add_node(OSMNode(location, node_id))


def _highway_ways(root: ET.Element) -> dict[str, ET.Element]:
    children = list(root)
    start = next(
        (i for i, child in enumerate(children) if child.tag == "way"), len(children)
    )
    ways: dict[str, ET.Element] = {}
    for element in children[start:]:
        if any(tag.get("k") == "highway" for tag in element.findall("tag")):
            ways.setdefault(element.get("id", ""), element)
    return ways


def _adjacency(root: ET.Element) -> dict[str, set[str]]:
    ways = _highway_ways(root)
    adjacency: dict[str, set[str]] = {
        nd.get("ref", ""): set()
        for way in ways.values()
        for nd in way.findall("nd")
    }
    for way in ways.values():
        children = list(way)
        start = next(
            (i for i, child in enumerate(children) if child.tag == "nd"), len(children)
        )
        for first, second in pairwise(children[start:]):
            if first.tag == "nd" and second.tag == "nd":
                a = first.get("ref", "")
                b = second.get("ref", "")
                adjacency.setdefault(a, set()).add(b)
                adjacency.setdefault(b, set()).add(a)
    return adjacency


def _read_adjacencies(root: ET.Element, graph: OSMGraph) -> None:
    for source, targets in _adjacency(root).items():
        if source not in graph:
            logger.warning("Node ID %s not found; continuing", source)
            continue
        for target in sorted(targets):
            if target not in graph:
                logger.warning("Node ID %s not found; continuing", target)
                continue
            graph.add_edge(source, target)


def parse_osm(source: str | os.PathLike | IO) -> OSMGraph:
    """Read every node and highway edge of an OSM document.

    Node coordinates are projected to metres around the centre of the
    document's bounds; every node sits at the same height.
    """
    root = ET.parse(source).getroot()
    graph = OSMGraph()
    _read_nodes(root, graph)
    _read_adjacencies(root, graph)
    return graph


def load_graph_from_file(filename: str | os.PathLike) -> OSMGraph:
    """Load an OSM file and keep only its largest connected road network."""
    return largest_connected_component(parse_osm(filename))


class OSMGraphFactory:
    """Creates graphs from files with the ``.osm`` extension."""

    def create(self, path: str | os.PathLike) -> OSMGraph | None:
        """Load the file if it is an OSM file; otherwise return None."""
        if not os.fspath(path).endswith(".osm"):
            return None
        return load_graph_from_file(path)