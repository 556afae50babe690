"""Road-graph loading, path finding and battery range helpers for drones."""

__version__ = "0.1.0"

__all__ = [
    "battery",
    "bounding_box",
    "distance",
    "graph",
    "obj_graph",
    "osm_graph",
    "osm_parser",
    "pathing",
    "point3",
    "routes",
    "routing_api",
]