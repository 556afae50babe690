# droneroute

Load road networks from OpenStreetMap (`.osm`) or Wavefront (`.obj`) files and
find paths through them, with a few helpers for drone battery range. The
package uses only the standard library.

## Installation

```
pip install droneroute
```

To run the test suite:

```
pip install "droneroute[test]"
pytest
```

## Loading a graph

`RoutingAPI` asks each registered factory in turn and returns the first graph
one of them creates, or `None` if no factory accepts the file:

```python
from droneroute.routing_api import RoutingAPI

graph = RoutingAPI().load_from_file("map.osm")   # or "mesh.obj"
```

The built-in factories are `OSMGraphFactory` (files ending in `.osm`) and
`ObjGraphFactory` (files ending in `.obj`). Any object with a `create(path)`
method that returns a graph or `None` can be registered with
`RoutingAPI.add_factory`; it is consulted after the existing ones.

### OpenStreetMap files

`droneroute.osm_parser.parse_osm(source)` reads every `node` element and links
the consecutive `nd` references of each `way` that carries a `highway` tag, in
both directions. It accepts a path or an open file. Coordinates are projected
to metres around the centre of the document's `bounds` element, with every
node at height 264; a document without usable bounds raises `ValueError`.
Malformed nodes and references to unknown nodes are skipped with a logged
warning.

`load_graph_from_file(filename)` parses a file and keeps only its largest
connected component, so nodes that lie on no highway drop out. The graph
helpers it is built from are public too:

- `connected_components(graph)` maps each node name to a component index.
- `filter_graph(graph, keep)` copies the nodes marked `True` and the edges
  between them.
- `largest_connected_component(graph)` returns a copy of the biggest component.
- `without_lonely_nodes(graph)` drops nodes with no neighbours.

### OBJ meshes

`droneroute.obj_graph.ObjGraph(path)` names vertices `"1"`, `"2"`, ... in file
order, places a vertex `(x, y, z)` at `(x, z, -y)`, and links the three
vertices of each face in both directions. A file that cannot be opened gives
an empty graph. `parse_obj(lines)` does the same for lines already in memory.

Both graph types are `OSMGraph` instances: `add_node`, `add_edge`,
`node_named`, `get_node`, `nodes`, `len(graph)` and `name in graph`.

## Finding paths

`Graph.get_path(src, dest, strategy)` snaps the source and destination to
their nearest nodes, searches between them with a routing strategy, and
returns a list of positions that starts with the start node and ends with the
end node:

```python
from droneroute.distance import EuclideanDistance
from droneroute.pathing import AStar, BreadthFirstSearch, DepthFirstSearch

astar = AStar(EuclideanDistance(), EuclideanDistance())
path = graph.get_path([0.0, 264.0, 0.0], [120.0, 264.0, -40.0], astar)
```

`AStar` uses Euclidean cost and heuristic when none are given. Each strategy's
`find_path(graph, start, goal)` returns node names, `[]` when the goal cannot
be reached, and raises `ValueError` if either end is not in the graph.

`droneroute.routes` wraps this for three-component positions:

```python
from droneroute.routes import astar_path, beeline_path, bfs_path, dfs_path

straight = beeline_path((0, 264, 0), (100, 264, 50))
roads = astar_path((0, 264, 0), (100, 264, 50), graph)
```

## Battery helpers

`droneroute.battery` holds the distance arithmetic a battery-aware drone
needs:

- `point_distance(p1, p2)` gives the distance between two points.
- `path_length(path)` gives the total length of a path; it raises
  `ValueError` for fewer than two points or for points that are not 3-D.
- `nearest_charger(position, chargers=CHARGERS)` picks the closest charging
  station from a built-in list, or from one you pass; an empty list raises
  `ValueError`.
- `flyable_distance(battery_level, consumption_rate, speed)` gives how far the
  remaining charge will carry the drone.

`FULL_BATTERY` and `STATIONARY_CONSUMPTION_RATE` give the usual starting level
and consumption rate.

## Other building blocks

- `Point3` is a small immutable 3-D point.
- `BoundingBox` records the extent of a graph (`Graph.bounding_box()`) and can
  normalise points to it.
- `EuclideanDistance` and `ZeroDistance` are distance functions, usable as
  costs and heuristics for `AStar` and as metrics for `Graph.nearest_node`.

## What this package does not do

It is a routing library only. It does not run a delivery simulation, model
drones, packages or other entities, keep battery state over time, or serve a
web view; those are left to the program that uses it.