import pytest

from droneroute.distance import EuclideanDistance, ZeroDistance
from droneroute.graph import Graph, GraphNode
from droneroute.pathing import RoutingStrategy


class _Node(GraphNode):
    def __init__(self, name, position):
        self._name = name
        self._position = list(position)
        self._neighbors = []

    @property
    def name(self):
        return self._name

    @property
    def neighbors(self):
        return self._neighbors

    @property
    def position(self):
        return list(self._position)


class _Graph(Graph):
    def __init__(self, nodes):
        self._nodes = list(nodes)
        self._lookup = {n.name: n for n in self._nodes}

    def get_node(self, name):
        return self._lookup.get(name)

    @property
    def nodes(self):
        return self._nodes


class _FixedStrategy(RoutingStrategy):
    def __init__(self, names):
        self.names = names
        self.calls = []

    def find_path(self, graph, start, goal):
        self.calls.append((start, goal))
        return list(self.names)


def _sample():
    return _Graph(
        [
            _Node("a", [0.0, 1.0, 2.0]),
            _Node("b", [5.0, -3.0, 2.5]),
            _Node("c", [-4.0, 8.0, 0.5]),
        ]
    )


def test_bounding_box_extremes():
    graph = _sample()
    box = Graph.bounding_box(graph)
    assert box.min == [-4.0, -3.0, 0.5]
    assert box.max == [5.0, 8.0, 2.5]


def test_bounding_box_contains_all_nodes():
    graph = _sample()
    box = Graph.bounding_box(graph)
    for node in graph.nodes:
        for low, value, high in zip(box.min, node.position, box.max):
            assert low <= value <= high


def test_bounding_box_empty_graph():
    box = Graph.bounding_box(_Graph([]))
    assert box.min == [] and box.max == []


def test_nearest_node():
    graph = _sample()
    node = graph.nearest_node([4.0, -2.0, 2.0], EuclideanDistance())
    assert node.name == "b"


def test_nearest_node_tie_returns_first():
    graph = _sample()
    assert graph.nearest_node([100.0, 100.0, 100.0], ZeroDistance()).name == "a"


def test_nearest_node_empty_graph():
    assert _Graph([]).nearest_node([0.0, 0.0, 0.0], EuclideanDistance()) is None


def test_get_path_wraps_strategy_route():
    graph = _sample()
    strategy = _FixedStrategy(["b"])
    path = Graph.get_path(graph, [0.1, 1.0, 2.0], [-4.0, 7.9, 0.5], strategy)
    assert strategy.calls == [("a", "c")]
    assert path == [[0.0, 1.0, 2.0], [5.0, -3.0, 2.5], [-4.0, 8.0, 0.5]]


def test_get_path_unknown_name_from_strategy():
    graph = _sample()
    with pytest.raises(KeyError):
        Graph.get_path(graph, [0.0, 1.0, 2.0], [5.0, -3.0, 2.5], _FixedStrategy(["zzz"]))


def test_get_path_empty_graph():
    with pytest.raises(ValueError):
        Graph.get_path(_Graph([]), [0.0, 0.0, 0.0], [1.0, 1.0, 1.0], _FixedStrategy([]))