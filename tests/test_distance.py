import pytest

from droneroute.distance import DistanceFunction, EuclideanDistance, ZeroDistance


def test_euclidean_pinned():
    assert EuclideanDistance().calculate([0.0, 0.0], [3.0, 4.0]) == pytest.approx(5.0)


def test_euclidean_symmetric():
    d = EuclideanDistance()
    a, b = [1.0, -2.0, 3.5], [4.0, 0.0, -1.0]
    assert d.calculate(a, b) == pytest.approx(d.calculate(b, a))


def test_euclidean_self_matches_zero_distance():
    point = [7.0, 8.0, 9.0]
    assert EuclideanDistance().calculate(point, point) == ZeroDistance().calculate(point, [1.0])


def test_euclidean_uses_shared_length():
    d = EuclideanDistance()
    assert d.calculate([3.0, 4.0], [0.0, 0.0, 99.0]) == d.calculate([3.0, 4.0], [0.0, 0.0])


def test_zero_distance():
    assert ZeroDistance().calculate([1.0, 2.0, 3.0], [100.0, -50.0, 7.0]) == 0.0


def test_abstract_cannot_be_instantiated():
    with pytest.raises(TypeError):
        DistanceFunction()