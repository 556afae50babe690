import pytest

from droneroute.battery import (
    CHARGERS,
    FULL_BATTERY,
    STATIONARY_CONSUMPTION_RATE,
    flyable_distance,
    nearest_charger,
    path_length,
    point_distance,
)


def test_point_distance_known_triangle():
    assert point_distance((0.0, 0.0, 0.0), (3.0, 4.0, 0.0)) == pytest.approx(5.0)


def test_point_distance_is_symmetric():
    p = (1.0, -2.0, 7.5)
    q = (-4.0, 3.0, 0.25)
    assert point_distance(p, q) == pytest.approx(point_distance(q, p))


def test_point_distance_to_self_is_zero():
    assert point_distance((5.0, 6.0, 7.0), (5.0, 6.0, 7.0)) == 0.0


def test_path_length_sums_segments():
    a, b, c = (0.0, 0.0, 0.0), (1.0, 2.0, 2.0), (4.0, 6.0, 2.0)
    expected = point_distance(a, b) + point_distance(b, c)
    assert path_length([a, b, c]) == pytest.approx(expected)


def test_path_length_two_points_matches_distance():
    a, b = (2.0, 2.0, 2.0), (-1.0, 0.0, 9.0)
    assert path_length([a, b]) == pytest.approx(point_distance(a, b))


@pytest.mark.parametrize("path", [[], [(0.0, 0.0, 0.0)]])
def test_path_length_needs_two_points(path):
    with pytest.raises(ValueError, match="at least two points"):
        path_length(path)


def test_path_length_needs_three_coordinates():
    with pytest.raises(ValueError, match="three coordinates"):
        path_length([(0.0, 0.0, 0.0), (1.0, 2.0)])


def test_nearest_charger_at_station():
    station = CHARGERS[7]
    assert nearest_charger(station) == station


def test_nearest_charger_first_listed():
    assert nearest_charger((498.292, 270, -228.623)) == (498.292, 270.0, -228.623)


def test_nearest_charger_custom_list_first_on_tie():
    chargers = [(1.0, 0.0, 0.0), (-1.0, 0.0, 0.0)]
    assert nearest_charger((0.0, 0.0, 0.0), chargers) == (1.0, 0.0, 0.0)


def test_nearest_charger_is_no_farther_than_any_other():
    position = (100.0, 250.0, 100.0)
    best = nearest_charger(position)
    assert all(
        point_distance(position, best) <= point_distance(position, c) for c in CHARGERS
    )


def test_nearest_charger_without_chargers_raises():
    with pytest.raises(ValueError):
        nearest_charger((0.0, 0.0, 0.0), [])


def test_flyable_distance_scales_with_speed():
    one = flyable_distance(FULL_BATTERY, STATIONARY_CONSUMPTION_RATE, 1.0)
    three = flyable_distance(FULL_BATTERY, STATIONARY_CONSUMPTION_RATE, 3.0)
    assert three == pytest.approx(3 * one)


def test_flyable_distance_invariant():
    battery, rate, speed = 42.0, 0.5, 30.0
    assert flyable_distance(battery, rate, speed) * rate == pytest.approx(battery * speed)


def test_flyable_distance_empty_battery():
    assert flyable_distance(0.0, STATIONARY_CONSUMPTION_RATE, 30.0) == 0.0