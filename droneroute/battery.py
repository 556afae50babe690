"""Battery range calculations and charging station lookup for drones."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

FULL_BATTERY = 100.0
STATIONARY_CONSUMPTION_RATE = 0.5

CHARGERS: tuple[tuple[float, float, float], ...] = (
    (498.292, 270, -228.623),
    (-698.510, 254.664, 13.222),
    (-282.063, 254.664, -95.990),
    (143.436, 254.664, -107.486),
    (-23.485, 254.664, -93.116),
    (-255.850, 254.664, -236.818),
    (-22.485, 254.664, -228.195),
    (264.146, 254.664, -219.573),
    (-309.223, 254.664, 85.073),
    (113.259, 254.664, 217.279),
    (390.891, 254.664, 277.633),
    (-918.805, 254.664, 47.711),
    (-903.716, 254.664, -170.715),
    (-939.929, 254.664, 314.996),
    (-816.202, 254.664, 562.163),
    (-656.262, 254.664, 309.248),
    (-562.712, 254.664, 579.407),
    (-1063.656, 254.664, 562.163),
    (-1244.720, 254.664, 214.405),
    (37.816, 254.664, -472.488),
    (396.926, 254.664, 16.096),
    (635.327, 254.664, -95.990),
    (743.965, 254.664, 162.672),
    (571.955, 254.664, -294.298),
    (170.596, 254.664, -679.419),
)


def point_distance(p1: Sequence[float], p2: Sequence[float]) -> float:
    """Return the Euclidean distance between two 3D points."""
    return math.sqrt(
        (p2[0] - p1[0]) ** 2 + (p2[1] - p1[1]) ** 2 + (p2[2] - p1[2]) ** 2
    )


def path_length(path: Sequence[Sequence[float]]) -> float:
    """Return the summed length of a path's segments.

    A path needs at least two points, each of exactly three coordinates.
    """
    if len(path) < 2:
        raise ValueError("Path must contain at least two points")
    total = 0.0
    for previous, current in zip(path, path[1:]):
        if len(previous) != 3 or len(current) != 3:
            raise ValueError(
                "Each point must have exactly three coordinates (x, y, and z)"
            )
        total += point_distance(previous, current)
    return total


def nearest_charger(
    position: Sequence[float],
    chargers: Iterable[Sequence[float]] = CHARGERS,
) -> tuple[float, float, float]:
    """Return the charger closest to ``position``, the first one on ties."""
    best: Sequence[float] | None = None
    best_distance = math.inf
    for charger in chargers:
        distance = point_distance(position, charger)
        if distance < best_distance:
            best = charger
            best_distance = distance
    if best is None:
        raise ValueError("No chargers available.")
    return (float(best[0]), float(best[1]), float(best[2]))


def flyable_distance(
    battery_level: float, consumption_rate: float, speed: float
) -> float:
    """Return how far a drone can fly on its remaining battery."""
    return battery_level / consumption_rate * speed