"""Three-dimensional points used for map node locations."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Point3:
    """An immutable point in three-dimensional space."""

    x: float
    y: float
    z: float

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> Point3:
        """Build a point from the first three values of a sequence."""
        if len(values) < 3:
            raise ValueError(f"a point needs three coordinates, got {len(values)}")
        return cls(float(values[0]), float(values[1]), float(values[2]))

    def to_list(self) -> list[float]:
        """Return the coordinates as a list ``[x, y, z]``."""
        return [self.x, self.y, self.z]

    def distance_to(self, other: Point3) -> float:
        """Return the Euclidean distance to another point."""
        return math.dist(self.to_list(), other.to_list())

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]