"""Distance functions between coordinate vectors."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Sequence


class DistanceFunction(ABC):
    """Measures the distance between two coordinate vectors."""

    @abstractmethod
    def calculate(self, a: Sequence[float], b: Sequence[float]) -> float:
        """Return the distance between ``a`` and ``b``."""


class EuclideanDistance(DistanceFunction):
    """Straight-line distance over the coordinates both vectors share."""

    def calculate(self, a: Sequence[float], b: Sequence[float]) -> float:
        return math.sqrt(sum((y - x) ** 2 for x, y in zip(a, b)))


class ZeroDistance(DistanceFunction):
    """A distance that is always zero."""

    def calculate(self, a: Sequence[float], b: Sequence[float]) -> float:
        return 0.0