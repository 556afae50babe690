"""Axis-aligned bounding boxes."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

_DEGENERATE_EXTENT = 0.00001


@dataclass
class BoundingBox:
    """An axis-aligned box given by its minimum and maximum corners."""

    min: list[float] = field(default_factory=list)
    max: list[float] = field(default_factory=list)

    def normalize(self, point: Sequence[float]) -> list[float]:
        """Map a point into the unit box; degenerate axes map to 0."""
        out = []
        for value, low, high in zip(point, self.min, self.max):
            extent = high - low
            if extent < _DEGENERATE_EXTENT:
                out.append(0.0)
            else:
                out.append((value - low) / extent)
        return out

    def __str__(self) -> str:
        low = ", ".join(f"{v:g}" for v in self.min)
        high = ", ".join(f"{v:g}" for v in self.max)
        return f"[({low}), ({high})]"