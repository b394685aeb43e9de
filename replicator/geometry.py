"""Axis-aligned boxes and planes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np


def _vec3(value) -> np.ndarray:
    vector = np.asarray(value, dtype=float)
    if vector.shape != (3,):
        raise ValueError("expected a vector with three components")
    return vector.copy()


class Box:
    """Axis-aligned box given by its minimum and maximum corners.

    ``Box()`` is the reversed infinite box, the identity for box union.
    ``Box(p2)`` spans from the origin to ``p2``; ``Box(p1, p2)`` spans
    from ``p1`` to ``p2``.
    """

    def __init__(self, *corners) -> None:
        if not corners:
            self._min = np.full(3, np.inf)
            self._max = np.full(3, -np.inf)
        elif len(corners) == 1:
            self._min = np.zeros(3)
            self._max = _vec3(corners[0])
        elif len(corners) == 2:
            self._min = _vec3(corners[0])
            self._max = _vec3(corners[1])
        else:
            raise TypeError("Box() takes at most two corners")

    @property
    def min(self) -> np.ndarray:
        """Minimum corner."""
        return self._min

    @property
    def max(self) -> np.ndarray:
        """Maximum corner."""
        return self._max

    def width(self) -> float:
        """Extent along x."""
        return float(self._max[0] - self._min[0])

    def height(self) -> float:
        """Extent along y."""
        return float(self._max[1] - self._min[1])

    def length(self) -> float:
        """Extent along z."""
        return float(self._max[2] - self._min[2])

    def scale(self, s: float) -> None:
        """Scale both corners by ``s`` in place."""
        self._min = self._min * s
        self._max = self._max * s

    def __repr__(self) -> str:
        return f"Box(min={self._min.tolist()}, max={self._max.tolist()})"


@dataclass(eq=False)
class Plane:
    """Plane through ``position`` with the given ``normal``."""

    position: Any
    normal: Any

    def __post_init__(self) -> None:
        self.position = _vec3(self.position)
        self.normal = _vec3(self.normal)