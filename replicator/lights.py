"""Light components and the light description handed to shaders."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

import numpy as np


class LightType(IntEnum):
    """Kind of light, as bit flags understood by the shaders."""

    NONE = 0
    DIRECTIONAL = 1
    POINT = 2
    SPOTLIGHT = 4


def _vector(value, size: int) -> np.ndarray:
    vector = np.asarray(value, dtype=float)
    if vector.shape != (size,):
        raise ValueError(f"expected a vector with {size} components")
    return vector.copy()


@dataclass(eq=False)
class ShaderLight:
    """Light parameters in the form the shaders consume."""

    position: Any = field(default_factory=lambda: np.zeros(4))
    direction: Any = field(default_factory=lambda: np.zeros(4))
    color: Any = field(default_factory=lambda: np.zeros(3))
    inner_angle: float = 0.0
    outer_angle: float = 0.0
    type: LightType = LightType.NONE

    def __post_init__(self) -> None:
        self.position = _vector(self.position, 4)
        self.direction = _vector(self.direction, 4)
        self.color = _vector(self.color, 3)
        self.inner_angle = float(self.inner_angle)
        self.outer_angle = float(self.outer_angle)
        self.type = LightType(self.type)


@dataclass(eq=False)
class LightColor:
    """Colour emitted by a light."""

    color: Any

    def __post_init__(self) -> None:
        self.color = _vector(self.color, 3)


class DirectionalLight:
    """Marker for lights shining in one direction from infinitely far away."""


class PointLight:
    """Marker for lights shining in all directions from a point."""


@dataclass
class Spotlight:
    """Cone light; the inner angle defaults to the outer angle."""

    outer: float
    inner: float | None = None

    def __post_init__(self) -> None:
        self.outer = float(self.outer)
        self.inner = self.outer if self.inner is None else float(self.inner)