"""Surface material: light response colours, shininess and textures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np


def _color(value) -> np.ndarray:
    vector = np.asarray(value, dtype=float)
    if vector.shape != (3,):
        raise ValueError("material colours must have three components")
    return vector


@dataclass(eq=False)
class Material:
    """Ambient, diffuse and specular colours with optional textures."""

    ambient: Any = field(default_factory=lambda: np.zeros(3))
    diffuse: Any = field(default_factory=lambda: np.zeros(3))
    specular: Any = field(default_factory=lambda: np.zeros(3))
    shininess: float = 0.0
    twosided: bool = False
    ambient_textures: list = field(default_factory=list)
    diffuse_textures: list = field(default_factory=list)
    specular_textures: list = field(default_factory=list)

    def __post_init__(self) -> None:
        self.ambient = _color(self.ambient)
        self.diffuse = _color(self.diffuse)
        self.specular = _color(self.specular)
        self.shininess = float(self.shininess)

    @classmethod
    def from_color(
        cls, color, ambient: float, diffuse: float, specular: float, shininess: float
    ) -> "Material":
        """Material whose colours are one base colour scaled per component."""
        base = _color(color)
        return cls(base * ambient, base * diffuse, base * specular, shininess)

    def add_ambient_texture(self, texture) -> None:
        """Append an ambient texture."""
        self.ambient_textures.append(texture)

    def add_diffuse_texture(self, texture) -> None:
        """Append a diffuse texture."""
        self.diffuse_textures.append(texture)

    def add_specular_texture(self, texture) -> None:
        """Append a specular texture."""
        self.specular_textures.append(texture)