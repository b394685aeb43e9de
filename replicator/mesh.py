"""Triangle meshes and a builder for common shapes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

import numpy as np

from replicator.geometry import Box
from replicator.matrix_op import rotate


class MeshCreationError(ValueError):
    """Raised when mesh attribute arrays do not fit together."""


def _attribute_array(values, width: int, name: str) -> np.ndarray:
    array = np.asarray(values, dtype=np.float32)
    if array.size == 0:
        return np.zeros((0, width), dtype=np.float32)
    if array.ndim != 2 or array.shape[1] != width:
        raise MeshCreationError(f"{name} must have {width} components each")
    return array


@dataclass(eq=False)
class Mesh:
    """Indexed triangle list with optional per-vertex attributes."""

    indices: Any
    vertices: Any
    colors: Any = ()
    normals: Any = ()
    texcoords: Any = ()

    def __post_init__(self) -> None:
        self.indices = np.asarray(self.indices, dtype=np.uint32).reshape(-1)
        self.vertices = _attribute_array(self.vertices, 4, "vertices")
        self.colors = _attribute_array(self.colors, 4, "colors")
        self.normals = _attribute_array(self.normals, 4, "normals")
        self.texcoords = _attribute_array(self.texcoords, 2, "texture coordinates")
        count = len(self.vertices)
        if len(self.colors) not in (0, count):
            raise MeshCreationError(
                "Number of color attributes must be equal to vertices or zero!"
            )
        if len(self.normals) not in (0, count):
            raise MeshCreationError(
                "Number of normal attributes must be equal to vertices or zero!"
            )
        if len(self.texcoords) not in (0, count):
            raise MeshCreationError(
                "Number of texture coordinate attributes must be equal to vertices or zero!"
            )

    @property
    def index_count(self) -> int:
        """Number of indices drawn."""
        return len(self.indices)


def _extend(value, size: int, fill: float, name: str) -> np.ndarray:
    vector = np.asarray(value, dtype=float)
    if vector.shape == (size - 1,):
        return np.append(vector, fill)
    if vector.shape == (size,):
        return vector.copy()
    raise ValueError(f"{name} must have {size - 1} or {size} components")


def _vec3(value) -> np.ndarray:
    vector = np.asarray(value, dtype=float)
    if vector.shape != (3,):
        raise ValueError("expected a vector with three components")
    return vector


def _normalize(vector: np.ndarray) -> np.ndarray:
    norm = np.linalg.norm(vector)
    if norm == 0.0:
        raise ValueError("cannot normalize a zero vector")
    return vector / norm


def _check_count(count: int) -> int:
    if count < 0:
        raise ValueError("count must not be negative")
    return count


_GOLDEN = (1.0 + math.sqrt(5.0)) / 2.0

_ICOSAHEDRON_VERTICES = (
    (-1, _GOLDEN, 0),
    (1, _GOLDEN, 0),
    (-1, -_GOLDEN, 0),
    (1, -_GOLDEN, 0),
    (0, -1, _GOLDEN),
    (0, 1, _GOLDEN),
    (0, -1, -_GOLDEN),
    (0, 1, -_GOLDEN),
    (_GOLDEN, 0, -1),
    (_GOLDEN, 0, 1),
    (-_GOLDEN, 0, -1),
    (-_GOLDEN, 0, 1),
)

_ICOSAHEDRON_TRIANGLES = (
    (0, 11, 5), (0, 5, 1), (0, 1, 7), (0, 7, 10), (0, 10, 11),
    (1, 5, 9), (5, 11, 4), (11, 10, 2), (10, 7, 6), (7, 1, 8),
    (3, 9, 4), (3, 4, 2), (3, 2, 6), (3, 6, 8), (3, 8, 9),
    (4, 9, 5), (2, 4, 11), (6, 2, 10), (8, 6, 7), (9, 8, 1),
)


class MeshBuilder:
    """Accumulates vertex attributes and indices, then builds a Mesh."""

    def __init__(self) -> None:
        self.vertices: list[np.ndarray] = []
        self.colors: list[np.ndarray] = []
        self.normals: list[np.ndarray] = []
        self.texcoords: list[np.ndarray] = []
        self.indices: list[int] = []

    def add_vertex(self, v, count: int = 1) -> None:
        """Add a vertex ``count`` times; a 3-vector gets ``w = 1``."""
        vertex = _extend(v, 4, 1.0, "vertex")
        self.vertices.extend(vertex.copy() for _ in range(_check_count(count)))

    def add_color(self, c, count: int = 1) -> None:
        """Add a colour ``count`` times; an RGB colour gets alpha 1."""
        color = _extend(c, 4, 1.0, "color")
        self.colors.extend(color.copy() for _ in range(_check_count(count)))

    def add_normal(self, n, count: int = 1) -> None:
        """Add a normalised normal ``count`` times; a 3-vector gets ``w = 0``."""
        normal = _normalize(_extend(n, 4, 0.0, "normal"))
        self.normals.extend(normal.copy() for _ in range(_check_count(count)))

    def add_texcoord(self, t, count: int = 1) -> None:
        """Add a texture coordinate ``count`` times."""
        texcoord = np.asarray(t, dtype=float)
        if texcoord.shape != (2,):
            raise ValueError("texture coordinates must have two components")
        self.texcoords.extend(texcoord.copy() for _ in range(_check_count(count)))

    def add_index(self, index: int) -> None:
        """Add a vertex index."""
        index = int(index)
        if index < 0:
            raise ValueError("index must not be negative")
        self.indices.append(index)

    def clear_vertices(self) -> None:
        self.vertices.clear()

    def clear_colors(self) -> None:
        self.colors.clear()

    def clear_normals(self) -> None:
        self.normals.clear()

    def clear_texcoord(self) -> None:
        self.texcoords.clear()

    def rect(self, pos, top, right) -> None:
        """Add a rectangle centred at ``pos`` with half-extents ``top`` and ``right``."""
        pos, top, right = _vec3(pos), _vec3(top), _vec3(right)
        normal = _normalize(np.cross(right, top))
        self.add_vertex(pos - right + top)
        self.add_vertex(pos + right + top)
        self.add_vertex(pos + right - top)
        self.add_vertex(pos - right - top)

        for texcoord in ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)):
            self.add_texcoord(texcoord)

        self.add_normal(normal, 4)

        n = len(self.vertices)
        for offset in (4, 2, 3, 4, 1, 2):
            self.add_index(n - offset)

    def cube(self, side: float, pos=(0.0, 0.0, 0.0)) -> None:
        """Add a cube of the given side length centred at ``pos``."""
        pos = _vec3(pos)
        h = side / 2.0
        faces = (
            ((0, 0, h), (0, h, 0), (h, 0, 0)),
            ((0, 0, -h), (0, h, 0), (-h, 0, 0)),
            ((-h, 0, 0), (0, h, 0), (0, 0, h)),
            ((h, 0, 0), (0, h, 0), (0, 0, -h)),
            ((0, h, 0), (0, 0, -h), (h, 0, 0)),
            ((0, -h, 0), (0, 0, h), (h, 0, 0)),
        )
        for offset, top, right in faces:
            self.rect(pos + np.asarray(offset, dtype=float), top, right)

    def _ring_direction(self, radius_angle: np.ndarray, axis: np.ndarray, i: int, sections: int):
        angle = (i / sections) * math.pi * 2.0
        return rotate(angle, np.append(axis, 0.0)) @ np.append(radius_angle, 0.0)

    def circle(self, radius_angle, front, sections: int, position=(0.0, 0.0, 0.0)) -> None:
        """Add a disc facing ``front`` as a fan of ``sections`` triangles."""
        radius_angle, front, position = _vec3(radius_angle), _vec3(front), _vec3(position)
        first = len(self.vertices)
        radius_angle = radius_angle - np.dot(radius_angle, front) * front
        self.add_vertex(position)
        for i in range(sections):
            direction = self._ring_direction(radius_angle, front, i, sections)
            self.add_vertex(position + direction[:3])
        self.add_normal(front, sections + 1)
        for i in range(sections):
            self.add_index(first)
            self.add_index(first + i + 1)
            self.add_index(first + (i + 1) % sections + 1)

    def cylinder(self, radius_angle, up_height, sections: int, position=(0.0, 0.0, 0.0)) -> None:
        """Add a closed cylinder extending ``up_height`` each way from ``position``."""
        radius_angle, up, position = _vec3(radius_angle), _vec3(up_height), _vec3(position)
        self.circle(radius_angle, up, sections, position + up)
        self.circle(radius_angle, -up, sections, position - up)

        first = len(self.vertices)
        for i in range(sections):
            direction = self._ring_direction(radius_angle, up, i, sections)
            self.add_vertex(position + direction[:3] + up)
            self.add_vertex(position + direction[:3] - up)
            self.add_normal(direction, 2)
        ring = sections * 2
        for i in range(sections):
            for offset in (0, 1, 2, 1, 3, 2):
                self.add_index(first + (i * 2 + offset) % ring)

    def icosphere(self, radius: float, divisions: int, position=(0.0, 0.0, 0.0)) -> None:
        """Add a sphere made by subdividing an icosahedron ``divisions`` times."""
        position = _vec3(position)
        first = len(self.vertices)
        vertices = [_normalize(np.asarray(v, dtype=float)) for v in _ICOSAHEDRON_VERTICES]
        triangles = list(_ICOSAHEDRON_TRIANGLES)

        for _ in range(divisions):
            middles: dict[tuple[int, int], int] = {}
            subdivided = []
            for x, y, z in triangles:
                mid_xy = self._middle_vertex(middles, vertices, x, y)
                mid_yz = self._middle_vertex(middles, vertices, y, z)
                mid_zx = self._middle_vertex(middles, vertices, z, x)
                subdivided.extend(
                    (
                        (x, mid_xy, mid_zx),
                        (y, mid_yz, mid_xy),
                        (z, mid_zx, mid_yz),
                        (mid_xy, mid_yz, mid_zx),
                    )
                )
            triangles = subdivided

        for vertex in vertices:
            self.add_vertex(position + radius * vertex)
            self.add_normal(vertex)

        for triangle in triangles:
            for index in triangle:
                self.add_index(first + index)

    @staticmethod
    def _middle_vertex(cache: dict, vertices: list, a: int, b: int) -> int:
        if (a, b) in cache:
            return cache[(a, b)]
        if (b, a) in cache:
            return cache[(b, a)]
        vertices.append(_normalize(vertices[a] + vertices[b]))
        cache[(a, b)] = len(vertices) - 1
        return len(vertices) - 1

    def build(self) -> Mesh:
        """Build the mesh; without indices, every vertex is used in order."""
        if self.vertices and not self.indices:
            self.indices.extend(range(len(self.vertices)))
        return Mesh(self.indices, self.vertices, self.colors, self.normals, self.texcoords)

    def bounding_box(self, transform=None) -> Box:
        """Axis-aligned box around all vertices after ``transform``."""
        if not self.vertices:
            raise ValueError("cannot compute a bounding box without vertices")
        matrix = np.eye(4) if transform is None else np.asarray(transform, dtype=float)
        points = (np.array(self.vertices) @ matrix.T)[:, :3]
        return Box(points.min(axis=0), points.max(axis=0))