"""Core pieces of a small 3D engine: matrices, transforms, meshes, materials, lights and a scene tree."""

__version__ = "0.1.0"

__all__ = [
    "action",
    "geometry",
    "input",
    "lights",
    "material",
    "matrix_op",
    "mesh",
    "state",
    "transform",
    "world",
]