"""Rigid transforms built from translation, rotation quaternion and scale.

Quaternions are numpy arrays ordered ``(w, x, y, z)``.
"""

from __future__ import annotations

import math
from numbers import Real

import numpy as np

from replicator import matrix_op


def quat_multiply(a, b) -> np.ndarray:
    """Hamilton product ``a * b`` of two quaternions."""
    aw, ax, ay, az = (float(v) for v in a)
    bw, bx, by, bz = (float(v) for v in b)
    return np.array(
        [
            aw * bw - ax * bx - ay * by - az * bz,
            aw * bx + ax * bw + ay * bz - az * by,
            aw * by - ax * bz + ay * bw + az * bx,
            aw * bz + ax * by - ay * bx + az * bw,
        ]
    )


def angle_axis(angle: float, axis) -> np.ndarray:
    """Quaternion rotating by ``angle`` radians around ``axis``."""
    half = angle / 2.0
    x, y, z = (float(v) for v in axis)
    s = math.sin(half)
    return np.array([math.cos(half), x * s, y * s, z * s])


def quat_to_matrix(q) -> np.ndarray:
    """4x4 rotation matrix of a unit quaternion."""
    w, x, y, z = (float(v) for v in q)
    return np.array(
        [
            [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y), 0.0],
            [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x), 0.0],
            [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y), 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


_X_AXIS = (1.0, 0.0, 0.0)
_Y_AXIS = (0.0, 1.0, 0.0)
_Z_AXIS = (0.0, 0.0, 1.0)


def _vector_from_args(args, name: str) -> np.ndarray:
    """Read ``(x, y, z)``, a 3-vector or a 4-vector as a 4-vector."""
    if len(args) == 3 and all(isinstance(a, Real) for a in args):
        return np.array([*map(float, args), 0.0])
    if len(args) == 1:
        vector = np.asarray(args[0], dtype=float)
        if vector.shape == (3,):
            return np.append(vector, 0.0)
        if vector.shape == (4,):
            return vector.copy()
    raise TypeError(f"{name}() takes three numbers or a 3- or 4-component vector")


def _normalized(axis) -> tuple[float, float, float]:
    vector = np.asarray(axis, dtype=float)
    return tuple(vector / np.linalg.norm(vector))


class Transform:
    """Local transform of an entity and its last computed global matrix."""

    def __init__(self) -> None:
        self._translation = np.zeros(4)
        self.scale_factors = np.ones(3)
        self.rotation = np.array([1.0, 0.0, 0.0, 0.0])
        self.global_matrix = np.eye(4)

    @property
    def translation(self) -> np.ndarray:
        """Translation as a 4-vector with ``w`` normally zero."""
        return self._translation

    @translation.setter
    def translation(self, value) -> None:
        vector = np.asarray(value, dtype=float)
        if vector.shape != (3,):
            raise ValueError("translation must have three components")
        self._translation = np.append(vector, 0.0)

    def local_matrix(self) -> np.ndarray:
        """Translation * rotation * scale."""
        tx, ty, tz = self._translation[:3]
        sx, sy, sz = self.scale_factors
        return (
            matrix_op.translation(tx, ty, tz)
            @ quat_to_matrix(self.rotation)
            @ matrix_op.scale(sx, sy, sz)
        )

    def _rotate_local_axis(self, angle: float, axis) -> "Transform":
        self.rotation = quat_multiply(self.rotation, angle_axis(angle, _normalized(axis)))
        return self

    def _rotate_global_axis(self, angle: float, axis) -> "Transform":
        self.rotation = quat_multiply(angle_axis(angle, axis), self.rotation)
        return self

    def rotate_x(self, angle: float) -> "Transform":
        """Rotate around the local x axis."""
        return self._rotate_local_axis(angle, _X_AXIS)

    def rotate_y(self, angle: float) -> "Transform":
        """Rotate around the local y axis."""
        return self._rotate_local_axis(angle, _Y_AXIS)

    def rotate_z(self, angle: float) -> "Transform":
        """Rotate around the local z axis."""
        return self._rotate_local_axis(angle, _Z_AXIS)

    def rotate(self, rot) -> "Transform":
        """Apply a quaternion rotation in local space."""
        self.rotation = quat_multiply(self.rotation, rot)
        return self

    def rotate_x_global(self, angle: float) -> "Transform":
        """Rotate around the global x axis."""
        return self._rotate_global_axis(angle, _X_AXIS)

    def rotate_y_global(self, angle: float) -> "Transform":
        """Rotate around the global y axis."""
        return self._rotate_global_axis(angle, _Y_AXIS)

    def rotate_z_global(self, angle: float) -> "Transform":
        """Rotate around the global z axis."""
        return self._rotate_global_axis(angle, _Z_AXIS)

    def rotate_global(self, rot) -> "Transform":
        """Apply a quaternion rotation in global space."""
        self.rotation = quat_multiply(rot, self.rotation)
        return self

    def translate_global(self, *args) -> "Transform":
        """Translate along the global axes."""
        self._translation = self._translation + _vector_from_args(args, "translate_global")
        return self

    def translate(self, *args) -> "Transform":
        """Translate along the axes rotated by the current rotation."""
        offset = _vector_from_args(args, "translate")
        self._translation = self._translation + quat_to_matrix(self.rotation) @ offset
        return self

    def scale(self, *args) -> "Transform":
        """Multiply the scale by one factor, three factors or a 3-vector."""
        if len(args) == 1 and isinstance(args[0], Real):
            factors = np.full(3, float(args[0]))
        elif len(args) == 3 and all(isinstance(a, Real) for a in args):
            factors = np.array(args, dtype=float)
        elif len(args) == 1 and np.asarray(args[0]).shape == (3,):
            factors = np.asarray(args[0], dtype=float)
        else:
            raise TypeError("scale() takes one number, three numbers or a 3-vector")
        self.scale_factors = self.scale_factors * factors
        return self