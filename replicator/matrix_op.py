"""Common 4x4 matrix operations for homogeneous coordinates.

Matrices are numpy arrays indexed ``[row, column]`` and act on column
vectors, so ``m @ v`` transforms the vector ``v``.
"""

from __future__ import annotations

import math

import numpy as np


def scale(sx: float, sy: float | None = None, sz: float | None = None) -> np.ndarray:
    """Scale matrix; a single factor scales all three axes uniformly."""
    if sy is None and sz is None:
        sy = sz = sx
    elif sy is None or sz is None:
        raise TypeError("scale() takes either one factor or three factors")
    return np.diag([float(sx), float(sy), float(sz), 1.0])


def translation(tx: float, ty: float, tz: float) -> np.ndarray:
    """Translation matrix."""
    matrix = np.eye(4)
    matrix[:3, 3] = (tx, ty, tz)
    return matrix


def rotate_x(angle: float) -> np.ndarray:
    """Rotation matrix around the x axis."""
    s, c = math.sin(angle), math.cos(angle)
    return np.array(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, s, 0.0],
            [0.0, -s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotate_y(angle: float) -> np.ndarray:
    """Rotation matrix around the y axis."""
    s, c = math.sin(angle), math.cos(angle)
    return np.array(
        [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotate_z(angle: float) -> np.ndarray:
    """Rotation matrix around the z axis."""
    s, c = math.sin(angle), math.cos(angle)
    return np.array(
        [
            [c, s, 0.0, 0.0],
            [-s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotate(angle: float, axis) -> np.ndarray:
    """Rotation by ``angle`` radians around an arbitrary axis.

    The axis may have three or four components; it is normalised as a whole.
    """
    vector = np.asarray(axis, dtype=float)
    norm = np.linalg.norm(vector)
    if norm == 0.0:
        raise ValueError("rotation axis must not be the zero vector")
    x, y, z = (vector / norm)[:3]
    c = math.cos(-angle)
    s = math.sin(-angle)
    k = 1.0 - c
    rows = np.array(
        [
            [x * x * k + c, x * y * k - z * s, x * z * k + y * s, 0.0],
            [x * y * k + z * s, y * y * k + c, y * z * k - x * s, 0.0],
            [x * z * k - y * s, y * z * k + x * s, z * z * k + c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return rows.T.copy()


def orthographic(
    left: float, right: float, bottom: float, top: float, far: float, near: float
) -> np.ndarray:
    """Orthographic projection mapping the given box onto the unit cube."""
    matrix = np.eye(4)
    matrix[0, 0] = 2.0 / (right - left)
    matrix[1, 1] = 2.0 / (top - bottom)
    matrix[2, 2] = 2.0 / (far - near)
    matrix[0, 3] = -(right + left) / (right - left)
    matrix[1, 3] = -(top + bottom) / (top - bottom)
    matrix[2, 3] = -(far + near) / (far - near)
    return matrix


def perspective(fov: float, aspect_ratio: float, near: float, far: float) -> np.ndarray:
    """Perspective projection; ``near`` and ``far`` are negative z positions."""
    top = abs(near) * math.tan(fov / 2.0)
    bottom = -top
    right = top * aspect_ratio
    left = -right

    to_box = np.array(
        [
            [near, 0.0, 0.0, 0.0],
            [0.0, near, 0.0, 0.0],
            [0.0, 0.0, near + far, -far * near],
            [0.0, 0.0, 1.0, 0.0],
        ]
    )
    ortho = orthographic(left, right, bottom, top, far, near)
    return -(ortho @ to_box)


def format_matrix(matrix) -> str:
    """Render a matrix one row per line, e.g. ``[ 1 0 0 0 ]``."""
    values = np.asarray(matrix, dtype=float)
    return "".join(
        "[" + "".join(f" {float(v):g}" for v in row) + " ]\n" for row in values
    )