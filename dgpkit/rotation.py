"""Rotations given as (angle in degrees, axis) and 4x4 column-major matrices."""

from __future__ import annotations

import math
from typing import Sequence

Vec3 = tuple[float, float, float]
Vec4 = tuple[float, float, float, float]

_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


def _unit_axis(u0: float, u1: float, u2: float) -> Vec3 | None:
    norm2 = u0 * u0 + u1 * u1 + u2 * u2
    if norm2 <= 0.0:
        return None
    norm = math.sqrt(norm2)
    return u0 / norm, u1 / norm, u2 / norm


def rotate(r: Sequence[float], x: Sequence[float]) -> Vec3:
    """Rotate *x* by ``r[0]`` degrees about the axis ``r[1:4]``.

    A zero axis leaves *x* unchanged.
    """
    axis = _unit_axis(r[1], r[2], r[3])
    x0, x1, x2 = x[0], x[1], x[2]
    if axis is None:
        return x0, x1, x2
    u0, u1, u2 = axis
    ang = math.radians(r[0])
    c, s = math.cos(ang), math.sin(ang)
    ux = u0 * x0 + u1 * x1 + u2 * x2
    v0, v1, v2 = x0 - ux * u0, x1 - ux * u1, x2 - ux * u2
    w0, w1, w2 = u1 * v2 - u2 * v1, u2 * v0 - u0 * v2, u0 * v1 - u1 * v0
    return (
        ux * u0 + c * v0 + s * w0,
        ux * u1 + c * v1 + s * w1,
        ux * u2 + c * v2 + s * w2,
    )


def vector_to_matrix(
    angle_deg: float, u0: float, u1: float, u2: float
) -> list[float]:
    """Return the column-major 4x4 matrix of a rotation about (u0, u1, u2)."""
    axis = _unit_axis(u0, u1, u2)
    if axis is None:
        return list(_IDENTITY)
    u0, u1, u2 = axis
    ang = math.radians(angle_deg)
    c, s = math.cos(ang), math.sin(ang)
    d = 1.0 - c
    return [
        u0 * u0 * d + c, u1 * u0 * d + u2 * s, u0 * u2 * d - u1 * s, 0.0,
        u0 * u1 * d - u2 * s, u1 * u1 * d + c, u1 * u2 * d + u0 * s, 0.0,
        u0 * u2 * d + u1 * s, u1 * u2 * d - u0 * s, u2 * u2 * d + c, 0.0,
        0.0, 0.0, 0.0, 1.0,
    ]


def rotation_to_matrix(r: Sequence[float]) -> list[float]:
    """Return the matrix of the rotation ``(angle_deg, u0, u1, u2)``."""
    return vector_to_matrix(r[0], r[1], r[2], r[3])


def matrix_to_vector(m: Sequence[float]) -> Vec4:
    """Recover ``(angle_deg, u0, u1, u2)`` from a column-major rotation matrix.

    Returns all zeros when the matrix has no rotation axis.
    """
    su2 = (m[1] - m[4]) / 2.0
    su1 = (m[8] - m[2]) / 2.0
    su0 = (m[6] - m[9]) / 2.0
    s = su0 * su0 + su1 * su1 + su2 * su2
    if s > 0.0:
        s = math.sqrt(s)
    c = 1.0 - (3.0 - m[0] - m[5] - m[10]) / 2.0
    if s == 0.0:
        return 0.0, 0.0, 0.0, 0.0
    return math.degrees(math.atan2(s, c)), su0 / s, su1 / s, su2 / s


def multiply_matrices(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Return the column-major product ``a * b`` of two 4x4 matrices."""
    return [
        sum(a[i + 4 * k] * b[k + 4 * j] for k in range(4))
        for j in range(4)
        for i in range(4)
    ]


def vector_multiply_left(
    angle_deg: float, u0: float, u1: float, u2: float, r: Sequence[float]
) -> Vec4:
    """Compose the rotation (angle_deg, u0, u1, u2) after the rotation *r*."""
    a = vector_to_matrix(angle_deg, u0, u1, u2)
    b = rotation_to_matrix(r)
    return matrix_to_vector(multiply_matrices(a, b))


def cross_product(x: Sequence[float], y: Sequence[float]) -> Vec3:
    """Return the cross product of two 3-vectors."""
    return (
        x[1] * y[2] - x[2] * y[1],
        x[2] * y[0] - x[0] * y[2],
        x[0] * y[1] - x[1] * y[0],
    )