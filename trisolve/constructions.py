"""Analytic point constructions used by the diagram layout.

All helpers operate on plain ``(x, y)`` tuples in whatever frame the caller
uses.  Routines whose construction can collapse (a zero-length base, three
collinear vertices) return ``None`` instead of dividing by a vanishing
denominator.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

Point = Tuple[float, float]
Vector = Tuple[float, float]

_EPS = 1e-12


def _as_point(pt: Sequence[float]) -> Point:
    return (float(pt[0]), float(pt[1]))


def _sub(a: Sequence[float], b: Sequence[float]) -> Vector:
    return (float(a[0]) - float(b[0]), float(a[1]) - float(b[1]))


def _add(a: Sequence[float], b: Sequence[float]) -> Point:
    return (float(a[0]) + float(b[0]), float(a[1]) + float(b[1]))


def _scale(vec: Sequence[float], factor: float) -> Vector:
    return (float(vec[0]) * factor, float(vec[1]) * factor)


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return float(a[0]) * float(b[0]) + float(a[1]) * float(b[1])


def _norm_sq(vec: Sequence[float]) -> float:
    return _dot(vec, vec)


def distance(A: Sequence[float], B: Sequence[float]) -> float:
    """Return the Euclidean distance between ``A`` and ``B``."""

    dx, dy = _sub(B, A)
    return math.hypot(dx, dy)


def midpoint(A: Sequence[float], B: Sequence[float]) -> Point:
    """Return the midpoint between ``A`` and ``B``."""

    ax, ay = _as_point(A)
    bx, by = _as_point(B)
    return ((ax + bx) * 0.5, (ay + by) * 0.5)


def centroid(A: Sequence[float], B: Sequence[float], C: Sequence[float]) -> Point:
    """Return the arithmetic mean of the three vertices."""

    return (
        (float(A[0]) + float(B[0]) + float(C[0])) / 3.0,
        (float(A[1]) + float(B[1]) + float(C[1])) / 3.0,
    )


def foot(V: Sequence[float], A: Sequence[float], B: Sequence[float]) -> Optional[Point]:
    """Return the orthogonal projection of ``V`` onto line ``AB``."""

    ab = _sub(B, A)
    denom = _norm_sq(ab)
    if denom <= _EPS:
        return None
    t = _dot(_sub(V, A), ab) / denom
    return _add(A, _scale(ab, t))


def incenter(
    A: Sequence[float],
    B: Sequence[float],
    C: Sequence[float],
    a: float,
    b: float,
    c: float,
) -> Optional[Point]:
    """Return the incenter as the side-weighted mean of the vertices.

    ``a``, ``b`` and ``c`` are the lengths of the sides opposite ``A``, ``B``
    and ``C``.
    """

    total = a + b + c
    if total <= _EPS:
        return None
    return (
        (a * float(A[0]) + b * float(B[0]) + c * float(C[0])) / total,
        (a * float(A[1]) + b * float(B[1]) + c * float(C[1])) / total,
    )


def circumcenter(
    A: Sequence[float],
    B: Sequence[float],
    C: Sequence[float],
    *,
    eps: float = 1e-5,
) -> Optional[Point]:
    """Return the circumcenter of triangle ``ABC`` using the determinant formula.

    ``None`` is returned when ``|D|`` does not exceed ``eps`` (near-collinear input).
    """

    ax, ay = _as_point(A)
    bx, by = _as_point(B)
    cx, cy = _as_point(C)
    d = 2.0 * (ax * (by - cy) + bx * (cy - ay) + cx * (ay - by))
    if abs(d) <= eps:
        return None
    a_sq = ax * ax + ay * ay
    b_sq = bx * bx + by * by
    c_sq = cx * cx + cy * cy
    ux = (a_sq * (by - cy) + b_sq * (cy - ay) + c_sq * (ay - by)) / d
    uy = (a_sq * (cx - bx) + b_sq * (ax - cx) + c_sq * (bx - ax)) / d
    return (ux, uy)


def outward_offset(
    point: Sequence[float], origin: Sequence[float], offset: float
) -> Point:
    """Move ``point`` by ``offset`` along the ray from ``origin`` through it."""

    direction = _sub(point, origin)
    length = math.sqrt(_norm_sq(direction))
    if length <= _EPS:
        return _as_point(point)
    return _add(point, _scale(direction, offset / length))


__all__ = [
    "Point",
    "Vector",
    "centroid",
    "circumcenter",
    "distance",
    "foot",
    "incenter",
    "midpoint",
    "outward_offset",
]
