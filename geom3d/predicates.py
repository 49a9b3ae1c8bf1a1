# geom3d/predicates.py
"""Орієнтаційні предикати під моделлю точності (Exact — знак точний)."""
from __future__ import annotations

from .vector import Vector


def _v(p) -> Vector:
    # приймаємо і Point, і Vector (абсолютне положення)
    return p if isinstance(p, Vector) else p.vector


def orient3d(a, b, c, d):
    """(b-a) x (c-a) . (d-a): шість об'ємів тетраедра abcd зі знаком."""
    a = _v(a)
    ab = _v(b) - a
    ac = _v(c) - a
    ad = _v(d) - a
    return ab.cross(ac).dot(ad)


def normal3(a, b, c) -> Vector:
    a = _v(a)
    return (_v(b) - a).cross(_v(c) - a)


def side_of_plane(a, b, c, p, tol) -> int:
    """Знак відстані p від площини abc: 1 з боку нормалі, -1 з протилежного, 0 на площині."""
    n = normal3(a, b, c)
    return tol.sign(orient3d(a, b, c, p), n.magnitude_squared)


def visible_from_point(a, b, c, p, tol) -> bool:
    return side_of_plane(a, b, c, p, tol) > 0


def distance_squared_to_plane(a, b, c, p):
    nn = normal3(a, b, c).magnitude_squared
    if nn == 0:
        return 0
    o = orient3d(a, b, c, p)
    return o * o / nn


def collinear(a, b, c, tol) -> bool:
    ab = _v(b) - _v(a)
    ab2 = ab.magnitude_squared
    if tol.is_zero_sq(ab2):
        return True
    return tol.is_zero_sq(normal3(a, b, c).magnitude_squared / ab2)


def coplanar(a, b, c, d, tol) -> bool:
    if collinear(a, b, c, tol):
        return True
    return side_of_plane(a, b, c, d, tol) == 0
