# geom3d/planar.py
"""Перетини й відстані площини з точками, лінійними об'єктами та площинами."""
from __future__ import annotations

from .dispatch import distance_squared, intersection
from .line import Line
from .linear import LINEAR, finite_ends, in_range, piece
from .plane import Plane
from .point import Point
from .vector import Vector


IN_PLANE = object()   # кусок повністю лежить у площині


def plane_value(plane: Plane, X: Vector):
    return plane.n.dot(X - plane.p.vector)


@intersection(Point, Plane)
def _point_plane(a: Point, b: Plane, tol):
    return a if b.get_side(a, tol) == 0 else None


@distance_squared(Point, Plane)
def _point_plane_d2(a: Point, b: Plane, tol):
    s = plane_value(b, a.vector)
    return s * s / b.n.magnitude_squared


def piece_plane_parameter(pc, plane: Plane, tol):
    """
    Параметр t перетину куска з площиною: t, None (паралельно й поза
    площиною) або IN_PLANE.
    """
    P, u, lo, hi = pc
    n = plane.n
    nn = n.magnitude_squared
    s0 = plane_value(plane, P)
    den = n.dot(u)
    if tol.is_zero(den, nn * u.magnitude_squared):
        return IN_PLANE if tol.sign(s0, nn) == 0 else None
    return -s0 / den


def _piece_plane(a, b: Plane, tol):
    P, u, lo, hi = pc = piece(a)
    t = piece_plane_parameter(pc, b, tol)
    if t is None:
        return None
    if t is IN_PLANE:
        return a
    if not in_range(t, lo, hi, tol, u.magnitude_squared):
        return None
    return Point.at(P + u * t, a.p)


def _piece_plane_d2(a, b: Plane, tol):
    if _piece_plane(a, b, tol) is not None:
        return 0
    pc = piece(a)
    nn = b.n.magnitude_squared
    ends = finite_ends(pc) or [pc[0]]
    return min(plane_value(b, X) ** 2 / nn for X in ends)


for _k in LINEAR:
    intersection(_k, Plane)(_piece_plane)
    distance_squared(_k, Plane)(_piece_plane_d2)


@intersection(Plane, Plane)
def _plane_plane(a: Plane, b: Plane, tol):
    if a.n.is_scalar_multiple(b.n, tol):
        return a if a.get_side(b.p, tol) == 0 else None
    n1, n2 = a.n, b.n
    d = n1.cross(n2)
    D = tuple(d)
    # опорна вісь: найбільша за модулем компонента напряму; на ній x_k = 0
    k = max(range(3), key=lambda i: abs(D[i]))
    i, j = (k + 1) % 3, (k + 2) % 3
    N1, N2 = tuple(n1), tuple(n2)
    c1 = n1.dot(a.p.vector)
    c2 = n2.dot(b.p.vector)
    X = [D[k] * 0] * 3
    X[i] = (c1 * N2[j] - N1[j] * c2) / D[k]
    X[j] = (N1[i] * c2 - c1 * N2[i]) / D[k]
    return Line.from_vector(Point.at(Vector(*X), a.p), d)


@distance_squared(Plane, Plane)
def _plane_plane_d2(a: Plane, b: Plane, tol):
    if not a.n.is_scalar_multiple(b.n, tol):
        return 0
    s = plane_value(a, b.p.vector)
    return s * s / a.n.magnitude_squared
