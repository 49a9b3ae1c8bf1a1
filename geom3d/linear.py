# geom3d/linear.py
"""
Спільна параметрична модель лінійних об'єктів.

Кусок (piece) — це (P, u, lo, hi): точки P + t u для t з [lo, hi], де None
означає нескінченну межу. Line = (None, None), Ray = (0, None),
LineSegment = (0, 1). Усі парні перетини/відстані точок, прямих, променів і
відрізків зводяться до операцій над кусками.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from .dispatch import distance_squared, intersection
from .line import Line
from .point import Point
from .ray import Ray
from .segment import LineSegment
from .vector import Vector, is_canonical

Piece = Tuple[Vector, Vector, Optional[object], Optional[object]]
HalfSpace = Tuple[Vector, Vector]   # (A, m): m . (X - A) >= 0

LINEAR = (Line, Ray, LineSegment)


def piece(g) -> Piece:
    if isinstance(g, LineSegment):
        return g.p.vector, g.v, 0, 1
    if isinstance(g, Ray):
        return g.p.vector, g.v, 0, None
    return g.p.vector, g.v, None, None


def _max(a, b):
    return b if a is None else (a if b is None else max(a, b))


def _min(a, b):
    return b if a is None else (a if b is None else min(a, b))


def in_range(t, lo, hi, tol, uu) -> bool:
    inv = 1 / uu
    return ((lo is None or tol.sign(t - lo, inv) >= 0)
            and (hi is None or tol.sign(t - hi, inv) <= 0))


def clamp(t, lo, hi):
    if lo is not None and t < lo:
        return lo
    if hi is not None and t > hi:
        return hi
    return t


def finite_ends(pc: Piece) -> List[Vector]:
    P, u, lo, hi = pc
    return [P + u * t for t in (lo, hi) if t is not None]


def interval_geometry(P: Vector, u: Vector, lo, hi, tol, like: Point, whole=None):
    """Геометрія параметричного інтервалу [lo, hi] на прямій (P, u)."""
    if lo is None and hi is None:
        return whole if whole is not None else Line.from_vector(like, u)
    if lo is None:
        return Ray.from_vector(Point.at(P + u * hi, like), -u)
    if hi is None:
        return Ray.from_vector(Point.at(P + u * lo, like), u)
    a = Point.at(P + u * lo, like)
    if tol.eq(lo, hi, 1 / u.magnitude_squared):
        return a
    b = Point.at(P + u * hi, like)
    return LineSegment(a, b) if is_canonical(u, tol) else LineSegment(b, a)


def clip_piece(pc: Piece, halfspaces: Iterable[HalfSpace], tol):
    """Обрізати кусок півпросторами; повертає (lo, hi) або None."""
    P, u, lo, hi = pc
    uu = u.magnitude_squared
    for A, m in halfspaces:
        mm = m.magnitude_squared
        a = m.dot(P - A)
        b = m.dot(u)
        if tol.is_zero(b, mm * uu):
            # кусок паралельний межі: або весь всередині, або весь зовні
            if tol.sign(a, mm) < 0:
                return None
            continue
        t = -a / b
        if b > 0:
            lo = _max(lo, t)
        else:
            hi = _min(hi, t)
        if lo is not None and hi is not None and tol.sign(hi - lo, 1 / uu) < 0:
            return None
    return lo, hi


# ---------- точка і кусок ----------
def point_piece_distance_squared(X: Vector, pc: Piece):
    P, u, lo, hi = pc
    t = clamp((X - P).dot(u) / u.magnitude_squared, lo, hi)
    return (X - (P + u * t)).magnitude_squared


def on_piece(X: Vector, pc: Piece, tol) -> bool:
    return tol.is_zero_sq(point_piece_distance_squared(X, pc))


# ---------- кусок і кусок ----------
def _pivot_solve(w: Vector, u: Vector, v: Vector, n: Vector):
    """
    Розв'язати t u - s v = w (w лежить у площині u, v) по двох рівняннях,
    мінор яких — найбільша за модулем компонента n = u x v.
    """
    k = max(range(3), key=lambda i: abs(tuple(n)[i]))
    i, j = (k + 1) % 3, (k + 2) % 3
    W, U, V = tuple(w), tuple(u), tuple(v)
    D = tuple(n)[k]
    t = (W[i] * V[j] - V[i] * W[j]) / D
    s = (W[i] * U[j] - U[i] * W[j]) / D
    return t, s


def piece_intersection(a, b, tol):
    pa, pb = piece(a), piece(b)
    P, u, alo, ahi = pa
    Q, v, blo, bhi = pb
    uu = u.magnitude_squared
    w = Q - P
    if u.is_scalar_multiple(v, tol):
        if not tol.is_zero_sq(w.cross(u).magnitude_squared / uu):
            return None
        # колінеарні: перевести інтервал b у параметр a
        t0 = w.dot(u) / uu
        k = v.dot(u) / uu
        b1 = None if blo is None else t0 + k * blo
        b2 = None if bhi is None else t0 + k * bhi
        if k < 0:
            b1, b2 = b2, b1
        lo, hi = _max(alo, b1), _min(ahi, b2)
        if lo is not None and hi is not None and tol.sign(hi - lo, 1 / uu) < 0:
            return None
        return interval_geometry(P, u, lo, hi, tol, a.p, whole=a)
    n = u.cross(v)
    if tol.sign(w.dot(n), n.magnitude_squared) != 0:
        return None  # мимобіжні
    t, s = _pivot_solve(w, u, v, n)
    if not (in_range(t, alo, ahi, tol, uu) and in_range(s, blo, bhi, tol, v.magnitude_squared)):
        return None
    return Point.at(P + u * t, a.p)


def piece_distance_squared(pa: Piece, pb: Piece, tol):
    P, u, alo, ahi = pa
    Q, v, blo, bhi = pb
    if not u.is_scalar_multiple(v, tol):
        w0 = P - Q
        a, b, c = u.dot(u), u.dot(v), v.dot(v)
        d, e = u.dot(w0), v.dot(w0)
        den = u.cross(v).magnitude_squared  # |u x v|^2 == a*c - b*b
        t = (b * e - c * d) / den
        s = (a * e - b * d) / den
        if clamp(t, alo, ahi) == t and clamp(s, blo, bhi) == s:
            return ((P + u * t) - (Q + v * s)).magnitude_squared
    cands = [point_piece_distance_squared(X, pb) for X in finite_ends(pa)]
    cands += [point_piece_distance_squared(X, pa) for X in finite_ends(pb)]
    if not cands:
        cands.append(point_piece_distance_squared(P, pb))
    return min(cands)


# ---------- реєстрація ----------
@intersection(Point, Point)
def _point_point(a: Point, b: Point, tol):
    return a if a.equals(b, tol) else None


@distance_squared(Point, Point)
def _point_point_d2(a: Point, b: Point, tol):
    return a.vector_to(b).magnitude_squared


def _point_piece(a: Point, b, tol):
    return a if on_piece(a.vector, piece(b), tol) else None


def _point_piece_d2(a: Point, b, tol):
    return point_piece_distance_squared(a.vector, piece(b))


def _piece_piece_d2(a, b, tol):
    return piece_distance_squared(piece(a), piece(b), tol)


for _i, _ka in enumerate(LINEAR):
    intersection(Point, _ka)(_point_piece)
    distance_squared(Point, _ka)(_point_piece_d2)
    for _kb in LINEAR[_i:]:
        intersection(_ka, _kb)(piece_intersection)
        distance_squared(_ka, _kb)(_piece_piece_d2)
