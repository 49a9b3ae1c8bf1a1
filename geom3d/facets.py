# geom3d/facets.py
"""
Перетини й відстані пласких многокутників (Triangle, ConvexArea) з усіма
нижчими типами та між собою.
"""
from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from .area import ConvexArea
from .dispatch import distance_squared, intersection
from .linear import (
    LINEAR,
    HalfSpace,
    clip_piece,
    finite_ends,
    in_range,
    interval_geometry,
    piece,
    piece_distance_squared,
    point_piece_distance_squared,
)
from .planar import IN_PLANE, piece_plane_parameter, plane_value
from .plane import Plane
from .point import Point
from .triangle import Polygon, Triangle, collinear_geometry
from .vector import Vector

POLYGONS = (Triangle, ConvexArea)


def inside(halfspaces: Iterable[HalfSpace], X: Vector, tol) -> bool:
    return all(tol.sign(m.dot(X - A), m.magnitude_squared) >= 0 for A, m in halfspaces)


def clip_polygon(vertices: Sequence[Vector], halfspaces: Iterable[HalfSpace], tol) -> List[Vector]:
    """Відсікання Сазерленда-Ходжмена опуклого многокутника півпросторами."""
    out = list(vertices)
    for A, m in halfspaces:
        if not out:
            break
        mm = m.magnitude_squared
        inp, out = out, []
        vals = [m.dot(X - A) for X in inp]
        for idx, cur in enumerate(inp):
            prev = inp[idx - 1]
            fc, fp = vals[idx], vals[idx - 1]
            sc, sp = tol.sign(fc, mm), tol.sign(fp, mm)
            if sc >= 0:
                if sp < 0:
                    out.append(prev + (cur - prev) * (fp / (fp - fc)))
                out.append(cur)
            elif sp > 0:
                out.append(prev + (cur - prev) * (fp / (fp - fc)))
    return out


def section_points(plane: Plane, vertices: Sequence[Vector], edges: Iterable[Tuple[int, int]], tol):
    """
    Точки перетину площини з ребрами (i, j) багатокутника/многогранника:
    вершини на площині й внутрішні точки ребер, які площина розділяє.
    Повертає None, якщо всі вершини лежать на площині.
    """
    nn = plane.n.magnitude_squared
    vals = [plane_value(plane, X) for X in vertices]
    signs = [tol.sign(v, nn) for v in vals]
    if all(s == 0 for s in signs):
        return None
    pts = [X for X, s in zip(vertices, signs) if s == 0]
    for i, j in edges:
        if signs[i] * signs[j] < 0:
            a, b = vertices[i], vertices[j]
            pts.append(a + (b - a) * (vals[i] / (vals[i] - vals[j])))
    return pts


def _ring(k: int):
    return [(i, (i + 1) % k) for i in range(k)]


def _vs(F: Polygon) -> List[Vector]:
    return [p.vector for p in F.pts]


# ---------- точка ----------
def _point_polygon(a: Point, b: Polygon, tol):
    if b.plane.get_side(a, tol) != 0:
        return None
    return a if inside(b.halfspaces(), a.vector, tol) else None


def point_polygon_distance_squared(X: Vector, F: Polygon, tol):
    if inside(F.halfspaces(), X, tol):
        s = plane_value(F.plane, X)
        return s * s / F.plane.n.magnitude_squared
    return min(point_piece_distance_squared(X, piece(e)) for e in F.edges)


def _point_polygon_d2(a: Point, b: Polygon, tol):
    return point_polygon_distance_squared(a.vector, b, tol)


# ---------- лінійні об'єкти ----------
def piece_polygon(g, F: Polygon, tol):
    P, u, lo, hi = pc = piece(g)
    t = piece_plane_parameter(pc, F.plane, tol)
    if t is None:
        return None
    if t is IN_PLANE:
        r = clip_piece(pc, F.halfspaces(), tol)
        if r is None:
            return None
        return interval_geometry(P, u, r[0], r[1], tol, g.p, whole=g)
    if not in_range(t, lo, hi, tol, u.magnitude_squared):
        return None
    X = P + u * t
    return Point.at(X, g.p) if inside(F.halfspaces(), X, tol) else None


def piece_polygon_distance_squared(g, F: Polygon, tol):
    if piece_polygon(g, F, tol) is not None:
        return 0
    pc = piece(g)
    cands = [piece_distance_squared(pc, piece(e), tol) for e in F.edges]
    cands += [point_polygon_distance_squared(X, F, tol) for X in finite_ends(pc)]
    return min(cands)


# ---------- площина ----------
def _plane_polygon(a: Plane, b: Polygon, tol):
    pts = section_points(a, _vs(b), _ring(len(b.pts)), tol)
    if pts is None:
        return b
    if not pts:
        return None
    return collinear_geometry([Point.at(X, b.pts[0]) for X in pts], tol)


def _plane_polygon_d2(a: Plane, b: Polygon, tol):
    if _plane_polygon(a, b, tol) is not None:
        return 0
    nn = a.n.magnitude_squared
    return min(plane_value(a, X) ** 2 / nn for X in _vs(b))


# ---------- многокутник і многокутник ----------
def _polygon_polygon(a: Polygon, b: Polygon, tol):
    if a.plane.equals(b.plane, tol):
        pts = clip_polygon(_vs(a), b.halfspaces(), tol)
        if not pts:
            return None
        return ConvexArea.get_geometry([Point.at(X, a.pts[0]) for X in pts], tol, a.plane.n)
    s = _plane_polygon(b.plane, a, tol)
    if s is None:
        return None
    if isinstance(s, Point):
        return s if inside(b.halfspaces(), s.vector, tol) else None
    return piece_polygon(s, b, tol)


def _polygon_polygon_d2(a: Polygon, b: Polygon, tol):
    if _polygon_polygon(a, b, tol) is not None:
        return 0
    cands = [piece_polygon_distance_squared(e, b, tol) for e in a.edges]
    cands += [piece_polygon_distance_squared(e, a, tol) for e in b.edges]
    return min(cands)


for _i, _kf in enumerate(POLYGONS):
    intersection(Point, _kf)(_point_polygon)
    distance_squared(Point, _kf)(_point_polygon_d2)
    for _kl in LINEAR:
        intersection(_kl, _kf)(piece_polygon)
        distance_squared(_kl, _kf)(piece_polygon_distance_squared)
    intersection(Plane, _kf)(_plane_polygon)
    distance_squared(Plane, _kf)(_plane_polygon_d2)
    for _kg in POLYGONS[_i:]:
        intersection(_kf, _kg)(_polygon_polygon)
        distance_squared(_kf, _kg)(_polygon_polygon_d2)
