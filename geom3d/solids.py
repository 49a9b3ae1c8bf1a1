# geom3d/solids.py
"""
Перетини й відстані опуклих многогранників (Tetrahedron, ConvexVolume) з
усіма нижчими типами та між собою. Многогранник — перетин півпросторів
своїх граней, тож лінійні об'єкти й многокутники просто відсікаються ними.
"""
from __future__ import annotations

from typing import List

from .area import ConvexArea
from .dispatch import distance_squared, intersection
from .facets import (
    POLYGONS,
    _polygon_polygon_d2,
    clip_polygon,
    inside,
    piece_polygon_distance_squared,
    point_polygon_distance_squared,
    section_points,
)
from .linear import LINEAR, clip_piece, interval_geometry, piece
from .planar import plane_value
from .plane import Plane
from .point import Point
from .tetrahedron import Solid, Tetrahedron
from .triangle import Polygon
from .volume import ConvexVolume, get_geometry

SOLIDS = (Tetrahedron, ConvexVolume)


def _ends(g) -> List[Point]:
    if isinstance(g, Point):
        return [g]
    return [g.p, g.q]


# ---------- точка ----------
def _point_solid(a: Point, b: Solid, tol):
    return a if inside(b.halfspaces(), a.vector, tol) else None


def _point_solid_d2(a: Point, b: Solid, tol):
    X = a.vector
    if inside(b.halfspaces(), X, tol):
        return 0
    return min(point_polygon_distance_squared(X, f, tol) for f in b.faces)


# ---------- лінійні об'єкти ----------
def piece_solid(g, S: Solid, tol):
    P, u, lo, hi = pc = piece(g)
    r = clip_piece(pc, S.halfspaces(), tol)
    if r is None:
        return None
    return interval_geometry(P, u, r[0], r[1], tol, g.p, whole=g)


def _piece_solid_d2(g, S: Solid, tol):
    if piece_solid(g, S, tol) is not None:
        return 0
    return min(piece_polygon_distance_squared(g, f, tol) for f in S.faces)


# ---------- площина ----------
def _plane_solid(a: Plane, b: Solid, tol):
    verts = [p.vector for p in b.pts]
    index = {v: i for i, v in enumerate(verts)}
    edges = [(index[e.p.vector], index[e.q.vector]) for e in b.edges]
    pts = section_points(a, verts, edges, tol)
    if not pts:
        return None
    return ConvexArea.get_geometry([Point.at(X, b.pts[0]) for X in pts], tol, a.n)


def _plane_solid_d2(a: Plane, b: Solid, tol):
    if _plane_solid(a, b, tol) is not None:
        return 0
    nn = a.n.magnitude_squared
    return min(plane_value(a, p.vector) ** 2 / nn for p in b.pts)


# ---------- многокутник ----------
def _polygon_solid(a: Polygon, b: Solid, tol):
    pts = clip_polygon([p.vector for p in a.pts], b.halfspaces(), tol)
    if not pts:
        return None
    return ConvexArea.get_geometry([Point.at(X, a.pts[0]) for X in pts], tol, a.plane.n)


def _polygon_solid_d2(a: Polygon, b: Solid, tol):
    if _polygon_solid(a, b, tol) is not None:
        return 0
    return min(_polygon_polygon_d2(a, f, tol) for f in b.faces)


# ---------- многогранник і многогранник ----------
def _solid_solid(a: Solid, b: Solid, tol):
    """
    Вершини перетину опуклих многогранників — кінці ребер кожного,
    відсічених іншим; результат — їхня опукла оболонка.
    """
    cand: List[Point] = []
    for s, t in ((a, b), (b, a)):
        for e in s.edges:
            r = piece_solid(e, t, tol)
            if r is not None:
                cand += _ends(r)
    if not cand:
        return None
    return get_geometry(*cand, tol=tol)


def _solid_solid_d2(a: Solid, b: Solid, tol):
    if _solid_solid(a, b, tol) is not None:
        return 0
    return min(_polygon_polygon_d2(f, g, tol) for f in a.faces for g in b.faces)


for _i, _ks in enumerate(SOLIDS):
    intersection(Point, _ks)(_point_solid)
    distance_squared(Point, _ks)(_point_solid_d2)
    for _kl in LINEAR:
        intersection(_kl, _ks)(piece_solid)
        distance_squared(_kl, _ks)(_piece_solid_d2)
    intersection(Plane, _ks)(_plane_solid)
    distance_squared(Plane, _ks)(_plane_solid_d2)
    for _kf in POLYGONS:
        intersection(_kf, _ks)(_polygon_solid)
        distance_squared(_kf, _ks)(_polygon_solid_d2)
    for _kt in SOLIDS[_i:]:
        intersection(_ks, _kt)(_solid_solid)
        distance_squared(_ks, _kt)(_solid_solid_d2)
