# geom3d/composite.py
"""
LineSegmentsCollinear з будь-якою геометрією: результат збирається з
перетинів окремих членів і спрощується.
"""
from __future__ import annotations

from . import dispatch
from .area import ConvexArea
from .collinear import LineSegmentsCollinear
from .line import Line
from .plane import Plane
from .point import Point
from .ray import Ray
from .segment import LineSegment
from .tetrahedron import Tetrahedron
from .triangle import Triangle
from .volume import ConvexVolume

KINDS = (Point, Line, Ray, LineSegment, LineSegmentsCollinear, Plane,
         Triangle, ConvexArea, Tetrahedron, ConvexVolume)


def _split(a, b):
    return (a, b) if isinstance(a, LineSegmentsCollinear) else (b, a)


def _collinear_intersection(a, b, tol):
    c, other = _split(a, b)
    parts = []
    for part in c.parts:
        r = dispatch.get_intersection(part, other, tol)
        if r is None:
            continue
        if isinstance(r, LineSegmentsCollinear):
            parts.extend(r.parts)
        else:
            parts.append(r)
    if not parts:
        return None
    return LineSegmentsCollinear(*parts, line=c.l, tol=tol).simplify(tol)


def _collinear_intersects(a, b, tol):
    c, other = _split(a, b)
    return any(dispatch.intersects(part, other, tol) for part in c.parts)


def _collinear_d2(a, b, tol):
    c, other = _split(a, b)
    return min(dispatch.get_distance_squared(part, other, tol) for part in c.parts)


for _k in KINDS:
    _pair = (_k, LineSegmentsCollinear) if _k.rank < LineSegmentsCollinear.rank \
        else (LineSegmentsCollinear, _k)
    dispatch.intersection(*_pair)(_collinear_intersection)
    dispatch.intersects_test(*_pair)(_collinear_intersects)
    dispatch.distance_squared(*_pair)(_collinear_d2)
