# geom3d/area.py
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .geometry import DegenerateError
from .numeric import as_precision
from .plane import Plane
from .point import Point
from .predicates import collinear, normal3
from .triangle import Polygon, Triangle, collinear_geometry
from .vector import Vector

logger = logging.getLogger(__name__)


def _hull2d(points: Sequence[Point], n: Vector, tol) -> List[Point]:
    """
    Опукла оболонка копланарних точок (монотонний ланцюг Ендрю) у проекції
    на координатну площину, перпендикулярну найбільшій компоненті n.
    Результат — проти годинникової стрілки відносно n, без колінеарних вершин.
    """
    N = tuple(n)
    k = max(range(3), key=lambda i: abs(N[i]))
    i, j = (k + 1) % 3, (k + 2) % 3

    def uv(p: Point):
        c = tuple(p.vector)
        return c[i], c[j]

    pts = sorted(points, key=uv)

    def turn(o: Point, a: Point, b: Point) -> int:
        (ox, oy), (ax, ay), (bx, by) = uv(o), uv(a), uv(b)
        c = (ax - ox) * (by - oy) - (ay - oy) * (bx - ox)
        return tol.sign(c, (ax - ox) ** 2 + (ay - oy) ** 2)

    lower: List[Point] = []
    for p in pts:
        while len(lower) >= 2 and turn(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)
    upper: List[Point] = []
    for p in reversed(pts):
        while len(upper) >= 2 and turn(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)
    hull = lower[:-1] + upper[:-1]
    if N[k] < 0:
        hull.reverse()
    return hull


def _normal_of(pts: Sequence[Point], tol) -> Optional[Vector]:
    a = pts[0]
    for ib in range(1, len(pts)):
        for ic in range(ib + 1, len(pts)):
            if not collinear(a, pts[ib], pts[ic], tol):
                return normal3(a, pts[ib], pts[ic])
    return None


class ConvexArea(Polygon):
    """Опуклий плаский многокутник з довільною кількістю вершин (>= 3)."""

    __slots__ = ()
    rank = 7

    def __init__(self, *points: Point, tol=None):
        tol = as_precision(tol, *points)
        pts = Point.unique(points, tol)
        n = _normal_of(pts, tol) if len(pts) >= 3 else None
        if n is None:
            raise DegenerateError("ConvexArea needs three non-collinear points")
        hull = _hull2d(pts, n, tol)
        if len(hull) < 3:
            raise DegenerateError("ConvexArea needs three non-collinear points")
        self.pts = tuple(hull)
        self.plane = Plane.from_normal(hull[0], n)

    @staticmethod
    def get_geometry(points: Sequence[Point], tol=None, normal: Optional[Vector] = None):
        """
        Опукла оболонка копланарних точок як геометрія найменшої розмірності:
        Point, LineSegment, Triangle або ConvexArea.
        """
        tol = as_precision(tol, *points)
        pts = Point.unique(points, tol)
        if not pts:
            return None
        n = _normal_of(pts, tol) if len(pts) >= 3 else None
        if n is None:
            return collinear_geometry(pts, tol)
        if normal is not None and normal.dot(n) < 0:
            n = -n
        hull = _hull2d(pts, n, tol)
        if len(hull) < 3:
            logger.debug("coplanar hull collapsed to %d points", len(hull))
            return collinear_geometry(pts, tol)
        if len(hull) == 3:
            return Triangle(*hull)
        area = ConvexArea.__new__(ConvexArea)
        area.pts = tuple(hull)
        area.plane = Plane.from_normal(hull[0], n)
        return area

    def triangulate(self) -> List[Triangle]:
        """Віялова тріангуляція від першої вершини."""
        p0 = self.pts[0]
        return [Triangle(p0, self.pts[i], self.pts[i + 1]) for i in range(1, len(self.pts) - 1)]

    def translate(self, v: Vector) -> "ConvexArea":
        return ConvexArea(*(p.translate(v) for p in self.pts))

    def rotate(self, axis, theta, tol=None) -> "ConvexArea":
        tol = self._tol(tol, axis)
        return ConvexArea(*(p.rotate(axis, theta, tol) for p in self.pts), tol=tol)


class Rectangle(ConvexArea):
    """
    Прямокутник з кутами p, q, r, s (обхід p -> q -> r -> s):

      q *-----* r
        |     |
      p *-----* s

    Усі парні запити успадковані від ConvexArea.
    """

    __slots__ = ("corners",)

    def __init__(self, p: Point, q: Point, r: Point, s: Point, tol=None):
        tol = as_precision(tol, p, q, r, s)
        pq, qr = p.vector_to(q), q.vector_to(r)
        if tol.is_zero_sq(pq.magnitude_squared) or tol.is_zero_sq(qr.magnitude_squared):
            raise DegenerateError("Rectangle needs sides of non-zero length")
        if not pq.is_orthogonal(qr, tol):
            raise DegenerateError("Rectangle sides pq and qr must be orthogonal")
        if not Point.at(p.vector + qr, p).equals(s, tol):
            raise DegenerateError("Rectangle corner s must be p + (r - q)")
        super().__init__(p, q, r, s, tol=tol)
        self.corners = (p, q, r, s)

    @property
    def p(self) -> Point:
        return self.corners[0]

    @property
    def q(self) -> Point:
        return self.corners[1]

    @property
    def r(self) -> Point:
        return self.corners[2]

    @property
    def s(self) -> Point:
        return self.corners[3]

    def translate(self, v: Vector) -> "Rectangle":
        return Rectangle(*(c.translate(v) for c in self.corners))

    def rotate(self, axis, theta, tol=None) -> "Rectangle":
        # округлення після повороту може порушити точну ортогональність
        tol = self._tol(tol, axis)
        corners = tuple(c.rotate(axis, theta, tol) for c in self.corners)
        out = Rectangle.__new__(Rectangle)
        ConvexArea.__init__(out, *corners, tol=tol)
        out.corners = corners
        return out
