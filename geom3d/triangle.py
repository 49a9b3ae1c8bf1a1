# geom3d/triangle.py
from __future__ import annotations

from typing import List, Sequence, Tuple

from .envelope import Envelope
from .geometry import DegenerateError, Geometry
from .numeric import as_precision
from .plane import Plane
from .point import Point
from .predicates import collinear
from .segment import LineSegment
from .vector import Vector, is_canonical


class Polygon(Geometry):
    """
    Опуклий плаский многокутник: вершини pts обходяться проти годинникової
    стрілки відносно plane.n. Спільна основа Triangle і ConvexArea.
    """

    __slots__ = ("pts", "plane")
    finite = True

    @property
    def points(self) -> List[Point]:
        return list(self.pts)

    @property
    def normal(self) -> Vector:
        return self.plane.n

    def _vectors(self):
        return tuple(v for p in self.pts for v in p._vectors())

    def __repr__(self) -> str:
        inner = ", ".join(repr(p) for p in self.pts)
        return f"{type(self).__name__}(points=({inner}))"

    @property
    def envelope(self) -> Envelope:
        return Envelope.of(self.pts)

    @property
    def edges(self) -> List[LineSegment]:
        k = len(self.pts)
        return [LineSegment(self.pts[i], self.pts[(i + 1) % k]) for i in range(k)]

    def halfspaces(self) -> List[Tuple[Vector, Vector]]:
        """(A, m) для кожного ребра AB: m = n x (B - A) дивиться всередину."""
        n = self.plane.n
        k = len(self.pts)
        out = []
        for i in range(k):
            a, b = self.pts[i].vector, self.pts[(i + 1) % k].vector
            out.append((a, n.cross(b - a)))
        return out

    @property
    def centroid(self) -> Point:
        s = self.pts[0].vector
        for p in self.pts[1:]:
            s = s + p.vector
        return Point.at(s / len(self.pts), self.pts[0])

    def get_area(self, tol=None):
        tol = self._tol(tol)
        o = self.pts[0].vector
        s = Vector(0, 0, 0)
        for i in range(1, len(self.pts) - 1):
            s = s + (self.pts[i].vector - o).cross(self.pts[i + 1].vector - o)
        return tol.sqrt(s.magnitude_squared / 4)

    def get_perimeter(self, tol=None):
        tol = self._tol(tol)
        f = tol.finer()
        return tol.round(sum(f.sqrt(e.length_squared) for e in self.edges))

    def is_aligned(self, pt: Point, tol=None) -> bool:
        """Чи лежить pt у призмі над многокутником (площину не перевіряємо)."""
        tol = self._tol(tol, pt)
        X = pt.vector
        return all(tol.sign(m.dot(X - a), m.magnitude_squared) >= 0
                   for a, m in self.halfspaces())

    def equals(self, other: "Polygon", tol=None) -> bool:
        """Та сама множина вершин (порядок обходу не важливий)."""
        tol = self._tol(tol, other)
        if len(self.pts) != len(other.pts):
            return False
        return all(any(p.equals(q, tol) for q in other.pts) for p in self.pts)


class Triangle(Polygon):
    """Трикутник pqr; площина з нормаллю (q - p) x (r - p)."""

    __slots__ = ()
    rank = 6

    def __init__(self, p: Point, q: Point, r: Point):
        try:
            plane = Plane(p, q, r)
        except DegenerateError as e:
            raise DegenerateError("Triangle needs three non-collinear points") from e
        self.pts = (p, q, r)
        self.plane = plane

    @property
    def p(self) -> Point:
        return self.pts[0]

    @property
    def q(self) -> Point:
        return self.pts[1]

    @property
    def r(self) -> Point:
        return self.pts[2]

    @property
    def pq(self) -> LineSegment:
        return LineSegment(self.p, self.q)

    @property
    def qr(self) -> LineSegment:
        return LineSegment(self.q, self.r)

    @property
    def rp(self) -> LineSegment:
        return LineSegment(self.r, self.p)

    @staticmethod
    def get_geometry(p: Point, q: Point, r: Point, tol=None):
        """Трикутник або, для вироджених вершин, Point / LineSegment."""
        tol = as_precision(tol, p, q, r)
        pts = Point.unique([p, q, r], tol)
        if len(pts) < 3 or collinear(p, q, r, tol):
            return collinear_geometry(pts, tol)
        return Triangle(p, q, r)

    def translate(self, v: Vector) -> "Triangle":
        return Triangle(*(p.translate(v) for p in self.pts))

    def rotate(self, axis, theta, tol=None) -> "Triangle":
        tol = self._tol(tol, axis)
        return Triangle(*(p.rotate(axis, theta, tol) for p in self.pts))


def collinear_geometry(points: Sequence[Point], tol):
    """Опукла оболонка колінеарних точок: Point або LineSegment."""
    pts = Point.unique(points, tol)
    if len(pts) == 1:
        return pts[0]
    a = pts[0]
    u = a.vector_to(pts[1])
    ts = [(a.vector_to(p).dot(u), p) for p in pts]
    lo = min(ts, key=lambda tp: tp[0])[1]
    hi = max(ts, key=lambda tp: tp[0])[1]
    return LineSegment(lo, hi) if is_canonical(u, tol) else LineSegment(hi, lo)
