# geom3d/tetrahedron.py
from __future__ import annotations

from typing import List, Tuple

from .area import ConvexArea
from .envelope import Envelope
from .geometry import DegenerateError, Geometry
from .numeric import as_precision
from .point import Point
from .predicates import orient3d
from .segment import LineSegment
from .triangle import Triangle
from .vector import Vector


class Solid(Geometry):
    """
    Опуклий многогранник: спільна основа Tetrahedron і ConvexVolume.
    Підкласи задають pts (вершини) і faces (трикутні грані).
    """

    __slots__ = ()
    finite = True

    @property
    def points(self) -> List[Point]:
        return list(self.pts)

    def _vectors(self):
        return tuple(v for p in self.pts for v in p._vectors())

    @property
    def envelope(self) -> Envelope:
        return Envelope.of(self.pts)

    @property
    def centroid(self) -> Point:
        """Середнє вершин (для тетраедра — центр мас)."""
        s = self.pts[0].vector
        for p in self.pts[1:]:
            s = s + p.vector
        return Point.at(s / len(self.pts), self.pts[0])

    def halfspaces(self) -> List[Tuple[Vector, Vector]]:
        """(A, m) для кожної грані: m дивиться всередину."""
        c = self.centroid.vector
        out = []
        for f in self.faces:
            a = f.p.vector
            m = f.plane.n
            out.append((a, m if m.dot(c - a) > 0 else -m))
        return out

    @property
    def edges(self) -> List[LineSegment]:
        seen = {}
        for f in self.faces:
            for e in f.edges:
                key = frozenset((e.p.vector, e.q.vector))
                seen.setdefault(key, e)
        return list(seen.values())

    def get_area(self, tol=None):
        tol = self._tol(tol)
        f = tol.finer()
        return tol.round(sum(face.get_area(f) for face in self.faces))

    def equals(self, other: "Solid", tol=None) -> bool:
        """Та сама множина вершин."""
        tol = self._tol(tol, other)
        if len(self.pts) != len(other.pts):
            return False
        return all(any(p.equals(q, tol) for q in other.pts) for p in self.pts)

    def __repr__(self) -> str:
        inner = ", ".join(repr(p) for p in self.pts)
        return f"{type(self).__name__}(points=({inner}))"


class Tetrahedron(Solid):
    """Тетраедр pqrs; грані pqr, qsr, spr, psq."""

    __slots__ = ("pts", "faces")
    rank = 8

    def __init__(self, p: Point, q: Point, r: Point, s: Point):
        if orient3d(p, q, r, s) == 0:
            raise DegenerateError("Tetrahedron needs four non-coplanar points")
        self.pts = (p, q, r, s)
        self.faces = (Triangle(p, q, r), Triangle(q, s, r),
                      Triangle(s, p, r), Triangle(p, s, q))

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
    def s(self) -> Point:
        return self.pts[3]

    @property
    def pqr(self) -> Triangle:
        return self.faces[0]

    @property
    def qsr(self) -> Triangle:
        return self.faces[1]

    @property
    def spr(self) -> Triangle:
        return self.faces[2]

    @property
    def psq(self) -> Triangle:
        return self.faces[3]

    def get_volume(self, tol=None):
        tol = self._tol(tol)
        return tol.round(abs(orient3d(*self.pts)) / 6)

    @staticmethod
    def get_geometry(p: Point, q: Point, r: Point, s: Point, tol=None):
        """Тетраедр або, для копланарних вершин, геометрія нижчої розмірності."""
        tol = as_precision(tol, p, q, r, s)
        n = p.vector_to(q).cross(p.vector_to(r))
        if not n.is_zero() and tol.sign(orient3d(p, q, r, s), n.magnitude_squared) != 0:
            return Tetrahedron(p, q, r, s)
        return ConvexArea.get_geometry([p, q, r, s], tol)

    def translate(self, v: Vector) -> "Tetrahedron":
        return Tetrahedron(*(p.translate(v) for p in self.pts))

    def rotate(self, axis, theta, tol=None) -> "Tetrahedron":
        tol = self._tol(tol, axis)
        return Tetrahedron(*(p.rotate(axis, theta, tol) for p in self.pts))
