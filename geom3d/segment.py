# geom3d/segment.py
from __future__ import annotations

from .envelope import Envelope
from .geometry import DegenerateError, Geometry
from .line import Line
from .point import Point
from .vector import Vector


class LineSegment(Geometry):
    """Відрізок [p, q], p != q; l — пряма через p з напрямом q - p."""

    __slots__ = ("l", "q")
    rank = 3
    finite = True

    def __init__(self, p: Point, q: Point):
        if p.vector_to(q).is_zero():
            raise DegenerateError("LineSegment needs two distinct points")
        self.l = Line(p, q)
        self.q = q

    @property
    def p(self) -> Point:
        return self.l.p

    @property
    def v(self) -> Vector:
        return self.l.v

    def _vectors(self):
        return self.l._vectors() + (self.q.rel, self.q.offset)

    def __repr__(self) -> str:
        return f"LineSegment(p={self.p!r}, q={self.q!r})"

    @property
    def envelope(self) -> Envelope:
        return Envelope.of([self.p, self.q])

    @property
    def points(self):
        return [self.p, self.q]

    # ---------- метрика ----------
    @property
    def length_squared(self):
        return self.v.magnitude_squared

    def get_length(self, tol=None):
        return self._tol(tol).sqrt(self.length_squared)

    @property
    def midpoint(self) -> Point:
        return Point.at(self.p.vector + self.v / 2, self.p)

    def reverse(self) -> "LineSegment":
        return LineSegment(self.q, self.p)

    # ---------- предикати ----------
    def is_parallel(self, other, tol=None) -> bool:
        return self.l.is_parallel(other, tol)

    def is_on_line(self, line, tol=None) -> bool:
        """Чи лежить відрізок на прямій line."""
        tol = self._tol(tol, line)
        return line.intersects(self.p, tol) and line.intersects(self.q, tol)

    def is_aligned(self, pt: Point, tol=None) -> bool:
        """Чи лежить pt між площинами, перпендикулярними відрізку в p і q."""
        tol = self._tol(tol, pt)
        vv = self.length_squared
        return (tol.sign(self.p.vector_to(pt).dot(self.v), vv) >= 0
                and tol.sign(self.q.vector_to(pt).dot(self.v), vv) <= 0)

    def equals(self, seg: "LineSegment", tol=None) -> bool:
        """Рівність з урахуванням напряму (p з p, q з q)."""
        tol = self._tol(tol, seg)
        return self.p.equals(seg.p, tol) and self.q.equals(seg.q, tol)

    def equals_ignore_direction(self, seg: "LineSegment", tol=None) -> bool:
        tol = self._tol(tol, seg)
        return self.equals(seg, tol) or (self.p.equals(seg.q, tol) and self.q.equals(seg.p, tol))

    def simplify(self, tol=None) -> "LineSegment":
        return self

    # ---------- об'єднання ----------
    @staticmethod
    def get_geometry(a, b, tol=None):
        """
        Для двох точок: Point, якщо вони рівні, інакше LineSegment.
        Для двох відрізків: об'єднання — LineSegment, якщо вони колінеарні й
        перекриваються або торкаються, LineSegmentsCollinear, якщо колінеарні
        й рознесені; неколінеарні — ValueError.
        """
        if isinstance(a, Point) and isinstance(b, Point):
            if a.equals(b, tol):
                return a
            return LineSegment(a, b)
        if not (isinstance(a, LineSegment) and isinstance(b, LineSegment)):
            raise TypeError(
                f"Union needs two points or two segments, got {type(a).__name__} and {type(b).__name__}")
        from .collinear import LineSegmentsCollinear
        tol = a._tol(tol, b)
        if not (a.l.intersects(b.p, tol) and a.l.intersects(b.q, tol)):
            raise ValueError("Union of non-collinear segments is not a geometry")
        return LineSegmentsCollinear(a, b, tol=tol).simplify(tol)

    # ---------- перетворення ----------
    def translate(self, v: Vector) -> "LineSegment":
        return LineSegment(self.p.translate(v), self.q.translate(v))

    def rotate(self, axis, theta, tol=None) -> "LineSegment":
        tol = self._tol(tol, axis)
        return LineSegment(self.p.rotate(axis, theta, tol), self.q.rotate(axis, theta, tol))
