# geom3d/line.py
from __future__ import annotations

from .geometry import DegenerateError, Geometry
from .point import ORIGIN, Point
from .vector import I, J, K, Vector


class Line(Geometry):
    """
    Нескінченна пряма через точку p з напрямом v (v != 0).
    Рівність — геометрична: та сама множина точок.
    """

    __slots__ = ("p", "v")
    rank = 1

    def __init__(self, p: Point, q: Point):
        v = p.vector_to(q)
        if v.is_zero():
            raise DegenerateError("Line needs two distinct points")
        self.p = p
        self.v = v

    @classmethod
    def from_vector(cls, p: Point, v: Vector) -> "Line":
        if v.is_zero():
            raise DegenerateError("Line direction must be non-zero")
        line = cls.__new__(cls)
        line.p = p
        line.v = v
        return line

    @property
    def q(self) -> Point:
        return self.p.translate(self.v)

    def _vectors(self):
        return (self.p.rel, self.p.offset, self.v)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(p={self.p!r}, v={self.v!r})"

    # ---------- предикати ----------
    def is_parallel(self, other, tol=None) -> bool:
        """Паралельність прямій (Line/Ray/LineSegment) чи площині."""
        tol = self._tol(tol, other)
        if hasattr(other, "n"):
            return self.v.is_orthogonal(other.n, tol)
        return self.v.is_scalar_multiple(other.v, tol)

    def equals(self, line: "Line", tol=None) -> bool:
        tol = self._tol(tol, line)
        return self.is_parallel(line, tol) and self.intersects(line.p, tol)

    def project(self, pt: Point) -> Point:
        """Найближча до pt точка прямої (точно)."""
        w = self.p.vector_to(pt)
        t = w.dot(self.v) / self.v.magnitude_squared
        return Point.at(self.p.vector + self.v * t, self.p)

    def get_line_of_intersection(self, other: "Line", tol=None):
        """
        Найкоротший відрізок між двома прямими: None для паралельних,
        Point, якщо прямі перетинаються, інакше LineSegment.
        """
        from .segment import LineSegment
        tol = self._tol(tol, other)
        if self.is_parallel(other, tol):
            return None
        u, v = self.v, other.v
        w0 = other.p.vector_to(self.p)
        a, b, c = u.dot(u), u.dot(v), v.dot(v)
        d, e = u.dot(w0), v.dot(w0)
        den = u.cross(v).magnitude_squared  # |u x v|^2 == a*c - b*b
        t = (b * e - c * d) / den
        s = (a * e - b * d) / den
        x = Point.at(self.p.vector + u * t, self.p)
        y = Point.at(other.p.vector + v * s, self.p)
        if x.equals(y, tol):
            return x
        return LineSegment(x, y)

    # ---------- перетворення ----------
    def translate(self, v: Vector) -> "Line":
        return Line.from_vector(self.p.translate(v), self.v)

    def rotate(self, axis, theta, tol=None) -> "Line":
        tol = self._tol(tol, axis)
        return Line.from_vector(self.p.rotate(axis, theta, tol), self.v.rotate(axis.v, theta, tol))


X_AXIS = Line.from_vector(ORIGIN, I)
Y_AXIS = Line.from_vector(ORIGIN, J)
Z_AXIS = Line.from_vector(ORIGIN, K)
