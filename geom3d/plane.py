# geom3d/plane.py
from __future__ import annotations

from .geometry import DegenerateError, Geometry
from .point import ORIGIN, Point
from .vector import I, J, K, Vector


class Plane(Geometry):
    """
    Площина через точку p з нормаллю n. Для Plane(p, q, r) нормаль
    n = (q - p) x (r - p) (правило правої руки).
    """

    __slots__ = ("p", "n")
    rank = 5

    def __init__(self, p: Point, q: Point, r: Point):
        n = p.vector_to(q).cross(p.vector_to(r))
        if n.is_zero():
            raise DegenerateError("Plane needs three non-collinear points")
        self.p = p
        self.n = n

    @classmethod
    def from_normal(cls, p: Point, n: Vector) -> "Plane":
        if n.is_zero():
            raise DegenerateError("Plane normal must be non-zero")
        plane = cls.__new__(cls)
        plane.p = p
        plane.n = n
        return plane

    @property
    def normal(self) -> Vector:
        return self.n

    def _vectors(self):
        return (self.p.rel, self.p.offset, self.n)

    def __repr__(self) -> str:
        return f"Plane(p={self.p!r}, n={self.n!r})"

    # ---------- сторона ----------
    def _signed(self, pt: Point):
        """n . (pt - p): відстань зі знаком, помножена на |n|."""
        return self.n.dot(self.p.vector_to(pt))

    def get_side(self, pt: Point, tol=None) -> int:
        """1 з боку нормалі, -1 з протилежного, 0 на площині."""
        tol = self._tol(tol, pt)
        return tol.sign(self._signed(pt), self.n.magnitude_squared)

    def is_on_same_side(self, a: Point, b: Point, tol=None) -> bool:
        """Чи не розділяє площина точки a, b (точка на площині — з обох боків)."""
        tol = self._tol(tol, a, b)
        return self.get_side(a, tol) * self.get_side(b, tol) >= 0

    def is_on_plane(self, g, tol=None) -> bool:
        """Чи лежить у площині пряма/промінь/відрізок."""
        tol = self._tol(tol, g)
        return self.intersects(g.p, tol) and self.is_parallel(g, tol)

    def is_parallel(self, other, tol=None) -> bool:
        tol = self._tol(tol, other)
        if isinstance(other, Plane):
            return self.n.is_scalar_multiple(other.n, tol)
        return self.n.is_orthogonal(other.v, tol)

    def project(self, pt: Point) -> Point:
        """Ортогональна проекція pt на площину (точно)."""
        k = self._signed(pt) / self.n.magnitude_squared
        return Point.at(pt.vector - self.n * k, pt)

    # ---------- порівняння ----------
    def equals(self, plane: "Plane", tol=None) -> bool:
        """Та сама множина точок; орієнтація нормалі не враховується."""
        tol = self._tol(tol, plane)
        return self.is_parallel(plane, tol) and self.get_side(plane.p, tol) == 0

    def equals_oriented(self, plane: "Plane", tol=None) -> bool:
        tol = self._tol(tol, plane)
        return self.equals(plane, tol) and self.n.dot(plane.n) > 0

    # ---------- перетворення ----------
    def translate(self, v: Vector) -> "Plane":
        return Plane.from_normal(self.p.translate(v), self.n)

    def rotate(self, axis, theta, tol=None) -> "Plane":
        tol = self._tol(tol, axis)
        return Plane.from_normal(self.p.rotate(axis, theta, tol), self.n.rotate(axis.v, theta, tol))


X0 = Plane.from_normal(ORIGIN, I)
Y0 = Plane.from_normal(ORIGIN, J)
Z0 = Plane.from_normal(ORIGIN, K)
