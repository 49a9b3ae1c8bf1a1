# geom3d/ray.py
from __future__ import annotations

from .geometry import DegenerateError, Geometry
from .line import Line
from .point import Point
from .vector import Vector


class Ray(Geometry):
    """Промінь: початок p, напрям v; точки p + t v для t >= 0."""

    __slots__ = ("l",)
    rank = 2

    def __init__(self, p: Point, q: Point):
        if p.vector_to(q).is_zero():
            raise DegenerateError("Ray needs two distinct points")
        self.l = Line(p, q)

    @classmethod
    def from_vector(cls, p: Point, v: Vector) -> "Ray":
        ray = cls.__new__(cls)
        ray.l = Line.from_vector(p, v)
        return ray

    @property
    def p(self) -> Point:
        return self.l.p

    @property
    def v(self) -> Vector:
        return self.l.v

    def _vectors(self):
        return self.l._vectors()

    def __repr__(self) -> str:
        return f"Ray(p={self.p!r}, v={self.v!r})"

    def is_parallel(self, other, tol=None) -> bool:
        return self.l.is_parallel(other, tol)

    def is_aligned(self, pt: Point, tol=None) -> bool:
        """Чи лежить pt у півпросторі перед початком (t >= 0)."""
        tol = self._tol(tol, pt)
        return tol.sign(self.p.vector_to(pt).dot(self.v), self.v.magnitude_squared) >= 0

    def equals(self, ray: "Ray", tol=None) -> bool:
        tol = self._tol(tol, ray)
        return (self.p.equals(ray.p, tol)
                and self.v.is_scalar_multiple(ray.v, tol)
                and self.v.dot(ray.v) > 0)

    def translate(self, v: Vector) -> "Ray":
        return Ray.from_vector(self.p.translate(v), self.v)

    def rotate(self, axis, theta, tol=None) -> "Ray":
        l = self.l.rotate(axis, theta, tol)
        return Ray.from_vector(l.p, l.v)
