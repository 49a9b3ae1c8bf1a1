# geom3d/point.py
from __future__ import annotations

from typing import Iterable, Iterator, List

from .envelope import Envelope
from .geometry import Geometry
from .numeric import Number, as_precision
from .vector import ZERO, Vector, rodrigues


class Point(Geometry):
    """
    Точка = offset + rel. Абсолютне положення — vector; розклад на offset/rel
    лише зберігає точність для далеких від початку координат даних.
    """

    __slots__ = ("rel", "offset")
    rank = 0
    finite = True

    def __init__(self, x: Number, y: Number, z: Number, offset: Vector = ZERO):
        self.rel = Vector(x, y, z)
        self.offset = offset

    @classmethod
    def from_vector(cls, rel: Vector, offset: Vector = ZERO) -> "Point":
        return cls(rel.dx, rel.dy, rel.dz, offset)

    @classmethod
    def at(cls, absolute: Vector, like: "Point") -> "Point":
        """Точка в абсолютному положенні з offset точки like."""
        return cls.from_vector(absolute - like.offset, like.offset)

    def _vectors(self):
        return (self.rel, self.offset)

    # ---------- координати ----------
    @property
    def vector(self) -> Vector:
        return self.offset + self.rel

    @property
    def x(self):
        return self.offset.dx + self.rel.dx

    @property
    def y(self):
        return self.offset.dy + self.rel.dy

    @property
    def z(self):
        return self.offset.dz + self.rel.dz

    def __iter__(self) -> Iterator:
        yield self.x; yield self.y; yield self.z

    def vector_to(self, q: "Point") -> Vector:
        return q.vector - self.vector

    @property
    def envelope(self) -> Envelope:
        return Envelope.of([self])

    # ---------- порівняння ----------
    def equals(self, pt: "Point", tol=None) -> bool:
        """
        Точна модель: абсолютні координати рівні після округлення до (oom, rm).
        Наближена: відстань менша за epsilon.
        """
        tol = self._tol(tol, pt)
        if tol.exact:
            return all(tol.round(a) == tol.round(b) for a, b in zip(self, pt))
        return tol.is_zero_sq(self.vector_to(pt).magnitude_squared)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.vector == other.vector

    def __hash__(self) -> int:
        return hash(self.vector)

    def __repr__(self) -> str:
        return f"Point(offset={self.offset!r}, rel={self.rel!r})"

    # ---------- перетворення ----------
    def translate(self, v: Vector) -> "Point":
        return Point.from_vector(self.rel, self.offset + v)

    def with_offset(self, offset: Vector) -> "Point":
        return Point.at(self.vector, Point.from_vector(ZERO, offset))

    def rotate(self, axis, theta, tol=None) -> "Point":
        """Поворот навколо осі axis (Line або Ray) на кут theta."""
        tol = as_precision(tol, self, axis)
        o = axis.p.vector
        r = o + rodrigues(self.vector - o, axis.v, theta, tol)
        return Point.at(Vector(tol.round(r.dx), tol.round(r.dy), tol.round(r.dz)), self)

    # ---------- утиліти ----------
    @staticmethod
    def unique(points: Iterable["Point"], tol=None) -> List["Point"]:
        """Унікальні точки у порядку першої появи."""
        pts = list(points)
        tol = as_precision(tol, *pts)
        if tol.exact:
            seen = {}
            for p in pts:
                seen.setdefault(tuple(tol.round(c) for c in p), p)
            return list(seen.values())
        out: List[Point] = []
        for p in pts:
            if not any(p.equals(q, tol) for q in out):
                out.append(p)
        return out


ORIGIN = Point(0, 0, 0)
