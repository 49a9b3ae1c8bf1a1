# geom3d/vector.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .numeric import Number, RatSqrt, as_precision, has_float, rat


def _coord(x: Number):
    # float лишається float (модель Approx), решта: точні раціональні
    if isinstance(x, float):
        return x
    return rat(x)


def _fmt(x) -> str:
    return str(x) if not isinstance(x, float) else repr(x)


@dataclass(frozen=True)
class Vector:
    """Вектор (dx, dy, dz). Компоненти — Fraction або float."""

    dx: Number
    dy: Number
    dz: Number

    def __post_init__(self):
        object.__setattr__(self, "dx", _coord(self.dx))
        object.__setattr__(self, "dy", _coord(self.dy))
        object.__setattr__(self, "dz", _coord(self.dz))

    def __iter__(self) -> Iterator:
        yield self.dx; yield self.dy; yield self.dz

    def __repr__(self) -> str:
        return f"Vector(dx={_fmt(self.dx)}, dy={_fmt(self.dy)}, dz={_fmt(self.dz)})"

    @property
    def is_float(self) -> bool:
        return has_float(self)

    # ---------- арифметика ----------
    def __add__(self, v: "Vector") -> "Vector":
        return Vector(self.dx + v.dx, self.dy + v.dy, self.dz + v.dz)

    def __sub__(self, v: "Vector") -> "Vector":
        return Vector(self.dx - v.dx, self.dy - v.dy, self.dz - v.dz)

    def __neg__(self) -> "Vector":
        return Vector(-self.dx, -self.dy, -self.dz)

    def __mul__(self, s) -> "Vector":
        return Vector(self.dx * s, self.dy * s, self.dz * s)

    __rmul__ = __mul__

    def __truediv__(self, s) -> "Vector":
        if not isinstance(s, float):
            s = rat(s)
        return Vector(self.dx / s, self.dy / s, self.dz / s)

    def dot(self, v: "Vector"):
        return self.dx * v.dx + self.dy * v.dy + self.dz * v.dz

    def cross(self, v: "Vector") -> "Vector":
        return Vector(self.dy * v.dz - self.dz * v.dy,
                      self.dz * v.dx - self.dx * v.dz,
                      self.dx * v.dy - self.dy * v.dx)

    # ---------- довжина ----------
    @property
    def magnitude_squared(self):
        return self.dot(self)

    @property
    def magnitude(self) -> RatSqrt:
        """Довжина як лінивий корінь (точна, якщо раціональна)."""
        return RatSqrt(self.magnitude_squared)

    def get_magnitude(self, tol=None):
        return self._tol(tol).sqrt(self.magnitude_squared)

    def get_unit_vector(self, tol=None) -> "Vector":
        tol = self._tol(tol)
        if self.is_zero():
            raise ValueError("Zero vector has no direction")
        m = tol.finer().root(self.magnitude_squared)
        return Vector(tol.round(self.dx / m), tol.round(self.dy / m), tol.round(self.dz / m))

    # ---------- предикати ----------
    def is_zero(self, tol=None) -> bool:
        if tol is None:
            return self.dx == 0 and self.dy == 0 and self.dz == 0
        return as_precision(tol, self).is_zero_sq(self.magnitude_squared)

    def is_scalar_multiple(self, v: "Vector", tol=None) -> bool:
        """Чи self = k * v для деякого скаляра k (ZERO кратний будь-якому)."""
        tol = self._tol(tol, v)
        vv = v.magnitude_squared
        if tol.is_zero_sq(vv):
            return tol.is_zero_sq(self.magnitude_squared)
        # |self x v| / |v| = |self| sin(кута)
        return tol.is_zero_sq(self.cross(v).magnitude_squared / vv)

    def is_orthogonal(self, v: "Vector", tol=None) -> bool:
        tol = self._tol(tol, v)
        return tol.is_zero(self.dot(v), self.magnitude_squared * v.magnitude_squared)

    def is_reverse(self, v: "Vector") -> bool:
        return self == -v

    def get_angle(self, v: "Vector", tol=None):
        """Кут між векторами у [0, pi]."""
        tol = self._tol(tol, v)
        if self.is_zero() or v.is_zero():
            raise ValueError("Angle with a zero vector is undefined")
        f = tol.finer()
        c = self.dot(v) / f.root(self.magnitude_squared * v.magnitude_squared)
        c = min(max(c, -1), 1)
        return tol.round(f.acos(c))

    def get_direction(self) -> int:
        """Октант 1..8 за знаками (dx, dy, dz); нуль рахується як додатний."""
        return 1 + (self.dx < 0) * 4 + (self.dy < 0) * 2 + (self.dz < 0)

    # ---------- поворот ----------
    def rotate(self, axis: "Vector", theta, tol=None) -> "Vector":
        """Поворот на theta навколо осі axis (через початок координат)."""
        tol = self._tol(tol, axis)
        r = rodrigues(self, axis, theta, tol)
        return Vector(tol.round(r.dx), tol.round(r.dy), tol.round(r.dz))

    def _tol(self, tol, *others):
        return as_precision(tol, self, *others)


def rodrigues(v: Vector, axis: Vector, theta, tol) -> Vector:
    """
    Формула Родріга для неодиничної осі u:
      v cos + (u x v) sin / |u| + u (u.v) (1 - cos) / |u|^2
    Повертає неокруглений результат (проміжні величини з запасом точності).
    """
    uu = axis.magnitude_squared
    if uu == 0:
        raise ValueError("Rotation axis must be non-zero")
    f = tol.finer()
    s, c = f.sin_cos(theta)
    if s == 0 and c == 1:
        return v
    inv = 1 / f.root(uu)
    return v * c + axis.cross(v) * (s * inv) + axis * (axis.dot(v) * (1 - c) / uu)


def as_vector(x) -> Vector:
    if isinstance(x, Vector):
        return x
    dx, dy, dz = x
    return Vector(dx, dy, dz)


ZERO = Vector(0, 0, 0)
I = Vector(1, 0, 0)
J = Vector(0, 1, 0)
K = Vector(0, 0, 1)



def is_canonical(v: Vector, tol) -> bool:
    """Чи додатна перша ненульова компонента v."""
    vv = v.magnitude_squared
    for c in v:
        s = tol.sign(c, vv)
        if s:
            return s > 0
    return True


def canonical_direction(v: Vector, tol) -> Vector:
    """v або -v так, щоб перша ненульова компонента була додатна."""
    return v if is_canonical(v, tol) else -v
