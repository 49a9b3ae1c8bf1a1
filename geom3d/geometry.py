# geom3d/geometry.py
"""
Базовий клас усіх геометрій і спільні типи.

Усі геометрії — незмінні значення: translate/rotate повертають нові об'єкти.
Парні операції (перетин, відстань) делегуються диспетчеру geom3d.dispatch.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional, Union

from . import dispatch
from .numeric import as_precision, has_float

if TYPE_CHECKING:
    from .area import ConvexArea
    from .collinear import LineSegmentsCollinear
    from .line import Line
    from .plane import Plane
    from .point import Point
    from .ray import Ray
    from .segment import LineSegment
    from .tetrahedron import Tetrahedron
    from .triangle import Triangle
    from .vector import Vector
    from .volume import ConvexVolume

    FiniteGeometry = Union[Point, LineSegment, LineSegmentsCollinear, Triangle,
                           ConvexArea, Tetrahedron, ConvexVolume]
    AnyGeometry = Union[FiniteGeometry, Line, Ray, Plane]
    Intersection = Optional[AnyGeometry]


class DegenerateError(ValueError):
    """Вироджені вхідні дані: збіжні точки, колінеарні чи копланарні вершини."""


class Geometry:
    """
    Спільна поведінка. Підкласи задають:
      rank      — канонічний порядок типу в диспетчері;
      finite    — чи має об'єкт обмежений envelope;
      _vectors  — вектори, що повністю визначають об'єкт.
    """

    __slots__ = ()
    rank = -1
    finite = False

    def _vectors(self) -> Iterable["Vector"]:
        raise NotImplementedError

    @property
    def is_float(self) -> bool:
        """Чи задані координати як float (тоді за замовчуванням — Approx)."""
        return any(has_float(v) for v in self._vectors())

    # ---------- перетворення ----------
    def translate(self, v: "Vector") -> "Geometry":
        raise NotImplementedError

    def rotate(self, axis, theta, tol=None) -> "Geometry":
        raise NotImplementedError

    # ---------- порівняння ----------
    def equals(self, other, tol=None) -> bool:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    # ---------- парні запити ----------
    def get_intersection(self, other: "Geometry", tol=None):
        return dispatch.get_intersection(self, other, tol)

    def intersects(self, other: "Geometry", tol=None) -> bool:
        return dispatch.intersects(self, other, tol)

    def get_distance_squared(self, other: "Geometry", tol=None):
        return dispatch.get_distance_squared(self, other, tol)

    def get_distance(self, other: "Geometry", tol=None):
        return dispatch.get_distance(self, other, tol)

    def _tol(self, tol, *others):
        return as_precision(tol, self, *others)
