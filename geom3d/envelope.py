# geom3d/envelope.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .numeric import Number, as_precision, has_float


@dataclass(frozen=True)
class Envelope:
    """Осьово-вирівняний обмежувальний паралелепіпед (AABB)."""

    xmin: Number
    xmax: Number
    ymin: Number
    ymax: Number
    zmin: Number
    zmax: Number

    @classmethod
    def of(cls, points: Iterable) -> "Envelope":
        """AABB точок (будь-що з атрибутами x, y, z)."""
        pts = list(points)
        if not pts:
            raise ValueError("empty set")
        xs = [p.x for p in pts]
        ys = [p.y for p in pts]
        zs = [p.z for p in pts]
        return cls(min(xs), max(xs), min(ys), max(ys), min(zs), max(zs))

    @property
    def is_float(self) -> bool:
        return has_float((self.xmin, self.xmax, self.ymin, self.ymax, self.zmin, self.zmax))

    def union(self, e: "Envelope") -> "Envelope":
        return Envelope(min(self.xmin, e.xmin), max(self.xmax, e.xmax),
                        min(self.ymin, e.ymin), max(self.ymax, e.ymax),
                        min(self.zmin, e.zmin), max(self.zmax, e.zmax))

    def _slack(self, tol):
        return 0 if tol.exact else tol.epsilon

    def intersects(self, e: "Envelope", tol=None) -> bool:
        tol = as_precision(tol, self, e)
        s = self._slack(tol)
        return (self.xmin <= e.xmax + s and e.xmin <= self.xmax + s
                and self.ymin <= e.ymax + s and e.ymin <= self.ymax + s
                and self.zmin <= e.zmax + s and e.zmin <= self.zmax + s)

    def contains(self, other, tol=None) -> bool:
        """Чи лежить точка або інший envelope всередині (межа включно)."""
        e = other if isinstance(other, Envelope) else Envelope.of([other])
        tol = as_precision(tol, self, e)
        s = self._slack(tol)
        return (self.xmin - s <= e.xmin and e.xmax <= self.xmax + s
                and self.ymin - s <= e.ymin and e.ymax <= self.ymax + s
                and self.zmin - s <= e.zmin and e.zmax <= self.zmax + s)

    def get_intersection(self, e: "Envelope", tol=None) -> Optional["Envelope"]:
        if not self.intersects(e, tol):
            return None
        bounds = []
        for lo_a, hi_a, lo_b, hi_b in ((self.xmin, self.xmax, e.xmin, e.xmax),
                                       (self.ymin, self.ymax, e.ymin, e.ymax),
                                       (self.zmin, self.zmax, e.zmin, e.zmax)):
            lo = max(lo_a, lo_b)
            # у моделі Approx межі можуть розминутися на epsilon
            bounds += [lo, max(lo, min(hi_a, hi_b))]
        return Envelope(*bounds)

    def translate(self, v) -> "Envelope":
        return Envelope(self.xmin + v.dx, self.xmax + v.dx,
                        self.ymin + v.dy, self.ymax + v.dy,
                        self.zmin + v.dz, self.zmax + v.dz)

    @property
    def points(self) -> List:
        """Вісім кутів (з повторами для виродженого AABB)."""
        from .point import Point
        return [Point(x, y, z)
                for x in (self.xmin, self.xmax)
                for y in (self.ymin, self.ymax)
                for z in (self.zmin, self.zmax)]

    @property
    def centroid(self):
        from .point import Point
        return Point((self.xmin + self.xmax) / 2, (self.ymin + self.ymax) / 2,
                     (self.zmin + self.zmax) / 2)
