# geom3d/collinear.py
from __future__ import annotations

from typing import List, Optional, Tuple

from .envelope import Envelope
from .geometry import DegenerateError, Geometry
from .line import Line
from .numeric import as_precision
from .point import Point
from .segment import LineSegment
from .vector import Vector, canonical_direction


class LineSegmentsCollinear(Geometry):
    """
    Скінченне об'єднання колінеарних відрізків (і, можливо, ізольованих
    точок, що виникають як результат перетину). Порядок членів не важливий.
    """

    __slots__ = ("parts", "l")
    rank = 4
    finite = True

    def __init__(self, *parts, line: Optional[Line] = None, tol=None):
        if not parts:
            raise ValueError("Need at least one segment")
        tol = as_precision(tol, *parts)
        if line is None:
            line = self._line_of(parts, tol)
        for part in parts:
            for pt in _points_of(part):
                if not line.intersects(pt, tol):
                    raise DegenerateError("Segments are not collinear")
        self.parts: Tuple = tuple(parts)
        self.l = line

    @staticmethod
    def _line_of(parts, tol) -> Line:
        for part in parts:
            if isinstance(part, LineSegment):
                return part.l
        pts = Point.unique([pt for part in parts for pt in _points_of(part)], tol)
        if len(pts) < 2:
            raise DegenerateError("Collinear set needs a segment or two distinct points")
        return Line(pts[0], pts[1])

    @property
    def segments(self) -> List[LineSegment]:
        return [p for p in self.parts if isinstance(p, LineSegment)]

    @property
    def points(self) -> List[Point]:
        return [pt for part in self.parts for pt in _points_of(part)]

    def _vectors(self):
        return tuple(v for part in self.parts for v in part._vectors())

    def __repr__(self) -> str:
        inner = ", ".join(repr(p) for p in self.parts)
        return f"LineSegmentsCollinear(parts=({inner}))"

    @property
    def envelope(self) -> Envelope:
        return Envelope.of(self.points)

    # ---------- спрощення ----------
    def _intervals(self, tol):
        """Параметричні інтервали членів уздовж канонічного напряму прямої."""
        P = self.l.p.vector
        u = canonical_direction(self.l.v, tol)
        uu = u.magnitude_squared
        out = []
        for part in self.parts:
            ts = [(pt.vector - P).dot(u) / uu for pt in _points_of(part)]
            out.append((min(ts), max(ts)))
        return P, u, sorted(out, key=lambda iv: (iv[0], iv[1]))

    def simplify(self, tol=None):
        """
        Злити члени, що перекриваються або торкаються. Повертає LineSegment
        (чи Point), якщо лишився один член, інакше новий LineSegmentsCollinear
        з членами, впорядкованими й орієнтованими вздовж канонічного напряму.
        """
        tol = self._tol(tol)
        P, u, ivs = self._intervals(tol)
        inv = 1 / u.magnitude_squared
        merged: List[list] = []
        for lo, hi in ivs:
            if merged and tol.sign(lo - merged[-1][1], inv) <= 0:
                merged[-1][1] = max(merged[-1][1], hi)
            else:
                merged.append([lo, hi])
        like = self.l.p
        parts = []
        for lo, hi in merged:
            a = Point.at(P + u * lo, like)
            parts.append(a if tol.eq(lo, hi, inv) else LineSegment(a, Point.at(P + u * hi, like)))
        if len(parts) == 1:
            return parts[0]
        return LineSegmentsCollinear(*parts, line=self.l, tol=tol)

    # ---------- порівняння ----------
    def equals(self, other: "LineSegmentsCollinear", tol=None) -> bool:
        """Рівність як множин точок (порядок і напрям членів не важливі)."""
        tol = self._tol(tol, other)
        a, b = self.simplify(tol), other.simplify(tol)
        pa = a.parts if isinstance(a, LineSegmentsCollinear) else (a,)
        pb = b.parts if isinstance(b, LineSegmentsCollinear) else (b,)
        if len(pa) != len(pb):
            return False
        for x, y in zip(pa, pb):
            if type(x) is not type(y):
                return False
            if isinstance(x, LineSegment):
                if not x.equals_ignore_direction(y, tol):
                    return False
            elif not x.equals(y, tol):
                return False
        return True

    # ---------- перетворення ----------
    def translate(self, v: Vector) -> "LineSegmentsCollinear":
        return LineSegmentsCollinear(*(p.translate(v) for p in self.parts),
                                     line=self.l.translate(v))

    def rotate(self, axis, theta, tol=None) -> "LineSegmentsCollinear":
        # округлення після повороту може порушити точну колінеарність
        tol = self._tol(tol, axis)
        out = LineSegmentsCollinear.__new__(LineSegmentsCollinear)
        out.parts = tuple(p.rotate(axis, theta, tol) for p in self.parts)
        out.l = self.l.rotate(axis, theta, tol)
        return out


def _points_of(part) -> List[Point]:
    if isinstance(part, Point):
        return [part]
    return [part.p, part.q]
