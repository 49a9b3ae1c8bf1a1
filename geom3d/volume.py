# geom3d/volume.py
from __future__ import annotations

import logging
from typing import List, Sequence

from .area import ConvexArea
from .geometry import DegenerateError
from .hull import ConvexHull3D
from .numeric import as_precision
from .point import Point
from .predicates import collinear, orient3d, side_of_plane
from .tetrahedron import Solid, Tetrahedron
from .triangle import Triangle
from .vector import Vector

logger = logging.getLogger(__name__)


class ConvexVolume(Solid):
    """
    Опуклий многогранник — опукла оболонка точок. Грані — трикутники
    оболонки з нормалями назовні; вершини — лише крайні точки.
    """

    __slots__ = ("pts", "faces")
    rank = 9

    def __init__(self, *points: Point, tol=None):
        tol = as_precision(tol, *points)
        try:
            hull = extreme_hull(Point.unique(points, tol), tol)
        except ValueError as e:
            raise DegenerateError(f"ConvexVolume needs four non-coplanar points: {e}") from e
        self._from_hull(hull)

    def _from_hull(self, hull: ConvexHull3D) -> None:
        self.pts = tuple(hull.vertex_points())
        self.faces = tuple(Triangle(*(hull.P[i] for i in f)) for f in hull.faces())

    def get_volume(self, tol=None):
        """Сума об'ємів тетраедрів (центроїд, грань)."""
        tol = self._tol(tol)
        c = self.centroid
        return tol.round(sum(abs(orient3d(c, *f.pts)) for f in self.faces) / 6)

    def tetrahedralize(self, backend: str = "scipy") -> List[Tetrahedron]:
        """Розбиття на тетраедри (Делоне по вершинах)."""
        from .pipeline import tetrahedralize
        return tetrahedralize(self.pts, backend=backend)

    def translate(self, v: Vector) -> "ConvexVolume":
        return ConvexVolume(*(p.translate(v) for p in self.pts))

    def rotate(self, axis, theta, tol=None) -> "ConvexVolume":
        tol = self._tol(tol, axis)
        return ConvexVolume(*(p.rotate(axis, theta, tol) for p in self.pts), tol=tol)


def get_geometry(*points: Point, tol=None):
    """
    Опукла оболонка точок як геометрія найменшої розмірності:
    Point, LineSegment, Triangle, ConvexArea, Tetrahedron або ConvexVolume.
    """
    if len(points) == 1 and not isinstance(points[0], Point):
        points = tuple(points[0])
    if not points:
        raise ValueError("Need at least one point")
    tol = as_precision(tol, *points)
    pts = Point.unique(points, tol)
    if len(pts) < 4 or _coplanar(pts, tol):
        return ConvexArea.get_geometry(pts, tol)
    hull = extreme_hull(pts, tol)
    verts = hull.vertex_points()
    if len(verts) == 4:
        return Tetrahedron(*verts)
    vol = ConvexVolume.__new__(ConvexVolume)
    vol._from_hull(hull)
    return vol


def extreme_hull(pts: Sequence[Point], tol) -> ConvexHull3D:
    """Оболонка, перебудована лише на крайніх точках, якщо їх менше за вершини."""
    hull = ConvexHull3D(list(pts), tol)
    ext = hull.extreme_points()
    if len(ext) < len(hull.vertices()):
        logger.debug("hull: dropping %d non-extreme vertices", len(hull.vertices()) - len(ext))
        hull = ConvexHull3D(ext, tol)
    return hull


def _coplanar(pts: Sequence[Point], tol) -> bool:
    a = pts[0]
    base = None
    for i in range(1, len(pts)):
        for j in range(i + 1, len(pts)):
            if not collinear(a, pts[i], pts[j], tol):
                base = (pts[i], pts[j])
                break
        if base:
            break
    if base is None:
        return True
    return all(side_of_plane(a, base[0], base[1], p, tol) == 0 for p in pts)
