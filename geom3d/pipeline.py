# geom3d/pipeline.py
from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Tuple

from .geometry import DegenerateError
from .hull import ConvexHull3D
from .numeric import as_precision
from .point import Point
from .tetrahedron import Tetrahedron

logger = logging.getLogger(__name__)


def _as_points(points: Iterable) -> List[Point]:
    out = []
    for p in points:
        out.append(p if isinstance(p, Point) else Point(*p))
    return out


def _delaunay_simplices(pts: Sequence[Point], backend: str) -> List[Tuple[int, int, int, int]]:
    if backend.lower() != "scipy":
        raise ValueError(f"Unknown backend: {backend}")
    try:
        import numpy as np
        from scipy.spatial import Delaunay
    except ImportError as e:
        raise RuntimeError(
            "backend='scipy' requires SciPy; install it with `pip install scipy`"
        ) from e

    arr = np.array([(float(p.x), float(p.y), float(p.z)) for p in pts], dtype=float)
    dela = Delaunay(arr, qhull_options="QJ")  # QJ = joggle для робастності
    return [tuple(int(i) for i in simplex) for simplex in dela.simplices]


def tetrahedralize(points: Iterable, backend: str = "scipy", tol=None) -> List[Tetrahedron]:
    """
    Тетраедралізація Делоне множини точок. Тетраедри будуються на вихідних
    (точних) точках; вироджені після joggle симплекси відкидаються.
    """
    pts = Point.unique(_as_points(points), tol)
    tets: List[Tetrahedron] = []
    dropped = 0
    for a, b, c, d in _delaunay_simplices(pts, backend):
        try:
            tets.append(Tetrahedron(pts[a], pts[b], pts[c], pts[d]))
        except DegenerateError:
            dropped += 1
    if dropped:
        logger.debug("tetrahedralize: dropped %d flat simplices", dropped)
    return tets


def tetrahedralize_convex(
    points: Iterable,
    backend: str = "scipy",
    tol=None,
) -> Tuple[List[Point], List[Tuple[int, int, int]], List[Tetrahedron]]:
    """
    Повний пайплайн:
      - прибирає дублікати точок;
      - будує опуклу оболонку (ConvexHull3D) -> surface;
      - будує 3D Делоне-тетраедралізацію -> tetrahedra.

    Повертає:
      pts       — список Point у фінальному порядку;
      surface   — трикутники оболонки (індекси у pts);
      tets      — список Tetrahedron.
    """
    pts = _as_points(points)
    tol = as_precision(tol, *pts)
    pts = Point.unique(pts, tol)

    hull = ConvexHull3D(pts, tol)
    surface = hull.faces()
    return pts, surface, tetrahedralize(pts, backend, tol)
