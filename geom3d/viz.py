# geom3d/viz.py
"""
3D-візуалізація геометрій через matplotlib (ребра + точки).
Нескінченні об'єкти (Line, Ray, Plane) обрізаються рамкою видимої області.
"""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from matplotlib.figure import Figure
from mpl_toolkits.mplot3d import Axes3D  # noqa: F401  # потрібен для 'projection="3d"'

from .area import ConvexArea
from .collinear import LineSegmentsCollinear
from .envelope import Envelope
from .facets import section_points
from .line import Line
from .linear import clip_piece, piece
from .numeric import Approx
from .plane import Plane
from .point import Point
from .ray import Ray
from .segment import LineSegment
from .tetrahedron import Solid
from .triangle import Polygon
from .vector import I, J, K

_BOX_EDGES = [(0, 1), (0, 2), (0, 4), (1, 3), (1, 5), (2, 3),
              (2, 6), (3, 7), (4, 5), (4, 6), (5, 7), (6, 7)]


def extent(geometries: Sequence, pad: float = 1.0) -> Envelope:
    """Рамка, що вміщує всі скінченні геометрії та опорні точки нескінченних."""
    pts: List[Point] = []
    for g in geometries:
        if getattr(g, "finite", False):
            pts += g.envelope.points
        else:
            pts.append(g.p)
    e = Envelope.of(pts)
    return Envelope(float(e.xmin) - pad, float(e.xmax) + pad,
                    float(e.ymin) - pad, float(e.ymax) + pad,
                    float(e.zmin) - pad, float(e.zmax) + pad)


def _box_halfspaces(box: Envelope):
    lo = Point(box.xmin, box.ymin, box.zmin).vector
    hi = Point(box.xmax, box.ymax, box.zmax).vector
    return [(lo, I), (lo, J), (lo, K), (hi, -I), (hi, -J), (hi, -K)]


def _segments(g, box: Envelope) -> List[Tuple[Point, Point]]:
    tol = Approx()
    if isinstance(g, Point):
        return []
    if isinstance(g, LineSegment):
        return [(g.p, g.q)]
    if isinstance(g, LineSegmentsCollinear):
        return [(s.p, s.q) for s in g.segments]
    if isinstance(g, (Polygon, Solid)):
        return [(e.p, e.q) for e in g.edges]
    if isinstance(g, (Line, Ray)):
        P, u, _, _ = pc = piece(g)
        r = clip_piece(pc, _box_halfspaces(box), tol)
        if r is None:
            return []
        return [(Point.from_vector(P + u * r[0]), Point.from_vector(P + u * r[1]))]
    if isinstance(g, Plane):
        corners = [p.vector for p in box.points]
        pts = section_points(g, corners, _BOX_EDGES, tol) or []
        if len(pts) < 3:
            return []
        section = ConvexArea.get_geometry([Point.from_vector(X) for X in pts], tol, g.n)
        return _segments(section, box)
    raise TypeError(f"Cannot plot {type(g).__name__}")


def _points(g) -> List[Point]:
    if isinstance(g, Point):
        return [g]
    if isinstance(g, LineSegmentsCollinear):
        return [p for p in g.parts if isinstance(p, Point)]
    return []


def plot_geometry(ax, g, box: Envelope, **kw) -> None:
    """Намалювати одну геометрію на 3D-осях ax."""
    for pa, pb in _segments(g, box):
        ax.plot([float(pa.x), float(pb.x)], [float(pa.y), float(pb.y)],
                [float(pa.z), float(pb.z)], linewidth=kw.get("linewidth", 1.0),
                color=kw.get("color"))
    pts = _points(g)
    if pts:
        ax.scatter([float(p.x) for p in pts], [float(p.y) for p in pts],
                   [float(p.z) for p in pts], color=kw.get("color"))


def plot(*geometries, title: Optional[str] = None, box: Optional[Envelope] = None):
    """
    Побудувати фігуру з усіма геометріями; повертає (fig, ax).
    Масштаби осей однакові, як у 3D-переглядачах.
    """
    if not geometries:
        raise ValueError("Nothing to plot")
    box = box or extent(geometries)
    fig = Figure()
    ax = fig.add_subplot(111, projection="3d")
    for g in geometries:
        plot_geometry(ax, g, box)

    max_range = max(box.xmax - box.xmin, box.ymax - box.ymin, box.zmax - box.zmin) or 1.0
    c = box.centroid
    ax.set_xlim(c.x - max_range / 2, c.x + max_range / 2)
    ax.set_ylim(c.y - max_range / 2, c.y + max_range / 2)
    ax.set_zlim(c.z - max_range / 2, c.z + max_range / 2)
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_zlabel("Z")
    if title:
        ax.set_title(title)
    return fig, ax
