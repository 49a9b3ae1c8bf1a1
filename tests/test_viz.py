"""Димові тести візуалізації (лише побудова Figure, без вікна)."""
import pytest

pytest.importorskip("matplotlib")

from geom3d import Line, Plane, Point, Ray, Tetrahedron, Triangle, Vector  # noqa: E402
from geom3d.viz import extent, plot  # noqa: E402


def P(x, y, z):
    return Point(x, y, z)


def test_plot_mixed():
    tri = Triangle(P(0, 0, 0), P(1, 0, 0), P(0, 1, 0))
    tet = Tetrahedron(P(0, 0, 0), P(1, 0, 0), P(0, 1, 0), P(0, 0, 1))
    line = Line(P(0, 0, 0), P(1, 1, 1))
    ray = Ray(P(0, 0, 0), P(-1, 0, 0))
    plane = Plane.from_normal(P(0, 0, 0), Vector(0, 0, 1))
    fig, ax = plot(tri, tet, line, ray, plane, P(1, 1, 1), title="scene")
    assert ax.get_title() == "scene"
    assert len(ax.lines) >= 3 + 6 + 1 + 1 + 3


def test_extent_pads():
    box = extent([P(0, 0, 0), P(1, 2, 3)], pad=1.0)
    assert (box.xmin, box.xmax, box.zmax) == (-1.0, 2.0, 4.0)


def test_nothing_to_plot():
    with pytest.raises(ValueError):
        plot()
