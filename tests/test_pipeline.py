"""Тести тетраедралізації (SciPy Delaunay) і повного пайплайна."""
from fractions import Fraction

import pytest

from geom3d import ConvexVolume, Point, orient3d
from geom3d.pipeline import tetrahedralize, tetrahedralize_convex

T = Fraction(1, 10)


def P(x, y, z):
    return Point(x, y, z)


def total_volume(tets):
    return sum(abs(orient3d(*t.points)) for t in tets) / 6


@pytest.fixture
def corner_with_inner():
    return [P(0, 0, 0), P(1, 0, 0), P(0, 1, 0), P(0, 0, 1), P(T, T, T)]


def test_unknown_backend(corner_with_inner):
    with pytest.raises(ValueError):
        tetrahedralize(corner_with_inner, backend="tetgen")


def test_tetrahedralize(corner_with_inner):
    pytest.importorskip("scipy")
    tets = tetrahedralize(corner_with_inner)
    assert len(tets) == 4
    assert total_volume(tets) == Fraction(1, 6)


def test_tuples_accepted():
    pytest.importorskip("scipy")
    tets = tetrahedralize([(0, 0, 0), (1, 0, 0), (0, 1, 0), (0, 0, 1)])
    assert len(tets) == 1


def test_pipeline(corner_with_inner):
    pytest.importorskip("scipy")
    pts, surface, tets = tetrahedralize_convex(corner_with_inner + [P(0, 0, 0)])
    assert len(pts) == 5
    assert len(surface) == 4
    assert total_volume(tets) == Fraction(1, 6)


def test_cube_volume(cube_points):
    pytest.importorskip("scipy")
    tets = ConvexVolume(*cube_points).tetrahedralize()
    assert total_volume(tets) == 1
