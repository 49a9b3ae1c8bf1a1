"""Тести ConvexHull3D: коректність структури, крайні точки, OFF-експорт."""
from fractions import Fraction
from random import Random

import pytest

from geom3d import Approx, ConvexHull3D, Point, side_of_plane


def P(x, y, z):
    return Point(x, y, z)


def assert_valid(hull: ConvexHull3D) -> None:
    rep = hull.validate()
    assert rep["bad_edges"] == []
    assert rep["bad_neighbors"] == []
    assert rep["bad_orient_faces"] == []


class TestConvexHull3D:

    def test_cube(self, cube_points):
        hull = ConvexHull3D(cube_points)
        assert_valid(hull)
        rep = hull.validate()
        assert rep["faces"] == 12
        assert rep["unique_vertices"] == 8

    def test_grid_extreme_points(self):
        """У ґратці 3x3x3 крайні лише 8 кутів."""
        pts = [P(x, y, z) for x in range(3) for y in range(3) for z in range(3)]
        hull = ConvexHull3D(pts)
        assert_valid(hull)
        assert set(hull.extreme_points()) == {P(x, y, z) for x in (0, 2) for y in (0, 2) for z in (0, 2)}

    @pytest.mark.parametrize("seed", [0, 1, 7])
    def test_random_cloud(self, seed):
        rng = Random(seed)
        pts = [P(rng.random(), rng.random(), rng.random()) for _ in range(60)]
        hull = ConvexHull3D(pts, seed=seed)
        assert_valid(hull)
        tol = Approx()
        for a, b, c in hull.faces():
            for p in pts:
                assert side_of_plane(pts[a], pts[b], pts[c], p, tol) <= 0

    def test_exact_random_cloud(self):
        rng = Random(3)
        pts = [P(Fraction(rng.randint(-50, 50), 7), Fraction(rng.randint(-50, 50), 3), rng.randint(-50, 50))
               for _ in range(40)]
        hull = ConvexHull3D(pts)
        assert_valid(hull)
        ext = hull.extreme_points()
        assert set(ext) <= set(hull.vertex_points())

    def test_to_off(self, cube_points):
        off = ConvexHull3D(cube_points).to_off()
        lines = off.splitlines()
        assert lines[0] == "OFF"
        assert lines[1] == "8 12 0"
        assert all(line.startswith("3 ") for line in lines[10:])

    def test_too_few_points(self):
        with pytest.raises(ValueError):
            ConvexHull3D([P(0, 0, 0), P(1, 0, 0), P(0, 1, 0)])

    def test_coplanar(self):
        with pytest.raises(ValueError):
            ConvexHull3D([P(0, 0, 0), P(1, 0, 0), P(0, 1, 0), P(1, 1, 0), P(2, 3, 0)])

    def test_collinear(self):
        with pytest.raises(ValueError):
            ConvexHull3D([P(i, i, i) for i in range(5)])
