"""Тести Plane: сторони, проекції, перетини з точками, прямими й площинами."""
from fractions import Fraction

import pytest

from geom3d import (
    DegenerateError,
    Exact,
    I,
    J,
    K,
    Line,
    LineSegment,
    Plane,
    Point,
    Ray,
    X0,
    X_AXIS,
    Y0,
    Z0,
    Z_AXIS,
)


def P(x, y, z):
    return Point(x, y, z)


class TestPlane:

    def test_normal_right_hand(self):
        plane = Plane(P(0, 0, 0), P(1, 0, 0), P(0, 1, 0))
        assert plane.normal == K

    def test_collinear_points(self):
        with pytest.raises(DegenerateError):
            Plane(P(0, 0, 0), P(1, 1, 1), P(2, 2, 2))

    def test_side(self):
        assert Z0.get_side(P(3, 3, 5)) == 1
        assert Z0.get_side(P(3, 3, -1)) == -1
        assert Z0.get_side(P(3, 3, 0)) == 0

    def test_same_side(self):
        assert Z0.is_on_same_side(P(0, 0, 1), P(5, 5, 2))
        assert Z0.is_on_same_side(P(0, 0, 0), P(5, 5, -2))
        assert not Z0.is_on_same_side(P(0, 0, 1), P(5, 5, -2))

    def test_equality_ignores_orientation(self):
        a = Plane.from_normal(P(0, 0, 0), K)
        b = Plane.from_normal(P(1, 1, 0), -K * 3)
        assert a == b
        assert not a.equals_oriented(b)
        assert a.equals_oriented(Plane.from_normal(P(2, 0, 0), K * 2))

    def test_project(self):
        plane = Plane.from_normal(P(0, 0, 1), K)
        assert plane.project(P(3, 4, 7)) == P(3, 4, 1)

    def test_is_on_plane(self):
        assert Z0.is_on_plane(Line(P(0, 0, 0), P(1, 1, 0)))
        assert not Z0.is_on_plane(Z_AXIS)

    def test_quarter_turn_about_x(self):
        assert Z0.rotate(X_AXIS, Exact(-6).pi() / 2, -6) == Y0


# =============================================================================
# Перетини
# =============================================================================

class TestPlaneIntersection:

    def test_two_planes(self):
        """Площини x = 1 та y = 1 перетинаються по вертикалі через (1, 1)."""
        a = Plane.from_normal(P(1, 0, 0), I)
        b = Plane.from_normal(P(0, 1, 0), J)
        expected = Line(P(1, 1, 0), P(1, 1, 1))
        assert a.get_intersection(b) == expected
        assert b.get_intersection(a) == expected

    def test_oblique_planes(self):
        a = Plane.from_normal(P(0, 0, 0), Point(1, 1, 0).vector)
        r = a.get_intersection(Z0)
        assert r == Line(P(0, 0, 0), P(1, -1, 0))

    def test_parallel_planes(self):
        a = Plane.from_normal(P(0, 0, 3), K)
        assert a.get_intersection(Z0) is None
        assert a.get_distance_squared(Z0) == 9
        assert a.get_distance(Z0) == 3

    def test_same_plane(self):
        a = Plane.from_normal(P(5, 5, 0), -K)
        assert a.get_intersection(Z0) == Z0

    def test_point(self):
        assert Z0.get_intersection(P(1, 2, 0)) == P(1, 2, 0)
        assert Z0.get_intersection(P(1, 2, 3)) is None
        assert Z0.get_distance_squared(P(1, 2, 3)) == 9

    def test_line(self):
        assert Line(P(0, 0, -1), P(0, 0, 1)).get_intersection(Z0) == P(0, 0, 0)
        inside = Line(P(0, 0, 0), P(1, 1, 0))
        assert Z0.get_intersection(inside) == inside
        parallel = Line(P(0, 0, 1), P(1, 1, 1))
        assert Z0.get_intersection(parallel) is None
        assert Z0.get_distance_squared(parallel) == 1

    def test_segment_short_of_plane(self):
        s = LineSegment(P(0, 0, 1), P(0, 0, 2))
        assert s.get_intersection(Z0) is None
        assert s.get_distance_squared(Z0) == 1

    def test_segment_crossing(self):
        s = LineSegment(P(0, 0, -1), P(2, 2, 3))
        assert s.get_intersection(Z0) == P(Fraction(1, 2), Fraction(1, 2), 0)

    def test_ray_pointing_away(self):
        r = Ray(P(0, 0, 1), P(0, 0, 2))
        assert r.get_intersection(Z0) is None
        assert r.get_distance_squared(Z0) == 1
        assert Ray(P(0, 0, 1), P(0, 0, 0)).get_intersection(Z0) == P(0, 0, 0)

    def test_approx(self):
        a = Plane.from_normal(P(1.0, 0.0, 0.0), I)
        b = Plane.from_normal(P(0.0, 1.0, 0.0), J)
        r = a.get_intersection(b)
        assert r.equals(Line(P(1, 1, 0), P(1, 1, 1)), 1e-9)

    def test_x0_contains_axis(self):
        assert X0.get_intersection(Z_AXIS) == Z_AXIS
