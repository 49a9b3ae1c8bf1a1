"""
Тести прямих, променів і відрізків: перетини, відстані, об'єднання.
"""
import math
from fractions import Fraction

import pytest

from geom3d import (
    DegenerateError,
    Exact,
    Line,
    LineSegment,
    LineSegmentsCollinear,
    Point,
    Ray,
    Z_AXIS,
)

H = Fraction(1, 2)


def P(x, y, z):
    return Point(x, y, z)


# =============================================================================
# Line
# =============================================================================

class TestLine:

    def test_crossing_lines(self):
        """Діагональ куба і вертикаль через (1, 1) перетинаються в (1, 1, 1)."""
        a = Line(P(-1, -1, -1), P(1, 1, 1))
        b = Line(P(1, 1, 0), P(1, 1, 2))
        assert a.get_intersection(b) == P(1, 1, 1)
        assert b.get_intersection(a) == P(1, 1, 1)

    def test_same_line(self):
        a = Line(P(0, 0, 0), P(1, 0, 0))
        b = Line(P(2, 0, 0), P(5, 0, 0))
        assert a.get_intersection(b) == b

    def test_parallel_lines(self):
        a = Line(P(0, 0, 0), P(1, 0, 0))
        b = Line(P(0, 1, 0), P(1, 1, 0))
        assert a.get_intersection(b) is None
        assert a.get_distance_squared(b) == 1

    def test_skew_lines(self):
        a = Line(P(0, 0, 0), P(1, 0, 0))
        b = Line(P(0, 1, 1), P(0, 2, 1))
        assert a.get_intersection(b) is None
        assert not a.intersects(b)
        assert a.get_distance_squared(b) == 1
        assert a.get_line_of_intersection(b) == LineSegment(P(0, 0, 0), P(0, 0, 1))

    def test_line_of_intersection_meeting(self):
        a = Line(P(0, 0, 0), P(1, 0, 0))
        b = Line(P(3, -1, 0), P(3, 1, 0))
        assert a.get_line_of_intersection(b) == P(3, 0, 0)

    def test_equality_is_geometric(self):
        a = Line(P(0, 0, 0), P(1, 1, 1))
        assert a == Line(P(2, 2, 2), P(-1, -1, -1))
        assert a != Line(P(0, 0, 1), P(1, 1, 2))

    def test_degenerate(self):
        with pytest.raises(DegenerateError):
            Line(P(1, 1, 1), P(1, 1, 1))

    def test_project(self):
        line = Line(P(0, 0, 0), P(2, 0, 0))
        assert line.project(P(5, 3, 4)) == P(5, 0, 0)

    def test_point_on_line(self):
        line = Line(P(0, 0, 0), P(1, 2, 3))
        assert line.intersects(P(-2, -4, -6))
        assert line.get_distance_squared(P(-2, -4, -6)) == 0


# =============================================================================
# Ray
# =============================================================================

class TestRay:
    """Промені: перекриття колінеарних променів і межа t >= 0."""

    def test_opposite_rays_overlap(self):
        a = Ray(P(0, 0, 0), P(1, 0, 0))
        b = Ray(P(1, 0, 0), P(0, 0, 0))
        expected = LineSegment(P(0, 0, 0), P(1, 0, 0))
        assert a.get_intersection(b) == expected
        assert b.get_intersection(a) == expected

    def test_same_direction(self):
        a = Ray(P(0, 0, 0), P(1, 0, 0))
        b = Ray(P(2, 0, 0), P(3, 0, 0))
        assert a.get_intersection(b) == Ray(P(2, 0, 0), P(5, 0, 0))

    def test_opposite_rays_apart(self):
        a = Ray(P(0, 0, 0), P(1, 0, 0))
        b = Ray(P(-1, 0, 0), P(-2, 0, 0))
        assert a.get_intersection(b) is None
        assert a.get_distance_squared(b) == 1

    def test_opposite_rays_share_start(self):
        a = Ray(P(0, 0, 0), P(1, 0, 0))
        b = Ray(P(0, 0, 0), P(-1, 0, 0))
        assert a.get_intersection(b) == P(0, 0, 0)

    def test_ray_and_line(self):
        ray = Ray(P(0, 0, 0), P(1, 0, 0))
        assert ray.get_intersection(Line(P(1, -1, 0), P(1, 1, 0))) == P(1, 0, 0)
        assert ray.get_intersection(Line(P(-1, -1, 0), P(-1, 1, 0))) is None

    def test_collinear_line_returns_ray(self):
        ray = Ray(P(1, 0, 0), P(2, 0, 0))
        assert ray.get_intersection(Line(P(0, 0, 0), P(-1, 0, 0))) == ray

    def test_distance_clamped_to_start(self):
        ray = Ray(P(0, 0, 0), P(1, 0, 0))
        assert ray.get_distance_squared(P(-3, 4, 0)) == 25
        assert ray.get_distance_squared(P(3, 4, 0)) == 16

    def test_is_aligned(self):
        ray = Ray(P(0, 0, 0), P(1, 0, 0))
        assert ray.is_aligned(P(5, 9, 9))
        assert ray.is_aligned(P(0, 1, 0))
        assert not ray.is_aligned(P(-1, 0, 0))

    def test_equality_needs_same_direction(self):
        assert Ray(P(0, 0, 0), P(1, 0, 0)) == Ray(P(0, 0, 0), P(7, 0, 0))
        assert Ray(P(0, 0, 0), P(1, 0, 0)) != Ray(P(0, 0, 0), P(-1, 0, 0))


# =============================================================================
# LineSegment
# =============================================================================

class TestLineSegment:

    def test_crossing(self):
        a = LineSegment(P(0, 0, 0), P(2, 2, 0))
        b = LineSegment(P(0, 2, 0), P(2, 0, 0))
        assert a.get_intersection(b) == P(1, 1, 0)

    def test_missing(self):
        a = LineSegment(P(0, 0, 0), P(1, 1, 0))
        b = LineSegment(P(0, 4, 0), P(4, 0, 0))
        assert a.get_intersection(b) is None
        assert a.get_distance_squared(b) == 2

    def test_overlap(self):
        a = LineSegment(P(0, 0, 0), P(2, 0, 0))
        b = LineSegment(P(3, 0, 0), P(1, 0, 0))
        expected = LineSegment(P(1, 0, 0), P(2, 0, 0))
        assert a.get_intersection(b) == expected
        assert b.get_intersection(a) == expected

    def test_touching_ends(self):
        a = LineSegment(P(0, 0, 0), P(1, 0, 0))
        b = LineSegment(P(1, 0, 0), P(2, 0, 0))
        assert a.get_intersection(b) == P(1, 0, 0)

    def test_disjoint_collinear(self):
        a = LineSegment(P(0, 0, 0), P(1, 0, 0))
        b = LineSegment(P(2, 0, 0), P(3, 0, 0))
        assert a.get_intersection(b) is None
        assert a.get_distance_squared(b) == 1

    def test_parallel_distance(self):
        a = LineSegment(P(0, 0, 0), P(1, 0, 0))
        b = LineSegment(P(3, 1, 0), P(4, 1, 0))
        assert a.get_distance_squared(b) == 5

    def test_metrics(self):
        s = LineSegment(P(0, 0, 0), P(3, 4, 0))
        assert s.get_length() == 5
        assert s.midpoint == P(Fraction(3, 2), 2, 0)
        assert s.reverse() == LineSegment(P(3, 4, 0), P(0, 0, 0))

    def test_direction_matters_for_equality(self):
        s = LineSegment(P(0, 0, 0), P(1, 0, 0))
        assert s != s.reverse()
        assert s.equals_ignore_direction(s.reverse())

    def test_is_on_line(self):
        s = LineSegment(P(1, 1, 1), P(2, 2, 2))
        assert s.is_on_line(Line(P(0, 0, 0), P(1, 1, 1)))
        assert not s.is_on_line(Line(P(0, 0, 0), P(1, 0, 0)))

    def test_is_aligned(self):
        s = LineSegment(P(0, 0, 0), P(2, 0, 0))
        assert s.is_aligned(P(1, 5, 0))
        assert not s.is_aligned(P(3, 0, 0))

    def test_line_segment_contains_point(self):
        s = LineSegment(P(0, 0, 0), P(2, 2, 2))
        assert s.intersects(P(1, 1, 1))
        assert not s.intersects(P(3, 3, 3))

    def test_degenerate(self):
        with pytest.raises(DegenerateError):
            LineSegment(P(0, 0, 0), P(0, 0, 0))

    def test_approx_crossing(self):
        a = LineSegment(P(0.0, 0.0, 0.0), P(2.0, 2.0, 0.0))
        b = LineSegment(P(0.0, 2.0, 0.0), P(2.0, 0.0, 0.0))
        r = a.get_intersection(b)
        assert r.equals(P(1, 1, 0), 1e-9)


# =============================================================================
# Об'єднання відрізків
# =============================================================================

class TestSegmentUnion:
    """LineSegment.get_geometry: злиття колінеарних відрізків."""

    def test_touching_merge(self):
        a = LineSegment(P(-2, 0, 0), P(-1, 0, 0))
        b = LineSegment(P(-1, 0, 0), P(0, 0, 0))
        expected = LineSegment(P(-2, 0, 0), P(0, 0, 0))
        assert LineSegment.get_geometry(a, b) == expected
        assert LineSegment.get_geometry(b, a) == expected

    def test_overlap_merge(self):
        a = LineSegment(P(0, 0, 0), P(0, 2, 0))
        b = LineSegment(P(0, 3, 0), P(0, 1, 0))
        assert LineSegment.get_geometry(a, b) == LineSegment(P(0, 0, 0), P(0, 3, 0))

    def test_disjoint_union(self):
        a = LineSegment(P(-2, 0, 0), P(-1, 0, 0))
        b = LineSegment(P(0, 0, 0), P(1, 0, 0))
        ab = LineSegment.get_geometry(a, b)
        ba = LineSegment.get_geometry(b, a)
        assert isinstance(ab, LineSegmentsCollinear)
        assert len(ab.parts) == 2
        assert ab == ba

    def test_non_collinear(self):
        a = LineSegment(P(0, 0, 0), P(1, 0, 0))
        b = LineSegment(P(0, 1, 0), P(1, 1, 0))
        with pytest.raises(ValueError):
            LineSegment.get_geometry(a, b)

    def test_from_points(self):
        assert LineSegment.get_geometry(P(1, 1, 1), P(1, 1, 1)) == P(1, 1, 1)
        assert LineSegment.get_geometry(P(0, 0, 0), P(H, 0, 0)) == LineSegment(P(0, 0, 0), P(H, 0, 0))

    def test_point_with_segment(self):
        with pytest.raises(TypeError):
            LineSegment.get_geometry(P(0, 0, 0), LineSegment(P(0, 0, 0), P(1, 0, 0)))


# =============================================================================
# Майже паралельні об'єкти у float
# =============================================================================

class TestNearlyParallelApprox:
    """Напрямки відрізняються на 1e-9: не паралельні, але a*c - b*b == 0.0."""

    def test_lines_distance(self):
        a = Line(Point(0.0, 0.0, 0.0), Point(1.0, 0.0, 0.0))
        b = Line(Point(0.0, 0.0, 1.0), Point(1.0, 1e-9, 1.0))
        assert not a.is_parallel(b)
        assert a.get_distance_squared(b) == pytest.approx(1.0)
        assert b.get_distance_squared(a) == pytest.approx(1.0)

    def test_line_of_intersection(self):
        a = Line(Point(0.0, 0.0, 0.0), Point(1.0, 0.0, 0.0))
        b = Line(Point(0.0, 0.0, 1.0), Point(1.0, 1e-9, 1.0))
        s = a.get_line_of_intersection(b)
        assert isinstance(s, LineSegment)
        assert s.length_squared == pytest.approx(1.0)

    def test_segments_distance(self):
        a = LineSegment(Point(0.0, 0.0, 0.0), Point(1.0, 0.0, 0.0))
        b = LineSegment(Point(0.0, 0.0, 1.0), Point(1.0, 1e-9, 1.0))
        assert a.get_distance_squared(b) == pytest.approx(1.0)
        assert a.get_distance(b) == pytest.approx(1.0)


# =============================================================================
# Поворот
# =============================================================================

class TestRotation:
    """Чверть оберту навколо осі Z: (x, y, z) -> (-y, x, z)."""

    QUARTER = Exact(-12).pi() / 2

    def test_line(self):
        l = Line(P(1, 0, 0), P(1, 1, 0)).rotate(Z_AXIS, self.QUARTER, -6)
        assert l == Line(P(0, 1, 0), P(5, 1, 0))

    def test_ray(self):
        r = Ray(P(1, 0, 0), P(2, 0, 0)).rotate(Z_AXIS, self.QUARTER, -6)
        assert r == Ray(P(0, 1, 0), P(0, 2, 0))

    def test_segment(self):
        s = LineSegment(P(1, 0, 0), P(2, 0, 3)).rotate(Z_AXIS, self.QUARTER, -6)
        assert s == LineSegment(P(0, 1, 0), P(0, 2, 3))

    def test_segment_approx(self):
        s = LineSegment(P(1.0, 0, 0), P(2.0, 0, 0)).rotate(Z_AXIS, math.pi / 2, 1e-9)
        assert s.q.x == pytest.approx(0, abs=1e-12)
        assert s.q.y == pytest.approx(2)
