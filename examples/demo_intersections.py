# examples/demo_intersections.py
"""Кілька перетинів у точній і наближеній моделях; з matplotlib — ще й малюнок."""
from fractions import Fraction

from geom3d import (
    ConvexVolume,
    Line,
    LineSegment,
    Plane,
    Point,
    Tetrahedron,
    Triangle,
    Vector,
)

if __name__ == "__main__":
    # пряма з прямою
    a = Line(Point(-1, -1, -1), Point(1, 1, 1))
    b = Line(Point(1, 1, 0), Point(1, 1, 2))
    print("line x line:", a.get_intersection(b))

    # об'єднання відрізків
    s1 = LineSegment(Point(-2, 0, 0), Point(-1, 0, 0))
    s2 = LineSegment(Point(-1, 0, 0), Point(0, 0, 0))
    print("segment union:", LineSegment.get_geometry(s1, s2))

    # переріз тетраедра площиною
    tet = Tetrahedron(Point(0, 0, 0), Point(1, 0, 0), Point(0, 1, 0), Point(0, 0, 1))
    cut = Plane.from_normal(Point(Fraction(1, 2), 0, 0), Vector(1, 1, 0))
    section = tet.get_intersection(cut)
    print("tetra x plane:", section, "area =", float(section.get_area(-9)))

    # куб і трикутник у float-координатах
    cube = ConvexVolume(*(Point(float(x), float(y), float(z))
                          for x in (0, 1) for y in (0, 1) for z in (0, 1)))
    tri = Triangle(Point(-0.5, 0.5, 0.5), Point(2.0, 0.5, 0.5), Point(0.5, 2.0, 0.5))
    print("cube x triangle:", cube.get_intersection(tri))
    print("distance:", cube.get_distance(Point(3.0, 0.5, 0.5)))

    try:
        from geom3d.viz import plot
    except ImportError:
        print("matplotlib не встановлено — без малюнка.")
    else:
        fig, _ = plot(tet, cut, section, title="tetra x plane")
        fig.savefig("intersections.png")
        print("Wrote intersections.png")
