# examples/demo_pipeline.py
from fractions import Fraction

from geom3d.pipeline import tetrahedralize_convex

if __name__ == "__main__":
    h = Fraction(1, 2)
    cube = [
        (0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0),
        (0, 0, 1), (1, 0, 1), (1, 1, 1), (0, 1, 1),
        (h, h, h), (Fraction(1, 5), Fraction(4, 5), Fraction(3, 10)),
    ]

    pts, surface, tets = tetrahedralize_convex(cube, backend="scipy")
    print("Vertices:", len(pts))
    print("Surface triangles:", len(surface))
    print("Tets:", len(tets))
    print("Volume:", sum(t.get_volume() for t in tets))
