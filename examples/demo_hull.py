# examples/demo_hull.py
import logging

from geom3d import ConvexHull3D, Point

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    raw = [
        (0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0),
        (0, 0, 1), (1, 0, 1), (1, 1, 1), (0, 1, 1),
        (0.5, 0.5, 0.5), (0.2, 0.8, 0.3), (0.8, 0.2, 0.7)
    ]
    pts = Point.unique(Point(*p) for p in raw)
    hull = ConvexHull3D(pts)

    report = hull.validate()
    print("VALIDATION:", report)
    print("Extreme points:", len(hull.extreme_points()))

    with open("hull.off", "w", encoding="utf-8") as f:
        f.write(hull.to_off())
    print("Wrote hull.off — можна глянути в MeshLab/ParaView.")
