"""
geom3d — 3D обчислювальна геометрія з двома режимами точності
(точні раціональні числа з округленням до oom / float з epsilon).
Примітиви: Vector, Point, Line, Ray, LineSegment, LineSegmentsCollinear,
Plane, Triangle, ConvexArea, Tetrahedron, ConvexVolume; перетини, відстані,
об'єднання, повороти; опукла оболонка та тетраедралізація.
"""

__version__ = "0.1.0"

from geom3d.numeric import EPS, OOM, RM, Approx, Exact, Precision, RatSqrt, as_precision, rat, round_rat
from geom3d.geometry import DegenerateError, Geometry
from geom3d.vector import I, J, K, ZERO, Vector
from geom3d.point import ORIGIN, Point
from geom3d.envelope import Envelope
from geom3d.line import X_AXIS, Y_AXIS, Z_AXIS, Line
from geom3d.ray import Ray
from geom3d.segment import LineSegment
from geom3d.collinear import LineSegmentsCollinear
from geom3d.plane import X0, Y0, Z0, Plane
from geom3d.triangle import Triangle
from geom3d.area import ConvexArea, Rectangle
from geom3d.tetrahedron import Tetrahedron
from geom3d.volume import ConvexVolume, get_geometry
from geom3d.hull import ConvexHull3D
from geom3d.predicates import orient3d, side_of_plane, visible_from_point

# реєстрація парних операцій у диспетчері
from geom3d import linear, planar, facets, solids, composite  # noqa: F401,E402
from geom3d.dispatch import get_distance, get_distance_squared, get_intersection, intersects

__all__ = [
    "EPS", "OOM", "RM", "Approx", "Exact", "Precision", "RatSqrt", "as_precision", "rat", "round_rat",
    "DegenerateError", "Geometry",
    "Vector", "ZERO", "I", "J", "K",
    "Point", "ORIGIN", "Envelope",
    "Line", "X_AXIS", "Y_AXIS", "Z_AXIS", "Ray", "LineSegment", "LineSegmentsCollinear",
    "Plane", "X0", "Y0", "Z0", "Triangle", "ConvexArea", "Rectangle", "Tetrahedron", "ConvexVolume",
    "ConvexHull3D", "orient3d", "side_of_plane", "visible_from_point",
    "get_geometry", "get_intersection", "get_distance", "get_distance_squared", "intersects",
    "__version__",
]
