"""Спільні фікстури для тестів geom3d."""
from fractions import Fraction

import pytest

from geom3d import Point, Tetrahedron, Triangle


def P(x, y, z):
    return Point(x, y, z)


@pytest.fixture
def half():
    return Fraction(1, 2)


@pytest.fixture
def unit_triangle():
    """Трикутник (0,0,0), (1,0,0), (0,1,0) у площині z = 0."""
    return Triangle(P(0, 0, 0), P(1, 0, 0), P(0, 1, 0))


@pytest.fixture
def unit_tetra():
    """Кутовий тетраедр з вершинами в початку координат і на осях."""
    return Tetrahedron(P(0, 0, 0), P(1, 0, 0), P(0, 1, 0), P(0, 0, 1))


@pytest.fixture
def cube_points():
    return [P(x, y, z) for x in (0, 1) for y in (0, 1) for z in (0, 1)]
