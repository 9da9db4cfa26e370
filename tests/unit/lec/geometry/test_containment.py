import pytest
import numpy as np
from scipy.spatial import ConvexHull

from lec.geometry.containment import point_in_polygon, points_in_polygon

square_x = np.array([0.0, 1.0, 1.0, 0.0])
square_y = np.array([0.0, 0.0, 1.0, 1.0])

# counter-clockwise hexagon
hexagon = np.array([[np.cos(a), np.sin(a)] for a in np.linspace(0, 2 * np.pi, 6, endpoint=False)])


@pytest.mark.parametrize("point, expected", [
    ((0.5, 0.5), True),
    ((0.01, 0.99), True),
    ((1.5, 0.5), False),
    ((-0.5, 0.5), False),
    ((0.5, 1.5), False),
    ((0.5, -0.5), False),
    ((2.0, 2.0), False),
])
def test_square(point, expected):
    assert point_in_polygon(point[0], point[1], square_x, square_y, True) == expected


@pytest.mark.parametrize("convex", [True, False])
def test_convex_early_exit_agrees_with_full_scan(rng, convex):
    points = rng.random((500, 2)) * 3 - 1.5
    inside = points_in_polygon(points, hexagon[:, 0], hexagon[:, 1], convex)

    # independent check against the hull's half-planes
    equations = ConvexHull(hexagon).equations
    expected = np.all(points @ equations[:, :2].T + equations[:, 2] < 0, axis=1)
    assert np.array_equal(inside, expected)


def test_orientation_independent():
    """clockwise vertex order gives the same answer"""
    assert point_in_polygon(0.5, 0.5, square_x[::-1].copy(), square_y[::-1].copy(), True)
    assert not point_in_polygon(1.5, 0.5, square_x[::-1].copy(), square_y[::-1].copy(), True)
