import numpy as np
from numba import njit

from lec.commons.types import DEFAULTS
INT, FLOAT = DEFAULTS

# API functions

@njit
def subtract(a, b):
    """vector a - b"""
    return np.array((a[0] - b[0], a[1] - b[1]))


@njit
def cross(a, b):
    """
    z-component of the 2D cross product a x b.
    """
    return a[0] * b[1] - a[1] * b[0]


@njit
def dist_sq(a, b):
    """squared euclidean distance"""
    return (a[0] - b[0])**2 + (a[1] - b[1])**2


def order_hull(points: np.ndarray, hull: np.ndarray) -> np.ndarray:
    """
    Reorders hull site indices counter-clockwise by their angle about the
    mean of the hull vertices.
    """
    hull = np.unique(np.asarray(hull, dtype=INT))
    hull_points = points[hull]
    angles = np.arctan2(
        hull_points[:, 1] - hull_points[:, 1].mean(),
        hull_points[:, 0] - hull_points[:, 0].mean(),
    )
    return hull[np.argsort(angles, kind="stable")]


def bounding_box(points: np.ndarray) -> np.ndarray:
    """(xmin, xmax, ymin, ymax) of a set of points"""
    return np.array(
        (points[:, 0].min(), points[:, 0].max(), points[:, 1].min(), points[:, 1].max()),
        dtype=FLOAT,
    )


def is_collinear(points: np.ndarray, rtol: float = 1e-12) -> bool:
    """
    True when the points span fewer than 2 dimensions, judged on the singular
    values of the centred coordinates.
    """
    centred = points - points.mean(axis=0)
    sv = np.linalg.svd(centred, compute_uv=False)
    if sv[0] == 0:
        return True
    return bool(sv[-1] <= rtol * sv[0])
