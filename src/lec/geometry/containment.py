import numpy as np
from numba import njit

# API functions

@njit
def point_in_polygon(xp, yp, vx, vy, convex=True):
    """
    Crossings test: casts a ray from (xp, yp) along +x and toggles `inside`
    each time an edge straddling yp is crossed at or beyond xp.
    The polygon (vx, vy) is implicitly closed. A convex polygon crosses the
    ray at most twice so the scan stops after the second straddling edge.
    Polygons with fewer than 3 vertices are not supported.
    """
    n = vx.shape[0]
    inside = False
    crossed = False
    yflag0 = vy[n - 1] >= yp
    for j in range(n):
        yflag1 = vy[j] >= yp
        if yflag0 != yflag1:
            # j - 1 wraps to the last vertex for j == 0
            if ((vy[j] - yp) * (vx[j - 1] - vx[j]) >= (vx[j] - xp) * (vy[j - 1] - vy[j])) == yflag1:
                inside = not inside
            if convex:
                if crossed:
                    break
                crossed = True
        yflag0 = yflag1
    return inside


@njit
def points_in_polygon(points, vx, vy, convex=True):
    """vectorised `point_in_polygon` over an (N, 2) array"""
    result = np.empty(points.shape[0], dtype=np.bool_)
    for i in range(points.shape[0]):
        result[i] = point_in_polygon(points[i, 0], points[i, 1], vx, vy, convex)
    return result
