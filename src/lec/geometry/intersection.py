"""
Segment / segment, segment / ray and segment / implicit line intersection.

The numba kernels report their outcome as a status code so they can be called
from inside other jitted loops. `intersect` and `intersect_line` are the
Python-level wrappers that raise instead.
"""
import numpy as np
from numba import njit

from lec.commons.exceptions import NoIntersection, DegenerateLine
from lec.geometry.primitives import subtract, cross

INTERSECT = 0
NO_INTERSECTION = 1
DEGENERATE_LINE = 2

# API functions

@njit
def segment_intersection(p1, p2, p3, p4, unbounded=False):
    """
    Intersection of segment (p1, p2) with segment (p3, p4).
    If `unbounded`, the second segment extends past p4 to infinity (but not
    before p3), i.e. it is the ray from p3 through p4.
    Returns (status, x, y).
    """
    d12 = subtract(p2, p1)
    d34 = subtract(p4, p3)
    denom = cross(d12, d34)
    if denom == 0.0:
        # parallel or coincident
        return NO_INTERSECTION, np.nan, np.nan

    d13 = subtract(p1, p3)
    s = cross(d34, d13) / denom
    t = cross(d12, d13) / denom

    if s < 0.0 or s > 1.0:
        return NO_INTERSECTION, np.nan, np.nan
    if t < 0.0:
        return NO_INTERSECTION, np.nan, np.nan
    if t > 1.0 and not unbounded:
        return NO_INTERSECTION, np.nan, np.nan
    return INTERSECT, p3[0] + t * d34[0], p3[1] + t * d34[1]


@njit
def segment_line_intersection(p1, p2, line):
    """
    Intersection of segment (p1, p2) with the line u*x + v*y + w = 0,
    where line = (u, v, w).
    Returns (status, x, y).
    """
    u = line[0]
    v = line[1]
    w = line[2]
    if u == 0.0 and v == 0.0:
        return DEGENERATE_LINE, np.nan, np.nan

    dx = p2[0] - p1[0]
    dy = p2[1] - p1[1]
    if v == 0.0:
        # vertical line: x is known outright
        x = -w / u
        if dx == 0.0:
            return NO_INTERSECTION, np.nan, np.nan
        s = (x - p1[0]) / dx
        y = p1[1] + s * dy
    else:
        denom = u * dx + v * dy
        if denom == 0.0:
            return NO_INTERSECTION, np.nan, np.nan
        s = -(u * p1[0] + v * p1[1] + w) / denom
        x = p1[0] + s * dx
        y = p1[1] + s * dy

    if s < 0.0 or s > 1.0:
        return NO_INTERSECTION, np.nan, np.nan
    return INTERSECT, x, y


def intersect(p1, p2, p3, p4, unbounded: bool = False) -> np.ndarray:
    """
    Wrapper of `segment_intersection` for python callers.
    Raises NoIntersection when the segments do not meet.
    """
    p1, p2, p3, p4 = (np.asarray(p, dtype=np.float64) for p in (p1, p2, p3, p4))
    status, x, y = segment_intersection(p1, p2, p3, p4, bool(unbounded))
    if status != INTERSECT:
        raise NoIntersection(f"segment {p1}-{p2} does not meet {'ray' if unbounded else 'segment'} {p3}-{p4}")
    return np.array((x, y))


def intersect_line(p1, p2, line) -> np.ndarray:
    """
    Wrapper of `segment_line_intersection` for python callers.
    Raises DegenerateLine for u == v == 0 and NoIntersection otherwise.
    """
    p1, p2, line = (np.asarray(p, dtype=np.float64) for p in (p1, p2, line))
    if line.shape != (3,):
        raise ValueError(f"'line' expected coefficients (u, v, w). Got shape: {line.shape}")
    status, x, y = segment_line_intersection(p1, p2, line)
    if status == DEGENERATE_LINE:
        raise DegenerateLine(f"line coefficients {line} do not define a line")
    if status != INTERSECT:
        raise NoIntersection(f"segment {p1}-{p2} does not meet line {line}")
    return np.array((x, y))
