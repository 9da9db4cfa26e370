"""
Candidate search over a Voronoi diagram.

Phase A scores every finite Voronoi vertex inside the hull, Phase B every
intersection of a ridge with a hull edge. Each kernel writes one slot per
vertex / ridge and the winner is picked by `reduce_candidates`, so Phase B
can run in parallel without sharing the running maximum.
"""
import numpy as np
from numba import njit, prange
from numba.core.registry import CPUDispatcher

from lec.commons.types import DEFAULTS
INT, FLOAT = DEFAULTS
from lec.geometry.containment import points_in_polygon  # noqa: E402
from lec.geometry.primitives import dist_sq  # noqa: E402
from lec.geometry.intersection import (  # noqa: E402
    segment_intersection, segment_line_intersection, INTERSECT, NO_INTERSECTION
)

# relative slack on the third-site distance before a ray candidate is rejected
RAY_VALIDITY_RTOL = 1e-9

VERTEX_PHASE = "vertex"
RIDGE_PHASE = "ridge"

# API functions

@njit
def search_vertices(vertices, vertex_sites, points, hull_points, radius2):
    """
    Phase A. radius2[i] is the squared distance from vertex i to one of its
    sites when the vertex is inside the hull, -1 otherwise.
    """
    inside = points_in_polygon(vertices, hull_points[:, 0], hull_points[:, 1], True)
    for i in range(vertices.shape[0]):
        s = vertex_sites[i]
        if s < 0 or not inside[i]:
            radius2[i] = -1.0
            continue
        radius2[i] = dist_sq(vertices[i], points[s])


def construct_ridge_search(parallelize: bool, use_ray_lines: bool = False) -> CPUDispatcher:
    """
    Builds the Phase B kernel.

    For every ridge the best intersection with a hull edge is written to
    best_r2[r] / best_xy[r] (-1 / nan when there is none) and the number of
    ray candidates demoted by the third-site check to rejected[r].
    With `use_ray_lines`, unbounded ridges are intersected as implicit lines
    clipped to the forward side of their vertex instead of as explicit rays.
    """
    @njit(parallel=parallelize)
    def _search_ridges(
            points, vertices, ridge_points, ridge_vertices, ridge_rays,
            far_points, third_sites, valid, ray_lines, hull_points,
            best_r2, best_xy, rejected):
        nhull = hull_points.shape[0]
        for r in prange(ridge_points.shape[0]):
            best_r2[r] = -1.0
            best_xy[r, 0] = np.nan
            best_xy[r, 1] = np.nan
            rejected[r] = 0

            k = ridge_rays[r]
            unbounded = k >= 0
            if unbounded and not valid[k]:
                continue
            p3 = vertices[ridge_vertices[r, 0]]
            if unbounded:
                p4 = far_points[k]
            else:
                p4 = vertices[ridge_vertices[r, 1]]
            site = points[ridge_points[r, 0]]

            for i in range(nhull):
                # edge from the previous hull vertex, wrapping at i == 0
                p1 = hull_points[i - 1]
                p2 = hull_points[i]
                if unbounded and use_ray_lines:
                    status, x, y = segment_line_intersection(p1, p2, ray_lines[k])
                    if status == INTERSECT and (x - p3[0]) * (p4[0] - p3[0]) + (y - p3[1]) * (p4[1] - p3[1]) < 0.0:
                        status = NO_INTERSECTION
                else:
                    status, x, y = segment_intersection(p1, p2, p3, p4, unbounded)
                if status != INTERSECT:
                    continue

                r2 = dist_sq((x, y), site)
                if unbounded:
                    bound = dist_sq((x, y), points[third_sites[k]])
                    if r2 > bound * (1.0 + RAY_VALIDITY_RTOL):
                        r2 = 0.0
                        rejected[r] += 1
                if r2 > best_r2[r]:
                    best_r2[r] = r2
                    best_xy[r, 0] = x
                    best_xy[r, 1] = y

    return _search_ridges


def reduce_candidates(vertices, vertex_r2, ridge_xy, ridge_r2):
    """
    Picks the largest positive candidate over both phases; ties go to the
    earlier candidate, vertices before ridges.
    Returns (radius2, x, y, phase) or None when no candidate is positive.
    """
    best = None
    if vertex_r2.size > 0:
        i = int(np.argmax(vertex_r2))
        if vertex_r2[i] > 0:
            best = (float(vertex_r2[i]), float(vertices[i, 0]), float(vertices[i, 1]), VERTEX_PHASE)
    if ridge_r2.size > 0:
        r = int(np.argmax(ridge_r2))
        if ridge_r2[r] > 0 and (best is None or ridge_r2[r] > best[0]):
            best = (float(ridge_r2[r]), float(ridge_xy[r, 0]), float(ridge_xy[r, 1]), RIDGE_PHASE)
    return best
