import numpy as np
from numba import njit
import warnings

from lec.commons.types import DEFAULTS
INT, FLOAT = DEFAULTS
from lec.geometry.primitives import dist_sq  # noqa: E402
from lec.voronoi.diagram import Diagram  # noqa: E402


class ResolvedRays:
    """
    Finite stand-ins for the unbounded ridges of a Diagram, indexed by ray id.

    far_points[k]  : point along ray k, a bounding-box extent away from its vertex
    third_sites[k] : site sharing the ray's vertex that the ray bisects away from
                     (-1 if none could be found)
    bounds[k]      : squared distance between the ray's first bisected site and
                     its third site
    valid[k]       : False for rays that must be skipped
    """
    def __init__(self, far_points, third_sites, bounds, valid):
        self.far_points = far_points
        self.third_sites = third_sites
        self.bounds = bounds
        self.valid = valid

    def __len__(self):
        return self.far_points.shape[0]

    def __getitem__(self, ray: int):
        return self.far_points[ray], self.bounds[ray]


def resolve_rays(diagram: Diagram) -> ResolvedRays:
    """
    Turns every unbounded ridge of `diagram` into a finite far point and
    records the third site used to validate candidates found on it.
    """
    far_points = np.empty((diagram.num_rays, 2), dtype=FLOAT)
    third_sites = np.full(diagram.num_rays, -1, dtype=INT)
    bounds = np.full(diagram.num_rays, np.inf, dtype=FLOAT)

    _resolve_rays(
        diagram.points,
        diagram.vertices,
        diagram.ridge_points,
        diagram.ridge_vertices,
        diagram.ridge_rays,
        diagram.normals,
        diagram.bbox,
        diagram.incident_ptr,
        diagram.incident_ridges,
        far_points,
        third_sites,
        bounds,
    )
    valid = third_sites >= 0
    if not valid.all():
        warnings.warn(f"{np.count_nonzero(~valid)} unbounded ridge(s) have no third site "
                      "at their vertex and will be skipped", RuntimeWarning)
    return ResolvedRays(far_points, third_sites, bounds, valid)


@njit
def _resolve_rays(
        points, vertices, ridge_points, ridge_vertices, ridge_rays, normals, bbox,
        incident_ptr, incident_ridges, far_points, third_sites, bounds):
    xmin, xmax, ymin, ymax = bbox[0], bbox[1], bbox[2], bbox[3]
    for r in range(ridge_points.shape[0]):
        k = ridge_rays[r]
        if k < 0:
            continue
        v = ridge_vertices[r, 0]
        a = ridge_points[r, 0]
        b = ridge_points[r, 1]
        nx = normals[k, 0]
        ny = normals[k, 1]

        # step along the ray, full bbox extent on the axis the ray leans towards
        if nx == 0.0 and ny == 0.0:
            dx = 0.0
            dy = 0.0
        elif abs(ny) > abs(nx):
            dx = xmax - xmin
            dy = -nx * dx / ny
        else:
            dy = ymax - ymin
            dx = -ny * dy / nx

        kv = _third_site(r, v, a, b, ridge_points, incident_ptr, incident_ridges)
        third_sites[k] = kv
        if kv < 0:
            far_points[k, 0] = vertices[v, 0]
            far_points[k, 1] = vertices[v, 1]
            continue

        # the ray heads away from the third site
        dd = dx * (points[a, 0] - points[kv, 0]) + dy * (points[a, 1] - points[kv, 1])
        if dd < 0.0:
            far_points[k, 0] = vertices[v, 0] - dx
            far_points[k, 1] = vertices[v, 1] - dy
        else:
            far_points[k, 0] = vertices[v, 0] + dx
            far_points[k, 1] = vertices[v, 1] + dy
        bounds[k] = dist_sq(points[a], points[kv])


@njit
def _third_site(ridge, vertex, a, b, ridge_points, incident_ptr, incident_ridges):
    """first site, in ridge order, of a ridge sharing `vertex` that is neither a nor b"""
    for idx in range(incident_ptr[vertex], incident_ptr[vertex + 1]):
        other = incident_ridges[idx]
        if other == ridge:
            continue
        c0 = ridge_points[other, 0]
        c1 = ridge_points[other, 1]
        if c0 != a and c0 != b:
            return c0
        if c1 != a and c1 != b:
            return c1
    return -1
