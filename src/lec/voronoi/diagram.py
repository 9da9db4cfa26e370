"""
Adapter around scipy.spatial (qhull) producing the combinatorial structure
the empty circle search consumes: ordered hull, Delaunay triangles, Voronoi
vertices and ridges, and a normal per unbounded ridge.
"""
import numpy as np
from scipy.spatial import ConvexHull, Delaunay, Voronoi, QhullError

from lec.commons.types import DEFAULTS
INT, FLOAT = DEFAULTS
from lec.commons.exceptions import DegenerateInput  # noqa: E402
from lec.geometry.primitives import order_hull, bounding_box, is_collinear  # noqa: E402


class Diagram:
    """
    Read-only view of the hull / Delaunay / Voronoi structure of a site set.

    Unbounded ridges carry their finite vertex in column 0 of
    `ridge_vertices` and -1 in column 1; `ridge_rays` maps them to a ray id
    indexing `normals` and `ray_lines`.
    """
    def __init__(
            self,
            points: np.ndarray,
            hull: np.ndarray,
            triangles: np.ndarray,
            vertices: np.ndarray,
            ridge_points: np.ndarray,
            ridge_vertices: np.ndarray,
    ):
        self.points = points
        self.hull = order_hull(points, hull)
        self.hull_points = np.ascontiguousarray(points[self.hull])
        self.bbox = bounding_box(self.hull_points)
        self.triangles = triangles
        self.vertices = vertices

        self.ridge_points = ridge_points
        self.ridge_vertices = ridge_vertices
        self.num_ridges = ridge_points.shape[0]

        unbounded = ridge_vertices[:, 1] < 0
        self.num_rays = int(unbounded.sum())
        self.ridge_rays = np.full(self.num_ridges, -1, dtype=INT)
        self.ridge_rays[unbounded] = np.arange(self.num_rays, dtype=INT)

        # normal of the bisector line is the vector between the two sites
        ray_sites = ridge_points[unbounded]
        self.normals = np.ascontiguousarray(points[ray_sites[:, 1]] - points[ray_sites[:, 0]], dtype=FLOAT)
        origins = vertices[ridge_vertices[unbounded, 0]]
        self.ray_lines = np.empty((self.num_rays, 3), dtype=FLOAT)
        self.ray_lines[:, :2] = self.normals
        self.ray_lines[:, 2] = -np.sum(self.normals * origins, axis=1)

        self.vertex_sites = _first_sites(ridge_points, ridge_vertices, vertices.shape[0])
        self.incident_ptr, self.incident_ridges = _vertex_incidence(ridge_vertices, vertices.shape[0])

    @property
    def num_vertices(self):
        return self.vertices.shape[0]

    def is_unbounded(self, ridge: int) -> bool:
        return bool(self.ridge_rays[ridge] >= 0)

    def __repr__(self):
        return (f"Diagram({self.points.shape[0]} sites, {self.hull.size} hull sites, "
                f"{self.num_vertices} vertices, {self.num_ridges} ridges, {self.num_rays} rays)")


def build_diagram(points: np.ndarray) -> Diagram:
    """
    Computes the convex hull, Delaunay triangulation and Voronoi diagram of
    `points` (shape (N, 2)) with qhull.
    Raises DegenerateInput for fewer than 3 or collinear sites.
    """
    points = np.ascontiguousarray(points, dtype=FLOAT)
    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"'points' expected shape (N, 2). Got: {points.shape}")
    if points.shape[0] < 3:
        raise DegenerateInput(f"at least 3 sites are required. Got: {points.shape[0]}")
    if is_collinear(points):
        raise DegenerateInput("all sites are collinear")

    try:
        hull = ConvexHull(points)
        delaunay = Delaunay(points)
        voronoi = Voronoi(points)
    except QhullError as e:
        raise DegenerateInput(f"qhull could not build the diagram: {e}") from e

    ridge_points = np.asarray(voronoi.ridge_points, dtype=INT)
    ridge_vertices = np.asarray(voronoi.ridge_vertices, dtype=INT).reshape(-1, 2)
    if (ridge_vertices < 0).all(axis=1).any():
        raise DegenerateInput("Voronoi ridge without a finite vertex")
    # finite vertex first
    swap = ridge_vertices[:, 0] < 0
    ridge_vertices[swap] = ridge_vertices[swap, ::-1]

    return Diagram(
        points,
        hull.vertices,
        np.asarray(delaunay.simplices, dtype=INT),
        np.ascontiguousarray(voronoi.vertices, dtype=FLOAT),
        ridge_points,
        ridge_vertices,
    )


def _first_sites(ridge_points, ridge_vertices, num_vertices):
    """first bisected site of the first ridge referencing each vertex"""
    vertex_sites = np.full(num_vertices, -1, dtype=INT)
    for r in range(ridge_points.shape[0]):
        for v in ridge_vertices[r]:
            if v >= 0 and vertex_sites[v] < 0:
                vertex_sites[v] = ridge_points[r, 0]
    return vertex_sites


def _vertex_incidence(ridge_vertices, num_vertices):
    """
    CSR adjacency of vertices to ridges: the ridges incident to vertex v are
    incident_ridges[incident_ptr[v]:incident_ptr[v + 1]], in ridge order.
    """
    ridge_ids = np.repeat(np.arange(ridge_vertices.shape[0], dtype=INT), 2)
    verts = ridge_vertices.ravel()
    finite = verts >= 0
    ridge_ids, verts = ridge_ids[finite], verts[finite]
    order = np.argsort(verts, kind="stable")
    counts = np.bincount(verts, minlength=num_vertices)
    incident_ptr = np.zeros(num_vertices + 1, dtype=INT)
    incident_ptr[1:] = np.cumsum(counts)
    return incident_ptr, ridge_ids[order]
