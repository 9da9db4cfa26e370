import numpy as np
from datetime import datetime as dt
from typing import NamedTuple

from lec.commons.types import DEFAULTS

INT, FLOAT = DEFAULTS
from lec.commons.exceptions import DegenerateInput  # noqa: E402
from lec.utils import typing  # noqa: E402
from lec.utils.logger import Logger  # noqa: E402
from lec.voronoi.diagram import Diagram, build_diagram  # noqa: E402
from lec.voronoi.rays import resolve_rays  # noqa: E402
from lec.search import search_vertices, construct_ridge_search, reduce_candidates  # noqa: E402


class LECResult(NamedTuple):
    radius: float
    x: float
    y: float
    phase: str = ""
    n_rejected: int = 0


class LECProblem:
    """
    Largest empty circle of a planar site set, centred inside its convex hull.

    The diagram is built once on construction. Each call to `solve` resolves
    the unbounded ridges afresh and scans Voronoi vertices (phase A) and
    ridge / hull-edge intersections (phase B) for the largest radius.
    """

    def __init__(
        self,
        x,
        y,
        dedupe: bool = False,
        parallelize: bool = False,
        use_ray_lines: bool = False,
        log_dir: str | None = None,
        verbose: bool = False,
    ):
        typing.sanitize_type(dedupe, "boolean", "dedupe")
        typing.sanitize_type(parallelize, "boolean", "parallelize")
        typing.sanitize_type(use_ray_lines, "boolean", "use_ray_lines")
        typing.sanitize_type(log_dir, (str, "none"), "log_dir")
        typing.sanitize_type(verbose, "boolean", "verbose")

        points = typing.sanitize_coordinates(x, y, FLOAT)
        self.points = prepare_sites(points, dedupe)
        self.verbose = verbose
        self.log_dir = log_dir
        self.use_ray_lines = use_ray_lines
        self.start_time = dt.now()

        self.diagram = build_diagram(self.points)
        self.ridge_search = construct_ridge_search(parallelize, use_ray_lines)
        self.result = None
        self._display(f"{self.diagram}")

    def solve(self) -> LECResult:
        diagram = self.diagram
        rays = resolve_rays(diagram)

        vertex_r2 = np.empty(diagram.num_vertices, dtype=FLOAT)
        search_vertices(diagram.vertices, diagram.vertex_sites, diagram.points, diagram.hull_points, vertex_r2)
        self._display(f"phase A: {np.count_nonzero(vertex_r2 >= 0)} of {diagram.num_vertices} vertices inside hull")

        ridge_r2 = np.empty(diagram.num_ridges, dtype=FLOAT)
        ridge_xy = np.empty((diagram.num_ridges, 2), dtype=FLOAT)
        rejected = np.empty(diagram.num_ridges, dtype=INT)
        self.ridge_search(
            diagram.points,
            diagram.vertices,
            diagram.ridge_points,
            diagram.ridge_vertices,
            diagram.ridge_rays,
            rays.far_points,
            rays.third_sites,
            rays.valid,
            diagram.ray_lines,
            diagram.hull_points,
            ridge_r2,
            ridge_xy,
            rejected,
        )
        n_rejected = int(rejected.sum())
        self._display(f"phase B: {np.count_nonzero(ridge_r2 >= 0)} of {diagram.num_ridges} ridges meet the hull, "
                      f"{n_rejected} ray candidate(s) rejected")

        best = reduce_candidates(diagram.vertices, vertex_r2, ridge_xy, ridge_r2)
        if best is None:
            raise DegenerateInput("no empty circle candidate found inside the convex hull")
        radius2, x, y, phase = best
        self.result = LECResult(float(np.sqrt(radius2)), x, y, phase, n_rejected)
        self._display(f"radius {self.result.radius:.6g} at ({x:.6g}, {y:.6g}) from {phase} phase")

        if self.log_dir:
            logger = Logger(self.log_dir, create_dir=True)
            logger.log_vertices(diagram.vertices, vertex_r2)
            logger.log_ridges(diagram, ridge_xy, ridge_r2, rejected, rays.bounds)
            logger.log_result(self.result)
            logger.finalize()

        return self.result

    def get_results(self) -> LECResult:
        if self.result is None:
            raise RuntimeError("Problem has not been solved yet. Call `.solve()` first.")
        return self.result

    def _display(self, message):
        if self.verbose:
            print(f"--- LEC: {message}. Time: {dt.now() - self.start_time} ---")


def prepare_sites(points: np.ndarray, dedupe: bool = False) -> np.ndarray:
    """
    Rejects (or, with `dedupe`, drops) repeated sites, keeping the first
    occurrence of each. Raises DegenerateInput for fewer than 3 sites.
    """
    if points.shape[0] < 3:
        raise DegenerateInput(f"at least 3 sites are required. Got: {points.shape[0]}")
    _, first = np.unique(points, axis=0, return_index=True)
    if first.size != points.shape[0]:
        if not dedupe:
            raise DegenerateInput(f"{points.shape[0] - first.size} duplicate site(s) in input")
        points = points[np.sort(first)]
    if points.shape[0] < 3:
        raise DegenerateInput(f"at least 3 distinct sites are required. Got: {points.shape[0]}")
    return points


def largest_empty_circle(
        x,
        y,
        display_triangulation: bool = False,
        display_voronoi: bool = False,
        **kwargs,
) -> LECResult:
    """
    Largest circle centred inside the convex hull of (x, y) containing no
    site in its interior. Keyword arguments are passed to `LECProblem`.
    """
    problem = LECProblem(x, y, **kwargs)
    result = problem.solve()
    if display_triangulation or display_voronoi:
        _display_diagram(problem.diagram, result, display_triangulation, display_voronoi)
    return result


def _display_diagram(diagram: Diagram, result: LECResult, triangulation: bool, voronoi: bool):
    import matplotlib.pyplot as plt
    from lec.utils import plotting

    if triangulation:
        plotting.plot_triangulation(diagram, result)
    if voronoi:
        plotting.plot_voronoi(diagram, result)
    plt.show()
