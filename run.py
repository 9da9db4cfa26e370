import numpy as np
import matplotlib.pyplot as plt

from lec.empty_circle import LECProblem
from lec.utils import plotting


def sample_sites(n, seed=None):
    """
    A dense cluster plus a sparse scatter, so the empty circle ends up
    between the two rather than at the centre of the hull.
    """
    rng = np.random.default_rng(seed)
    cluster = rng.normal(loc=(0.3, 0.3), scale=0.05, size=(n // 2, 2))
    scatter = rng.random((n - n // 2, 2))
    points = np.vstack((cluster, scatter))
    return points[:, 0], points[:, 1]


def main(run=True, plot=True, seed=None):
    """
    Finds the largest empty circle of a sample site set.
    """
    global problem
    FILE_PREFIX = "logs/lec"
    # FILE_PREFIX = None
    if run:
        # 1. Generate the sites
        x, y = sample_sites(60, seed)

        # 2. Build the diagram and search it
        problem = LECProblem(
            x,
            y,
            parallelize=False,
            log_dir=FILE_PREFIX,
            verbose=True,
        )
        result = problem.solve()

        print("\n--- Largest empty circle ---")
        print(f"Centre=({result.x:.4f}, {result.y:.4f}), Radius={result.radius:.4f}, "
              f"Phase={result.phase}, Rejected ray candidates={result.n_rejected}")

    if plot:
        print("\nGenerating plots...")
        plotting.plot_voronoi(problem.diagram, problem.get_results())
        plotting.plot_triangulation(problem.diagram, problem.get_results())
        if FILE_PREFIX is not None:
            plotting.plot_candidates(FILE_PREFIX)
        plt.show()
    return problem


if __name__ == "__main__":
    problem = main(True, True, seed=1)
