import pandas as pd
import matplotlib.pyplot as plt
from matplotlib.patches import Circle, Polygon
import seaborn as sns

from lec.voronoi.rays import resolve_rays


def _axes(ax):
    if ax is None:
        fig, ax = plt.subplots(figsize=(5, 5))
    return ax


def _draw_hull(ax, diagram):
    ax.add_patch(Polygon(diagram.hull_points, closed=True, fill=False, color="k", lw=1))


def _draw_circle(ax, result):
    ax.add_patch(Circle((result.x, result.y), result.radius, fill=False, color="C3", lw=1.5))
    ax.plot(result.x, result.y, "+", color="C3")


def plot_triangulation(diagram, result=None, ax=None):
    ax = _axes(ax)
    ax.triplot(diagram.points[:, 0], diagram.points[:, 1], diagram.triangles, color="C0", lw=0.8)
    ax.plot(diagram.points[:, 0], diagram.points[:, 1], "o", color="k", ms=3)
    _draw_hull(ax, diagram)
    if result is not None:
        _draw_circle(ax, result)
    ax.set_aspect("equal")
    ax.set_title("Delaunay triangulation")
    return ax


def plot_voronoi(diagram, result=None, rays=None, ax=None):
    """
    Draws bounded ridges solid and unbounded ridges dashed up to their far point.
    """
    ax = _axes(ax)
    if rays is None:
        rays = resolve_rays(diagram)
    for r in range(diagram.num_ridges):
        v0 = diagram.vertices[diagram.ridge_vertices[r, 0]]
        k = diagram.ridge_rays[r]
        if k >= 0:
            v1 = rays.far_points[k]
            style = "--"
        else:
            v1 = diagram.vertices[diagram.ridge_vertices[r, 1]]
            style = "-"
        ax.plot((v0[0], v1[0]), (v0[1], v1[1]), style, color="C1", lw=0.8)
    ax.plot(diagram.points[:, 0], diagram.points[:, 1], "o", color="k", ms=3)
    _draw_hull(ax, diagram)
    if result is not None:
        _draw_circle(ax, result)

    # keep the view on the sites rather than on far-away vertices
    xmin, xmax, ymin, ymax = diagram.bbox
    pad = 0.2 * max(xmax - xmin, ymax - ymin)
    ax.set_xlim(xmin - pad, xmax + pad)
    ax.set_ylim(ymin - pad, ymax + pad)
    ax.set_aspect("equal")
    ax.set_title("Voronoi diagram")
    return ax


def plot_candidates(file_prefix, ax=None):
    """
    Scatter of the candidate centres written by `lec.utils.logger.Logger`,
    coloured by squared radius.
    """
    ax = _axes(ax)
    vertices = pd.read_csv(file_prefix + "-vertices.csv", header=0)
    vertices = vertices.loc[vertices["inside"] == 1, ["x", "y", "radius2"]]
    vertices["phase"] = "vertex"
    ridges = pd.read_csv(file_prefix + "-ridges.csv", header=0)
    ridges = ridges.loc[:, ["x", "y", "radius2"]]
    ridges["phase"] = "ridge"
    df = pd.concat([vertices, ridges], ignore_index=True)
    df["radius2"] = df["radius2"].astype(float)

    sns.scatterplot(
        df,
        x="x",
        y="y",
        hue="radius2",
        style="phase",
        palette="viridis",
        ax=ax,
    )
    result = pd.read_csv(file_prefix + "-result.csv", header=0)
    if len(result) > 0:
        ax.plot(result["x"].iloc[0], result["y"].iloc[0], "*", color="C3", ms=12)
    ax.set_aspect("equal")
    ax.set_title("LEC candidates")
    return ax
