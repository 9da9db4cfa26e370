import pytest
import numpy as np


# fixtures
@pytest.fixture
def rng():
    yield np.random.default_rng(20240517)


@pytest.fixture
def unit_square():
    """corners of the unit square, counter-clockwise"""
    x = np.array([0.0, 1.0, 1.0, 0.0])
    y = np.array([0.0, 0.0, 1.0, 1.0])
    return x, y


@pytest.fixture
def equilateral_triangle():
    x = np.array([0.0, 1.0, 0.5])
    y = np.array([0.0, 0.0, np.sqrt(3) / 2])
    return x, y


@pytest.fixture
def cluster_with_outlier():
    """a tight 5-point cluster around (0.05, 0.05) and one site far to the right"""
    x = np.array([0.0, 0.1, 0.0, 0.1, 0.05, 10.0])
    y = np.array([0.0, 0.0, 0.1, 0.1, 0.05, 0.05])
    return x, y


@pytest.fixture
def random_sites(rng):
    points = rng.random((40, 2))
    return points[:, 0], points[:, 1]
