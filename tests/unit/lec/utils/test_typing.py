import pytest
import numpy as np

from lec.utils import typing

numerics = [0, -1, np.int32(3), np.uint16(5), 0.5, np.float32(5.6789), np.float64(-8.8)]
non_finite = [np.nan, np.inf, -np.inf]
booleans = [True, False, np.True_, np.False_]
others = ["abc", None, {}, {1, 2}, [1.0]]


@pytest.mark.parametrize("obj", numerics + non_finite)
def test_is_numeric_true(obj):
    assert typing.is_numeric(obj)


@pytest.mark.parametrize("obj", booleans + others)
def test_is_numeric_false(obj):
    assert not typing.is_numeric(obj)


@pytest.mark.parametrize("obj", numerics + booleans)
def test_is_finite_true(obj):
    assert typing.is_finite(obj)


@pytest.mark.parametrize("obj", non_finite + others)
def test_is_finite_false(obj):
    assert not typing.is_finite(obj)


@pytest.mark.parametrize("obj", [(), [], (1.0, 2.0), np.array([1, 2]), np.empty((0, 2))])
def test_is_array_like_true(obj):
    assert typing.is_array_like(obj)


@pytest.mark.parametrize("obj", ["abc", {"a": 1}, {1, 2}, 1.0, None])
def test_is_array_like_false(obj):
    assert not typing.is_array_like(obj)


def test_array_dtype_is():
    assert typing.array_dtype_is([1, 2.0, np.float32(3)], "numeric")
    assert not typing.array_dtype_is([1, 2.0, True], "numeric")
    assert typing.array_dtype_is([], "finite")
    assert not typing.array_dtype_is([1.0, np.nan], "finite")
    assert typing.array_dtype_is(["a", "b"], str)
    with pytest.raises(ValueError):
        typing.array_dtype_is([1], "complex")
    with pytest.raises(TypeError):
        typing.array_dtype_is([1], 3)
    with pytest.raises(TypeError):
        typing.array_dtype_is(1, "numeric")


def test_sanitize_type():
    assert typing.sanitize_type(None, (str, "none"), "log_dir")
    assert typing.sanitize_type("logs/run", (str, "none"), "log_dir")
    with pytest.raises(TypeError):
        typing.sanitize_type(1, (str, "none"), "log_dir")
    with pytest.raises(TypeError):
        typing.sanitize_type(1, "boolean", "verbose")
    with pytest.raises(NotImplementedError):
        typing.sanitize_type(1, "complex", "value")


def test_sanitize_coordinates():
    points = typing.sanitize_coordinates([0, 1, 2], (0.5, np.float32(1.5), 2.5), np.float64)
    assert points.dtype == np.float64
    assert np.array_equal(points, [[0.0, 0.5], [1.0, 1.5], [2.0, 2.5]])

    with pytest.raises(ValueError):
        typing.sanitize_coordinates([0, 1], [0, 1, 2])
    with pytest.raises(TypeError):
        typing.sanitize_coordinates([0, True], [0, 1])
    with pytest.raises(TypeError):
        typing.sanitize_coordinates([0, np.inf], [0, 1])
