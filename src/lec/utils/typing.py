import numpy as np
import numbers
from typing import Type


def sanitize_array_type(obj, dtype, name):
    if not is_array_like(obj):
        raise TypeError(f"'{name}' expected array-like. Got: {type(obj)}")
    if not array_dtype_is(obj, dtype):
        if hasattr(obj, "dtype"):
            raise TypeError(f"Array-like '{name}' expected dtype: {dtype}. Got: {obj.dtype}")
        else:
            raise TypeError(f"Array-like '{name}' expected dtype: {dtype}. Inferred: {type(obj[0])}")
    return True


def sanitize_type(obj, dtype, name):
    if isinstance(dtype, (tuple, list)):
        if not any(is_dtype(obj, dt) for dt in dtype):
            raise TypeError(f"'{name}' expected type one of {dtype}. Got: '{type(obj)}'")
    else:
        if not is_dtype(obj, dtype):
            raise TypeError(f"{name} expected type: '{dtype}'. Got: '{type(obj)}'")
    return True


def sanitize_coordinates(x, y, float_type=np.float64):
    """
    Checks a pair of coordinate sequences and stacks them into an (N, 2) array.
    Booleans are rejected; integers are cast.
    """
    for obj, name in ((x, "x"), (y, "y")):
        sanitize_array_type(obj, "numeric", name)
        sanitize_array_type(obj, "finite", name)
    if len(x) != len(y):
        raise ValueError(f"'x' and 'y' must be of equal length. Got: {len(x)} and {len(y)}")
    points = np.empty((len(x), 2), dtype=float_type)
    points[:, 0] = x
    points[:, 1] = y
    return points


def is_dtype(obj, dtype):
    if isinstance(dtype, type):
        return isinstance(obj, dtype)
    if dtype not in func_dict.keys():
        raise NotImplementedError(f"string dtype: {dtype} not Implemented. Supported: {func_dict.keys()}")
    return func_dict[dtype](obj)


def is_none(obj):
    return obj is None


def is_numeric(obj):
    """
    check whether object is numeric
    """
    return isinstance(obj, numbers.Number) and not is_boolean(obj)


def is_boolean(obj):
    return isinstance(obj, (bool, np.bool_))


def is_finite(obj):
    """
    check whether numeric object is finite
    """
    if not (is_numeric(obj) or is_boolean(obj)):
        return False
    return bool(np.isfinite(obj))  # return as python bool


def is_array_like(obj):
    """
    check whether object is array-like.
    """
    if isinstance(obj, (str, dict)):
        return False
    return all(hasattr(obj, attr) for attr in ("__len__", "__iter__", "__getitem__"))


def array_dtype_is(obj, dtype: str | Type):
    """
    check dtype of an array-like object
    """
    if not is_array_like(obj):
        raise TypeError(f"'obj' must be array-like. Supplied a {type(obj)}")
    if isinstance(dtype, str):
        dtype = dtype.lower()
        if dtype not in func_dict.keys():
            raise ValueError(
                f"'dtype' expects a type or a string. Supported string dtypes: "
                f"{tuple(func_dict.keys())}. Supplied: '{dtype}'"
            )
        func = func_dict[dtype]
    elif not isinstance(dtype, type):
        raise TypeError(f"'dtype' must be a string or a type. Supplied a {type(dtype)}.")

    if len(obj) == 0:
        # empty array has compliant dtype
        return True

    if isinstance(dtype, str):
        return all(func(element) for element in obj)
    return all(isinstance(element, dtype) for element in obj)


func_dict = {
    "numeric": is_numeric,
    "boolean": is_boolean,
    "arraylike": is_array_like,
    "finite": is_finite,
    "none": is_none,
}
