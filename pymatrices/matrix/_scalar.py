"""
Scalar type handling for Matrix.

A matrix holds values of one NumPy integer or floating dtype. Arithmetic
follows that dtype's native semantics: integers wrap around on overflow,
floats round per IEEE 754.
"""

from __future__ import annotations

from numbers import Real
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymatrices.core.validation import check_real_scalar, check_scalar_dtype


def resolve_dtype(array: NDArray[Any], dtype: Any, name: str) -> np.dtype:
    """Return the validated dtype for a literal, inferring it when None."""
    if dtype is None:
        return check_scalar_dtype(array.dtype, name)
    return check_scalar_dtype(dtype, name)


def cast_array(array: NDArray[Any], dtype: np.dtype) -> NDArray[Any]:
    """
    Copy an array into the target dtype with C-style conversion.

    Out-of-range integers wrap and floats truncate toward zero when the
    target is an integer type.
    """
    # astype always copies, so the result never aliases caller data
    return array.astype(dtype, casting='unsafe')


def wrap_integer(value: int, dtype: np.dtype) -> int:
    """Reduce a Python int into the range of an integer dtype, modulo 2**bits."""
    bits = 8 * dtype.itemsize
    wrapped = value % (1 << bits)
    if np.issubdtype(dtype, np.signedinteger) and wrapped >= 1 << (bits - 1):
        wrapped -= 1 << bits
    return wrapped


def to_scalar(value: Any, dtype: np.dtype, name: str) -> np.generic:
    """
    Convert a real number to a scalar of the given dtype.

    Python ints of any size wrap into integer dtypes; floats truncate
    toward zero.
    """
    check_real_scalar(value, name)
    if isinstance(value, int) and np.issubdtype(dtype, np.integer):
        value = wrap_integer(value, dtype)
    return np.asarray(value).astype(dtype, casting='unsafe')[()]


def literal_to_array(rows: Any, dtype: np.dtype) -> NDArray[Any]:
    """
    Build a 2D array from a validated rectangular literal, one cell at a time.

    Each value goes straight into the target dtype, so integers outside the
    int64 range never pass through float64.
    """
    array = np.empty((len(rows), len(rows[0])), dtype=dtype)
    for i, row in enumerate(rows):
        for j, value in enumerate(row):
            array[i, j] = to_scalar(value, dtype, f"data[{i}][{j}]")
    return array


def zero(dtype: np.dtype) -> np.generic:
    """Additive identity of the dtype."""
    return dtype.type(0)


def is_real_scalar(value: Any) -> bool:
    """Whether value can act as a scalar multiplier (real, non-bool)."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (Real, np.integer, np.floating))
