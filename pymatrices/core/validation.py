"""
Input validation utilities for pymatrices.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. Every operation on a Matrix
runs its checks here before touching any data, so a failure never
produces a partial result.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No clamping or wrapping of indices
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Sequence
from numbers import Integral, Real
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrices.core.exceptions import (
    DegenerateShapeError,
    DimensionError,
    IndexOutOfRangeError,
    ScalarTypeError,
    ShapeMismatchError,
    ValidationError,
)


def check_scalar_dtype(dtype: Any, name: str) -> np.dtype:
    """
    Resolve and validate a scalar type.

    Accepts anything np.dtype() accepts. Only real integer and floating
    dtypes are arithmetic scalar types; bool, complex, object, string and
    datetime dtypes are rejected.

    Args:
        dtype: dtype-like (np.int32, 'float64', int, float, ...)
        name: Parameter name for error messages

    Returns:
        The resolved numpy dtype

    Raises:
        ScalarTypeError: If dtype is not a real integer or floating type
    """
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise ScalarTypeError(f"{name}: not a dtype: {dtype!r}", dtype=dtype) from e

    if resolved == np.bool_:
        raise ScalarTypeError(
            f"{name}: bool is not an arithmetic scalar type", dtype=resolved
        )

    if not (
        np.issubdtype(resolved, np.integer)
        or np.issubdtype(resolved, np.floating)
    ):
        raise ScalarTypeError(
            f"{name}: unsupported scalar type {resolved}, expected an integer "
            f"or floating dtype",
            dtype=resolved,
        )

    return resolved


def check_real_scalar(value: Any, name: str) -> None:
    """
    Verify a value is a real number usable as a multiplier.

    Args:
        value: Value to check
        name: Parameter name for error messages

    Raises:
        ScalarTypeError: If value is bool, complex or non-numeric
    """
    if isinstance(value, (bool, np.bool_)):
        raise ScalarTypeError(f"{name}: bool is not a scalar multiplier", dtype=bool)
    if not isinstance(value, (Real, np.integer, np.floating)):
        raise ScalarTypeError(
            f"{name}: expected a real number, got {type(value).__name__}",
            dtype=type(value),
        )


def check_literal(data: Any, name: str) -> NDArray[Any]:
    """
    Validate a row-major matrix literal and convert it to a 2D array.

    Nested sequences must contain at least one row and every row must have
    the same length. 2D arrays are accepted as-is (including zero-size
    ones, which arise from deleting the last row or column).

    Args:
        data: Nested sequence of rows, or a 2D ndarray
        name: Parameter name for error messages

    Returns:
        2D numpy array (dtype not yet validated)

    Raises:
        ShapeMismatchError: If rows are ragged or the literal is empty
        DimensionError: If an array input is not 2D
        ValidationError: If the input is not a sequence of rows
    """
    if isinstance(data, np.ndarray):
        if data.ndim != 2:
            raise DimensionError(
                f"{name}: expected 2D array, got {data.ndim}D with shape {data.shape}"
            )
        return data

    check_rows(data, name)

    try:
        array = np.asarray(data)
    except (ValueError, TypeError, OverflowError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected rows of scalars, got {array.ndim}D with shape {array.shape}"
        )

    return array


def check_rows(data: Any, name: str) -> tuple[int, int]:
    """
    Verify a nested-sequence literal is non-empty and rectangular.

    Args:
        data: Nested sequence of rows
        name: Parameter name for error messages

    Returns:
        (rows, cols) of the literal

    Raises:
        ShapeMismatchError: If rows are ragged or the literal is empty
        ValidationError: If the input is not a sequence of rows
    """
    if not isinstance(data, Sequence) or isinstance(data, (str, bytes)):
        raise ValidationError(
            f"{name}: expected a sequence of rows, got {type(data).__name__}"
        )

    if len(data) == 0:
        raise ShapeMismatchError(
            f"{name}: literal must contain at least one row",
            actual=(0,),
            operation="construct",
        )

    for i, row in enumerate(data):
        if not isinstance(row, (Sequence, np.ndarray)) or isinstance(row, (str, bytes)):
            raise ValidationError(
                f"{name}: row {i} is not a sequence (got {type(row).__name__})"
            )

    widths = [len(row) for row in data]
    if len(set(widths)) > 1:
        raise ShapeMismatchError(
            f"{name}: ragged literal, row lengths are {widths}",
            expected=(len(data), widths[0]),
            actual=tuple(widths),
            operation="construct",
        )

    return len(data), widths[0]


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a matrix dimension is a non-negative integer.

    Args:
        value: Dimension to check
        name: Parameter name for error messages

    Returns:
        The dimension as int

    Raises:
        ValidationError: If value is not a non-negative integer
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, Integral):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {value!r}"
        )
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return int(value)


def check_expected_shape(
    actual: tuple[int, int],
    expected: tuple[int, int],
    name: str,
) -> None:
    """
    Verify a literal has exactly the declared shape.

    Raises:
        ShapeMismatchError: If the shapes differ
    """
    if tuple(actual) != tuple(expected):
        raise ShapeMismatchError(
            f"{name}: expected shape {tuple(expected)}, got {tuple(actual)}",
            expected=tuple(expected),
            actual=tuple(actual),
            operation="construct",
        )


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands share a shape (elementwise ops and equality).

    Raises:
        ShapeMismatchError: If the shapes differ
    """
    if tuple(left) != tuple(right):
        raise ShapeMismatchError(
            f"{operation}: operand shapes differ, {left[0]} x {left[1]} "
            f"vs {right[0]} x {right[1]}",
            expected=tuple(left),
            actual=tuple(right),
            operation=operation,
        )


def check_same_dtype(left: np.dtype, right: np.dtype, operation: str) -> None:
    """
    Verify two operands share a scalar type.

    Raises:
        ScalarTypeError: If the dtypes differ
    """
    if left != right:
        raise ScalarTypeError(
            f"{operation}: operand scalar types differ, {left} vs {right}",
            dtype=(left, right),
        )


def check_inner_dimensions(
    left: tuple[int, int],
    right: tuple[int, int],
) -> None:
    """
    Verify (M x N) @ (N x P) compatibility.

    Raises:
        ShapeMismatchError: If left cols != right rows
    """
    if left[1] != right[0]:
        raise ShapeMismatchError(
            f"multiply: inner dimensions differ, {left[0]} x {left[1]} "
            f"times {right[0]} x {right[1]}",
            expected=left[1],
            actual=right[0],
            operation="multiply",
        )


def check_index(index: Any, bound: int, axis: str) -> int:
    """
    Verify an index lies in [0, bound).

    Args:
        index: Index to check
        bound: Exclusive upper bound (number of rows or columns)
        axis: 'row' or 'column', for error messages

    Returns:
        The index as int

    Raises:
        IndexOutOfRangeError: If index is not an integer or is out of range
    """
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, Integral):
        raise IndexOutOfRangeError(
            f"{axis} index must be an integer, got {index!r}",
            index=index,
            bound=bound,
            axis=axis,
        )
    if not 0 <= index < bound:
        raise IndexOutOfRangeError(
            f"{axis} index {index} out of range [0, {bound})",
            index=index,
            bound=bound,
            axis=axis,
        )
    return int(index)


def check_square(shape: tuple[int, int], min_size: int, operation: str) -> int:
    """
    Verify a shape is square and at least min_size x min_size.

    Returns:
        The side length

    Raises:
        DegenerateShapeError: If the shape is non-square or too small
    """
    rows, cols = shape
    if rows != cols:
        raise DegenerateShapeError(
            f"{operation}: requires a square matrix, got {rows} x {cols}",
            shape=(rows, cols),
            operation=operation,
        )
    if rows < min_size:
        raise DegenerateShapeError(
            f"{operation}: requires at least {min_size} x {min_size}, "
            f"got {rows} x {cols}",
            shape=(rows, cols),
            operation=operation,
        )
    return rows
