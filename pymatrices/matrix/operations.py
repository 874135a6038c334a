"""
Functional API over Matrix.

Each function is pure: it validates its operands, then returns a new
Matrix (or a scalar / bool) without modifying its inputs.

    equals(A, B)            not_equal(A, B)
    add(A, B)               subtract(A, B)
    scale(A, k)             transpose(A)
    multiply(A, B)          minor(A, row, col)
    delete_row(A, idx)      delete_column(A, idx)
    det(A)
"""

from __future__ import annotations

from typing import Any
import numpy as np

from pymatrices.matrix.matrix import Matrix


def equals(a: Matrix, b: Matrix) -> bool:
    """True iff every corresponding entry is equal. Shapes must match."""
    return a.equals(b)


def not_equal(a: Matrix, b: Matrix) -> bool:
    return not a.equals(b)


def add(a: Matrix, b: Matrix) -> Matrix:
    return a.add(b)


def subtract(a: Matrix, b: Matrix) -> Matrix:
    return a.subtract(b)


def scale(a: Matrix, k: Any) -> Matrix:
    """Multiply every entry of `a` by the scalar `k`."""
    return a.scale(k)


def transpose(a: Matrix) -> Matrix:
    return a.transpose()


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Matrix product. `a` is M x N and `b` is N x P; the result is M x P.

    Not commutative: multiply(a, b) and multiply(b, a) may differ in value
    and, for non-square operands, in shape.
    """
    return a.multiply(b)


def delete_row(a: Matrix, index: int) -> Matrix:
    """Copy of `a` without row `index`. Raises IndexOutOfRangeError if index >= rows."""
    return a.delete_row(index)


def delete_column(a: Matrix, index: int) -> Matrix:
    """Copy of `a` without column `index`. Raises IndexOutOfRangeError if index >= cols."""
    return a.delete_column(index)


def minor(a: Matrix, row: int, col: int) -> Matrix:
    return a.minor(row, col)


def det(a: Matrix) -> np.generic:
    """Determinant by cofactor expansion. `a` must be square and at least 2 x 2."""
    return a.det()
