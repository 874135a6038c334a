"""
Matrix module.

Provides the fixed-shape dense Matrix type and a functional API over it.

Public API:
    Matrix                   - the matrix type
    equals(A, B)             - exact elementwise equality
    not_equal(A, B)          - negation of equals
    add(A, B)                - elementwise sum
    subtract(A, B)           - elementwise difference
    scale(A, k)              - scalar multiplication
    transpose(A)             - cols x rows copy
    multiply(A, B)           - matrix product
    delete_row(A, idx)       - copy without one row
    delete_column(A, idx)    - copy without one column
    minor(A, row, col)       - copy without one row and one column
    det(A)                   - determinant by cofactor expansion
"""

from pymatrices.matrix.matrix import Matrix
from pymatrices.matrix.operations import (
    equals,
    not_equal,
    add,
    subtract,
    scale,
    transpose,
    multiply,
    delete_row,
    delete_column,
    minor,
    det,
)

__all__ = [
    "Matrix",
    "equals",
    "not_equal",
    "add",
    "subtract",
    "scale",
    "transpose",
    "multiply",
    "delete_row",
    "delete_column",
    "minor",
    "det",
]
