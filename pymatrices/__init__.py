"""
pymatrices: fixed-shape dense matrices over NumPy scalar types.

Elementwise arithmetic, scalar and matrix multiplication, transposition,
row/column deletion and recursive (cofactor-expansion) determinants.
Shapes are fixed at construction; every operation checks compatibility
before computing and returns a new matrix.

Submodules:
    matrix: The Matrix type and its functional API
    determinants: Determinant pipeline (cofactor reference, LU fast path)
    core: Exceptions, validation, result envelope, timing, tolerances
"""

__version__ = "0.1.0"

from pymatrices.core.exceptions import (
    MatricesError,
    ValidationError,
    DimensionError,
    ShapeMismatchError,
    DegenerateShapeError,
    IndexOutOfRangeError,
    ScalarTypeError,
    NumericalError,
)
from pymatrices.matrix import (
    Matrix,
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
)
from pymatrices.determinants import det, determinant, DeterminantSolution

__all__ = [
    "__version__",
    # Matrix
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
    # Determinant
    "det",
    "determinant",
    "DeterminantSolution",
    # Exceptions
    "MatricesError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatchError",
    "DegenerateShapeError",
    "IndexOutOfRangeError",
    "ScalarTypeError",
    "NumericalError",
]
