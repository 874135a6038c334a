"""
Matrix: fixed-shape dense matrix over an arithmetic scalar type.

The shape (rows, cols) and the scalar dtype are fixed at construction.
Operations that change shape (transpose, multiply, row/column deletion)
return a new Matrix; operands are never modified. Shape compatibility is
checked at the top of each operation, before any computation.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import DTypeLike, NDArray

from pymatrices.core.compute.tolerances import EXACT, select_tolerance
from pymatrices.core.exceptions import ValidationError
from pymatrices.core.validation import (
    check_dimension,
    check_expected_shape,
    check_index,
    check_inner_dimensions,
    check_literal,
    check_rows,
    check_same_dtype,
    check_same_shape,
    check_scalar_dtype,
    check_square,
)
from pymatrices.matrix._format import format_grid, format_repr
from pymatrices.matrix._scalar import (
    cast_array,
    is_real_scalar,
    literal_to_array,
    resolve_dtype,
    to_scalar,
)

if TYPE_CHECKING:
    from collections.abc import Sequence


class Matrix:
    """
    Dense, row-major, fixed-shape matrix.

    Construction:
        Matrix([[1, 2, 3], [4, 5, 6]], dtype=np.int32)
        Matrix([[1, 2], [3, 4]], shape=(2, 2))     # literal must be 2 x 2
        Matrix.zeros(3, 2, dtype=np.uint32)
        Matrix.identity(3)

    Operators:
        A == B, A != B      exact elementwise equality (same shape required)
        A + B, A - B        elementwise, same shape and dtype
        A * k, k * A        scalar multiplication
        A * B, A @ B        matrix multiplication (A.cols == B.rows)
        A[i, j]             element read/write, zero-based

    Integer dtypes wrap around on overflow; nothing is trapped.
    """

    __slots__ = ('_data',)

    # Make NumPy scalars defer to our reflected operators (k * A)
    __array_ufunc__ = None

    # Mutable via element write
    __hash__ = None

    def __init__(
        self,
        data: Sequence[Sequence[Any]] | NDArray[Any],
        dtype: DTypeLike | None = None,
        *,
        shape: tuple[int, int] | None = None,
    ):
        """
        Build a matrix from a row-major literal.

        Parameters
        ----------
        data : nested sequence, 2D ndarray or Matrix
            Rows of scalars. Nested sequences must be non-empty and
            rectangular. A Matrix is copied.
        dtype : dtype-like, optional
            Scalar type. Inferred from the literal when omitted
            (int64 for integers, float64 for floats).
        shape : (rows, cols), optional
            Declared shape; the literal must match it exactly.
        """
        if isinstance(data, Matrix):
            array = data._data
        elif dtype is not None and not isinstance(data, np.ndarray):
            check_rows(data, 'data')
            array = literal_to_array(data, check_scalar_dtype(dtype, 'dtype'))
        else:
            array = check_literal(data, 'data')
        if shape is not None:
            check_expected_shape(array.shape, shape, 'data')
        resolved = resolve_dtype(array, dtype, 'dtype')
        self._data = cast_array(array, resolved)

    @classmethod
    def _wrap(cls, data: NDArray[Any]) -> Matrix:
        """Adopt a freshly computed array without copying or revalidating."""
        matrix = cls.__new__(cls)
        matrix._data = data
        return matrix

    @classmethod
    def zeros(cls, rows: int, cols: int, dtype: DTypeLike = np.float64) -> Matrix:
        """Matrix with every entry set to the dtype's additive identity."""
        n_rows = check_dimension(rows, 'rows')
        n_cols = check_dimension(cols, 'cols')
        resolved = check_scalar_dtype(dtype, 'dtype')
        return cls._wrap(np.zeros((n_rows, n_cols), dtype=resolved))

    @classmethod
    def identity(cls, n: int, dtype: DTypeLike = np.float64) -> Matrix:
        """Square identity matrix."""
        size = check_dimension(n, 'n')
        resolved = check_scalar_dtype(dtype, 'dtype')
        return cls._wrap(np.eye(size, dtype=resolved))

    # --- Shape and type ---

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return self._data.shape

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def dtype(self) -> np.dtype:
        """Scalar type of every entry."""
        return self._data.dtype

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    # --- Element access ---

    def _check_key(self, key: Any) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise ValidationError(
                f"Matrix index must be a (row, col) pair, got {key!r}"
            )
        row = check_index(key[0], self.rows, 'row')
        col = check_index(key[1], self.cols, 'column')
        return row, col

    def __getitem__(self, key: tuple[int, int]) -> np.generic:
        row, col = self._check_key(key)
        return self._data[row, col]

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        row, col = self._check_key(key)
        self._data[row, col] = to_scalar(value, self.dtype, 'value')

    # --- Conversion ---

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the underlying data as a 2D ndarray."""
        return self._data.copy()

    def tolist(self) -> list[list[Any]]:
        """Nested lists of Python scalars."""
        return self._data.tolist()

    def copy(self) -> Matrix:
        return Matrix._wrap(self._data.copy())

    # --- Equality ---

    def equals(self, other: Matrix) -> bool:
        """
        True iff every corresponding entry compares equal.

        Raises ShapeMismatchError when the shapes differ.
        """
        check_same_shape(self.shape, other.shape, 'equals')
        return bool(np.array_equal(self._data, other._data))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return not self.equals(other)

    def allclose(
        self,
        other: Matrix,
        rtol: float | None = None,
        atol: float | None = None,
    ) -> bool:
        """
        Elementwise comparison within tolerance.

        Defaults come from the tolerance tier of this matrix's dtype;
        integer matrices compare exactly.
        """
        check_same_shape(self.shape, other.shape, 'allclose')
        tier = select_tolerance(self.dtype)
        rtol = tier.rtol if rtol is None else rtol
        atol = tier.atol if atol is None else atol
        if tier is EXACT and rtol == 0.0 and atol == 0.0:
            return bool(np.array_equal(self._data, other._data))
        return bool(np.allclose(self._data, other._data, rtol=rtol, atol=atol))

    # --- Elementwise arithmetic ---

    def add(self, other: Matrix) -> Matrix:
        """Elementwise sum of two same-shape, same-dtype matrices."""
        check_same_shape(self.shape, other.shape, 'add')
        check_same_dtype(self.dtype, other.dtype, 'add')
        return Matrix._wrap(self._data + other._data)

    def subtract(self, other: Matrix) -> Matrix:
        """Elementwise difference of two same-shape, same-dtype matrices."""
        check_same_shape(self.shape, other.shape, 'subtract')
        check_same_dtype(self.dtype, other.dtype, 'subtract')
        return Matrix._wrap(self._data - other._data)

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    # --- Scalar and matrix multiplication ---

    def scale(self, k: Any) -> Matrix:
        """
        Multiply every entry by k.

        k is first converted to the matrix dtype (wrapping or truncating
        as a C cast would), then multiplied in that dtype.
        """
        factor = to_scalar(k, self.dtype, 'k')
        return Matrix._wrap(self._data * factor)

    def multiply(self, other: Matrix) -> Matrix:
        """
        Matrix product of (M x N) and (N x P), giving M x P.

        result[m, p] = sum over n of self[m, n] * other[n, p], computed in
        the matrix dtype.
        """
        check_same_dtype(self.dtype, other.dtype, 'multiply')
        check_inner_dimensions(self.shape, other.shape)
        return Matrix._wrap(np.matmul(self._data, other._data))

    def __mul__(self, other: object) -> Matrix:
        if isinstance(other, Matrix):
            return self.multiply(other)
        if not is_real_scalar(other):
            return NotImplemented
        return self.scale(other)

    def __rmul__(self, other: object) -> Matrix:
        if not is_real_scalar(other):
            return NotImplemented
        return self.scale(other)

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    # --- Shape-changing operations ---

    def transpose(self) -> Matrix:
        """New cols x rows matrix with result[j, i] == self[i, j]."""
        return Matrix._wrap(self._data.T.copy())

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def delete_row(self, index: int) -> Matrix:
        """New (rows - 1) x cols matrix without row `index`."""
        row = check_index(index, self.rows, 'row')
        return Matrix._wrap(np.delete(self._data, row, axis=0))

    def delete_column(self, index: int) -> Matrix:
        """New rows x (cols - 1) matrix without column `index`."""
        col = check_index(index, self.cols, 'column')
        return Matrix._wrap(np.delete(self._data, col, axis=1))

    def minor(self, row: int, col: int) -> Matrix:
        """Submatrix with one row and one column removed."""
        # Both indices are checked before either deletion happens
        check_index(row, self.rows, 'row')
        check_index(col, self.cols, 'column')
        return self.delete_row(row).delete_column(col)

    # --- Determinant ---

    def det(self) -> np.generic:
        """
        Determinant by cofactor expansion along row 0.

        Requires a square matrix of at least 2 x 2. Returns a scalar of
        the matrix dtype. O(n!) time.
        """
        from pymatrices.determinants.backends.cofactor import cofactor_expansion

        check_square(self.shape, 2, 'det')
        value, _ = cofactor_expansion(self, stacklevel=3)
        return value

    # --- Formatting ---

    def to_string(self) -> str:
        """Header line 'rows x cols' followed by one '|a\\tb|' line per row."""
        return format_grid(self._data)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return format_repr(self._data)
