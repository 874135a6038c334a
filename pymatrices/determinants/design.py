"""
DeterminantDesign: validated input for the determinant pipeline.

Wraps a square Matrix of at least 2 x 2. Validation happens once, here;
backends trust the design.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import DTypeLike

from pymatrices.core.validation import check_square
from pymatrices.matrix.matrix import Matrix


@dataclass(frozen=True)
class DeterminantDesign:
    """
    Design for determinant computation.

    Immutable after construction. The wrapped matrix is a private copy, so
    later element writes on the caller's matrix do not leak in.

    Construction:
        DeterminantDesign.from_matrix(matrix)
        DeterminantDesign.from_array([[3, 4], [5, 6]], dtype=np.int32)
    """
    _matrix: Matrix
    _n: int

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> DeterminantDesign:
        """Build from an existing Matrix (copied)."""
        return cls._build(matrix.copy())

    @classmethod
    def from_array(cls, data: Any, dtype: DTypeLike | None = None) -> DeterminantDesign:
        """
        Build from a row-major literal.

        Parameters
        ----------
        data : nested sequence or 2D ndarray
            Square matrix literal.
        dtype : dtype-like, optional
            Scalar type, inferred from the literal when omitted.
        """
        return cls._build(Matrix(data, dtype=dtype))

    @classmethod
    def _build(cls, matrix: Matrix) -> DeterminantDesign:
        """Internal builder with validation."""
        n = check_square(matrix.shape, 2, 'determinant')
        return cls(_matrix=matrix, _n=n)

    @property
    def matrix(self) -> Matrix:
        """Square input matrix (n x n)."""
        return self._matrix

    @property
    def n(self) -> int:
        """Side length."""
        return self._n

    @property
    def dtype(self) -> np.dtype:
        """Scalar type of the matrix and of the determinant."""
        return self._matrix.dtype

    def __repr__(self) -> str:
        return f"DeterminantDesign(n={self._n}, dtype={self.dtype.name})"
