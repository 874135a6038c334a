"""
Cofactor-expansion backend: the reference determinant.

Expands along row 0:

    det(A) = sum_n sign(n) * A[0, n] * det(minor(A, 0, n))

with sign(n) = +1 for even n and -1 for odd n, down to the 2 x 2 base
case a00*a11 - a10*a01. Arithmetic stays in the matrix dtype throughout,
so integer results are exact modulo wraparound. Time is O(n!).
"""

from __future__ import annotations

import warnings
import numpy as np

from pymatrices.core.compute.timing import Timer
from pymatrices.core.result import Result
from pymatrices.core.validation import check_square
from pymatrices.determinants.design import DeterminantDesign
from pymatrices.determinants.solution import DeterminantParams
from pymatrices.matrix._scalar import zero
from pymatrices.matrix.matrix import Matrix


# Expansion of an n x n matrix visits n!/2 base cases; 9! / 2 = 181440
FACTORIAL_WARNING_SIZE = 9


def factorial_cost_message(n: int) -> str | None:
    """Warning text for sizes where the O(n!) expansion gets slow, else None."""
    if n < FACTORIAL_WARNING_SIZE:
        return None
    return (
        f"Cofactor expansion of a {n} x {n} matrix is O(n!); "
        f"consider method='elimination'"
    )


def cofactor_expansion(
    matrix: Matrix,
    *,
    stacklevel: int = 2,
) -> tuple[np.generic, int]:
    """
    Determinant of a square matrix (n >= 2) by cofactor expansion.

    Integer overflow wraps silently, as the dtype's native arithmetic does.
    Callers inside the library pass a larger stacklevel so the O(n!) cost
    warning points at user code.

    Returns:
        (determinant as a scalar of the matrix dtype, number of 2 x 2 base
        cases evaluated)

    Raises:
        DegenerateShapeError: If matrix is non-square or smaller than 2 x 2
    """
    n = check_square(matrix.shape, 2, 'det')

    message = factorial_cost_message(n)
    if message is not None:
        warnings.warn(message, RuntimeWarning, stacklevel=stacklevel)

    return _expand_in_dtype(matrix)


def _expand_in_dtype(matrix: Matrix) -> tuple[np.generic, int]:
    with np.errstate(over='ignore'):
        return _expand(matrix)


def _expand(matrix: Matrix) -> tuple[np.generic, int]:
    if matrix.rows == 2:
        value = matrix[0, 0] * matrix[1, 1] - matrix[1, 0] * matrix[0, 1]
        return value, 1

    without_top = matrix.delete_row(0)
    total = zero(matrix.dtype)
    base_cases = 0
    for n in range(matrix.cols):
        sub_det, count = _expand(without_top.delete_column(n))
        base_cases += count
        term = matrix[0, n] * sub_det
        # Odd columns subtract rather than multiply by -1, which an
        # unsigned dtype cannot represent
        if n % 2 == 0:
            total = total + term
        else:
            total = total - term
    return total, base_cases


class CofactorBackend:
    """Reference backend: recursive cofactor expansion in the matrix dtype."""

    @property
    def name(self) -> str:
        return 'cofactor'

    def solve(self, design: DeterminantDesign) -> Result[DeterminantParams]:
        """
        Compute the determinant by cofactor expansion.

        Args:
            design: Validated determinant design

        Returns:
            Result containing DeterminantParams; info records the number
            of 2 x 2 base cases evaluated. The O(n!) cost note is recorded
            in Result.warnings, not emitted.
        """
        timer = Timer()
        timer.start()

        warnings_list: list[str] = []
        message = factorial_cost_message(design.n)
        if message is not None:
            warnings_list.append(message)

        with timer.section('expansion'):
            value, base_cases = _expand_in_dtype(design.matrix)

        timer.stop()

        return Result(
            params=DeterminantParams(value=value),
            info={
                'method': 'cofactor',
                'n': design.n,
                'dtype': design.dtype.name,
                'base_cases': base_cases,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
