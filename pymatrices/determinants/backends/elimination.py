"""
LU elimination backend: O(n^3) determinant via LAPACK.

Factorises P A = L U with scipy.linalg.lu_factor in float64 and takes

    det(A) = (-1)^swaps * prod(diag(U))

This is an optional fast path. The cofactor backend remains the
reference; for integer matrices whose determinant magnitude stays below
2**53 the two agree exactly, for floating matrices within the dtype's
tolerance tier.
"""

from __future__ import annotations

import warnings
import numpy as np
from scipy.linalg import LinAlgWarning, lu_factor

from pymatrices.core.compute.timing import Timer
from pymatrices.core.exceptions import NumericalError
from pymatrices.core.result import Result
from pymatrices.determinants.design import DeterminantDesign
from pymatrices.determinants.solution import DeterminantParams
from pymatrices.matrix._scalar import to_scalar


# float64 represents every integer up to this magnitude exactly
EXACT_INTEGER_LIMIT = 2 ** 53


def _to_dtype(raw: float, dtype: np.dtype) -> tuple[np.generic, str | None]:
    """
    Convert a float64 determinant to the matrix dtype.

    Integer dtypes get the nearest integer, wrapped modulo 2**bits the same
    way the cofactor backend's native arithmetic wraps.
    """
    if not np.isfinite(raw):
        raise NumericalError(f"Elimination produced a non-finite determinant ({raw})")

    if not np.issubdtype(dtype, np.integer):
        return dtype.type(raw), None

    rounded = round(raw)
    note = None
    if abs(rounded) > EXACT_INTEGER_LIMIT:
        note = (
            f"Determinant magnitude {abs(rounded):.3e} exceeds 2**53; "
            f"the integer result may be inexact"
        )
    return to_scalar(rounded, dtype, 'determinant'), note


class EliminationBackend:
    """Fast path: partial-pivoting LU factorisation in float64."""

    @property
    def name(self) -> str:
        return 'lu_elimination'

    def solve(self, design: DeterminantDesign) -> Result[DeterminantParams]:
        """
        Compute the determinant from an LU factorisation.

        Args:
            design: Validated determinant design

        Returns:
            Result containing DeterminantParams; info records the number of
            row swaps. A precision note is recorded in Result.warnings,
            not emitted.

        Raises:
            NumericalError: If the matrix holds NaN/Inf or the product
                overflows float64
        """
        timer = Timer()
        timer.start()

        warnings_list: list[str] = []
        a = design.matrix.to_numpy().astype(np.float64)

        with timer.section('factorization'):
            try:
                with warnings.catch_warnings():
                    # Exactly singular input is a valid zero determinant
                    warnings.simplefilter('ignore', LinAlgWarning)
                    lu, piv = lu_factor(a, check_finite=True)
            except ValueError as e:
                raise NumericalError(f"LU factorization failed: {e}") from e

        with timer.section('diagonal_product'):
            swaps = int(np.count_nonzero(piv != np.arange(piv.size)))
            with np.errstate(over='ignore', under='ignore'):
                raw = float(np.prod(np.diag(lu)))
            if swaps % 2 == 1:
                raw = -raw

        with timer.section('conversion'):
            value, note = _to_dtype(raw, design.dtype)

        if note is not None:
            warnings_list.append(note)

        timer.stop()

        return Result(
            params=DeterminantParams(value=value),
            info={
                'method': 'elimination',
                'n': design.n,
                'dtype': design.dtype.name,
                'row_swaps': swaps,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
