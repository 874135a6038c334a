"""
Determinant module.

Cofactor expansion is the reference algorithm; LU elimination is an
optional fast path selected with method='elimination'.

Public API:
    det(A)                       - determinant as a scalar (cofactor)
    determinant(A, method=...)   - full solution with timing and diagnostics
"""

from pymatrices.determinants.design import DeterminantDesign
from pymatrices.determinants.solution import DeterminantParams, DeterminantSolution
from pymatrices.determinants.solvers import det, determinant

__all__ = [
    "det",
    "determinant",
    "DeterminantDesign",
    "DeterminantParams",
    "DeterminantSolution",
]
