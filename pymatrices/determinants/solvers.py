"""
Solver dispatch for determinants.

Provides determinant() as the pipeline entry point and det() as the
scalar shortcut.
"""

from __future__ import annotations

import warnings
from typing import Any, Literal
import numpy as np

from pymatrices.core.exceptions import ValidationError
from pymatrices.determinants.design import DeterminantDesign
from pymatrices.determinants.solution import DeterminantSolution
from pymatrices.determinants.backends.cofactor import CofactorBackend, cofactor_expansion
from pymatrices.determinants.backends.elimination import EliminationBackend
from pymatrices.matrix.matrix import Matrix


MethodChoice = Literal['cofactor', 'elimination']


def _ensure_design(data: Any) -> DeterminantDesign:
    """Convert a Matrix or raw literal to DeterminantDesign if needed."""
    if isinstance(data, DeterminantDesign):
        return data
    if isinstance(data, Matrix):
        return DeterminantDesign.from_matrix(data)
    return DeterminantDesign.from_array(data)


def _get_backend(method: MethodChoice):
    """Select backend based on method."""
    if method == 'cofactor':
        return CofactorBackend()

    if method == 'elimination':
        return EliminationBackend()

    raise ValidationError(f"Unknown method: {method!r}")


def determinant(
    data: Matrix | DeterminantDesign | Any,
    *,
    method: MethodChoice = 'cofactor',
) -> DeterminantSolution:
    """
    Compute the determinant of a square matrix.

    Parameters
    ----------
    data : Matrix, DeterminantDesign or array-like
        Square matrix, at least 2 x 2.
    method : str
        'cofactor' (default): recursive expansion along row 0 in the
        matrix dtype. Exact for integers (modulo wraparound), O(n!).
        'elimination': LU factorisation in float64, O(n^3).

    Returns
    -------
    DeterminantSolution with the value, timing and diagnostics.

    Raises
    ------
    DegenerateShapeError
        If the matrix is non-square or smaller than 2 x 2.
    ValidationError
        If method is unknown.
    """
    be = _get_backend(method)
    design = _ensure_design(data)
    result = be.solve(design)
    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)
    return DeterminantSolution(_result=result, _design=design)


def det(data: Matrix | Any) -> np.generic:
    """
    Determinant by cofactor expansion, as a scalar of the matrix dtype.

    Accepts a Matrix or a square array-like literal.
    """
    design = _ensure_design(data)
    value, _ = cofactor_expansion(design.matrix, stacklevel=3)
    return value
