"""
Core infrastructure for pymatrices.

This module provides shared abstractions and utilities used by the matrix
type and the determinant pipeline.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from pymatrices.core.protocols import Backend
from pymatrices.core.result import Result
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

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
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
