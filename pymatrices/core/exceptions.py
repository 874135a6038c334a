"""
Exception hierarchy for pymatrices.

All exceptions inherit from MatricesError to allow catching any
library-specific error. Every check that raises one of these runs before
a result matrix is allocated, so a failed operation never leaves a
partially built result behind.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class MatricesError(Exception):
    """Base exception for all pymatrices errors."""
    pass


class ValidationError(MatricesError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Base class for shape problems. Use the more specific subclasses
    when the failing operation is known.
    """
    pass


class ShapeMismatchError(DimensionError):
    """
    Operand shapes are incompatible for the requested operation.

    Raised by construction from a literal of the wrong shape, and by
    elementwise arithmetic, equality and multiplication between
    incompatible matrices.

    Attributes:
        expected: Shape (or inner dimension) the operation required
        actual: Shape (or inner dimension) that was supplied
        operation: Name of the failing operation
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | int | None = None,
        actual: tuple[int, ...] | int | None = None,
        operation: str | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
        self.operation = operation


class DegenerateShapeError(DimensionError):
    """
    Matrix shape is unsuitable for the requested operation.

    Raised when a determinant is requested for a non-square matrix or
    for a matrix smaller than 2 x 2.

    Attributes:
        shape: The offending (rows, cols) shape
        operation: Name of the failing operation
    """

    def __init__(
        self,
        message: str,
        shape: tuple[int, int] | None = None,
        operation: str | None = None
    ):
        super().__init__(message)
        self.shape = shape
        self.operation = operation


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Row or column index outside the matrix bounds.

    Indices are never clamped or wrapped; negative indices are rejected.

    Attributes:
        index: The index that was supplied
        bound: Exclusive upper bound for the axis
        axis: 'row' or 'column'
    """

    def __init__(
        self,
        message: str,
        index: object = None,
        bound: int | None = None,
        axis: str | None = None
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
        self.axis = axis


class ScalarTypeError(ValidationError, TypeError):
    """
    Scalar type is not a supported real arithmetic type, or two operands
    carry different scalar types.

    Attributes:
        dtype: The offending dtype (or description of it)
    """

    def __init__(self, message: str, dtype: object = None):
        super().__init__(message)
        self.dtype = dtype


class NumericalError(MatricesError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass
