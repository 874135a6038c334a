"""
Tests for pymatrices exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via MatricesError)
    - IndexOutOfRangeError is also an IndexError, ScalarTypeError a TypeError
    - Diagnostic attributes on ShapeMismatchError, DegenerateShapeError,
      IndexOutOfRangeError, ScalarTypeError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pymatrices.core.exceptions import (
    DegenerateShapeError,
    DimensionError,
    IndexOutOfRangeError,
    MatricesError,
    NumericalError,
    ScalarTypeError,
    ShapeMismatchError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via MatricesError."""

    def test_validation_error_is_matrices_error(self):
        with pytest.raises(MatricesError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_shape_mismatch_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise ShapeMismatchError("2 x 2 vs 3 x 3")

    def test_degenerate_shape_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise DegenerateShapeError("1 x 1")

    def test_index_out_of_range_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise IndexOutOfRangeError("row 5")

    def test_index_out_of_range_is_index_error(self):
        with pytest.raises(IndexError):
            raise IndexOutOfRangeError("row 5")

    def test_scalar_type_error_is_type_error(self):
        with pytest.raises(TypeError):
            raise ScalarTypeError("complex")

    def test_scalar_type_error_is_matrices_error(self):
        with pytest.raises(MatricesError):
            raise ScalarTypeError("complex")

    def test_numerical_error_is_matrices_error(self):
        with pytest.raises(MatricesError):
            raise NumericalError("non-finite")

    def test_numerical_error_is_not_validation_error(self):
        err = NumericalError("non-finite")
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Simple exceptions (no extra attributes)
# ═══════════════════════════════════════════════════════════════════════


class TestSimpleExceptions:
    """MatricesError, ValidationError, DimensionError, NumericalError carry only a message."""

    def test_matrices_error_message(self):
        err = MatricesError("base error")
        assert str(err) == "base error"

    def test_validation_error_message(self):
        err = ValidationError("data: cannot convert to array")
        assert "cannot convert" in str(err)

    def test_dimension_error_message(self):
        err = DimensionError("data: expected 2D array, got 3D")
        assert "expected 2D" in str(err)

    def test_numerical_error_message(self):
        err = NumericalError("overflow in computation")
        assert "overflow" in str(err)


# ═══════════════════════════════════════════════════════════════════════
# ShapeMismatchError
# ═══════════════════════════════════════════════════════════════════════


class TestShapeMismatchError:
    """ShapeMismatchError carries expected/actual shapes and the operation."""

    def test_all_attributes(self):
        err = ShapeMismatchError(
            "add: operand shapes differ",
            expected=(2, 2),
            actual=(3, 2),
            operation="add",
        )
        assert str(err) == "add: operand shapes differ"
        assert err.expected == (2, 2)
        assert err.actual == (3, 2)
        assert err.operation == "add"

    def test_defaults_are_none(self):
        err = ShapeMismatchError("mismatch")
        assert err.expected is None
        assert err.actual is None
        assert err.operation is None

    def test_inner_dimension_as_int(self):
        err = ShapeMismatchError("inner", expected=3, actual=2, operation="multiply")
        assert err.expected == 3
        assert err.actual == 2

    def test_catchable_with_attributes(self):
        with pytest.raises(ShapeMismatchError) as exc_info:
            raise ShapeMismatchError("bad", expected=(1, 2), operation="construct")
        assert exc_info.value.expected == (1, 2)
        assert exc_info.value.operation == "construct"


# ═══════════════════════════════════════════════════════════════════════
# DegenerateShapeError
# ═══════════════════════════════════════════════════════════════════════


class TestDegenerateShapeError:
    """DegenerateShapeError carries the offending shape."""

    def test_all_attributes(self):
        err = DegenerateShapeError("det: not square", shape=(2, 3), operation="det")
        assert err.shape == (2, 3)
        assert err.operation == "det"

    def test_defaults_are_none(self):
        err = DegenerateShapeError("degenerate")
        assert err.shape is None
        assert err.operation is None


# ═══════════════════════════════════════════════════════════════════════
# IndexOutOfRangeError / ScalarTypeError
# ═══════════════════════════════════════════════════════════════════════


class TestIndexOutOfRangeError:
    """IndexOutOfRangeError carries index, bound and axis."""

    def test_all_attributes(self):
        err = IndexOutOfRangeError("row index 2 out of range", index=2, bound=2, axis="row")
        assert err.index == 2
        assert err.bound == 2
        assert err.axis == "row"

    def test_defaults_are_none(self):
        err = IndexOutOfRangeError("out of range")
        assert err.index is None
        assert err.bound is None
        assert err.axis is None


class TestScalarTypeError:
    """ScalarTypeError carries the offending dtype."""

    def test_dtype_attribute(self):
        err = ScalarTypeError("unsupported", dtype="complex128")
        assert err.dtype == "complex128"

    def test_default_is_none(self):
        assert ScalarTypeError("unsupported").dtype is None
