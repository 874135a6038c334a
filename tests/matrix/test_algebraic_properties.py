"""
Algebraic identities that hold for every shape-compatible input.
"""

import numpy as np
import pytest

from pymatrices import Matrix


@pytest.fixture
def operands(rng):
    """Three int64 matrices: 2 x 3, 3 x 4, 4 x 2."""
    a = Matrix(rng.integers(-50, 50, size=(2, 3)), dtype=np.int64)
    b = Matrix(rng.integers(-50, 50, size=(3, 4)), dtype=np.int64)
    c = Matrix(rng.integers(-50, 50, size=(4, 2)), dtype=np.int64)
    return a, b, c


class TestElementwiseIdentities:

    def test_add_then_subtract_roundtrip(self, square_3x3):
        other = Matrix([[1, -2, 3], [0, 0, 9], [-4, 5, 6]], dtype=np.int32)
        assert (square_3x3 + other) - other == square_3x3

    def test_unsigned_roundtrip_through_wraparound(self):
        a = Matrix([[0, 1]], dtype=np.uint32)
        b = Matrix([[3, 7]], dtype=np.uint32)
        assert (a - b) + b == a

    def test_scalar_commutes(self, matrix_5x3):
        assert 7 * matrix_5x3 == matrix_5x3 * 7

    def test_scale_distributes_over_add(self, square_2x2):
        other = Matrix([[1, 0], [2, -1]], dtype=np.int32)
        assert (square_2x2 + other).scale(3) == square_2x2.scale(3) + other.scale(3)


class TestProductIdentities:

    def test_associative(self, operands):
        a, b, c = operands
        np.testing.assert_array_equal(
            ((a * b) * c).to_numpy(),
            (a * (b * c)).to_numpy(),
        )

    def test_matches_numpy(self, operands):
        a, b, _ = operands
        np.testing.assert_array_equal((a * b).to_numpy(), a.to_numpy() @ b.to_numpy())

    def test_distributes_over_add(self, operands):
        a, b, _ = operands
        assert a * (b + b) == a * b + a * b


class TestEqualityRelation:

    def test_transitive(self):
        a = Matrix([[1, 2], [3, 4]], dtype=np.int32)
        b = a.copy()
        c = Matrix(b)
        assert a == b and b == c
        assert a == c

    def test_exact_for_floats(self):
        a = Matrix([[0.1 + 0.2]])
        b = Matrix([[0.3]])
        assert a != b
        assert a.allclose(b)
