"""
Tests for delete_row, delete_column and minor.
"""

import numpy as np
import pytest

from pymatrices import Matrix
from pymatrices.core.exceptions import IndexOutOfRangeError


class TestDeleteRow:

    def test_2x2_examples(self, square_2x2):
        np.testing.assert_array_equal(square_2x2.delete_row(1).to_numpy(), [[3, 4]])
        np.testing.assert_array_equal(square_2x2.delete_column(0).to_numpy(), [[4], [6]])

    def test_middle_row(self, matrix_5x3):
        result = matrix_5x3.delete_row(2)
        assert result.shape == (4, 3)
        assert result.tolist() == [[1, 2, 3], [4, 5, 6], [10, 11, 12], [13, 14, 15]]

    def test_first_row(self, square_2x2):
        assert square_2x2.delete_row(0).tolist() == [[5, 6]]

    def test_last_row(self, matrix_5x3):
        assert matrix_5x3.delete_row(4).tolist()[-1] == [10, 11, 12]

    def test_source_unchanged(self, matrix_5x3):
        matrix_5x3.delete_row(0)
        assert matrix_5x3.shape == (5, 3)
        assert matrix_5x3[0, 0] == 1

    def test_keeps_dtype(self, matrix_5x3):
        assert matrix_5x3.delete_row(1).dtype == np.uint32

    def test_only_row_leaves_empty_matrix(self):
        result = Matrix([[1, 2, 3]], dtype=np.int32).delete_row(0)
        assert result.shape == (0, 3)
        assert str(result) == "0 x 3"

    def test_index_equal_to_rows(self, matrix_5x3):
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            matrix_5x3.delete_row(5)
        assert exc_info.value.axis == "row"
        assert exc_info.value.bound == 5
        assert matrix_5x3.shape == (5, 3)

    def test_negative_index(self, matrix_5x3):
        with pytest.raises(IndexOutOfRangeError):
            matrix_5x3.delete_row(-1)


class TestDeleteColumn:

    def test_middle_column(self, matrix_5x3):
        result = matrix_5x3.delete_column(1)
        assert result.shape == (5, 2)
        assert result.tolist() == [[1, 3], [4, 6], [7, 9], [10, 12], [13, 15]]

    def test_last_column(self, square_3x3):
        assert square_3x3.delete_column(2).tolist() == [[5, 3], [1, 15], [8, 9]]

    def test_source_unchanged(self, square_3x3):
        square_3x3.delete_column(0)
        assert square_3x3.shape == (3, 3)

    def test_index_equal_to_cols(self, matrix_5x3):
        with pytest.raises(IndexOutOfRangeError, match="column index 3") as exc_info:
            matrix_5x3.delete_column(3)
        assert exc_info.value.axis == "column"

    def test_row_bound_does_not_apply(self, matrix_5x3):
        # 4 is a valid row index but not a valid column index
        with pytest.raises(IndexOutOfRangeError):
            matrix_5x3.delete_column(4)


class TestMinor:

    def test_top_left(self, square_3x3):
        assert square_3x3.minor(0, 0).tolist() == [[15, 77], [9, 11]]

    def test_centre(self, square_3x3):
        assert square_3x3.minor(1, 1).tolist() == [[5, 8], [8, 11]]

    def test_matches_sequential_deletion(self, square_4x4):
        expected = square_4x4.delete_row(2).delete_column(1)
        assert square_4x4.minor(2, 1) == expected

    def test_rectangular(self, matrix_5x3):
        assert matrix_5x3.minor(0, 0).shape == (4, 2)

    def test_column_checked_before_any_deletion(self, square_2x2):
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            square_2x2.minor(1, 2)
        assert exc_info.value.axis == "column"
        assert exc_info.value.bound == 2
