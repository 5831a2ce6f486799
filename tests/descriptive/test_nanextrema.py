"""
Tests for nanmax / nanmin.
"""

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from statbox.descriptive import nanmax, nanmin


M = np.array([[1, np.nan, 3], [np.nan, 5, 6], [7, 8, np.nan]])


class TestNanmax:

    def test_vector(self):
        v, idx = nanmax([2, 4, np.nan, 7])
        assert v == 7
        assert idx == 3

    def test_infinity(self):
        v, _ = nanmax([2, 4, np.nan, np.inf])
        assert v == np.inf

    def test_matrix_columns(self):
        v, idx = nanmax(M)
        assert_array_equal(v, [7, 8, 6])
        assert_array_equal(idx, [2, 2, 1])

    def test_transposed(self):
        v, _ = nanmax(M.T)
        assert_array_equal(v, [3, 6, 8])

    def test_row_vector_reduces_along_columns(self):
        v, _ = nanmax(np.array([[1.0, np.nan, 4.0]]))
        assert_array_equal(v, [4.0])

    def test_explicit_axis(self):
        v, _ = nanmax(M, axis=1)
        assert_array_equal(v, [3, 6, 8])

    def test_single_precision(self):
        v, _ = nanmax(M.astype(np.float32))
        assert v.dtype == np.float32
        assert_array_equal(v, [7, 8, 6])

    def test_all_nan_slice(self):
        v, _ = nanmax(np.array([[np.nan, 1.0], [np.nan, 2.0]]))
        assert np.isnan(v[0])
        assert v[1] == 2.0

    def test_pairwise(self):
        v = nanmax([1, np.nan, 3, np.nan], [2, 2, np.nan, np.nan])
        assert_array_equal(v, [2, 2, 3, np.nan])


class TestNanmin:

    def test_vector(self):
        v, idx = nanmin([2, 4, np.nan, 7])
        assert v == 2
        assert idx == 0

    def test_infinity(self):
        v, _ = nanmin([2, 4, np.nan, np.inf])
        assert v == 2

    def test_matrix_columns(self):
        v, _ = nanmin(M)
        assert_array_equal(v, [1, 5, 3])

    def test_transposed(self):
        v, _ = nanmin(M.T)
        assert_array_equal(v, [1, 5, 7])

    def test_single_precision(self):
        v, _ = nanmin(M.astype(np.float32))
        assert v.dtype == np.float32
        assert_array_equal(v, [1, 5, 3])

    @pytest.mark.parametrize("x, y, expected", [
        ([1, np.nan], [0, 4], [0, 4]),
        ([np.nan], [np.nan], [np.nan]),
        ([5, 1], 3, [3, 1]),
    ])
    def test_pairwise(self, x, y, expected):
        assert_array_equal(nanmin(x, y), expected)
