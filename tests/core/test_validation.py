"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object and complex rejection
    - check_vector: row/column/1D acceptance, matrix rejection
    - check_scalar / check_probability_open / check_nonnegative_integer
    - common_size: scalar expansion and shape mismatch detection
"""

import numpy as np
import pytest

from statbox.core.exceptions import DimensionError, ValidationError
from statbox.core.validation import (
    check_array,
    check_nonnegative_integer,
    check_probability_open,
    check_real,
    check_scalar,
    check_vector,
    common_size,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to a real floating ndarray."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert isinstance(result, np.ndarray)
        assert np.issubdtype(result.dtype, np.floating)
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float32_preserved(self):
        result = check_array(np.array([1.0, 2.0], dtype=np.float32), "x")
        assert result.dtype == np.float32

    def test_complex_rejected(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([2, 3, 5, 7, 3 + 3j], "x")

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array(["a", "b"], "x")

    def test_mixed_types_rejected(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([1, "a", None], "x")

    def test_name_in_message(self):
        with pytest.raises(ValidationError, match="my_param"):
            check_array(["a"], "my_param")


class TestCheckReal:

    def test_real_passes(self):
        check_real(np.array([1.0, 2.0]), "x")

    def test_complex_raises(self):
        with pytest.raises(ValidationError):
            check_real(np.array([1 + 1j]), "x")


# ═══════════════════════════════════════════════════════════════════════
# check_vector
# ═══════════════════════════════════════════════════════════════════════


class TestCheckVector:

    @pytest.mark.parametrize("shape", [(5,), (1, 5), (5, 1), (1, 1, 5), ()])
    def test_vector_shapes_accepted(self, shape):
        arr = np.zeros(shape)
        assert check_vector(arr, "x").ndim == 1

    def test_matrix_rejected(self):
        with pytest.raises(DimensionError, match="vector"):
            check_vector(np.ones((2, 4)), "x")


# ═══════════════════════════════════════════════════════════════════════
# Scalar checks
# ═══════════════════════════════════════════════════════════════════════


class TestScalarChecks:

    def test_scalar_from_numpy(self):
        assert check_scalar(np.float64(0.5), "alpha") == 0.5
        assert check_scalar(np.array(0.25), "alpha") == 0.25

    @pytest.mark.parametrize("value", ["0.05", True, [0.1, 0.2], 1 + 2j])
    def test_scalar_rejects_non_numeric(self, value):
        with pytest.raises(ValidationError):
            check_scalar(value, "alpha")

    @pytest.mark.parametrize("value", [0, 1, -0.1, 1.5, np.nan])
    def test_probability_open_rejects(self, value):
        with pytest.raises(ValidationError, match="alpha"):
            check_probability_open(value, "alpha")

    def test_probability_open_accepts(self):
        assert check_probability_open(0.05, "alpha") == 0.05

    def test_nonnegative_integer(self):
        assert check_nonnegative_integer(3.0, "size") == 3
        with pytest.raises(ValidationError):
            check_nonnegative_integer(-1, "size")
        with pytest.raises(ValidationError):
            check_nonnegative_integer(2.5, "size")


# ═══════════════════════════════════════════════════════════════════════
# common_size
# ═══════════════════════════════════════════════════════════════════════


class TestCommonSize:

    def test_scalars_expand_to_array_shape(self):
        shape, (a, b, c) = common_size(
            np.array(4.0), np.ones((2, 3)), np.array([2.0]),
            names=("t", "m", "n"),
        )
        assert shape == (2, 3)
        assert a.shape == b.shape == c.shape == (2, 3)
        np.testing.assert_array_equal(a, 4.0)
        np.testing.assert_array_equal(c, 2.0)

    def test_all_scalars(self):
        shape, arrays = common_size(
            np.array(1.0), np.array(2.0), names=("a", "b"),
        )
        assert shape == ()
        assert all(a.shape == () for a in arrays)

    def test_mismatch_raises(self):
        with pytest.raises(DimensionError, match="common size") as exc_info:
            common_size(np.ones(2), np.ones(3), names=("t", "m"))
        assert exc_info.value.shapes == {"t": (2,), "m": (3,)}

    def test_row_and_column_do_not_broadcast(self):
        with pytest.raises(DimensionError):
            common_size(np.ones((1, 3)), np.ones((3, 1)), names=("a", "b"))

    def test_name_count_mismatch(self):
        with pytest.raises(ValueError):
            common_size(np.ones(2), names=("a", "b"))
