"""
Tests for the statbox exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via StatboxError)
    - Usage errors and numeric infeasibility are distinct branches
    - Diagnostic attributes on DimensionError and InterpolationRangeError
"""

import pytest

from statbox.core.exceptions import (
    DimensionError,
    InterpolationRangeError,
    NumericalError,
    StatboxError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via StatboxError."""

    def test_validation_error_is_statbox_error(self):
        with pytest.raises(StatboxError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_numerical_error_is_statbox_error(self):
        with pytest.raises(StatboxError):
            raise NumericalError("computation failed")

    def test_interpolation_range_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise InterpolationRangeError("table too narrow")

    def test_interpolation_range_error_is_not_validation_error(self):
        """Numeric infeasibility is a separate class from usage errors."""
        err = InterpolationRangeError("table too narrow")
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Attributes
# ═══════════════════════════════════════════════════════════════════════


class TestDimensionError:

    def test_shapes_attribute(self):
        err = DimensionError("t, m must be of common size", shapes={"t": (2,), "m": (3,)})
        assert err.shapes == {"t": (2,), "m": (3,)}
        assert "common size" in str(err)

    def test_shapes_default_none(self):
        assert DimensionError("wrong shape").shapes is None


class TestInterpolationRangeError:

    def test_all_attributes(self):
        err = InterpolationRangeError(
            "CDF: table does not span observations",
            table_range=(0.0, 1.0),
            data_range=(-0.5, 0.9),
        )
        assert str(err) == "CDF: table does not span observations"
        assert err.table_range == (0.0, 1.0)
        assert err.data_range == (-0.5, 0.9)

    def test_defaults_are_none(self):
        err = InterpolationRangeError("too narrow")
        assert err.table_range is None
        assert err.data_range is None
