"""
Tests for PyAccuracy exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyAccuracyError)
    - Diagnostic attributes on InvocationError and ToleranceExceededError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pyaccuracy.core.exceptions import (
    DimensionError,
    InvocationError,
    NumericalError,
    PyAccuracyError,
    ToleranceExceededError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyAccuracyError."""

    def test_validation_error_is_pyaccuracy_error(self):
        with pytest.raises(PyAccuracyError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong arity")

    def test_invocation_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise InvocationError("complex result")

    def test_invocation_error_is_arithmetic_free(self):
        """InvocationError is a library error, not a builtin ArithmeticError."""
        assert not issubclass(InvocationError, ArithmeticError)

    def test_tolerance_exceeded_is_not_numerical_error(self):
        err = ToleranceExceededError(
            "too large", "f", "double", "data", 3.0, 2.0, 1.0, 1.0,
        )
        assert isinstance(err, PyAccuracyError)
        assert not isinstance(err, NumericalError)


# ═══════════════════════════════════════════════════════════════════════
# InvocationError
# ═══════════════════════════════════════════════════════════════════════


class TestInvocationError:
    """InvocationError records the failing call."""

    def test_all_attributes(self):
        err = InvocationError(
            "I_v(x) is complex",
            function_name="mpmath.besseli",
            inputs=(2.5, -1.0),
        )
        assert str(err) == "I_v(x) is complex"
        assert err.function_name == "mpmath.besseli"
        assert err.inputs == (2.5, -1.0)

    def test_defaults_are_none(self):
        err = InvocationError("failed")
        assert err.function_name is None
        assert err.inputs is None


# ═══════════════════════════════════════════════════════════════════════
# ToleranceExceededError
# ═══════════════════════════════════════════════════════════════════════


class TestToleranceExceededError:
    """ToleranceExceededError carries observed and allowed errors."""

    def test_all_attributes(self):
        err = ToleranceExceededError(
            "Peak error 20 eps greater than expected value of 15 eps",
            function_name="cyl_bessel_i",
            type_name="double",
            dataset_name="Bessel Iv: Mathworld Data",
            peak=20.0,
            rms=3.0,
            max_peak=15.0,
            max_rms=10.0,
        )
        assert "Peak error" in str(err)
        assert err.function_name == "cyl_bessel_i"
        assert err.type_name == "double"
        assert err.dataset_name == "Bessel Iv: Mathworld Data"
        assert err.peak == 20.0
        assert err.rms == 3.0
        assert err.max_peak == 15.0
        assert err.max_rms == 10.0

    def test_catchable_with_attributes(self):
        with pytest.raises(ToleranceExceededError) as exc_info:
            raise ToleranceExceededError(
                "too large", "f", "float", "d", 5.0, 1.0, 1.0, 1.0,
            )
        assert exc_info.value.peak == 5.0
