"""
Tests for numeric types under test.

Validates:
    - Epsilon, overflow and underflow thresholds per type
    - Rounding of exact decimals into each type
    - Exact conversion to mpmath
    - Name lookup and the widest-type tolerance pattern
"""

import re

import mpmath
import numpy as np
import pytest

from pyaccuracy.core.exceptions import ValidationError
from pyaccuracy.core.precision import (
    DOUBLE,
    FLOAT,
    LONG_DOUBLE,
    MPF,
    NUMERIC_TYPES,
    get_numeric_type,
    largest_type_pattern,
    long_double_is_double,
    machine_epsilon,
    mpf_type,
)


# ═══════════════════════════════════════════════════════════════════════
# Type properties
# ═══════════════════════════════════════════════════════════════════════


class TestTypeProperties:
    """Epsilon and range of each type."""

    def test_epsilons(self):
        assert FLOAT.epsilon == 2.0 ** -23
        assert DOUBLE.epsilon == 2.0 ** -52
        assert MPF.epsilon == 2.0 ** -63

    def test_long_double_epsilon_matches_bits(self):
        assert LONG_DOUBLE.epsilon == 2.0 ** (1 - LONG_DOUBLE.bits)

    def test_machine_epsilon(self):
        assert machine_epsilon(np.float32) == FLOAT.epsilon

    def test_native_flags(self):
        assert FLOAT.is_native and DOUBLE.is_native and LONG_DOUBLE.is_native
        assert not MPF.is_native

    def test_mpf_unbounded(self):
        assert MPF.max_value is None
        assert MPF.min_normal is None

    def test_double_limits(self):
        assert DOUBLE.max_value == mpmath.mpf(np.finfo(np.float64).max)
        assert DOUBLE.min_normal == mpmath.mpf(np.finfo(np.float64).smallest_normal)

    def test_str_is_name(self):
        assert str(LONG_DOUBLE) == "long double"


# ═══════════════════════════════════════════════════════════════════════
# from_string / cast
# ═══════════════════════════════════════════════════════════════════════


class TestFromString:
    """Rounding decimals and adapter results into each type."""

    def test_float_rounds_once(self):
        value = FLOAT.from_string("0.1")
        assert isinstance(value, np.float32)
        assert value == np.float32(0.1)

    def test_float_overflow_is_inf(self):
        assert np.isinf(FLOAT.from_string("1.07375170713107382351972085760349466128840319332527279540154e42"))

    def test_float_underflow_is_zero(self):
        assert FLOAT.from_string("1e-60") == 0

    def test_double(self):
        text = "1.26606587775200833559824462521471753760767031135496220680814"
        value = DOUBLE.from_string(text)
        assert isinstance(value, np.float64)
        assert value == float(text)

    def test_long_double(self):
        value = LONG_DOUBLE.from_string("0.5")
        assert isinstance(value, np.longdouble)
        assert value == np.longdouble(0.5)

    def test_mpf_uses_type_precision(self):
        value = MPF.from_string("0.1")
        with mpmath.workprec(64):
            assert value == mpmath.mpf("0.1")
        assert value != mpmath.mpf(0.1)

    def test_cast_mpf_to_double(self):
        value = DOUBLE.cast(mpmath.mpf(2))
        assert isinstance(value, np.float64)
        assert value == 2.0

    def test_cast_to_mpf(self):
        assert MPF.cast(3) == mpmath.mpf(3)

    def test_cast_mpf_to_long_double_rounds_once(self):
        with mpmath.workprec(256):
            third = mpmath.mpf(1) / 3
        value = LONG_DOUBLE.cast(third)
        assert isinstance(value, np.longdouble)
        assert value == np.longdouble(1) / np.longdouble(3)

    def test_cast_mpf_to_long_double_keeps_all_bits(self):
        with mpmath.workprec(LONG_DOUBLE.bits):
            seventh = mpmath.mpf(1) / 7
        assert LONG_DOUBLE.to_mpf(LONG_DOUBLE.cast(seventh)) == seventh

    def test_cast_mpf_infinity_to_long_double(self):
        assert np.isposinf(LONG_DOUBLE.cast(mpmath.mpf("inf")))
        assert np.isneginf(LONG_DOUBLE.cast(mpmath.mpf("-inf")))
        assert np.isnan(LONG_DOUBLE.cast(mpmath.mpf("nan")))

    def test_cast_mpf_to_float_rounds_once(self):
        with mpmath.workprec(256):
            tenth = mpmath.mpf(1) / 10
        assert FLOAT.cast(tenth) == np.float32(0.1)


# ═══════════════════════════════════════════════════════════════════════
# to_mpf
# ═══════════════════════════════════════════════════════════════════════


class TestToMpf:
    """Exact conversion to mpmath."""

    def test_double_exact(self):
        assert DOUBLE.to_mpf(np.float64(0.1)) == mpmath.mpf(0.1)

    def test_float_exact(self):
        assert FLOAT.to_mpf(np.float32(0.1)) == mpmath.mpf(float(np.float32(0.1)))

    def test_long_double_exact(self):
        assert LONG_DOUBLE.to_mpf(np.longdouble(0.75)) == mpmath.mpf(0.75)

    def test_long_double_keeps_extra_bits(self):
        third = np.longdouble(1) / np.longdouble(3)
        with mpmath.workprec(LONG_DOUBLE.bits):
            expected = mpmath.mpf(1) / 3
        assert LONG_DOUBLE.to_mpf(third) == expected

    def test_infinity(self):
        assert mpmath.isinf(DOUBLE.to_mpf(np.float64(np.inf)))

    def test_nan_and_inf_predicates(self):
        assert DOUBLE.is_nan(np.float64(np.nan))
        assert MPF.is_nan(mpmath.mpf("nan"))
        assert FLOAT.is_inf(np.float32(np.inf))
        assert not MPF.is_inf(mpmath.mpf(1))


# ═══════════════════════════════════════════════════════════════════════
# Lookup
# ═══════════════════════════════════════════════════════════════════════


class TestLookup:
    """Numeric type lookup by name."""

    @pytest.mark.parametrize("name", ["float", "double", "long double", "mpf"])
    def test_known_names(self, name):
        assert get_numeric_type(name) is NUMERIC_TYPES[name]

    def test_passthrough(self):
        assert get_numeric_type(FLOAT) is FLOAT

    def test_unknown_name(self):
        with pytest.raises(ValidationError, match="Unknown numeric type"):
            get_numeric_type("quad")

    def test_mpf_type_bits(self):
        t = mpf_type(100)
        assert t.name == "mpf"
        assert t.epsilon == 2.0 ** -99

    @pytest.mark.parametrize("bits", [0, 1, True, 64.0])
    def test_mpf_type_invalid(self, bits):
        with pytest.raises(ValidationError):
            mpf_type(bits)


class TestLargestTypePattern:
    """Pattern naming the widest native type."""

    def test_matches_long_double(self):
        assert re.fullmatch(largest_type_pattern(), "long double")

    def test_double_only_when_same_precision(self):
        matched = re.fullmatch(largest_type_pattern(), "double") is not None
        assert matched == long_double_is_double()

    def test_never_matches_float(self):
        assert re.fullmatch(largest_type_pattern(), "float") is None
