"""
Numeric types under test.

Each NumericType describes one precision the harness exercises: how to
round an exact decimal reference value into it, how to convert its values
exactly into a high-precision mpmath number for error measurement, and its
machine epsilon, overflow and underflow thresholds.

Types:
    FLOAT        numpy float32 (IEEE single)
    DOUBLE       numpy float64 (IEEE double)
    LONG_DOUBLE  numpy longdouble (x87 extended, binary128 or plain double,
                 depending on the platform)
    MPF          mpmath mpf at a fixed binary precision, the
                 arbitrary-precision test type
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import mpmath
import numpy as np

from pyaccuracy.core.exceptions import ValidationError


# Working precision (bits) used to compare values of any type under test.
ERROR_PRECISION_BITS: int = 256

# Precision of the default arbitrary-precision test type.
MPF_DEFAULT_BITS: int = 64


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)


@dataclass(frozen=True)
class NumericType:
    """
    One precision under test.

    Attributes:
        name: Type label used in reports and tolerance lookup
        bits: Significand bits, including the implicit leading bit
        dtype: numpy scalar type, or None for mpmath-backed types
    """
    name: str
    bits: int
    dtype: type | None = None

    @property
    def is_native(self) -> bool:
        """True for numpy floating types."""
        return self.dtype is not None

    @property
    def epsilon(self) -> float:
        """Distance from 1 to the next larger representable value."""
        if self.dtype is not None:
            return machine_epsilon(self.dtype)
        return float(mpmath.ldexp(1, 1 - self.bits))

    @property
    def max_value(self) -> mpmath.mpf | None:
        """Largest finite value, or None when the exponent range is unbounded."""
        if self.dtype is None:
            return None
        return self.to_mpf(np.finfo(self.dtype).max)

    @property
    def min_normal(self) -> mpmath.mpf | None:
        """Smallest positive normal value, or None when unbounded."""
        if self.dtype is None:
            return None
        return self.to_mpf(np.finfo(self.dtype).smallest_normal)

    def from_string(self, text: str) -> Any:
        """
        Round an exact decimal string to this type.

        Values outside the exponent range become signed infinity or zero,
        the same as a literal of the type would.
        """
        if self.dtype is None:
            with mpmath.workprec(self.bits):
                return mpmath.mpf(text)
        if self.dtype is np.float64:
            return np.float64(float(text))
        if self.dtype is np.float32:
            # Round once, to 24 bits, before narrowing.
            with mpmath.workprec(self.bits):
                value = float(mpmath.mpf(text))
            with np.errstate(over='ignore', under='ignore'):
                return np.float32(value)
        with np.errstate(over='ignore', under='ignore'):
            return self.dtype(text)

    def cast(self, value: Any) -> Any:
        """Convert a result returned by a function adapter to this type."""
        if self.dtype is None:
            with mpmath.workprec(self.bits):
                return mpmath.mpf(value)
        if isinstance(value, mpmath.mpf):
            # Round once, to the significand width of the type.
            with mpmath.workprec(self.bits):
                value = +value
            if self.dtype is np.longdouble:
                return self._long_double_from_mpf(value)
            value = float(value)
        with np.errstate(over='ignore', under='ignore'):
            return self.dtype(value)

    def _long_double_from_mpf(self, value: mpmath.mpf) -> Any:
        # value already holds at most self.bits significand bits, so the
        # integer significand and the power of two are both exact.
        if mpmath.isnan(value):
            return self.dtype(np.nan)
        if mpmath.isinf(value):
            return self.dtype(np.inf if value > 0 else -np.inf)
        mant, exp = mpmath.frexp(value)
        scaled = int(mpmath.ldexp(mant, self.bits))
        shift = max(-20000, min(20000, int(exp) - self.bits))
        with np.errstate(over='ignore', under='ignore'):
            return np.ldexp(self.dtype(str(scaled)), shift)

    def to_mpf(self, value: Any) -> mpmath.mpf:
        """
        Exact conversion of a value of this type to mpmath.

        The conversion is done at ERROR_PRECISION_BITS so no bits of the
        significand are lost.
        """
        with mpmath.workprec(ERROR_PRECISION_BITS):
            if isinstance(value, mpmath.mpf):
                return +value
            if self.dtype is np.longdouble and np.isfinite(value):
                mant, exp = np.frexp(value)
                scaled = int(np.ldexp(mant, self.bits))
                return mpmath.ldexp(mpmath.mpf(scaled), int(exp) - self.bits)
            return mpmath.mpf(float(value))

    def is_nan(self, value: Any) -> bool:
        if isinstance(value, mpmath.mpf):
            return bool(mpmath.isnan(value))
        return bool(np.isnan(value))

    def is_inf(self, value: Any) -> bool:
        if isinstance(value, mpmath.mpf):
            return bool(mpmath.isinf(value))
        return bool(np.isinf(value))

    def __str__(self) -> str:
        return self.name


FLOAT = NumericType(name='float', bits=24, dtype=np.float32)
DOUBLE = NumericType(name='double', bits=53, dtype=np.float64)
LONG_DOUBLE = NumericType(
    name='long double',
    bits=int(np.finfo(np.longdouble).nmant) + 1,
    dtype=np.longdouble,
)


def mpf_type(bits: int = MPF_DEFAULT_BITS) -> NumericType:
    """
    Arbitrary-precision test type at the given binary precision.

    Raises:
        ValidationError: If bits is not a positive integer
    """
    if not isinstance(bits, int) or isinstance(bits, bool) or bits < 2:
        raise ValidationError(f"bits: must be an integer >= 2, got {bits!r}")
    return NumericType(name='mpf', bits=bits)


MPF = mpf_type()

NUMERIC_TYPES: dict[str, NumericType] = {
    t.name: t for t in (FLOAT, DOUBLE, LONG_DOUBLE, MPF)
}


def get_numeric_type(name: str | NumericType) -> NumericType:
    """
    Look up a numeric type by name.

    Raises:
        ValidationError: If the name is unknown
    """
    if isinstance(name, NumericType):
        return name
    try:
        return NUMERIC_TYPES[name]
    except KeyError:
        raise ValidationError(
            f"Unknown numeric type: {name!r}. "
            f"Use one of {sorted(NUMERIC_TYPES)}."
        ) from None


def long_double_is_double() -> bool:
    """True when long double has no more precision than double."""
    return LONG_DOUBLE.bits == DOUBLE.bits


def largest_type_pattern() -> str:
    """
    Pattern matching the widest native type name.

    When long double is no wider than double, both names describe the
    same arithmetic and share one tolerance.
    """
    if long_double_is_double():
        return r"(long\s+)?double"
    return "long double"
