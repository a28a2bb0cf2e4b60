"""
Relative error of a computed value against its reference.

Errors are measured in mpmath at ERROR_PRECISION_BITS after exact
conversion of both values, then expressed in epsilons of the numeric type
under test.

Rules, applied in order:
    1. Infinities are clamped to the largest finite value of the type,
       keeping their sign. Overflowed results stay comparable and a
       correct overflow scores 0.
    2. If both magnitudes are below the smallest normal value, the error
       is 0. Denormal accuracy is not measured.
    3. If the reference is exactly 0, the absolute error |computed| is used.
    4. Otherwise |computed - expected| / |expected|.
"""

from __future__ import annotations

import sys
from typing import Any

import mpmath

from pyaccuracy.core.exceptions import NumericalError
from pyaccuracy.core.precision import NumericType, ERROR_PRECISION_BITS


def _clamp(value: mpmath.mpf, limit: mpmath.mpf | None) -> mpmath.mpf:
    if limit is None or not mpmath.isinf(value):
        return value
    return limit if value > 0 else -limit


def relative_error(computed: Any, expected: Any, ntype: NumericType) -> float:
    """
    Relative error in epsilons of ntype.

    Args:
        computed: Value returned by the function under test
        expected: Reference value, already rounded to ntype
        ntype: Numeric type both values belong to

    Returns:
        Non-negative error. Finite whenever the reference is non-zero and
        the type has a bounded exponent range.

    Raises:
        NumericalError: If either value is NaN
    """
    a = ntype.to_mpf(computed)
    b = ntype.to_mpf(expected)
    if mpmath.isnan(a) or mpmath.isnan(b):
        raise NumericalError(
            f"cannot measure error of NaN (computed={computed}, expected={expected})"
        )

    with mpmath.workprec(ERROR_PRECISION_BITS):
        limit = ntype.max_value
        a = _clamp(a, limit)
        b = _clamp(b, limit)

        if mpmath.isinf(a) or mpmath.isinf(b):
            # Only reachable for types without an overflow threshold.
            return 0.0 if a == b else float('inf')

        tiny = ntype.min_normal
        if tiny is not None and abs(a) < tiny and abs(b) < tiny:
            return 0.0

        if b == 0:
            err = abs(a)
        else:
            err = abs(a - b) / abs(b)

        if ntype.dtype is None:
            eps = mpmath.ldexp(1, 1 - ntype.bits)
        else:
            eps = mpmath.mpf(ntype.epsilon)
        in_eps = float(err / eps)
    return min(in_eps, sys.float_info.max)
