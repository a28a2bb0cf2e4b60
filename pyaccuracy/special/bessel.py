"""
Scalar adapters for the modified Bessel function of the first kind.

cyl_bessel_i(v, x) = I_v(x), with one adapter per numeric type:

    float, double      scipy.special.iv on the type's own ufunc loop
    long double        mpmath.besseli at the long double precision, or
                       scipy.special.iv when long double is plain double
    mpf                mpmath.besseli at the type's precision

Each adapter accepts and returns values of its numeric type and raises
InvocationError where I_v(x) is not a real number (non-integer order with a
negative argument) or the implementation returns NaN.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

import mpmath
import numpy as np
from scipy import special

from pyaccuracy.core.exceptions import InvocationError, ValidationError
from pyaccuracy.core.precision import NumericType, DOUBLE, get_numeric_type


Implementation = Literal['scipy', 'mpmath']

IMPLEMENTATION_NAMES = {
    'scipy': 'scipy.special.iv',
    'mpmath': 'mpmath.besseli',
}


def default_implementation(ntype: NumericType) -> Implementation:
    """Library supplying I_v(x) for a numeric type."""
    if ntype.dtype in (np.float32, np.float64):
        return 'scipy'
    if ntype.dtype is np.longdouble and ntype.bits == DOUBLE.bits:
        return 'scipy'
    return 'mpmath'


@dataclass(frozen=True)
class BesselI:
    """
    I_v(x) for one numeric type.

    Attributes:
        ntype: Numeric type of inputs and result
        implementation: 'scipy' or 'mpmath'
        integer_order: If True, the order is truncated to an integer
            before the call, exercising the integer-order code path
    """
    ntype: NumericType
    implementation: Implementation = 'scipy'
    integer_order: bool = False

    @property
    def name(self) -> str:
        return IMPLEMENTATION_NAMES[self.implementation]

    def __call__(self, v: Any, x: Any) -> Any:
        if self.integer_order:
            v = self._to_integer_order(v)
        if self.implementation == 'scipy':
            return self._scipy(v, x)
        return self._mpmath(v, x)

    def _to_integer_order(self, v: Any) -> Any:
        n = int(v)
        if self.ntype.dtype is None:
            return mpmath.mpf(n)
        return self.ntype.dtype(n)

    def _scipy(self, v: Any, x: Any) -> Any:
        if self.ntype.dtype is np.longdouble:
            # Only reached when long double is plain double.
            v, x = np.float64(v), np.float64(x)
        with np.errstate(all='ignore'):
            result = special.iv(v, x)
        if np.isnan(result):
            raise InvocationError(
                f"{self.name} returned NaN for v={v}, x={x}",
                function_name=self.name,
                inputs=(v, x),
            )
        return self.ntype.cast(result)

    def _mpmath(self, v: Any, x: Any) -> Any:
        mv, mx = self.ntype.to_mpf(v), self.ntype.to_mpf(x)
        with mpmath.workprec(self.ntype.bits):
            result = mpmath.besseli(mv, mx)
        if isinstance(result, mpmath.mpc):
            if result.imag != 0:
                raise InvocationError(
                    f"{self.name} is complex for v={v}, x={x}",
                    function_name=self.name,
                    inputs=(v, x),
                )
            result = result.real
        if mpmath.isnan(result):
            raise InvocationError(
                f"{self.name} returned NaN for v={v}, x={x}",
                function_name=self.name,
                inputs=(v, x),
            )
        return self.ntype.cast(result)


def cyl_bessel_i_function(
    ntype: str | NumericType = DOUBLE,
    *,
    implementation: Implementation | None = None,
) -> BesselI:
    """
    I_v(x) adapter for a numeric type.

    Parameters
    ----------
    ntype : str or NumericType
        Numeric type of inputs and result.
    implementation : str or None
        'scipy' or 'mpmath'. None picks the library for the type.

    Raises
    ------
    ValidationError
        If the implementation is unknown or scipy is requested for a type
        it has no loop for.
    """
    ntype = get_numeric_type(ntype)
    if implementation is None:
        implementation = default_implementation(ntype)
    _check_implementation(ntype, implementation)
    return BesselI(ntype=ntype, implementation=implementation)


def cyl_bessel_i_int_function(
    ntype: str | NumericType = DOUBLE,
    *,
    implementation: Implementation | None = None,
) -> BesselI:
    """
    Integer-order variant: cyl_bessel_i(int(v), x).

    The order is truncated toward zero before the call.
    """
    ntype = get_numeric_type(ntype)
    if implementation is None:
        implementation = default_implementation(ntype)
    _check_implementation(ntype, implementation)
    return BesselI(ntype=ntype, implementation=implementation, integer_order=True)


def _check_implementation(ntype: NumericType, implementation: str) -> None:
    if implementation not in IMPLEMENTATION_NAMES:
        raise ValidationError(
            f"implementation must be one of {tuple(IMPLEMENTATION_NAMES)}, "
            f"got {implementation!r}"
        )
    if implementation == 'scipy' and default_implementation(ntype) != 'scipy':
        raise ValidationError(
            f"scipy.special.iv has no {ntype.name} loop; use implementation='mpmath'"
        )


def cyl_bessel_i(v: Any, x: Any, ntype: str | NumericType = DOUBLE) -> Any:
    """
    I_v(x) in the given numeric type.

    Convenience wrapper: converts v and x to the type, then evaluates with
    the default implementation for it.
    """
    ntype = get_numeric_type(ntype)
    f = cyl_bessel_i_function(ntype)
    return f(ntype.from_string(str(v)), ntype.from_string(str(x)))
