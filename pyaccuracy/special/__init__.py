"""
Functions under test.

Public API:
    cyl_bessel_i(v, x, ntype)      - I_v(x) in a numeric type
    cyl_bessel_i_function(ntype)   - per-type I_v(x) adapter
    cyl_bessel_i_int_function(ntype) - integer-order adapter
"""

from pyaccuracy.special.bessel import (
    BesselI,
    cyl_bessel_i,
    cyl_bessel_i_function,
    cyl_bessel_i_int_function,
    default_implementation,
)

__all__ = [
    "BesselI",
    "cyl_bessel_i",
    "cyl_bessel_i_function",
    "cyl_bessel_i_int_function",
    "default_implementation",
]
