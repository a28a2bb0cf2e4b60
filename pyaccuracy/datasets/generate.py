"""
High-precision random reference data for I_v(x).

Inputs are drawn from a seeded generator and rounded to float32, so every
input is exactly representable in every numeric type under test and all
types see the same mathematical problem. Reference values are computed
with mpmath at a working precision far beyond any type under test.
"""

from __future__ import annotations

from decimal import Decimal

import mpmath
import numpy as np

from pyaccuracy.core.exceptions import ValidationError
from pyaccuracy.datasets._dataset import TestDataset


DEFAULT_PRECISION_BITS = 256
DEFAULT_DIGITS = 40

# Orders and arguments sampled by the generator.
INTEGER_ORDER_RANGE = (-50, 50)
INTEGER_ARG_RANGE = (-100.0, 100.0)
REAL_ORDER_RANGE = (-50.0, 50.0)
REAL_ARG_RANGE = (0.25, 100.0)


def exact_decimal(value: float) -> str:
    """Exact decimal expansion of a binary floating-point value."""
    return str(Decimal(float(value)))


def reference_bessel_i(v: str, x: str, precision_bits: int = DEFAULT_PRECISION_BITS) -> mpmath.mpf:
    """
    I_v(x) at the given working precision.

    Raises:
        ValidationError: If the value is not real (non-integer order with a
            negative argument)
    """
    with mpmath.workprec(precision_bits):
        value = mpmath.besseli(mpmath.mpf(v), mpmath.mpf(x))
        if isinstance(value, mpmath.mpc):
            if value.imag != 0:
                raise ValidationError(
                    f"I_v(x) is complex for v={v}, x={x}"
                )
            value = value.real
        return value


def generate_bessel_i_data(
    n_rows: int = 200,
    *,
    seed: int = 42,
    integer_order: bool = False,
    precision_bits: int = DEFAULT_PRECISION_BITS,
    digits: int = DEFAULT_DIGITS,
    name: str | None = None,
) -> TestDataset:
    """
    Generate a random I_v(x) dataset.

    Parameters
    ----------
    n_rows : int
        Number of rows.
    seed : int
        Seed for numpy.random.default_rng; equal seeds give equal tables.
    integer_order : bool
        If True, orders are integers in INTEGER_ORDER_RANGE and arguments
        may be negative. Otherwise orders are real and arguments positive.
    precision_bits : int
        mpmath working precision for the reference values.
    digits : int
        Significant digits kept in the expected column.
    name : str or None
        Dataset label. Defaults to 'Bessel In: Random Data' or
        'Bessel Iv: Random Data'.

    Returns
    -------
    TestDataset
    """
    if n_rows < 1:
        raise ValidationError(f"n_rows: must be >= 1, got {n_rows}")
    if precision_bits < 64:
        raise ValidationError(
            f"precision_bits: must be >= 64 to serve as a reference, got {precision_bits}"
        )

    rng = np.random.default_rng(seed)
    if integer_order:
        lo, hi = INTEGER_ORDER_RANGE
        orders = [str(int(v)) for v in rng.integers(lo, hi + 1, size=n_rows)]
        args = rng.uniform(*INTEGER_ARG_RANGE, size=n_rows).astype(np.float32)
    else:
        raw = rng.uniform(*REAL_ORDER_RANGE, size=n_rows).astype(np.float32)
        orders = [exact_decimal(v) for v in raw]
        lo, hi = REAL_ARG_RANGE
        # hi - U[0, hi - lo) lies in (lo, hi]
        args = (hi - rng.uniform(0.0, hi - lo, size=n_rows)).astype(np.float32)

    rows = []
    for v, x in zip(orders, args):
        x_text = exact_decimal(x)
        value = reference_bessel_i(v, x_text, precision_bits)
        rows.append((v, x_text, mpmath.nstr(value, digits)))

    if name is None:
        name = "Bessel In: Random Data" if integer_order else "Bessel Iv: Random Data"

    return TestDataset.from_rows(
        name,
        rows,
        origin="random",
        description=(
            f"numpy default_rng(seed={seed}), mpmath besseli at "
            f"{precision_bits} bits, {digits} digits"
        ),
    )
