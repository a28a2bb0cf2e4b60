"""
Accuracy suite for the modified Bessel function of the first kind.

There are two sets of data: spot values compared with results from the
special function calculator at functions.wolfram.com, and the bulk of
the accuracy tests, which use random inputs with reference values
computed by mpmath at 256-bit precision.

When this suite is first run on a new platform some cases may fail: the
default tolerance of 1 epsilon is too tight for most implementations. Look
at the error rates reported and decide whether they are acceptable; the
acceptable rates are recorded below as rules matched against the
interpreter, libraries, platform, numeric type, dataset and function,
together with the largest peak and RMS errors expected.
"""

from __future__ import annotations

import warnings

from pyaccuracy.core.precision import (
    NumericType, FLOAT, DOUBLE, LONG_DOUBLE, MPF,
    largest_type_pattern, long_double_is_double,
)
from pyaccuracy.datasets.bessel_i import I0_DATA, I1_DATA, IN_DATA, IV_DATA
from pyaccuracy.datasets.generate import generate_bessel_i_data
from pyaccuracy.special.bessel import (
    BesselI,
    cyl_bessel_i_function,
    cyl_bessel_i_int_function,
)
from pyaccuracy.suites.driver import AccuracySuite, SuiteCase
from pyaccuracy.tolerance.registry import ToleranceRegistry, MATCH_ANY


FUNCTION_NAME = "cyl_bessel_i"

DEFAULT_TYPES = (FLOAT, DOUBLE, LONG_DOUBLE, MPF)

INTEGER_VERSION_SUFFIX = " (Integer Version)"


def expected_results() -> ToleranceRegistry:
    """
    Maximum peak and RMS errors expected for I_v(x).

    First matching rule wins. Anything not listed here falls back to the
    1 epsilon default, which is what single precision is held to.
    """
    largest_type = largest_type_pattern()
    registry = ToleranceRegistry()

    # Mac OS has higher error rates.
    registry.register(
        MATCH_ANY,                  # interpreter
        MATCH_ANY,                  # library
        "Darwin",                   # platform
        largest_type,               # numeric type(s)
        MATCH_ANY,                  # dataset
        MATCH_ANY,                  # function
        100, 50,
        label="Mac OS",
    )
    registry.register(
        MATCH_ANY, MATCH_ANY, "Darwin", "mpf", MATCH_ANY, MATCH_ANY,
        100, 50,
        label="Mac OS",
    )

    registry.register(
        MATCH_ANY, MATCH_ANY, MATCH_ANY, largest_type, MATCH_ANY, MATCH_ANY,
        15, 10,
    )
    registry.register(
        MATCH_ANY, MATCH_ANY, MATCH_ANY, "mpf", MATCH_ANY, MATCH_ANY,
        15, 10,
    )
    return registry


def _direct(ntype: NumericType) -> BesselI:
    return cyl_bessel_i_function(ntype)


def _integer(ntype: NumericType) -> BesselI:
    return cyl_bessel_i_int_function(ntype)


def _other(ntype: NumericType) -> BesselI | None:
    """mpmath at the type's precision, for float and double only."""
    if ntype.dtype is None or ntype is LONG_DOUBLE:
        return None
    return cyl_bessel_i_function(ntype, implementation='mpmath')


def bessel_i_suite(
    *,
    random_rows: int = 200,
    seed: int = 42,
    include_random: bool = True,
    types: tuple[NumericType, ...] = DEFAULT_TYPES,
) -> AccuracySuite:
    """
    The I_v(x) suite.

    Parameters
    ----------
    random_rows : int
        Rows in each generated dataset.
    seed : int
        Seed for the generated datasets.
    include_random : bool
        If False, only the spot datasets are run.
    types : tuple of NumericType
        Default numeric types.

    Returns
    -------
    AccuracySuite
    """
    if long_double_is_double() and LONG_DOUBLE in types:
        warnings.warn(
            "long double has the same precision as double on this platform; "
            "the long double cases repeat the double ones",
            RuntimeWarning,
            stacklevel=2,
        )

    cases = [
        SuiteCase(I0_DATA, _direct, FUNCTION_NAME),
        SuiteCase(I1_DATA, _direct, FUNCTION_NAME),
        SuiteCase(IN_DATA, _direct, FUNCTION_NAME),
    ]
    for data in (I0_DATA, I1_DATA, IN_DATA):
        cases.append(SuiteCase(
            data.renamed(data.name + INTEGER_VERSION_SUFFIX),
            _integer,
            FUNCTION_NAME,
        ))
    cases.append(SuiteCase(IV_DATA, _direct, FUNCTION_NAME))

    if include_random:
        int_data = generate_bessel_i_data(random_rows, seed=seed, integer_order=True)
        real_data = generate_bessel_i_data(random_rows, seed=seed, integer_order=False)
        cases.append(SuiteCase(int_data, _direct, FUNCTION_NAME))
        cases.append(SuiteCase(real_data, _direct, FUNCTION_NAME))

    return AccuracySuite(
        name="Bessel I",
        cases=tuple(cases),
        registry=expected_results(),
        types=tuple(types),
        make_other=_other,
    )
