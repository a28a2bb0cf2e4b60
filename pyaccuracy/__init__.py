"""
PyAccuracy: accuracy regression testing for special functions.

Runs implementations of a special function against tabulated reference
values, in several numeric precisions, and reports peak and RMS relative
error against per-environment tolerance tables.

Submodules:
    accuracy: Dataset runner (peak / RMS relative error)
    tolerance: Tolerance registry and checks
    datasets: Reference tables, random data generation, JSON fixtures
    special: Functions under test (Bessel I adapters)
    suites: Suite driver and the Bessel I suite
"""

__version__ = "0.1.0"

from pyaccuracy.core import (
    NumericType, FLOAT, DOUBLE, LONG_DOUBLE, MPF,
    Environment, detect_environment,
)
from pyaccuracy.accuracy import run
from pyaccuracy.tolerance import ToleranceRegistry, check
from pyaccuracy.suites import run_suite, bessel_i_suite

__all__ = [
    "__version__",
    "NumericType",
    "FLOAT",
    "DOUBLE",
    "LONG_DOUBLE",
    "MPF",
    "Environment",
    "detect_environment",
    "run",
    "ToleranceRegistry",
    "check",
    "run_suite",
    "bessel_i_suite",
]
