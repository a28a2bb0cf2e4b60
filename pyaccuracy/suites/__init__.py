"""
Accuracy suites and their driver.

Public API:
    run_suite(suite)     - run every case for every numeric type and report
    bessel_i_suite()     - the I_v(x) suite
    expected_results()   - I_v(x) tolerance table
"""

from pyaccuracy.suites.driver import (
    AccuracySuite,
    SuiteCase,
    CaseReport,
    SuiteReport,
    run_suite,
)
from pyaccuracy.suites.bessel_i import bessel_i_suite, expected_results

__all__ = [
    "AccuracySuite",
    "SuiteCase",
    "CaseReport",
    "SuiteReport",
    "run_suite",
    "bessel_i_suite",
    "expected_results",
]
