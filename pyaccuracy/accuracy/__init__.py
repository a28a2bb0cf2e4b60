"""
Dataset runner.

Evaluates a function against reference rows and reports peak and RMS
relative error in epsilons of the numeric type under test.

Public API:
    run(dataset, f, ntype=...)  - run one dataset
    relative_error(a, b, ntype) - error of one value, in epsilons
    summarize_errors(errors)    - peak, RMS and worst row of per-row errors
"""

from pyaccuracy.accuracy.solvers import run
from pyaccuracy.accuracy.design import AccuracyDesign
from pyaccuracy.accuracy._common import ErrorStats, RowFailure
from pyaccuracy.accuracy.solution import AccuracySolution
from pyaccuracy.accuracy._relative_error import relative_error
from pyaccuracy.accuracy.backends.cpu import CPUAccuracyBackend, summarize_errors

__all__ = [
    "run",
    "AccuracyDesign",
    "ErrorStats",
    "RowFailure",
    "AccuracySolution",
    "relative_error",
    "summarize_errors",
    "CPUAccuracyBackend",
]
