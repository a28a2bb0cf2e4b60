"""
Solver dispatch for dataset runs.

run(dataset, f) evaluates f against every row of a dataset and returns an
AccuracySolution with peak and RMS relative error.
"""

from __future__ import annotations

from typing import Any, Callable, Literal

from pyaccuracy.core.exceptions import ValidationError
from pyaccuracy.core.precision import NumericType
from pyaccuracy.accuracy.design import AccuracyDesign
from pyaccuracy.accuracy.solution import AccuracySolution
from pyaccuracy.accuracy.backends.cpu import CPUAccuracyBackend
from pyaccuracy.datasets._dataset import TestDataset


BackendChoice = Literal['cpu']


def _get_backend(backend: str = 'cpu'):
    """
    Select backend for dataset runs.

    Evaluation is scalar and row by row, so CPU is the only backend.
    """
    if backend in ('cpu', 'auto'):
        return CPUAccuracyBackend()
    raise ValidationError(f"Unknown backend: {backend!r}. Use 'cpu'.")


def run(
    dataset: TestDataset | AccuracyDesign,
    f: Callable[..., Any] | None = None,
    *,
    ntype: str | NumericType = "double",
    function_name: str | None = None,
    error_policy: Literal["report", "ignore"] = "report",
    backend: str = 'cpu',
    verbose: bool = False,
) -> AccuracySolution:
    """
    Run a function against a reference dataset.

    Parameters
    ----------
    dataset : TestDataset or AccuracyDesign
        Reference rows (inputs then expected value), or a ready design.
    f : callable
        Function under test. Called once per row with the row inputs
        converted to ntype. Required unless a design is given.
    ntype : str or NumericType
        'float', 'double', 'long double', 'mpf' or a NumericType.
    function_name : str or None
        Label for reports and tolerance lookup.
    error_policy : str
        'report' (default): rows on which f raises or returns NaN are
        failures. 'ignore': such rows are accepted and only noted.
    backend : str
        'cpu' (default).
    verbose : bool
        Print progress information.

    Returns
    -------
    AccuracySolution
        Peak and RMS error in epsilons, worst row, failures.

    Examples
    --------
    >>> from pyaccuracy.datasets import I0_DATA
    >>> from pyaccuracy.special import cyl_bessel_i_function
    >>> sol = run(I0_DATA, cyl_bessel_i_function('double'), ntype='double')
    >>> print(sol.summary())
    """
    if isinstance(dataset, AccuracyDesign):
        design = dataset
    else:
        if f is None:
            raise ValidationError("f: a function under test is required")
        design = AccuracyDesign.for_dataset(
            dataset, f,
            ntype=ntype,
            function_name=function_name,
            error_policy=error_policy,
        )

    if verbose:
        print(f"Running {design.function_name} on {design.dataset_name} "
              f"({design.dataset.n_rows} rows) with type {design.type_name}")

    be = _get_backend(backend)
    result = be.solve(design)
    solution = AccuracySolution(_result=result, _design=design)

    if verbose:
        print(f"Peak = {solution.peak:.4g} eps, RMS = {solution.rms:.4g} eps, "
              f"{len(solution.failures)} failure(s)")

    return solution
