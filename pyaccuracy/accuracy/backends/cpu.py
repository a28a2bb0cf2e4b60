"""
CPU backend for dataset runs.

Evaluates the function under test once per row, measures each row's
relative error, and aggregates peak and RMS error. A row that fails is
recorded and the run continues: the result always covers the whole
dataset.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyaccuracy.core.exceptions import InvocationError
from pyaccuracy.core.result import Result
from pyaccuracy.core.timing import Timer
from pyaccuracy.accuracy._common import ErrorStats, RowFailure
from pyaccuracy.accuracy._relative_error import relative_error
from pyaccuracy.accuracy.design import AccuracyDesign


# Exceptions from the function under test that count as a failed row.
# Anything else (TypeError, AttributeError, ...) is a harness bug and
# propagates.
INVOCATION_ERRORS = (InvocationError, ArithmeticError, ValueError)


def summarize_errors(
    errors: NDArray[np.floating[Any]],
) -> tuple[float, float, int | None]:
    """
    Peak, RMS and worst row of per-row errors.

    NaN entries mark rows that were not evaluated and are skipped. The sum
    of squares is taken with math.fsum, so the result does not depend on
    row order, and each square is scaled by the peak first, so errors near
    the top of the float range still give a finite RMS. RMS is never
    reported above the peak.

    Returns:
        (peak, rms, worst_index); (0.0, 0.0, None) when nothing was evaluated
    """
    mask = ~np.isnan(errors)
    if not mask.any():
        return 0.0, 0.0, None

    worst = int(np.nanargmax(errors))
    peak = float(errors[worst])
    if peak == 0:
        return 0.0, 0.0, worst

    # Squares are taken relative to the peak so the sum cannot overflow.
    evaluated = errors[mask]
    scaled = math.fsum((float(e) / peak) ** 2 for e in evaluated)
    rms = peak * math.sqrt(scaled / evaluated.size)
    return peak, min(rms, peak), worst


class CPUAccuracyBackend:
    """Reference backend: scalar evaluation, one call per row."""

    @property
    def name(self) -> str:
        return 'cpu_accuracy'

    def solve(self, design: AccuracyDesign) -> Result[ErrorStats]:
        timer = Timer()
        timer.start()

        dataset = design.dataset
        ntype = design.ntype
        n = dataset.n_rows
        warnings_list: list[str] = []

        with timer.section('convert'):
            converted = [
                tuple(ntype.from_string(v) for v in row) for row in dataset.rows
            ]

        errors = np.full(n, np.nan)
        computed: list[Any] = [None] * n
        failures: list[RowFailure] = []

        for i, (row, values) in enumerate(zip(dataset.rows, converted)):
            inputs, expected = values[:-1], values[-1]

            with timer.section('evaluate'):
                try:
                    value = design.function(*inputs)
                except INVOCATION_ERRORS as e:
                    failures.append(RowFailure(
                        index=i, row=row, message=str(e),
                        exception_type=type(e).__name__,
                    ))
                    continue

            if ntype.is_nan(value):
                failures.append(RowFailure(
                    index=i, row=row,
                    message=f"{design.function_name} returned NaN",
                    exception_type='NaN',
                ))
                continue

            computed[i] = value
            with timer.section('measure'):
                errors[i] = relative_error(value, expected, ntype)

        peak, rms, worst = summarize_errors(errors)

        n_overflow = sum(1 for values in converted if ntype.is_inf(values[-1]))
        if n_overflow:
            warnings_list.append(
                f"{n_overflow} reference value(s) overflow {ntype.name}"
            )
        if failures and design.error_policy == 'ignore':
            warnings_list.append(
                f"{len(failures)} row(s) raised or returned NaN and were ignored"
            )

        timer.stop()

        stats = ErrorStats(
            errors=errors,
            peak=peak,
            rms=rms,
            worst_index=worst,
            n_rows=n,
            failures=tuple(failures),
            computed=tuple(computed),
        )
        return Result(
            params=stats,
            info={
                'dataset': dataset.name,
                'type': ntype.name,
                'function': design.function_name,
                'error_policy': design.error_policy,
                'origin': dataset.origin,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
