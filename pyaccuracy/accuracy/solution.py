"""
Dataset run solution types.

AccuracySolution wraps Result[ErrorStats] and formats the per-run report.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pyaccuracy.core.result import Result
from pyaccuracy.accuracy._common import ErrorStats, RowFailure

if TYPE_CHECKING:
    from pyaccuracy.accuracy.design import AccuracyDesign


@dataclass
class AccuracySolution:
    """
    User-facing result of one dataset run.

    Errors are relative errors in epsilons of the numeric type under test.
    """
    _result: Result[ErrorStats]
    _design: 'AccuracyDesign | None'

    # --- Error statistics ---

    @property
    def peak(self) -> float:
        """Maximum relative error over evaluated rows."""
        return self._result.params.peak

    @property
    def rms(self) -> float:
        """Root-mean-square relative error over evaluated rows."""
        return self._result.params.rms

    @property
    def errors(self) -> NDArray[np.floating[Any]]:
        """Per-row error; NaN for failed rows."""
        return self._result.params.errors

    @property
    def worst_index(self) -> int | None:
        """Index of the first row attaining the peak error."""
        return self._result.params.worst_index

    @property
    def worst_row(self) -> tuple[str, ...] | None:
        """The reference row attaining the peak error."""
        idx = self.worst_index
        if idx is None or self._design is None:
            return None
        return self._design.dataset.rows[idx]

    @property
    def worst_value(self) -> Any:
        """Value computed for the worst row."""
        idx = self.worst_index
        if idx is None:
            return None
        return self._result.params.computed[idx]

    @property
    def failures(self) -> tuple[RowFailure, ...]:
        """Rows on which the function raised or returned NaN."""
        return self._result.params.failures

    @property
    def n_rows(self) -> int:
        return self._result.params.n_rows

    # --- Labels ---

    @property
    def dataset_name(self) -> str:
        return self._result.info['dataset']

    @property
    def type_name(self) -> str:
        return self._result.info['type']

    @property
    def function_name(self) -> str:
        return self._result.info['function']

    @property
    def error_policy(self) -> str:
        return self._result.info['error_policy']

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def provenance(self) -> dict[str, str]:
        return self._result.provenance

    # --- Formatting ---

    def summary(self) -> str:
        """
        Format the run for a text report.

        Produces output like:
            cyl_bessel_i: Max = 3.412 RMS Mean = 1.207
                worst case at row: 6
                { -10.0002994537353515625, 0.0009765625, 1.4147400566518135e+35 }
        """
        lines = [
            f"{self.function_name}: Max = {_format_eps(self.peak)} "
            f"RMS Mean = {_format_eps(self.rms)}"
        ]
        row = self.worst_row
        if self.peak != 0 and row is not None:
            lines.append(f"    worst case at row: {self.worst_index}")
            lines.append("    { " + ", ".join(_short(v) for v in row) + " }")
        for failure in self.failures:
            lines.append(
                f"    row {failure.index} failed ({failure.exception_type}): "
                f"{failure.message}"
            )
        for w in self.warnings:
            lines.append(f"    note: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"AccuracySolution(dataset={self.dataset_name!r}, "
            f"type={self.type_name!r}, peak={self.peak:.4g}, rms={self.rms:.4g})"
        )


def _format_eps(x: float) -> str:
    return f"{x:.4g}"


def _short(value: str, digits: int = 17) -> str:
    """Shorten a long reference decimal for display."""
    if len(value) <= digits + 8:
        return value
    try:
        return f"{float(value):.{digits}g}"
    except ValueError:
        return value
