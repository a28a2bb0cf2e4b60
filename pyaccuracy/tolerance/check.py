"""
Comparison of a dataset run against its tolerance.

The outcome is a ToleranceCheck rather than a boolean: it says which
limit was exceeded, by how much, and on which row, so a failing case can
be attributed without re-running it.
"""

from __future__ import annotations

from dataclasses import dataclass

from pyaccuracy.core.exceptions import ToleranceExceededError
from pyaccuracy.accuracy.solution import AccuracySolution
from pyaccuracy.tolerance.registry import ToleranceRule


# A result using less than this fraction of its peak allowance is noted
# as a candidate for a tighter tolerance.
TIGHTEN_FRACTION = 0.25


@dataclass(frozen=True)
class ToleranceCheck:
    """
    Result of comparing one run against one tolerance rule.

    Attributes:
        solution: The dataset run
        tolerance: Rule the run was compared against
        peak_exceeded: Observed peak error above the allowed peak
        rms_exceeded: Observed RMS error above the allowed RMS
        invocation_failed: Some rows raised or returned NaN and the run's
            error policy is 'report'
        notes: Non-fatal remarks
    """
    solution: AccuracySolution
    tolerance: ToleranceRule
    peak_exceeded: bool
    rms_exceeded: bool
    invocation_failed: bool
    notes: tuple[str, ...] = ()

    @property
    def passed(self) -> bool:
        return not (self.peak_exceeded or self.rms_exceeded or self.invocation_failed)

    @property
    def messages(self) -> list[str]:
        """One line per violated limit."""
        s, t = self.solution, self.tolerance
        out = []
        if self.peak_exceeded:
            out.append(
                f"Peak error {s.peak:.4g} eps greater than expected value of "
                f"{t.max_peak:g} eps"
            )
        if self.rms_exceeded:
            out.append(
                f"RMS error {s.rms:.4g} eps greater than expected value of "
                f"{t.max_rms:g} eps"
            )
        if self.invocation_failed:
            rows = ", ".join(str(f.index) for f in s.failures)
            out.append(
                f"{len(s.failures)} row(s) raised or returned NaN (rows {rows})"
            )
        return out

    def report(self) -> str:
        """
        Failure report naming function, type, dataset, worst row and limits.

        Empty string when the check passed and there are no notes.
        """
        s = self.solution
        lines = []
        if not self.passed:
            lines.append(
                f"FAILED: {s.function_name} with type {s.type_name} "
                f"on {s.dataset_name!r}"
            )
            lines.extend(f"    {m}" for m in self.messages)
            if self.peak_exceeded or self.rms_exceeded:
                row = s.worst_row
                if row is not None:
                    lines.append(
                        f"    worst case at row {s.worst_index}: "
                        f"{{ {', '.join(row)} }} computed {s.worst_value}"
                    )
                lines.append(
                    f"    observed peak {s.peak:.4g} / RMS {s.rms:.4g} eps, "
                    f"allowed peak {self.tolerance.max_peak:g} / "
                    f"RMS {self.tolerance.max_rms:g} eps"
                )
            for failure in s.failures if self.invocation_failed else ():
                lines.append(
                    f"    row {failure.index} {{ {', '.join(failure.row)} }}: "
                    f"{failure.exception_type}: {failure.message}"
                )
        lines.extend(f"    note: {n}" for n in self.notes)
        return "\n".join(lines)

    def raise_if_failed(self) -> None:
        """
        Raise ToleranceExceededError if the check failed.

        Raises:
            ToleranceExceededError: With the observed and allowed errors
        """
        if self.passed:
            return
        s, t = self.solution, self.tolerance
        raise ToleranceExceededError(
            "; ".join(self.messages),
            function_name=s.function_name,
            type_name=s.type_name,
            dataset_name=s.dataset_name,
            peak=s.peak,
            rms=s.rms,
            max_peak=t.max_peak,
            max_rms=t.max_rms,
        )


def check(solution: AccuracySolution, tolerance: ToleranceRule) -> ToleranceCheck:
    """
    Compare a run against a tolerance.

    A limit is exceeded only when the observed error is strictly greater
    than the allowance. Invocation failures fail the check under the
    'report' policy and are noted under 'ignore'.
    """
    peak_exceeded = solution.peak > tolerance.max_peak
    rms_exceeded = solution.rms > tolerance.max_rms

    notes = []
    failed_rows = bool(solution.failures)
    invocation_failed = failed_rows and solution.error_policy == "report"
    if failed_rows and not invocation_failed:
        notes.append(
            f"{len(solution.failures)} row(s) raised or returned NaN; "
            f"ignored by error policy"
        )
    if (
        not peak_exceeded
        and tolerance.max_peak > 1
        and solution.peak < TIGHTEN_FRACTION * tolerance.max_peak
    ):
        notes.append(
            f"peak error {solution.peak:.4g} eps is well below the allowed "
            f"{tolerance.max_peak:g} eps; the tolerance could be tightened"
        )

    return ToleranceCheck(
        solution=solution,
        tolerance=tolerance,
        peak_exceeded=peak_exceeded,
        rms_exceeded=rms_exceeded,
        invocation_failed=invocation_failed,
        notes=tuple(notes),
    )
