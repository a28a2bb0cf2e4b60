"""
Suite driver.

Runs every case of a suite for every numeric type, checks each run
against the tolerance registry and writes a text report. Accuracy and
invocation failures are collected, never raised: the report at the end
covers the whole suite.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, TextIO

from pyaccuracy.core.environment import Environment, detect_environment
from pyaccuracy.core.precision import NumericType, get_numeric_type
from pyaccuracy.core.validation import check_error_policy
from pyaccuracy.accuracy.solution import AccuracySolution
from pyaccuracy.accuracy.solvers import run
from pyaccuracy.datasets._dataset import TestDataset
from pyaccuracy.tolerance.check import ToleranceCheck, check
from pyaccuracy.tolerance.registry import ToleranceRegistry


# Returns None when the case does not apply to the numeric type.
FunctionFactory = Callable[[NumericType], Callable[..., Any] | None]

BANNER_RULE = "~" * 66


@dataclass(frozen=True)
class SuiteCase:
    """
    One dataset paired with the function variant run against it.

    Attributes:
        dataset: Reference rows
        make_function: Builds the function under test for a numeric type,
            or returns None to skip the type
        function_name: Label used in reports and tolerance lookup
    """
    dataset: TestDataset
    make_function: FunctionFactory
    function_name: str


@dataclass(frozen=True)
class AccuracySuite:
    """
    A named collection of cases with its tolerance table.

    Attributes:
        name: Suite label
        cases: Cases in run order
        registry: Tolerances for the suite
        types: Numeric types run by default
        make_other: Optional factory for a comparison implementation;
            returns None for types without one. Comparison runs are
            reported but never checked.
    """
    name: str
    cases: tuple[SuiteCase, ...]
    registry: ToleranceRegistry
    types: tuple[NumericType, ...]
    make_other: Callable[[NumericType], Callable[..., Any] | None] | None = None


@dataclass(frozen=True)
class CaseReport:
    """Outcome of one case for one numeric type."""
    check: ToleranceCheck
    others: tuple[AccuracySolution, ...] = ()

    @property
    def solution(self) -> AccuracySolution:
        return self.check.solution

    @property
    def passed(self) -> bool:
        return self.check.passed

    @property
    def dataset_name(self) -> str:
        return self.solution.dataset_name

    @property
    def type_name(self) -> str:
        return self.solution.type_name


@dataclass(frozen=True)
class SuiteReport:
    """Outcome of a whole suite."""
    suite_name: str
    environment: Environment
    cases: tuple[CaseReport, ...] = field(default_factory=tuple)
    skipped: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    @property
    def failed_cases(self) -> tuple[CaseReport, ...]:
        return tuple(c for c in self.cases if not c.passed)

    @property
    def n_failed(self) -> int:
        return len(self.failed_cases)

    @property
    def passed(self) -> bool:
        return self.n_failed == 0

    def summary(self) -> str:
        lines = [
            f"{self.suite_name}: {len(self.cases)} case(s), "
            f"{self.n_failed} failed"
        ]
        if self.skipped:
            lines[0] += f", {len(self.skipped)} skipped"
        for c in self.failed_cases:
            lines.append(f"    {c.dataset_name} [{c.type_name}]")
        return "\n".join(lines)


def run_suite(
    suite: AccuracySuite,
    *,
    types: Iterable[str | NumericType] | None = None,
    registry: ToleranceRegistry | None = None,
    environment: Environment | None = None,
    error_policy: str = "report",
    compare_other: bool = False,
    out: TextIO | None = None,
    verbose: bool = False,
) -> SuiteReport:
    """
    Run a suite and report.

    Parameters
    ----------
    suite : AccuracySuite
        Cases and tolerances.
    types : iterable or None
        Numeric types (names or NumericType). Defaults to suite.types.
    registry : ToleranceRegistry or None
        Tolerances. Defaults to suite.registry.
    environment : Environment or None
        Environment used for tolerance lookup. Detected if None.
    error_policy : str
        'report' or 'ignore', applied to every run.
    compare_other : bool
        Also run suite.make_other implementations, unchecked.
    out : text stream or None
        Where the report is written. Defaults to sys.stdout.
    verbose : bool
        Print per-run progress and timing.

    Returns
    -------
    SuiteReport
    """
    check_error_policy(error_policy)
    out = sys.stdout if out is None else out
    ntypes = [get_numeric_type(t) for t in (suite.types if types is None else types)]
    registry = suite.registry if registry is None else registry
    environment = detect_environment() if environment is None else environment

    print(f"Tests run with {environment}", file=out)

    reports: list[CaseReport] = []
    skipped: list[tuple[str, str]] = []
    for ntype in ntypes:
        for case in suite.cases:
            f = case.make_function(ntype)
            if f is None:
                skipped.append((case.dataset.name, ntype.name))
                if verbose:
                    print(f"Skipping {case.dataset.name} with type {ntype.name}", file=out)
                continue
            report = _run_case(
                case, f,
                ntype, registry, environment,
                error_policy=error_policy,
                make_other=suite.make_other if compare_other else None,
                out=out,
                verbose=verbose,
            )
            reports.append(report)

    suite_report = SuiteReport(
        suite_name=suite.name,
        environment=environment,
        cases=tuple(reports),
        skipped=tuple(skipped),
    )
    print(suite_report.summary(), file=out)
    return suite_report


def _run_case(
    case: SuiteCase,
    f: Callable[..., Any],
    ntype: NumericType,
    registry: ToleranceRegistry,
    environment: Environment,
    *,
    error_policy: str,
    make_other: Callable[[NumericType], Callable[..., Any] | None] | None,
    out: TextIO,
    verbose: bool,
) -> CaseReport:
    print(f"Testing {case.dataset.name} with type {ntype.name}", file=out)
    print(BANNER_RULE, file=out)

    solution = run(
        case.dataset, f,
        ntype=ntype,
        function_name=case.function_name,
        error_policy=error_policy,
    )
    tolerance = registry.lookup(
        environment, ntype.name, case.dataset.name, case.function_name,
    )
    result = check(solution, tolerance)

    impl = getattr(f, "name", None)
    if impl:
        print(f"Implementation: {impl}", file=out)
    print(solution.summary(), file=out)
    print(f"Tolerance: {tolerance}", file=out)
    detail = result.report()
    if detail:
        print(detail, file=out)
    if verbose and solution.timing is not None:
        print(f"Time: {solution.timing['total_seconds']:.3f}s", file=out)

    others = []
    if make_other is not None:
        g = make_other(ntype)
        if g is not None:
            other = run(
                case.dataset, g,
                ntype=ntype,
                function_name=getattr(g, "name", None),
                error_policy=error_policy,
            )
            print(f"Comparison (not checked): {other.summary()}", file=out)
            others.append(other)

    print("", file=out)
    return CaseReport(check=result, others=tuple(others))
