"""
Tests for tolerance checks.

Validates:
    - Strictly-greater comparison of peak and RMS against the rule
    - Failure attribution (which limit, by how much, which dataset)
    - Invocation failures under each error policy
    - Tighten-tolerance notes
"""

import pytest

from pyaccuracy.accuracy import RowFailure, run
from pyaccuracy.core.exceptions import ToleranceExceededError
from pyaccuracy.tolerance import DEFAULT_TOLERANCE, ToleranceRule, check
from pyaccuracy.tolerance.check import TIGHTEN_FRACTION

RULE_15_10 = ToleranceRule.create(max_peak=15, max_rms=10)

FAILURE = RowFailure(
    index=3, row=("2.5", "-1", "0"), message="scipy.special.iv returned NaN",
    exception_type="InvocationError",
)


# ═══════════════════════════════════════════════════════════════════════
# Limits
# ═══════════════════════════════════════════════════════════════════════


class TestLimits:
    """Peak and RMS compared against the allowance."""

    def test_within_limits(self, make_solution):
        result = check(make_solution(5.0, 3.0), RULE_15_10)
        assert result.passed
        assert result.messages == []
        assert result.report() == ""

    def test_equal_to_limit_passes(self, make_solution):
        assert check(make_solution(15.0, 10.0), RULE_15_10).passed

    def test_peak_exceeded_only(self, make_solution):
        result = check(make_solution(20.0, 3.0), RULE_15_10)
        assert not result.passed
        assert result.peak_exceeded
        assert not result.rms_exceeded
        assert result.messages == [
            "Peak error 20 eps greater than expected value of 15 eps"
        ]

    def test_rms_exceeded_only(self, make_solution):
        result = check(make_solution(12.0, 11.0), RULE_15_10)
        assert not result.peak_exceeded
        assert result.rms_exceeded
        assert result.messages[0].startswith("RMS error 11 eps")

    def test_default_tolerance(self, make_solution):
        assert check(make_solution(1.0, 0.5), DEFAULT_TOLERANCE).passed
        assert not check(make_solution(1.5, 0.5), DEFAULT_TOLERANCE).passed


# ═══════════════════════════════════════════════════════════════════════
# Reports
# ═══════════════════════════════════════════════════════════════════════


class TestReport:
    """Failure messages and raise_if_failed."""

    def test_report_names_case(self, make_solution):
        result = check(make_solution(20.0, 3.0), RULE_15_10)
        report = result.report()
        assert report.startswith(
            "FAILED: cyl_bessel_i with type double on 'Bessel I0: Mathworld Data'"
        )
        assert "observed peak 20 / RMS 3 eps, allowed peak 15 / RMS 10 eps" in report

    def test_report_shows_worst_row(self, powers_of_two):
        def f(v, x):
            return 4.0 + 2.0 ** -48 if x == 2 else 2.0 ** x

        result = check(run(powers_of_two, f, function_name="pow2"), DEFAULT_TOLERANCE)
        assert "worst case at row 2: { 0, 2, 4 }" in result.report()

    def test_raise_if_failed(self, make_solution):
        result = check(make_solution(20.0, 12.0), RULE_15_10)
        with pytest.raises(ToleranceExceededError) as exc_info:
            result.raise_if_failed()
        err = exc_info.value
        assert err.peak == 20.0
        assert err.rms == 12.0
        assert err.max_peak == 15.0
        assert err.max_rms == 10.0
        assert err.dataset_name == "Bessel I0: Mathworld Data"
        assert err.type_name == "double"
        assert "Peak error" in str(err) and "RMS error" in str(err)

    def test_raise_if_passed_is_noop(self, make_solution):
        check(make_solution(1.0, 1.0), RULE_15_10).raise_if_failed()


# ═══════════════════════════════════════════════════════════════════════
# Invocation failures
# ═══════════════════════════════════════════════════════════════════════


class TestInvocationFailures:
    """Failed rows under each error policy."""

    def test_report_policy_fails(self, make_solution):
        result = check(make_solution(0.0, 0.0, failures=(FAILURE,)), RULE_15_10)
        assert not result.passed
        assert result.invocation_failed
        assert result.messages == ["1 row(s) raised or returned NaN (rows 3)"]
        assert "row 3 { 2.5, -1, 0 }: InvocationError" in result.report()

    def test_ignore_policy_passes_with_note(self, make_solution):
        sol = make_solution(0.0, 0.0, failures=(FAILURE,), error_policy="ignore")
        result = check(sol, DEFAULT_TOLERANCE)
        assert result.passed
        assert not result.invocation_failed
        assert any("ignored by error policy" in n for n in result.notes)
        assert "note:" in result.report()


# ═══════════════════════════════════════════════════════════════════════
# Tighten notes
# ═══════════════════════════════════════════════════════════════════════


class TestTightenNote:
    """Notes suggesting a tighter allowance."""

    def test_well_below_allowance(self, make_solution):
        result = check(make_solution(2.0, 1.0), RULE_15_10)
        assert result.passed
        assert any("could be tightened" in n for n in result.notes)

    def test_close_to_allowance(self, make_solution):
        peak = TIGHTEN_FRACTION * 15 + 1
        result = check(make_solution(peak, 1.0), RULE_15_10)
        assert result.notes == ()

    def test_not_for_one_eps_default(self, make_solution):
        result = check(make_solution(0.0, 0.0), DEFAULT_TOLERANCE)
        assert result.notes == ()
