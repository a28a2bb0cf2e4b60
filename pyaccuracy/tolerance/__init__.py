"""
Tolerance registry and checks.

Public API:
    ToleranceRegistry   - ordered rules, first match wins
    ToleranceRule       - one (matchers -> max peak, max RMS) entry
    DEFAULT_TOLERANCE   - 1 eps peak / 1 eps RMS, used when nothing matches
    check(solution, rule) - compare a run against a rule
    ToleranceCheck      - outcome with attributable failure report
"""

from pyaccuracy.tolerance.registry import (
    ToleranceRegistry,
    ToleranceRule,
    DEFAULT_TOLERANCE,
    MATCH_ANY,
)
from pyaccuracy.tolerance.check import ToleranceCheck, check

__all__ = [
    "ToleranceRegistry",
    "ToleranceRule",
    "DEFAULT_TOLERANCE",
    "MATCH_ANY",
    "ToleranceCheck",
    "check",
]
