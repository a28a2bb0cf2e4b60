"""
Input validation utilities for PyAccuracy.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent coercion of reference values (strings stay exact decimals)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
from typing import Any, Sequence

import mpmath

from pyaccuracy.core.exceptions import ValidationError, DimensionError


VALID_ERROR_POLICIES = ("report", "ignore")


def check_decimal(value: Any, name: str) -> str:
    """
    Validate and normalise one reference value.

    Accepts decimal strings, ints and floats (floats are converted via
    repr, which round-trips exactly). Rejects NaN and anything mpmath
    cannot parse. Infinite values are accepted.

    Args:
        value: Value to validate
        name: Parameter name for error messages

    Returns:
        The value as a decimal string

    Raises:
        ValidationError: If the value is not a number or is NaN
    """
    if isinstance(value, bool):
        raise ValidationError(f"{name}: expected a number, got bool {value!r}")
    if isinstance(value, (int, float)):
        text = repr(value)
    elif isinstance(value, str):
        text = value.strip()
    else:
        raise ValidationError(
            f"{name}: expected a decimal string or number, got {type(value).__name__}"
        )

    try:
        parsed = mpmath.mpf(text)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot parse {text!r} as a number: {e}") from e

    if mpmath.isnan(parsed):
        raise ValidationError(f"{name}: NaN is not a valid reference value")
    return text


def check_row(row: Sequence[Any], n_columns: int, name: str) -> tuple[str, ...]:
    """
    Validate one dataset row.

    Args:
        row: Sequence of values
        n_columns: Required number of columns
        name: Row label for error messages

    Returns:
        Row as a tuple of decimal strings

    Raises:
        DimensionError: If the row has the wrong number of columns
        ValidationError: If any value is not a valid number
    """
    if isinstance(row, (str, bytes)) or not hasattr(row, '__len__'):
        raise ValidationError(f"{name}: expected a sequence of values, got {row!r}")
    if len(row) != n_columns:
        raise DimensionError(
            f"{name}: expected {n_columns} columns, got {len(row)}"
        )
    return tuple(check_decimal(v, f"{name}[{i}]") for i, v in enumerate(row))


def check_min_rows(n_rows: int, min_rows: int, name: str) -> None:
    """
    Verify a dataset has at least the minimum number of rows.

    Raises:
        ValidationError: If there are fewer than min_rows rows
    """
    if n_rows < min_rows:
        raise ValidationError(
            f"{name}: requires at least {min_rows} rows, got {n_rows}"
        )


def check_error_policy(policy: str) -> str:
    """
    Validate how invocation failures are treated.

    'report' surfaces them as failures; 'ignore' accepts them (e.g. for
    intentional out-of-range inputs).

    Raises:
        ValidationError: If policy is unknown
    """
    if policy not in VALID_ERROR_POLICIES:
        raise ValidationError(
            f"error_policy must be one of {VALID_ERROR_POLICIES}, got {policy!r}"
        )
    return policy


def check_tolerance(value: Any, name: str) -> float:
    """
    Validate a tolerance given in epsilons.

    Raises:
        ValidationError: If value is not a finite, non-negative number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{name}: expected a number, got {value!r}")
    if not math.isfinite(value) or value < 0:
        raise ValidationError(
            f"{name}: must be finite and non-negative, got {value}"
        )
    return float(value)
