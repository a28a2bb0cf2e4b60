"""
Core infrastructure for PyAccuracy.

This module provides shared abstractions and utilities used by the
dataset runner, the tolerance registry and the suites.

Key components:
    protocols: NumericFunction, DataSource, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    precision: Numeric types under test
    environment: Interpreter / library / platform detection
    timing: Section timer
"""

from pyaccuracy.core.protocols import NumericFunction, DataSource, Backend
from pyaccuracy.core.result import Result
from pyaccuracy.core.exceptions import (
    PyAccuracyError,
    ValidationError,
    DimensionError,
    NumericalError,
    InvocationError,
    ToleranceExceededError,
)
from pyaccuracy.core.precision import (
    NumericType,
    FLOAT,
    DOUBLE,
    LONG_DOUBLE,
    MPF,
    NUMERIC_TYPES,
    get_numeric_type,
    mpf_type,
)
from pyaccuracy.core.environment import Environment, detect_environment

__all__ = [
    # Protocols
    "NumericFunction",
    "DataSource",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyAccuracyError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "InvocationError",
    "ToleranceExceededError",
    # Numeric types
    "NumericType",
    "FLOAT",
    "DOUBLE",
    "LONG_DOUBLE",
    "MPF",
    "NUMERIC_TYPES",
    "get_numeric_type",
    "mpf_type",
    # Environment
    "Environment",
    "detect_environment",
]
