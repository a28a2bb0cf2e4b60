"""
Exception hierarchy for PyAccuracy.

All exceptions inherit from PyAccuracyError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs allowed values
    - Never catch and re-raise with less information
"""

from typing import Any


class PyAccuracyError(Exception):
    """Base exception for all PyAccuracy errors."""
    pass


class ValidationError(PyAccuracyError):
    """
    Input validation failed.

    Raised when datasets, numeric type names, policies or tolerance
    rules fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Row arity is incorrect or inconsistent.

    Raised when a dataset row does not have the number of columns the
    dataset declares, or a function is called with the wrong number of
    inputs.
    """
    pass


class NumericalError(PyAccuracyError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during evaluation.
    """
    pass


class InvocationError(NumericalError):
    """
    The function under test could not produce a real, finite answer.

    Raised by function adapters when an input lies outside the real
    domain (e.g. non-integer order with a negative argument) or when the
    implementation signals an error for the input.

    Attributes:
        function_name: Name of the function that failed
        inputs: The inputs it was called with
    """

    def __init__(
        self,
        message: str,
        function_name: str | None = None,
        inputs: tuple[Any, ...] | None = None,
    ):
        super().__init__(message)
        self.function_name = function_name
        self.inputs = inputs


class ToleranceExceededError(PyAccuracyError):
    """
    Observed error exceeds the registered tolerance.

    Accuracy failures are normally reported, not raised. This exception
    is only raised on request via ToleranceCheck.raise_if_failed().

    Attributes:
        function_name: Function under test
        type_name: Numeric type under test
        dataset_name: Dataset the function was run against
        peak: Observed peak error in epsilons
        rms: Observed RMS error in epsilons
        max_peak: Allowed peak error in epsilons
        max_rms: Allowed RMS error in epsilons
    """

    def __init__(
        self,
        message: str,
        function_name: str,
        type_name: str,
        dataset_name: str,
        peak: float,
        rms: float,
        max_peak: float,
        max_rms: float,
    ):
        super().__init__(message)
        self.function_name = function_name
        self.type_name = type_name
        self.dataset_name = dataset_name
        self.peak = peak
        self.rms = rms
        self.max_peak = max_peak
        self.max_rms = max_rms
