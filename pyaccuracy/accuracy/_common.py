"""
Common types for accuracy runs.

Defines ErrorStats (the payload of every dataset run) and RowFailure.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class RowFailure:
    """
    A row on which the function under test produced no usable value.

    Attributes
    ----------
    index : int
        Row index within the dataset.
    row : tuple of str
        The reference row (inputs then expected value).
    message : str
        What went wrong (exception text or non-finite result).
    exception_type : str
        Name of the exception class, or 'NaN' for a NaN result.
    """
    index: int
    row: tuple[str, ...]
    message: str
    exception_type: str


@dataclass(frozen=True)
class ErrorStats:
    """
    Error statistics of one dataset run.

    All errors are relative errors in units of machine epsilon of the
    numeric type under test.

    Attributes
    ----------
    errors : ndarray
        Per-row error, shape (n_rows,). NaN for rows that failed.
    peak : float
        Maximum error over evaluated rows (0 if none were evaluated).
    rms : float
        Root-mean-square error over evaluated rows.
    worst_index : int or None
        First row attaining the peak error, None if no row was evaluated.
    n_rows : int
        Number of rows in the dataset.
    failures : tuple of RowFailure
        Rows on which the function raised or returned NaN.
    computed : tuple
        Value returned for each row (None for failed rows).
    """
    errors: NDArray[np.floating[Any]]
    peak: float
    rms: float
    worst_index: int | None
    n_rows: int
    failures: tuple[RowFailure, ...] = field(default_factory=tuple)
    computed: tuple[Any, ...] = field(default_factory=tuple)

    @property
    def n_evaluated(self) -> int:
        return self.n_rows - len(self.failures)

    @property
    def n_failures(self) -> int:
        return len(self.failures)
