"""
Generic result container for all PyAccuracy runs.

The Result class provides a standardized envelope that every dataset run
produces. This enables shared tooling for timing, reporting and
reproducibility while allowing each kind of run to define its own payload.

Design decisions:
    - Generic over payload P for type safety
    - info dict for flexible metadata (dataset, type, function, policy)
    - timing is optional (don't burden unit tests)
    - provenance records the library versions that produced the numbers
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Payload type


def _default_provenance() -> dict[str, str]:
    """Versions of the libraries an accuracy figure depends on."""
    import numpy
    import scipy
    import mpmath
    from pyaccuracy import __version__

    return {
        'pyaccuracy_version': __version__,
        'numpy_version': numpy.__version__,
        'scipy_version': scipy.__version__,
        'mpmath_version': mpmath.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for accuracy runs.

    Type Parameters:
        P: The payload type (e.g. ErrorStats)

    Attributes:
        params: Payload (error statistics, per-row errors, failures)
        info: Structured metadata (dataset, numeric type, function name)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during the run
        provenance: Library versions, filled in automatically

    Examples:
        >>> Result(
        ...     params=stats,
        ...     info={'dataset': 'Bessel I0: Mathworld Data', 'type': 'double'},
        ...     timing={'total_seconds': 0.01, 'evaluate': 0.008},
        ...     backend_name='cpu_accuracy',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
