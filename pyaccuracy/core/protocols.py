"""
Core protocols for PyAccuracy.

These define structural interfaces that datasets, functions under test and
backends must satisfy. We use Protocol (structural typing) rather than ABC
(nominal typing) so that any plain callable or third-party object can take
part without inheriting from our classes.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Type-safe: use generics to preserve type information through runs
"""

from typing import Protocol, TypeVar, Any, Sequence, runtime_checkable

# Type variables for generic payloads
P = TypeVar('P')  # Payload type
D = TypeVar('D')  # Design type
T = TypeVar('T')  # Value type of the function under test


@runtime_checkable
class NumericFunction(Protocol[T]):
    """
    A function under test.

    Accepts N values of one numeric type and returns one value of that
    type. Scalar adapters around scipy ufuncs, mpmath functions and
    lambdas all satisfy this protocol.

    Implementations signal inputs outside their domain by raising
    InvocationError (or ArithmeticError / ValueError); returning NaN is
    treated the same way by the runner.
    """

    def __call__(self, *args: T) -> T:
        ...


@runtime_checkable
class DataSource(Protocol):
    """
    Minimal protocol for a table of reference rows.

    A row holds the function inputs followed by the expected value, all as
    decimal strings so that each numeric type rounds the exact value
    itself.
    """

    @property
    def name(self) -> str:
        """Human-readable dataset label used in reports and tolerance lookup."""
        ...

    @property
    def n_rows(self) -> int:
        """Number of reference rows."""
        ...

    @property
    def arity(self) -> int:
        """Number of function inputs per row (columns minus the expected value)."""
        ...

    @property
    def rows(self) -> Sequence[tuple[str, ...]]:
        """Rows in dataset order."""
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for evaluation backends.

    Each backend takes a design (dataset, function, numeric type, policy)
    and produces a Result envelope around its payload.

    Backends are stateless: all configuration is passed via the design or
    at construction time.

    Type Parameters:
        D: The design type this backend accepts
        P: The payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{task}', e.g. 'cpu_accuracy'.
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Run the design.

        Args:
            design: Fully validated design

        Returns:
            Result envelope containing the payload and metadata

        Raises:
            ValidationError: If the design is invalid for this backend
        """
        ...


def describe_callable(f: Any) -> str:
    """Best-effort display name for a callable."""
    name = getattr(f, '__qualname__', None) or getattr(f, '__name__', None)
    if name is None:
        return type(f).__name__
    module = getattr(f, '__module__', None)
    if module and module != 'builtins':
        return f"{module}.{name}"
    return name
