"""
AccuracyDesign: everything one dataset run needs.

Bundles the dataset, the function under test, the numeric type and the
invocation-error policy. Immutable after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from pyaccuracy.core.exceptions import ValidationError
from pyaccuracy.core.precision import NumericType, get_numeric_type
from pyaccuracy.core.protocols import describe_callable
from pyaccuracy.core.validation import check_error_policy
from pyaccuracy.datasets._dataset import TestDataset


@dataclass(frozen=True)
class AccuracyDesign:
    """
    Design for a dataset run.

    Do not construct directly; use AccuracyDesign.for_dataset().
    """
    _dataset: TestDataset
    _function: Callable[..., Any]
    _ntype: NumericType
    _function_name: str
    _error_policy: str = "report"

    @property
    def dataset(self) -> TestDataset:
        return self._dataset

    @property
    def function(self) -> Callable[..., Any]:
        return self._function

    @property
    def ntype(self) -> NumericType:
        return self._ntype

    @property
    def function_name(self) -> str:
        return self._function_name

    @property
    def error_policy(self) -> str:
        return self._error_policy

    @property
    def dataset_name(self) -> str:
        return self._dataset.name

    @property
    def type_name(self) -> str:
        return self._ntype.name

    @classmethod
    def for_dataset(
        cls,
        dataset: TestDataset,
        function: Callable[..., Any],
        *,
        ntype: str | NumericType = "double",
        function_name: str | None = None,
        error_policy: str = "report",
    ) -> 'AccuracyDesign':
        """
        Validate and build a design.

        Parameters
        ----------
        dataset : TestDataset
            Reference rows.
        function : callable
            Function under test; called with dataset.arity values of ntype.
        ntype : str or NumericType
            Numeric type the run is performed in.
        function_name : str or None
            Label for reports and tolerance lookup. Defaults to the
            function's 'name' attribute, or its qualified name.
        error_policy : str
            'report' (invocation failures fail the run) or 'ignore'.

        Raises
        ------
        ValidationError
            If any argument is invalid.
        """
        if not isinstance(dataset, TestDataset):
            raise ValidationError(
                f"dataset: expected TestDataset, got {type(dataset).__name__}"
            )
        if not callable(function):
            raise ValidationError(
                f"function: expected a callable, got {type(function).__name__}"
            )
        ntype = get_numeric_type(ntype)
        check_error_policy(error_policy)

        if function_name is None:
            function_name = getattr(function, "name", None)
            if not isinstance(function_name, str):
                function_name = describe_callable(function)

        return cls(
            _dataset=dataset,
            _function=function,
            _ntype=ntype,
            _function_name=function_name,
            _error_policy=error_policy,
        )
