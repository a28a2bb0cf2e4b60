"""
TestDataset: immutable table of reference rows.

Each row holds the function inputs followed by the expected value, all as
exact decimal strings. Converting to a numeric type happens at run time so
one table serves every precision.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from pyaccuracy.core.exceptions import ValidationError
from pyaccuracy.core.validation import check_row, check_min_rows


VALID_ORIGINS = ("spot", "random")

TestRow = tuple[str, ...]


@dataclass(frozen=True)
class TestDataset:
    """
    Ordered, immutable sequence of reference rows.

    Do not construct directly; use TestDataset.from_rows(), which validates
    every value.

    Attributes:
        name: Label used in reports and tolerance lookup
        columns: Column names; the last column is the expected value
        rows: Rows as tuples of decimal strings
        origin: 'spot' for hand-picked values, 'random' for generated ones
        description: Where the reference values come from
    """
    __test__ = False  # not a pytest test class

    name: str
    columns: tuple[str, ...]
    rows: tuple[TestRow, ...]
    origin: str = "spot"
    description: str = ""

    @classmethod
    def from_rows(
        cls,
        name: str,
        rows: Iterable[Sequence[Any]],
        *,
        columns: Sequence[str] = ("v", "x", "expected"),
        origin: str = "spot",
        description: str = "",
    ) -> 'TestDataset':
        """
        Build a validated dataset.

        Args:
            name: Dataset label
            rows: Iterable of rows; values may be decimal strings, ints or floats
            columns: Column names, inputs first, expected value last
            origin: 'spot' or 'random'
            description: Free-text provenance

        Raises:
            ValidationError: If the name, columns or origin are invalid,
                the dataset is empty, or a value is not a number
            DimensionError: If a row has the wrong number of columns
        """
        if not isinstance(name, str) or not name:
            raise ValidationError(f"name: expected a non-empty string, got {name!r}")
        columns = tuple(columns)
        if len(columns) < 2:
            raise ValidationError(
                f"columns: need at least one input and the expected value, got {columns}"
            )
        if origin not in VALID_ORIGINS:
            raise ValidationError(
                f"origin must be one of {VALID_ORIGINS}, got {origin!r}"
            )

        checked = tuple(
            check_row(row, len(columns), f"{name} row {i}")
            for i, row in enumerate(rows)
        )
        check_min_rows(len(checked), 1, name)

        return cls(
            name=name,
            columns=columns,
            rows=checked,
            origin=origin,
            description=description,
        )

    @property
    def n_rows(self) -> int:
        return len(self.rows)

    @property
    def arity(self) -> int:
        return len(self.columns) - 1

    def renamed(self, name: str) -> 'TestDataset':
        """Same rows under a different label."""
        return TestDataset(
            name=name,
            columns=self.columns,
            rows=self.rows,
            origin=self.origin,
            description=self.description,
        )

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self):
        return iter(self.rows)

    def __getitem__(self, index: int) -> TestRow:
        return self.rows[index]

    def __repr__(self) -> str:
        return (
            f"TestDataset(name={self.name!r}, n_rows={self.n_rows}, "
            f"origin={self.origin!r})"
        )
