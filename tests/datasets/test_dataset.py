"""
Tests for TestDataset construction and access.
"""

from dataclasses import FrozenInstanceError

import pytest

from pyaccuracy.core.exceptions import DimensionError, ValidationError
from pyaccuracy.datasets import TestDataset


class TestFromRows:
    """Validated construction of datasets."""

    def test_basic(self):
        data = TestDataset.from_rows("d", [("0", "1", "1.5"), (1, 2.5, "3")])
        assert data.n_rows == 2
        assert data.arity == 2
        assert data.rows[1] == ("1", "2.5", "3")
        assert data.origin == "spot"

    def test_custom_columns(self):
        data = TestDataset.from_rows("d", [("1", "2")], columns=("x", "expected"))
        assert data.arity == 1

    def test_empty_rejected(self):
        with pytest.raises(ValidationError, match="at least 1 rows"):
            TestDataset.from_rows("d", [])

    def test_wrong_arity(self):
        with pytest.raises(DimensionError):
            TestDataset.from_rows("d", [("0", "1", "1"), ("0", "1")])

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="NaN"):
            TestDataset.from_rows("d", [("0", "1", "nan")])

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError, match="name"):
            TestDataset.from_rows("", [("0", "1", "1")])

    def test_single_column_rejected(self):
        with pytest.raises(ValidationError, match="columns"):
            TestDataset.from_rows("d", [("1",)], columns=("expected",))

    def test_invalid_origin(self):
        with pytest.raises(ValidationError, match="origin"):
            TestDataset.from_rows("d", [("0", "1", "1")], origin="measured")


class TestAccess:
    """Sequence access and immutability."""

    def test_sequence_protocol(self, powers_of_two):
        assert len(powers_of_two) == 3
        assert powers_of_two[2] == ("0", "2", "4")
        assert list(powers_of_two) == list(powers_of_two.rows)

    def test_renamed_keeps_rows(self, powers_of_two):
        other = powers_of_two.renamed("Powers of two (Integer Version)")
        assert other.name == "Powers of two (Integer Version)"
        assert other.rows is powers_of_two.rows
        assert powers_of_two.name == "Powers of two"

    def test_frozen(self, powers_of_two):
        with pytest.raises(FrozenInstanceError):
            powers_of_two.name = "x"

    def test_repr(self, powers_of_two):
        assert "n_rows=3" in repr(powers_of_two)
