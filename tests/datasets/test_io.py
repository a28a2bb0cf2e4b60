"""
Tests for JSON dataset fixtures.
"""

import json

import pytest

from pyaccuracy.core.exceptions import ValidationError
from pyaccuracy.datasets import I0_DATA, load_dataset, save_dataset
from pyaccuracy.datasets.io import dataset_from_dict, dataset_to_dict


class TestFixtures:
    """Saving and loading JSON dataset fixtures."""

    def test_save_then_load(self, tmp_path):
        path = save_dataset(I0_DATA, tmp_path / "i0.json")
        loaded = load_dataset(path)
        assert loaded == I0_DATA

    def test_values_stored_as_strings(self):
        data = dataset_to_dict(I0_DATA)
        assert all(isinstance(v, str) for row in data["rows"] for v in row)

    def test_optional_keys_default(self):
        data = dataset_from_dict({"name": "d", "rows": [["0", "0", "1"]]})
        assert data.origin == "spot"
        assert data.columns == ("v", "x", "expected")

    def test_missing_keys(self):
        with pytest.raises(ValidationError, match="missing keys"):
            dataset_from_dict({"rows": []})

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(ValidationError, match="invalid JSON"):
            load_dataset(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text(json.dumps([1, 2]))
        with pytest.raises(ValidationError, match="JSON object"):
            load_dataset(path)

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "binary.json"
        path.write_bytes(b"\xff\xfe\x00")
        with pytest.raises(ValidationError, match="UTF-8"):
            load_dataset(path)
