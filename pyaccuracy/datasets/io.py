"""
JSON fixtures for datasets.

A fixture is one JSON object:

    {
      "name": "Bessel Iv: Random Data",
      "origin": "random",
      "description": "...",
      "columns": ["v", "x", "expected"],
      "rows": [["-37.29999923706054688", "12.5", "1.23e-5"], ...]
    }

Values are stored as strings to keep every digit of the reference.
"""

from __future__ import annotations

import json
from pathlib import Path

from pyaccuracy.core.exceptions import ValidationError
from pyaccuracy.datasets._dataset import TestDataset


def dataset_to_dict(dataset: TestDataset) -> dict:
    return {
        "name": dataset.name,
        "origin": dataset.origin,
        "description": dataset.description,
        "columns": list(dataset.columns),
        "rows": [list(row) for row in dataset.rows],
    }


def dataset_from_dict(data: dict) -> TestDataset:
    """
    Build a dataset from its fixture dict.

    Raises:
        ValidationError: If required keys are missing or values are invalid
    """
    missing = [k for k in ("name", "rows") if k not in data]
    if missing:
        raise ValidationError(f"dataset fixture: missing keys {missing}")
    return TestDataset.from_rows(
        data["name"],
        data["rows"],
        columns=data.get("columns", ("v", "x", "expected")),
        origin=data.get("origin", "spot"),
        description=data.get("description", ""),
    )


def save_dataset(dataset: TestDataset, path: str | Path) -> Path:
    """Write a dataset fixture; returns the path written."""
    path = Path(path)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(dataset_to_dict(dataset), f, indent=2)
    return path


def load_dataset(path: str | Path) -> TestDataset:
    """
    Read a dataset fixture.

    Raises:
        ValidationError: If the file is not valid JSON or not a valid dataset
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValidationError(f"{path.name}: invalid JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise ValidationError(f"{path.name}: not UTF-8 text: {e}") from e
    if not isinstance(data, dict):
        raise ValidationError(f"{path.name}: expected a JSON object")
    return dataset_from_dict(data)
