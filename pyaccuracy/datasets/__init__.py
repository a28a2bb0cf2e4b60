"""
Reference datasets.

Public API:
    TestDataset                 - immutable table of reference rows
    I0_DATA, I1_DATA, IN_DATA,
    IV_DATA                     - Bessel I spot values
    generate_bessel_i_data()    - high-precision random I_v(x) data
    load_dataset(), save_dataset() - JSON fixtures
"""

from pyaccuracy.datasets._dataset import TestDataset, TestRow
from pyaccuracy.datasets.bessel_i import (
    I0_DATA, I1_DATA, IN_DATA, IV_DATA,
    INTEGER_ORDER_DATA, ALL_SPOT_DATA,
)
from pyaccuracy.datasets.generate import generate_bessel_i_data
from pyaccuracy.datasets.io import load_dataset, save_dataset

__all__ = [
    "TestDataset",
    "TestRow",
    "I0_DATA",
    "I1_DATA",
    "IN_DATA",
    "IV_DATA",
    "INTEGER_ORDER_DATA",
    "ALL_SPOT_DATA",
    "generate_bessel_i_data",
    "load_dataset",
    "save_dataset",
]
