"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pyaccuracy.core.environment import Environment
from pyaccuracy.core.result import Result
from pyaccuracy.accuracy._common import ErrorStats
from pyaccuracy.accuracy.solution import AccuracySolution
from pyaccuracy.datasets._dataset import TestDataset


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def linux_env():
    """Fixed environment so tolerance lookup does not depend on the host."""
    return Environment(
        interpreter="CPython 3.12.4",
        library="scipy 1.14.1, mpmath 1.3.0, numpy 2.1.0",
        platform="Linux",
    )


@pytest.fixture
def darwin_env():
    return Environment(
        interpreter="CPython 3.12.4",
        library="scipy 1.14.1, mpmath 1.3.0, numpy 2.1.0",
        platform="Darwin",
    )


@pytest.fixture
def powers_of_two():
    """2**x for x = 0, 1, 2; exact in every numeric type."""
    return TestDataset.from_rows(
        "Powers of two",
        [("0", "0", "1"), ("0", "1", "2"), ("0", "2", "4")],
    )


@pytest.fixture
def make_solution():
    """
    Factory for AccuracySolution with chosen statistics.

    Builds the Result directly so checks can be tested without running
    any function.
    """
    def _make(peak, rms, *, failures=(), error_policy="report",
              dataset="Bessel I0: Mathworld Data", type_name="double",
              function="cyl_bessel_i"):
        stats = ErrorStats(
            errors=np.array([peak]),
            peak=peak,
            rms=rms,
            worst_index=0,
            n_rows=1 + len(failures),
            failures=tuple(failures),
            computed=(1.0,),
        )
        result = Result(
            params=stats,
            info={
                'dataset': dataset,
                'type': type_name,
                'function': function,
                'error_policy': error_policy,
                'origin': 'spot',
            },
            timing=None,
            backend_name='test',
        )
        return AccuracySolution(_result=result, _design=None)

    return _make
