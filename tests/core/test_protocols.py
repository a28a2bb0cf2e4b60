"""
Structural conformance of library objects to the core protocols.
"""

from pyaccuracy.accuracy import CPUAccuracyBackend
from pyaccuracy.core.protocols import Backend, DataSource, NumericFunction, describe_callable
from pyaccuracy.datasets import I0_DATA
from pyaccuracy.special import cyl_bessel_i_function


def plain(v, x):
    return x


class TestProtocols:
    """Concrete classes satisfy the runtime protocols."""

    def test_dataset_is_data_source(self):
        assert isinstance(I0_DATA, DataSource)

    def test_adapter_is_numeric_function(self):
        assert isinstance(cyl_bessel_i_function('double'), NumericFunction)
        assert isinstance(plain, NumericFunction)

    def test_cpu_backend(self):
        assert isinstance(CPUAccuracyBackend(), Backend)


class TestDescribeCallable:
    """Display names for functions under test."""

    def test_function(self):
        assert describe_callable(plain).endswith("test_protocols.plain")

    def test_builtin(self):
        assert describe_callable(abs) == "abs"

    def test_instance_without_name(self):
        assert describe_callable(cyl_bessel_i_function('double')) == "BesselI"
