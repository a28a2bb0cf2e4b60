"""
Tests for environment detection.
"""

import platform

from pyaccuracy.core.environment import (
    Environment,
    detect_environment,
    get_interpreter,
    get_library,
    get_platform,
)


class TestEnvironment:
    """Interpreter, library and platform strings."""

    def test_str_joins_fields(self):
        env = Environment("CPython 3.12.4", "scipy 1.14.1", "Linux")
        assert str(env) == "CPython 3.12.4, scipy 1.14.1, Linux"

    def test_interpreter(self):
        assert get_interpreter().startswith(platform.python_implementation())

    def test_library_names_scipy_and_mpmath(self):
        lib = get_library()
        assert "scipy" in lib
        assert "mpmath" in lib

    def test_platform_non_empty(self):
        assert get_platform()

    def test_detect(self):
        env = detect_environment()
        assert env.interpreter == get_interpreter()
        assert env.library == get_library()
        assert env.platform == get_platform()
