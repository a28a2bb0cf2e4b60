"""
Environment detection.

Describes the interpreter, the numerical libraries and the operating
system a run happens on. These are the fields tolerance rules are matched
against, so that a platform with known higher error rates can carry its
own allowance.
"""

from dataclasses import dataclass
import platform


@dataclass(frozen=True)
class Environment:
    """
    Where an accuracy run happens.

    Attributes:
        interpreter: Python implementation and version, e.g. 'CPython 3.12.4'
        library: Versions of the libraries supplying the functions under
            test, e.g. 'scipy 1.14.1, mpmath 1.3.0'
        platform: Operating system name as reported by platform.system(),
            e.g. 'Linux', 'Darwin', 'Windows'
    """
    interpreter: str
    library: str
    platform: str

    def __str__(self) -> str:
        return f"{self.interpreter}, {self.library}, {self.platform}"


def get_interpreter() -> str:
    """Python implementation and version."""
    return f"{platform.python_implementation()} {platform.python_version()}"


def get_library() -> str:
    """Versions of the numerical libraries in use."""
    import numpy
    import scipy
    import mpmath

    return (
        f"scipy {scipy.__version__}, mpmath {mpmath.__version__}, "
        f"numpy {numpy.__version__}"
    )


def get_platform() -> str:
    """Operating system name, or 'Unknown' if it cannot be determined."""
    return platform.system() or "Unknown"


def detect_environment() -> Environment:
    """
    Detect the current environment.

    Returns:
        Environment for the running process
    """
    return Environment(
        interpreter=get_interpreter(),
        library=get_library(),
        platform=get_platform(),
    )
