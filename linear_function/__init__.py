"""Parse single‑variable linear functions and query them.

Typical usage
-------------
>>> from linear_function import is_valid, parse
>>> is_valid("2x + 3")
True
>>> f = parse("3 - x")
>>> f.slope, f.intercept, f.root()
(-1.0, 3.0, 3.0)
"""
from importlib.metadata import version as _version  # type: ignore

from .function import LinearFunction, MalformedLinearFunctionError, parse
from .grammar import extract_coefficients, is_valid

__all__ = [
    "LinearFunction",
    "MalformedLinearFunctionError",
    "extract_coefficients",
    "is_valid",
    "parse",
    "__version__",
]

try:
    __version__ = _version("linear_function")
except Exception:  # pragma: no cover – package not installed yet
    __version__ = "0.0.0"
