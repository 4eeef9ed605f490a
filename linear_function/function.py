"""The :class:`LinearFunction` value type and its string entry point."""
from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from typing import Any

import numpy as np

from . import grammar
from .constants import VARIABLE

__all__ = ["LinearFunction", "MalformedLinearFunctionError", "parse"]

logger = logging.getLogger(__name__)


class MalformedLinearFunctionError(ValueError):
    """Raised when a string is not a linear function."""

    def __init__(self, text: Any) -> None:
        super().__init__(f"invalid linear function string: {text!r}")
        self.text = text


def _format_number(value: float) -> str:
    # Positional notation only; the grammar has no exponents.
    return np.format_float_positional(value, trim="-")


@dataclass(frozen=True)
class LinearFunction:
    """``f(x) = slope * x + intercept``.

    Build instances with :func:`parse` / :meth:`from_string`; the value never
    changes once created.

    >>> f = parse("2x + 4")
    >>> f(8), f.x_from_y(8), f.root()
    (20.0, 2.0, -2.0)
    """

    slope: float
    intercept: float = 0.0

    def __post_init__(self) -> None:
        for name in ("slope", "intercept"):
            value = getattr(self, name)
            if not isinstance(value, numbers.Real):
                raise TypeError(f"{name} must be a real number, got {value!r}")
            object.__setattr__(self, name, float(value))

    @classmethod
    def from_string(cls, text: str) -> "LinearFunction":
        """Parse *text*, raising :class:`MalformedLinearFunctionError` if invalid."""
        if not grammar.is_valid(text):
            logger.debug("rejected %r", text)
            raise MalformedLinearFunctionError(text)
        try:
            slope, intercept = grammar.extract_coefficients(text)
        except ValueError as exc:
            raise MalformedLinearFunctionError(text) from exc
        return cls(slope, intercept)

    # -- queries ------------------------------------------------------------

    def evaluate(self, x: float) -> float:
        """Return ``f(x)``."""
        return self.slope * x + self.intercept

    __call__ = evaluate

    def x_from_y(self, y: float) -> float:
        """Return the ``x`` for which ``f(x) == y``.

        A zero slope gives ``±inf`` (or ``nan`` when ``y`` equals the
        intercept) instead of raising.
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(y - self.intercept) / np.float64(self.slope))

    def root(self) -> float:
        """Return the ``x`` for which ``f(x) == 0``."""
        return self.x_from_y(0)

    def is_increasing(self) -> bool:
        return self.slope > 0

    def is_decreasing(self) -> bool:
        # A zero slope counts as decreasing.
        return not self.is_increasing()

    # -- conversions --------------------------------------------------------

    def __str__(self) -> str:
        magnitude = abs(self.slope)
        if magnitude == 1:
            term = VARIABLE
        else:
            coeff = _format_number(magnitude)
            if "." not in coeff and not coeff.lstrip("0"):
                coeff = "0.0"  # "0x" is not accepted back
            term = f"{coeff}{VARIABLE}"
        text = f"-{term}" if np.signbit(self.slope) else term
        if self.intercept:
            op = "-" if self.intercept < 0 else "+"
            text += f"{op}{_format_number(abs(self.intercept))}"
        return text

    def to_sympy(self, symbol: str = VARIABLE) -> Any:
        """Return the equivalent SymPy expression with rational coefficients."""
        import sympy as sp

        x = sp.Symbol(symbol)
        return sp.Rational(repr(self.slope)) * x + sp.Rational(repr(self.intercept))

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON‑ready summary of the function."""
        return {
            "function": str(self),
            "slope": self.slope,
            "intercept": self.intercept,
            "root": self.root(),
            "increasing": self.is_increasing(),
            "decreasing": self.is_decreasing(),
        }


def parse(text: str) -> LinearFunction:
    """Return the :class:`LinearFunction` described by *text*."""
    return LinearFunction.from_string(text)
