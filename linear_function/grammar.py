"""Recognition and coefficient extraction for linear function strings.

Accepted shapes, after every space is removed:

* slope first:     ``[+-]? TERM ([+-] CONST)?``   e.g. ``2x+3``, ``-x``
* intercept first: ``[+-]? CONST [+-] TERM``      e.g. ``3-x``, ``-1.5-2.3x``

where ``TERM`` is ``x`` preceded by an optional integer coefficient without a
leading zero or by a decimal coefficient with digits on both sides of the
point, and ``CONST`` is an integer or such a decimal.
"""
from __future__ import annotations

import logging
import re

from .constants import VARIABLE

__all__ = ["is_valid", "extract_coefficients", "remove_spaces"]

logger = logging.getLogger(__name__)

_X = re.escape(VARIABLE)
_SIGN = r"[+-]"
_CONST = r"[0-9]+(?:\.[0-9]+)?"


def _term(n: int) -> str:
    return rf"(?:(?P<int{n}>[1-9][0-9]*)?{_X}|(?P<dec{n}>[0-9]+\.[0-9]+){_X})"


# Both shapes in one anchored pattern; group suffix 1 or 2 names the shape.
_LINEAR_RE = re.compile(
    rf"(?P<sign1>{_SIGN})?{_term(1)}(?:(?P<csign1>{_SIGN})(?P<const1>{_CONST}))?"
    rf"|(?P<csign2>{_SIGN})?(?P<const2>{_CONST})(?P<sign2>{_SIGN}){_term(2)}"
)


def remove_spaces(text: str) -> str:
    """Drop every space character; other whitespace is kept."""
    return text.replace(" ", "")


def is_valid(text: str) -> bool:
    """Return ``True`` when *text* is a linear function string."""
    if not isinstance(text, str):
        return False
    return _LINEAR_RE.fullmatch(remove_spaces(text)) is not None


def extract_coefficients(text: str) -> tuple[float, float]:
    """Return ``(slope, intercept)`` for a linear function string.

    Raises :class:`ValueError` when *text* is not one.
    """
    m = _LINEAR_RE.fullmatch(remove_spaces(text))
    if m is None:
        raise ValueError(f"not a linear function: {text!r}")

    n = 2 if m.group("const2") is not None else 1
    slope = _signed(m.group(f"sign{n}"), m.group(f"int{n}") or m.group(f"dec{n}") or "1")
    const = m.group(f"const{n}")
    intercept = _signed(m.group(f"csign{n}"), const) if const is not None else 0.0

    logger.debug("extracted slope=%r intercept=%r from %r", slope, intercept, text)
    return slope, intercept


def _signed(sign: str | None, digits: str) -> float:
    value = float(digits)
    return -value if sign == "-" else value
