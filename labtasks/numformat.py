"""Reading numbers from text fields and writing them back."""

from __future__ import annotations

import re

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

_DOUBLE_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|nan)",
    re.IGNORECASE,
)
_INT_RE = re.compile(r"[+-]?\d+")


def format_number(value: float | int) -> str:
    """Render a number the way a text field shows it.

    Integers are written in full; floating-point values use the general
    format with six significant digits.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return f"{float(value):g}"


def parse_double(text: str) -> float:
    """Read a floating-point value from text, or 0.0 if it is not a number.

    Surrounding whitespace is ignored; anything else that is not part of
    the number makes the whole text invalid.
    """
    stripped = text.strip()
    if not _DOUBLE_RE.fullmatch(stripped):
        return 0.0
    return float(stripped)


def parse_int(text: str) -> int:
    """Read a 32-bit signed integer from text, or 0 if it is not one."""
    stripped = text.strip()
    if not _INT_RE.fullmatch(stripped):
        return 0
    value = int(stripped)
    if not _INT32_MIN <= value <= _INT32_MAX:
        return 0
    return value