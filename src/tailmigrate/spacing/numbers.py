from __future__ import annotations

import math
import re


_FULL_NUMBER_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")
_LEADING_NUMBER_RE = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def is_number(value: object) -> bool:
    # bool is an int subclass but never a spacing number; ints of any size are finite
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def parse_number(text: str) -> float | None:
    """Parse text that is entirely a finite decimal number, surrounding whitespace allowed."""
    stripped = text.strip()
    if not _FULL_NUMBER_RE.match(stripped):
        return None
    return _finite(float(stripped))


def parse_leading_number(text: str) -> float | None:
    match = _LEADING_NUMBER_RE.match(text)
    if match is None:
        return None
    return _finite(float(match.group(1)))


def format_number(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _finite(number: float) -> float | None:
    # "1e400" overflows to inf
    return number if math.isfinite(number) else None


__all__ = ["format_number", "is_number", "parse_leading_number", "parse_number"]
