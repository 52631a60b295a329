from __future__ import annotations

import json
import math
import re
from decimal import Decimal

from tailmigrate.spacing.numbers import format_number, is_number, parse_leading_number, parse_number
from tailmigrate.spacing.scale import PX_TO_STEP, REM_TO_STEP, is_scale_step, rem_for_px


AUTO = "auto"
ZERO = "0"
# one design-system unit is 4px, used for negative numeric steps
PX_PER_UNIT = 4

_ZERO_LENGTHS = {"0", "0px", "0rem"}
_WHITESPACE_RE = re.compile(r"\s+")
_COMPACT_FUNCTIONS = ("calc", "clamp")
# int-to-text conversion refuses longer values
_MAX_EXACT_DIGITS = 4000


def normalize_spacing(value: object) -> str:
    """Map one spacing value to a class suffix.

    Returns a scale step (``"4"``, ``"0.5"``, ``"px"``), ``"auto"``, ``"0"`` or a
    bracketed literal such as ``"[15px]"``. ``None`` and blank strings give
    ``""`` and produce no class.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return _normalize_text(value)
    if isinstance(value, Decimal):
        number = _decimal_number(value)
        if number is None:
            return _normalize_text(_leaf_text(value))
        return _normalize_number(number)
    if is_number(value):
        return _normalize_number(value)
    return _normalize_text(_leaf_text(value))


def is_bracketed(token: str) -> bool:
    return token.startswith("[") and token.endswith("]")


def _normalize_number(number: int | float) -> str:
    if number == 0:
        return ZERO
    if number < 0:
        px = abs(number) * PX_PER_UNIT
        if not is_number(px):
            return f"[{_leaf_text(number)}]"
        return f"[-{format_number(px)}px]"
    return format_number(number)


def _decimal_number(value: Decimal) -> int | float | None:
    if not value.is_finite() or value.adjusted() > _MAX_EXACT_DIGITS:
        return None
    if value == value.to_integral_value():
        return int(value)
    number = float(value)
    # too small or too large for a float
    if not math.isfinite(number) or number == 0:
        return None
    return number


def _normalize_text(value: str) -> str:
    if not value.strip():
        return ""
    if value == AUTO:
        return AUTO
    if value.startswith("-"):
        number = parse_number(value)
        if number is not None:
            return _normalize_number(number)
    clean = _compact(value)
    if clean in _ZERO_LENGTHS:
        return ZERO
    if is_scale_step(clean):
        return clean
    step = _lookup_rem(clean)
    if step is not None:
        return step
    if clean.endswith("px"):
        return _normalize_px(clean)
    return f"[{clean}]"


def _compact(value: str) -> str:
    if any(name in value for name in _COMPACT_FUNCTIONS):
        return _WHITESPACE_RE.sub("", value)
    return value


def _lookup_rem(value: str) -> str | None:
    if value.endswith("px"):
        px = parse_leading_number(value)
        if px is None:
            return None
        return REM_TO_STEP.get(rem_for_px(px))
    if value.endswith("rem"):
        return REM_TO_STEP.get(value)
    return None


def _normalize_px(value: str) -> str:
    magnitude = parse_leading_number(value)
    if magnitude is None:
        return f"[{value}]"
    px = int(magnitude)
    if px < 0:
        return f"[-{abs(px)}px]"
    step = PX_TO_STEP.get(px)
    if step is not None:
        return step
    return f"[{px}px]"


def _leaf_text(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and not math.isfinite(value):
        if math.isnan(value):
            return "NaN"
        return "Infinity" if value > 0 else "-Infinity"
    if isinstance(value, (list, tuple, dict)):
        try:
            return json.dumps(value, separators=(",", ":"), sort_keys=False, default=str)
        except ValueError:
            return _WHITESPACE_RE.sub("", str(value))
    return _WHITESPACE_RE.sub("", str(value))


__all__ = ["AUTO", "PX_PER_UNIT", "ZERO", "is_bracketed", "normalize_spacing"]
