"""Spacing scale shared by the source design system and the utility classes.

One design-system unit is 0.25rem (4px), so ``m={4}`` means ``margin: 1rem``.
The utility classes use the same step names (``m-4`` is ``margin: 1rem``), which
lets a numeric design-system value pass through unchanged while px and rem
lengths are looked up against the table.

The series is not arithmetic past step 10. Missing steps (11, 13, 15, ...) are
part of the scale, not gaps to interpolate.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from tailmigrate.errors.base import TailmigrateError
from tailmigrate.errors.guidance import build_guidance_message
from tailmigrate.spacing.numbers import format_number


PX_PER_REM = 16


@dataclass(frozen=True)
class ScaleEntry:
    step: str
    length: str


SPACING_SCALE: tuple[ScaleEntry, ...] = (
    ScaleEntry("px", "1px"),
    ScaleEntry("0", "0"),
    ScaleEntry("0.5", "0.125rem"),  # 2px
    ScaleEntry("1", "0.25rem"),  # 4px
    ScaleEntry("1.5", "0.375rem"),  # 6px
    ScaleEntry("2", "0.5rem"),  # 8px
    ScaleEntry("2.5", "0.625rem"),  # 10px
    ScaleEntry("3", "0.75rem"),  # 12px
    ScaleEntry("3.5", "0.875rem"),  # 14px
    ScaleEntry("4", "1rem"),  # 16px
    ScaleEntry("5", "1.25rem"),  # 20px
    ScaleEntry("6", "1.5rem"),  # 24px
    ScaleEntry("7", "1.75rem"),  # 28px
    ScaleEntry("8", "2rem"),  # 32px
    ScaleEntry("9", "2.25rem"),  # 36px
    ScaleEntry("10", "2.5rem"),  # 40px
    ScaleEntry("12", "3rem"),  # 48px
    ScaleEntry("14", "3.5rem"),  # 56px
    ScaleEntry("16", "4rem"),  # 64px
    ScaleEntry("20", "5rem"),  # 80px
    ScaleEntry("24", "6rem"),  # 96px
    ScaleEntry("28", "7rem"),  # 112px
    ScaleEntry("32", "8rem"),  # 128px
    ScaleEntry("36", "9rem"),  # 144px
    ScaleEntry("40", "10rem"),  # 160px
    ScaleEntry("44", "11rem"),  # 176px
    ScaleEntry("48", "12rem"),  # 192px
    ScaleEntry("52", "13rem"),  # 208px
    ScaleEntry("56", "14rem"),  # 224px
    ScaleEntry("60", "15rem"),  # 240px
    ScaleEntry("64", "16rem"),  # 256px
    ScaleEntry("72", "18rem"),  # 288px
    ScaleEntry("80", "20rem"),  # 320px
    ScaleEntry("96", "24rem"),  # 384px
)


def _build_length_map(entries: tuple[ScaleEntry, ...]) -> Mapping[str, str]:
    lengths: dict[str, str] = {}
    for entry in entries:
        if entry.step in lengths:
            raise ValueError(f"Duplicate spacing step '{entry.step}'")
        lengths[entry.step] = entry.length
    return MappingProxyType(lengths)


def _build_rem_index(entries: tuple[ScaleEntry, ...]) -> Mapping[str, str]:
    index: dict[str, str] = {}
    for entry in entries:
        if entry.length.endswith("rem"):
            index[entry.length] = entry.step
    return MappingProxyType(index)


def length_to_px(length: str) -> int | None:
    """Pixel size of a scale length, or None when the unit has no pixel equivalent."""
    if length == "0":
        return 0
    try:
        if length.endswith("rem"):
            px = float(length[: -len("rem")]) * PX_PER_REM
        elif length.endswith("px"):
            px = float(length[: -len("px")])
        else:
            return None
    except ValueError:
        return None
    if not px.is_integer() or px < 0:
        return None
    return int(px)


def _build_px_index(entries: tuple[ScaleEntry, ...]) -> Mapping[int, str]:
    index: dict[int, str] = {}
    for entry in entries:
        px = length_to_px(entry.length)
        if px is None:
            continue
        index[px] = entry.step
    return MappingProxyType(index)


STEP_TO_LENGTH: Mapping[str, str] = _build_length_map(SPACING_SCALE)
REM_TO_STEP: Mapping[str, str] = _build_rem_index(SPACING_SCALE)
PX_TO_STEP: Mapping[int, str] = _build_px_index(SPACING_SCALE)


def scale_steps() -> tuple[str, ...]:
    return tuple(entry.step for entry in SPACING_SCALE)


def is_scale_step(value: str) -> bool:
    return value in STEP_TO_LENGTH


def length_of(step: str) -> str:
    length = STEP_TO_LENGTH.get(step)
    if length is None:
        raise TailmigrateError(
            build_guidance_message(
                what=f"Unknown spacing step '{step}'.",
                why="Spacing steps come from a fixed scale with gaps after 10.",
                fix="Use one of the listed steps or a bracketed value.",
                example="tailmigrate scale",
            )
        )
    return length


def rem_for_px(px: float) -> str:
    return f"{format_number(px / PX_PER_REM)}rem"


__all__ = [
    "PX_PER_REM",
    "PX_TO_STEP",
    "REM_TO_STEP",
    "SPACING_SCALE",
    "STEP_TO_LENGTH",
    "ScaleEntry",
    "is_scale_step",
    "length_of",
    "length_to_px",
    "rem_for_px",
    "scale_steps",
]
