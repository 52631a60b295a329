from __future__ import annotations

from dataclasses import dataclass


BASE_BREAKPOINT = "base"


@dataclass(frozen=True)
class Breakpoint:
    name: str
    min_width: str | None

    @property
    def prefix(self) -> str:
        return f"{self.name}:" if self.name else ""


BREAKPOINT_LADDER: tuple[Breakpoint, ...] = (
    Breakpoint("", None),
    Breakpoint("sm", "640px"),
    Breakpoint("md", "768px"),
    Breakpoint("lg", "1024px"),
    Breakpoint("xl", "1280px"),
    Breakpoint("2xl", "1536px"),
)


def ladder_prefix(index: int) -> str | None:
    """Class prefix for the tier at a responsive array position, None past the ladder."""
    if index < 0 or index >= len(BREAKPOINT_LADDER):
        return None
    return BREAKPOINT_LADDER[index].prefix


def key_prefix(key: str) -> str:
    # object keys are taken verbatim; only "base" drops the prefix
    if key == BASE_BREAKPOINT:
        return ""
    return f"{key}:"


__all__ = ["BASE_BREAKPOINT", "BREAKPOINT_LADDER", "Breakpoint", "key_prefix", "ladder_prefix"]
