from __future__ import annotations

from tailmigrate.cli.json_io import dumps_pretty
from tailmigrate.errors.base import TailmigrateError
from tailmigrate.spacing.breakpoints import BREAKPOINT_LADDER
from tailmigrate.spacing.properties import PROPERTY_PREFIXES
from tailmigrate.spacing.scale import SPACING_SCALE, length_to_px


def run_scale_command(args: list[str]) -> int:
    json_mode = _json_only(args, "Usage: tailmigrate scale [--json]")
    rows = [
        {"step": entry.step, "length": entry.length, "px": length_to_px(entry.length)} for entry in SPACING_SCALE
    ]
    if json_mode:
        breakpoints = [{"name": bp.name or "base", "min_width": bp.min_width} for bp in BREAKPOINT_LADDER]
        print(dumps_pretty({"scale": rows, "breakpoints": breakpoints}))
        return 0
    print("Spacing scale:")
    for row in rows:
        print(f"- {row['step']}: {row['length']} ({row['px']}px)")
    return 0


def run_properties_command(args: list[str]) -> int:
    json_mode = _json_only(args, "Usage: tailmigrate properties [--json]")
    if json_mode:
        print(dumps_pretty(dict(PROPERTY_PREFIXES)))
        return 0
    print("Spacing properties:")
    for name, prefix in PROPERTY_PREFIXES.items():
        print(f"- {name}: {prefix}")
    return 0


def _json_only(args: list[str], usage: str) -> bool:
    if any(item != "--json" for item in args):
        raise TailmigrateError(usage)
    return "--json" in args


__all__ = ["run_properties_command", "run_scale_command"]
