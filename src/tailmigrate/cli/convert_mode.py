from __future__ import annotations

from tailmigrate.cli.json_io import dumps_pretty, read_cli_value
from tailmigrate.errors.base import TailmigrateError
from tailmigrate.spacing.convert import convert_spacing
from tailmigrate.spacing.normalize import normalize_spacing


def run_convert_command(args: list[str]) -> int:
    json_mode = "--json" in args
    positional = [item for item in args if item != "--json"]
    if len(positional) != 2:
        raise TailmigrateError("Usage: tailmigrate convert <property> <value> [--json]")
    property_name, raw_value = positional
    value = read_cli_value(raw_value)
    classes = convert_spacing(property_name, value)
    if json_mode:
        print(dumps_pretty({"property": property_name, "value": value, "classes": classes}))
        return 0
    print(classes)
    return 0


def run_normalize_command(args: list[str]) -> int:
    json_mode = "--json" in args
    positional = [item for item in args if item != "--json"]
    if len(positional) != 1:
        raise TailmigrateError("Usage: tailmigrate normalize <value> [--json]")
    value = read_cli_value(positional[0])
    token = normalize_spacing(value)
    if json_mode:
        print(dumps_pretty({"value": value, "token": token}))
        return 0
    print(token)
    return 0


__all__ = ["run_convert_command", "run_normalize_command"]
