from __future__ import annotations

import sys
from pathlib import Path

from tailmigrate.cli.aliases import canonical_command
from tailmigrate.cli.batch_mode import run_batch_command
from tailmigrate.cli.convert_mode import run_convert_command, run_normalize_command
from tailmigrate.cli.scale_mode import run_properties_command, run_scale_command
from tailmigrate.errors.base import TailmigrateError
from tailmigrate.errors.render import format_error
from tailmigrate.version import get_version


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    try:
        if not args:
            _print_usage()
            return 1

        cmd_raw = args[0]
        cmd = canonical_command(cmd_raw)

        if cmd_raw == "--version":
            print(f"tailmigrate {get_version()}")
            return 0
        if cmd_raw in {"--help", "-h"} or cmd == "help":
            _print_usage()
            return 0
        if cmd == "convert":
            return run_convert_command(args[1:])
        if cmd == "normalize":
            return run_normalize_command(args[1:])
        if cmd == "batch":
            return run_batch_command(args[1:])
        if cmd == "scale":
            return run_scale_command(args[1:])
        if cmd == "properties":
            return run_properties_command(args[1:])
        raise TailmigrateError(f"Unknown command '{cmd_raw}'. Run `tailmigrate help` for usage.")
    except TailmigrateError as err:
        print(format_error(err, _error_source(err)), file=sys.stderr)
        return 1


def _error_source(err: TailmigrateError) -> object | None:
    details = err.details if isinstance(err.details, dict) else {}
    if isinstance(details.get("source"), str):
        return details["source"]
    file_path = details.get("file")
    if isinstance(file_path, str):
        path = Path(file_path)
        if path.exists():
            return {file_path: path.read_text(encoding="utf-8")}
    return None


def _print_usage() -> None:
    usage = """Usage:
  tailmigrate convert <property> <value> [--json]   # spacing prop to classes (alias: conv)
  tailmigrate normalize <value> [--json]            # one value to a class suffix (alias: norm)
  tailmigrate batch <props.json> [--root DIR] [--json]  # convert extracted props
  tailmigrate scale [--json]                        # list the spacing scale and breakpoints
  tailmigrate properties [--json]                   # list spacing properties (alias: props)
  tailmigrate --version
"""
    print(usage.rstrip())


if __name__ == "__main__":
    sys.exit(main())
