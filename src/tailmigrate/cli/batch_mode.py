from __future__ import annotations

from pathlib import Path

from tailmigrate.cli.json_io import dumps_pretty, load_json_file
from tailmigrate.config.loader import load_config
from tailmigrate.errors.base import TailmigrateError
from tailmigrate.observability.log_store import LogStore
from tailmigrate.spacing.batch import convert_props


def run_batch_command(args: list[str]) -> int:
    json_mode = "--json" in args
    remaining = [item for item in args if item != "--json"]
    root_arg, remaining = _split_root_arg(remaining)
    if len(remaining) != 1:
        raise TailmigrateError("Usage: tailmigrate batch <props.json> [--root DIR] [--json]")
    path = Path(remaining[0])
    root = Path(root_arg) if root_arg else path.resolve().parent
    config = load_config(root=root)
    log_store = LogStore(project_root=root, min_level=config.logging.level)
    payload = load_json_file(path)
    result = convert_props(payload, config=config, log_store=log_store)
    if config.logging.persist:
        log_store.flush()
    if json_mode:
        print(dumps_pretty(result.as_dict()))
        return 0
    for item in result.conversions:
        print(f"- {item.name}: {item.classes or '(no classes)'}")
    for item in result.rejected:
        print(f"! {item.name}: {item.reason}")
    print(f"className: {result.class_name}")
    return 0


def _split_root_arg(args: list[str]) -> tuple[str | None, list[str]]:
    if "--root" not in args:
        return None, args
    index = args.index("--root")
    if index + 1 >= len(args):
        raise TailmigrateError("--root needs a directory.")
    return args[index + 1], args[:index] + args[index + 2 :]


__all__ = ["run_batch_command"]
