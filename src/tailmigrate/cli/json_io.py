from __future__ import annotations

import json
from pathlib import Path

from tailmigrate.determinism import canonical_json_dumps
from tailmigrate.errors.base import TailmigrateError
from tailmigrate.errors.guidance import build_guidance_message
from tailmigrate.spacing.literals import looks_like_attribute, parse_attribute_value


def dumps_pretty(payload: object) -> str:
    return canonical_json_dumps(payload, pretty=True).rstrip("\n")


def read_cli_value(text: str) -> object:
    """Read a spacing value typed on the command line.

    JSON wins (``4``, ``[2, null, "1rem"]``, ``{"base": 2}``), then JSX attribute
    text (``{4}``, ``{{ base: 2 }}``), and anything else is a plain string.
    """
    try:
        return json.loads(text)
    except ValueError:
        # also covers integers too long for int parsing
        pass
    if looks_like_attribute(text):
        return parse_attribute_value(text)
    return text


def load_json_file(path: Path) -> object:
    if not path.exists():
        raise TailmigrateError(
            build_guidance_message(
                what=f"File '{path.as_posix()}' was not found.",
                why="The batch command reads props from a JSON file.",
                fix="Check the path and try again.",
                example="tailmigrate batch props.json",
            )
        )
    text = path.read_text(encoding="utf-8")
    try:
        return json.loads(text)
    except json.JSONDecodeError as err:
        raise TailmigrateError(
            build_guidance_message(
                what=f"File '{path.name}' is not valid JSON.",
                why=err.msg,
                fix="Fix the JSON syntax in the props file.",
                example='{"mb": "24px", "px": [2, 4]}',
            ),
            line=err.lineno,
            column=err.colno,
            details={"file": path.as_posix()},
        ) from err


__all__ = ["dumps_pretty", "load_json_file", "read_cli_value"]
