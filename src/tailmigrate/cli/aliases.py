from __future__ import annotations

from typing import Dict

# Keys are accepted command words; values are canonical names.
ALIAS_MAP: Dict[str, str] = {
    "convert": "convert",
    "conv": "convert",
    "normalize": "normalize",
    "norm": "normalize",
    "batch": "batch",
    "scale": "scale",
    "properties": "properties",
    "props": "properties",
    "help": "help",
}


def canonical_command(raw: str) -> str:
    return ALIAS_MAP.get(raw, raw)


__all__ = ["ALIAS_MAP", "canonical_command"]
