from __future__ import annotations

import json
from pathlib import Path


def canonical_json_dumps(value: object, *, pretty: bool = False) -> str:
    if pretty:
        return json.dumps(value, sort_keys=True, indent=2, ensure_ascii=False) + "\n"
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def canonical_json_dump(path: str | Path, value: object, *, pretty: bool = True) -> None:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(canonical_json_dumps(value, pretty=pretty), encoding="utf-8")


__all__ = ["canonical_json_dump", "canonical_json_dumps"]
