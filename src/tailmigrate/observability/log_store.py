from __future__ import annotations

import json
from pathlib import Path

from tailmigrate.determinism import canonical_json_dump


LOG_LEVELS = {"debug", "info", "warn", "error"}
LEVEL_ORDER = {"debug": 0, "info": 1, "warn": 2, "error": 3}
STATE_DIRNAME = ".tailmigrate"
LOG_DIRNAME = "logs"
LOG_FILENAME = "logs.json"


def logs_path(project_root: str | Path | None) -> Path | None:
    if project_root is None:
        return None
    return Path(project_root) / STATE_DIRNAME / LOG_DIRNAME / LOG_FILENAME


class LogStore:
    def __init__(
        self,
        *,
        project_root: str | Path | None = None,
        min_level: str = "debug",
    ) -> None:
        self._project_root = project_root
        self._min_level = _normalize_level(min_level)
        self._logs: list[dict] = []
        self._seq = 0

    def reset(self) -> None:
        self._logs = []
        self._seq = 0

    def record(
        self,
        *,
        level: str,
        message: object,
        fields: object | None = None,
    ) -> dict | None:
        normalized_level = _normalize_level(level)
        if LEVEL_ORDER[normalized_level] < LEVEL_ORDER[self._min_level]:
            return None
        self._seq += 1
        event = {
            "id": f"log:{self._seq:04d}",
            "level": normalized_level,
            "message": _coerce_message(message),
        }
        if fields is not None:
            event["fields"] = fields
        self._logs.append(event)
        return event

    def debug(self, message: object, **fields: object) -> dict | None:
        return self.record(level="debug", message=message, fields=fields or None)

    def info(self, message: object, **fields: object) -> dict | None:
        return self.record(level="info", message=message, fields=fields or None)

    def warn(self, message: object, **fields: object) -> dict | None:
        return self.record(level="warn", message=message, fields=fields or None)

    def error(self, message: object, **fields: object) -> dict | None:
        return self.record(level="error", message=message, fields=fields or None)

    def snapshot(self) -> list[dict]:
        return list(self._logs)

    def flush(self) -> Path | None:
        path = logs_path(self._project_root)
        if path is None:
            return None
        canonical_json_dump(path, self.snapshot(), pretty=True)
        return path


def read_logs(project_root: str | Path | None) -> list[dict]:
    path = logs_path(project_root)
    if path is None or not path.exists():
        return []
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return []
    if not isinstance(raw, list):
        return []
    return [item for item in raw if isinstance(item, dict)]


def _normalize_level(level: str) -> str:
    normalized = str(level).lower().strip()
    if normalized == "warning":
        return "warn"
    if normalized not in LOG_LEVELS:
        return "info"
    return normalized


def _coerce_message(message: object) -> str:
    if message is None:
        return ""
    if isinstance(message, str):
        return message
    return str(message)


__all__ = ["LEVEL_ORDER", "LOG_LEVELS", "LogStore", "logs_path", "read_logs"]
