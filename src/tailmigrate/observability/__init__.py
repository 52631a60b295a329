from __future__ import annotations

from .log_store import LOG_LEVELS, LogStore, logs_path, read_logs

__all__ = ["LOG_LEVELS", "LogStore", "logs_path", "read_logs"]
