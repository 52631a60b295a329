from __future__ import annotations

from .loader import CONFIG_FILENAME, ConfigSource, load_config, resolve_config
from .model import AppConfig, ConvertConfig, LoggingConfig

__all__ = [
    "AppConfig",
    "CONFIG_FILENAME",
    "ConfigSource",
    "ConvertConfig",
    "LoggingConfig",
    "load_config",
    "resolve_config",
]
