from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ConvertConfig:
    skip_unknown: bool = True


@dataclass
class LoggingConfig:
    level: str = "info"
    persist: bool = False


@dataclass
class AppConfig:
    convert: ConvertConfig = field(default_factory=ConvertConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


__all__ = ["AppConfig", "ConvertConfig", "LoggingConfig"]
