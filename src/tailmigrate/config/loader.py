from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from tailmigrate.config.model import AppConfig
from tailmigrate.errors.base import TailmigrateError
from tailmigrate.errors.guidance import build_guidance_message
from tailmigrate.observability.log_store import LOG_LEVELS


CONFIG_FILENAME = "tailmigrate.toml"
ENV_SKIP_UNKNOWN = "TAILMIGRATE_SKIP_UNKNOWN"
ENV_LOG_LEVEL = "TAILMIGRATE_LOG_LEVEL"
ENV_PERSIST_LOGS = "TAILMIGRATE_PERSIST_LOGS"
RESERVED_TRUE_VALUES = {"1", "true", "yes", "on"}
RESERVED_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class ConfigSource:
    kind: str
    path: str | None = None


def load_config(root: Path | None = None) -> AppConfig:
    config, _ = resolve_config(root=root)
    return config


def resolve_config(root: Path | None = None) -> tuple[AppConfig, list[ConfigSource]]:
    config = AppConfig()
    sources: list[ConfigSource] = []
    if root:
        toml_path = Path(root).resolve() / CONFIG_FILENAME
        if toml_path.exists():
            data = _parse_toml(toml_path.read_text(encoding="utf-8"), toml_path)
            _apply_toml_config(config, data)
            sources.append(ConfigSource(kind="toml", path=toml_path.as_posix()))
    if _apply_env_overrides(config):
        sources.append(ConfigSource(kind="env", path=None))
    return config, sources


def _parse_toml(text: str, path: Path) -> Dict[str, Any]:
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as err:
        raise TailmigrateError(
            build_guidance_message(
                what=f"{path.name} is not valid TOML.",
                why=f"TOML parsing failed: {err}.",
                fix=f"Fix the TOML syntax in {path.name}.",
                example='[convert]\nskip_unknown = true',
            ),
            line=getattr(err, "lineno", None),
            column=getattr(err, "colno", None),
            details={"file": path.as_posix()},
        ) from err
    return data if isinstance(data, dict) else {}


def _apply_toml_config(config: AppConfig, data: Dict[str, Any]) -> None:
    convert = data.get("convert")
    if isinstance(convert, dict) and "skip_unknown" in convert:
        config.convert.skip_unknown = _coerce_bool(convert["skip_unknown"], "convert.skip_unknown")
    logging = data.get("logging")
    if isinstance(logging, dict):
        if "level" in logging:
            config.logging.level = _coerce_level(logging["level"], "logging.level")
        if "persist" in logging:
            config.logging.persist = _coerce_bool(logging["persist"], "logging.persist")


def _apply_env_overrides(config: AppConfig) -> bool:
    used = False
    skip_unknown = os.getenv(ENV_SKIP_UNKNOWN)
    if skip_unknown:
        config.convert.skip_unknown = _coerce_bool(skip_unknown, ENV_SKIP_UNKNOWN)
        used = True
    level = os.getenv(ENV_LOG_LEVEL)
    if level:
        config.logging.level = _coerce_level(level, ENV_LOG_LEVEL)
        used = True
    persist = os.getenv(ENV_PERSIST_LOGS)
    if persist:
        config.logging.persist = _coerce_bool(persist, ENV_PERSIST_LOGS)
        used = True
    return used


def _coerce_bool(value: object, name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in RESERVED_TRUE_VALUES:
            return True
        if lowered in RESERVED_FALSE_VALUES:
            return False
    raise TailmigrateError(
        build_guidance_message(
            what=f"{name} must be true or false.",
            why=f"Got {value!r}.",
            fix="Use true/false (or 1/0, yes/no, on/off in environment variables).",
            example=f"{name.split('.')[-1]} = true",
        )
    )


def _coerce_level(value: object, name: str) -> str:
    if isinstance(value, str):
        level = value.strip().lower()
        if level == "warning":
            level = "warn"
        if level in LOG_LEVELS:
            return level
    allowed = ", ".join(sorted(LOG_LEVELS))
    raise TailmigrateError(
        build_guidance_message(
            what=f"{name} has unknown log level {value!r}.",
            why=f"Allowed levels: {allowed}.",
            fix="Pick one of the allowed levels.",
            example='level = "info"',
        )
    )


__all__ = ["CONFIG_FILENAME", "ConfigSource", "load_config", "resolve_config"]
