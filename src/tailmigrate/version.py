from __future__ import annotations

from importlib import metadata
from pathlib import Path


DISTRIBUTION = "tailmigrate"
# src/tailmigrate/version.py -> repository root
VERSION_FILE = Path(__file__).resolve().parents[2] / "VERSION"
UNKNOWN_VERSION = "0.0.0"


def get_version() -> str:
    """Installed distribution version, else the checkout's VERSION file."""
    try:
        return metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:
        pass
    if VERSION_FILE.is_file():
        return VERSION_FILE.read_text(encoding="utf-8").strip() or UNKNOWN_VERSION
    return UNKNOWN_VERSION


__all__ = ["DISTRIBUTION", "VERSION_FILE", "get_version"]
