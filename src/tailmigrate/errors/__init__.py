from __future__ import annotations

from .base import TailmigrateError, UnknownPropertyError
from .guidance import build_guidance_message
from .render import format_error

__all__ = [
    "TailmigrateError",
    "UnknownPropertyError",
    "build_guidance_message",
    "format_error",
]
