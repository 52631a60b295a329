from __future__ import annotations

import difflib
from types import MappingProxyType
from typing import Mapping

from tailmigrate.errors.base import UnknownPropertyError
from tailmigrate.errors.guidance import build_guidance_message


# Logical properties collapse to physical sides assuming a left-to-right writing mode.
_MARGIN_PROPERTIES: dict[str, str] = {
    "margin": "m",
    "marginTop": "mt",
    "marginRight": "mr",
    "marginBottom": "mb",
    "marginLeft": "ml",
    "marginX": "mx",
    "marginY": "my",
    "marginInline": "mx",
    "marginInlineStart": "ms",
    "marginInlineEnd": "me",
    "marginBlock": "my",
    "marginBlockStart": "mt",
    "marginBlockEnd": "mb",
}
_MARGIN_SHORTHANDS = ("m", "mt", "mr", "mb", "ml", "mx", "my", "ms", "me")

_PADDING_PROPERTIES: dict[str, str] = {
    "padding": "p",
    "paddingTop": "pt",
    "paddingRight": "pr",
    "paddingBottom": "pb",
    "paddingLeft": "pl",
    "paddingX": "px",
    "paddingY": "py",
    "paddingInline": "px",
    "paddingInlineStart": "ps",
    "paddingInlineEnd": "pe",
    "paddingBlock": "py",
    "paddingBlockStart": "pt",
    "paddingBlockEnd": "pb",
}
_PADDING_SHORTHANDS = ("p", "pt", "pr", "pb", "pl", "px", "py", "ps", "pe")

_OTHER_PROPERTIES: dict[str, str] = {
    "gap": "gap",
    "rowGap": "gap-y",
    "columnGap": "gap-x",
    "space": "space",
    "inset": "inset",
    "insetX": "inset-x",
    "insetY": "inset-y",
}


def _build_prefix_map() -> Mapping[str, str]:
    prefixes: dict[str, str] = {}
    prefixes.update(_MARGIN_PROPERTIES)
    prefixes.update({name: name for name in _MARGIN_SHORTHANDS})
    prefixes.update(_PADDING_PROPERTIES)
    prefixes.update({name: name for name in _PADDING_SHORTHANDS})
    prefixes.update(_OTHER_PROPERTIES)
    return MappingProxyType(prefixes)


PROPERTY_PREFIXES: Mapping[str, str] = _build_prefix_map()
SPACING_PROPERTIES: tuple[str, ...] = tuple(PROPERTY_PREFIXES)


def is_spacing_property(name: str) -> bool:
    return name in PROPERTY_PREFIXES


def resolve_prefix(name: str) -> str:
    prefix = PROPERTY_PREFIXES.get(name) if isinstance(name, str) else None
    if prefix is not None:
        return prefix
    suggestion = _closest(str(name))
    fix = f'Did you mean "{suggestion}"?' if suggestion else "Pass a margin, padding, gap, space or inset property."
    raise UnknownPropertyError(
        build_guidance_message(
            what=f"Unknown spacing property '{name}'.",
            why="Only margin, padding, gap, space and inset properties have spacing classes.",
            fix=fix,
            example="tailmigrate convert marginTop 16px",
        ),
        property_name=str(name),
    )


def _closest(value: str) -> str | None:
    matches = difflib.get_close_matches(value, list(SPACING_PROPERTIES), n=1, cutoff=0.6)
    return matches[0] if matches else None


__all__ = ["PROPERTY_PREFIXES", "SPACING_PROPERTIES", "is_spacing_property", "resolve_prefix"]
