from __future__ import annotations

from dataclasses import dataclass

from tailmigrate.spacing.breakpoints import BREAKPOINT_LADDER, key_prefix, ladder_prefix
from tailmigrate.spacing.normalize import is_bracketed, normalize_spacing
from tailmigrate.spacing.properties import resolve_prefix
from tailmigrate.spacing.values import KeyedValue, SequenceValue, classify_spacing_value


@dataclass(frozen=True)
class ClassToken:
    breakpoint: str
    prefix: str
    suffix: str

    @property
    def text(self) -> str:
        return f"{self.breakpoint}{self.prefix}-{self.suffix}"

    @property
    def is_fallback(self) -> bool:
        return is_bracketed(self.suffix)


def convert_spacing(property_name: str, value: object) -> str:
    """Convert a spacing prop to utility classes.

    ``convert_spacing("margin", [2, 4, 6])`` gives ``"m-2 sm:m-4 md:m-6"`` and
    ``convert_spacing("padding", {"base": 2, "md": 4})`` gives ``"p-2 md:p-4"``.
    """
    return " ".join(spacing_classes(property_name, value))


def spacing_classes(property_name: str, value: object) -> tuple[str, ...]:
    return tuple(token.text for token in class_tokens(property_name, value))


def class_tokens(property_name: str, value: object) -> tuple[ClassToken, ...]:
    prefix = resolve_prefix(property_name)
    shaped = classify_spacing_value(value)
    if shaped.kind == "sequence":
        candidates = _sequence_tokens(prefix, shaped)
    elif shaped.kind == "keyed":
        candidates = _keyed_tokens(prefix, shaped)
    elif shaped.kind == "scalar":
        candidates = [_class_token("", prefix, shaped.value)]
    else:
        raise TypeError(f"Unsupported spacing value kind: {shaped.kind!r}")
    return tuple(token for token in candidates if token is not None)


def overflow_entries(value: object) -> tuple[object, ...]:
    """Non-null array entries past the last breakpoint tier; they produce no class."""
    shaped = classify_spacing_value(value)
    if shaped.kind != "sequence":
        return ()
    return tuple(item for item in shaped.items[len(BREAKPOINT_LADDER):] if item is not None)


def _sequence_tokens(prefix: str, value: SequenceValue) -> list[ClassToken | None]:
    tokens: list[ClassToken | None] = []
    # a None entry keeps its array position, so later entries still land on their own tier
    for position, item in enumerate(value.items):
        if item is None:
            continue
        breakpoint_prefix = ladder_prefix(position)
        if breakpoint_prefix is None:
            break
        tokens.append(_class_token(breakpoint_prefix, prefix, item))
    return tokens


def _keyed_tokens(prefix: str, value: KeyedValue) -> list[ClassToken | None]:
    return [_class_token(key_prefix(key), prefix, item) for key, item in value.entries]


def _class_token(breakpoint_prefix: str, prefix: str, item: object) -> ClassToken | None:
    normalized = normalize_spacing(item)
    if not normalized:
        return None
    return ClassToken(breakpoint=breakpoint_prefix, prefix=prefix, suffix=normalized)


__all__ = ["ClassToken", "class_tokens", "convert_spacing", "overflow_entries", "spacing_classes"]
