from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Union


@dataclass(frozen=True)
class ScalarValue:
    value: object
    kind: str = "scalar"


@dataclass(frozen=True)
class SequenceValue:
    """Responsive array; position i targets breakpoint tier i, None leaves a hole."""

    items: tuple[object, ...]
    kind: str = "sequence"


@dataclass(frozen=True)
class KeyedValue:
    """Responsive object; entries keep their declaration order."""

    entries: tuple[tuple[str, object], ...]
    kind: str = "keyed"


SpacingValue = Union[ScalarValue, SequenceValue, KeyedValue]


def classify_spacing_value(value: object) -> SpacingValue:
    if isinstance(value, (ScalarValue, SequenceValue, KeyedValue)):
        return value
    if isinstance(value, (list, tuple)):
        return SequenceValue(items=tuple(value))
    if isinstance(value, Mapping):
        return KeyedValue(entries=tuple((str(key), item) for key, item in value.items()))
    return ScalarValue(value=value)


__all__ = ["KeyedValue", "ScalarValue", "SequenceValue", "SpacingValue", "classify_spacing_value"]
