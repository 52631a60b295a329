from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from tailmigrate.config.model import AppConfig
from tailmigrate.errors.base import TailmigrateError, UnknownPropertyError
from tailmigrate.errors.guidance import build_guidance_message
from tailmigrate.observability.log_store import LogStore
from tailmigrate.spacing.convert import class_tokens, overflow_entries
from tailmigrate.spacing.literals import parse_attribute_value
from tailmigrate.spacing.properties import resolve_prefix


@dataclass(frozen=True)
class ExtractedProp:
    """A JSX attribute reported by a source scanner.

    ``raw`` holds the attribute initializer text (``'"24px"'``, ``"{[2, 4]}"``)
    when the scanner did not evaluate it; it takes precedence over ``value``.
    """

    name: str
    value: object = None
    raw: str | None = None


@dataclass(frozen=True)
class PropConversion:
    name: str
    value: object
    classes: str


@dataclass(frozen=True)
class RejectedProp:
    name: str
    reason: str


@dataclass(frozen=True)
class BatchResult:
    conversions: tuple[PropConversion, ...]
    rejected: tuple[RejectedProp, ...]

    @property
    def class_name(self) -> str:
        return " ".join(item.classes for item in self.conversions if item.classes)

    def as_dict(self) -> dict:
        return {
            "class_name": self.class_name,
            "conversions": [
                {"name": item.name, "value": item.value, "classes": item.classes} for item in self.conversions
            ],
            "rejected": [{"name": item.name, "reason": item.reason} for item in self.rejected],
        }


def convert_props(
    props: object,
    *,
    config: AppConfig | None = None,
    log_store: LogStore | None = None,
) -> BatchResult:
    config = config or AppConfig()
    conversions: list[PropConversion] = []
    rejected: list[RejectedProp] = []
    for prop in coerce_props(props):
        try:
            resolve_prefix(prop.name)
        except UnknownPropertyError as err:
            if not config.convert.skip_unknown:
                raise
            rejected.append(RejectedProp(name=prop.name, reason=_first_line(err)))
            _log(log_store, "warn", "Skipped unknown spacing property", name=prop.name)
            continue
        if prop.raw is not None:
            try:
                value = parse_attribute_value(prop.raw)
            except TailmigrateError as err:
                rejected.append(RejectedProp(name=prop.name, reason=_first_line(err)))
                _log(log_store, "warn", "Skipped non-literal attribute value", name=prop.name, raw=prop.raw)
                continue
        else:
            value = prop.value
        tokens = class_tokens(prop.name, value)
        classes = " ".join(token.text for token in tokens)
        conversions.append(PropConversion(name=prop.name, value=value, classes=classes))
        _log(log_store, "info", "Converted spacing prop", name=prop.name, classes=classes)
        fallbacks = [token.text for token in tokens if token.is_fallback]
        if fallbacks:
            _log(log_store, "debug", "Used bracketed fallback", name=prop.name, tokens=fallbacks)
        ignored = overflow_entries(value)
        if ignored:
            _log(log_store, "warn", "Ignored entries past the last breakpoint", name=prop.name, entries=list(ignored))
    return BatchResult(conversions=tuple(conversions), rejected=tuple(rejected))


def coerce_props(props: object) -> list[ExtractedProp]:
    if isinstance(props, ExtractedProp):
        return [props]
    if isinstance(props, Mapping) and "name" not in props:
        return [ExtractedProp(name=str(name), value=value) for name, value in props.items()]
    if isinstance(props, Mapping):
        return [_coerce_prop(props, 0)]
    if isinstance(props, Iterable) and not isinstance(props, (str, bytes)):
        return [_coerce_prop(item, index) for index, item in enumerate(props)]
    raise TailmigrateError(_invalid_props_message(f"Expected a list of props, got {type(props).__name__}."))


def _coerce_prop(item: object, index: int) -> ExtractedProp:
    if isinstance(item, ExtractedProp):
        return item
    if isinstance(item, Mapping) and isinstance(item.get("name"), str):
        raw = item.get("defaultValue")
        if raw is not None and not isinstance(raw, str):
            raise TailmigrateError(_invalid_props_message(f"Prop #{index + 1} has a non-text defaultValue."))
        return ExtractedProp(name=item["name"], value=item.get("value"), raw=raw)
    if isinstance(item, (list, tuple)) and len(item) == 2 and isinstance(item[0], str):
        return ExtractedProp(name=item[0], value=item[1])
    raise TailmigrateError(_invalid_props_message(f"Prop #{index + 1} is missing a name."))


def _invalid_props_message(why: str) -> str:
    return build_guidance_message(
        what="Props input is not in a supported shape.",
        why=why,
        fix='Pass a {"property": value} object or a list of {"name": ..., "value": ...} entries.',
        example='[{"name": "mb", "defaultValue": "\\"24px\\""}]',
    )


def _first_line(err: TailmigrateError) -> str:
    text = err.message.splitlines()[0] if err.message else str(err)
    return text.replace("What happened:", "", 1).strip()


def _log(log_store: LogStore | None, level: str, message: str, **fields: object) -> None:
    if log_store is None:
        return
    log_store.record(level=level, message=message, fields=fields)


__all__ = [
    "BatchResult",
    "ExtractedProp",
    "PropConversion",
    "RejectedProp",
    "coerce_props",
    "convert_props",
]
