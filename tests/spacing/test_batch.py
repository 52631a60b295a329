from __future__ import annotations

import pytest

from tailmigrate.config.model import AppConfig
from tailmigrate.errors.base import TailmigrateError, UnknownPropertyError
from tailmigrate.observability.log_store import LogStore
from tailmigrate.spacing.batch import ExtractedProp, convert_props


def test_mapping_input_converts_each_prop_in_order() -> None:
    result = convert_props({"mb": "24px", "px": [2, 4], "gap": {"base": 1, "md": "1rem"}})
    assert [item.name for item in result.conversions] == ["mb", "px", "gap"]
    assert result.class_name == "mb-6 px-2 sm:px-4 gap-1 md:gap-4"
    assert result.rejected == ()


def test_extractor_entries_with_raw_attribute_text() -> None:
    props = [
        {"name": "mb", "type": "StringLiteral", "defaultValue": '"24px"'},
        {"name": "spacing", "defaultValue": '"4"'},
        {"name": "p", "defaultValue": "{[2, null, 4]}"},
    ]
    result = convert_props(props)
    assert [(item.name, item.classes) for item in result.conversions] == [
        ("mb", "mb-6"),
        ("p", "p-2 md:p-4"),
    ]
    assert [item.name for item in result.rejected] == ["spacing"]
    assert result.rejected[0].reason == "Unknown spacing property 'spacing'."


def test_extracted_prop_objects_and_pairs() -> None:
    result = convert_props([ExtractedProp(name="m", value=4), ("pt", "8px"), ExtractedProp(name="mt", raw="{-1}")])
    assert result.class_name == "m-4 pt-2 mt-[-4px]"


def test_unknown_properties_raise_when_not_skipped() -> None:
    config = AppConfig()
    config.convert.skip_unknown = False
    with pytest.raises(UnknownPropertyError):
        convert_props({"m": 1, "direction": "column"}, config=config)


def test_dynamic_attribute_values_are_rejected_not_raised() -> None:
    result = convert_props([{"name": "m", "defaultValue": "{theme.space}"}])
    assert result.conversions == ()
    assert result.rejected[0].name == "m"
    assert result.rejected[0].reason.startswith("Could not read attribute value")


def test_batch_records_log_events() -> None:
    store = LogStore()
    convert_props({"m": "15px", "direction": "row"}, log_store=store)
    events = store.snapshot()
    assert [(event["level"], event["message"]) for event in events] == [
        ("info", "Converted spacing prop"),
        ("debug", "Used bracketed fallback"),
        ("warn", "Skipped unknown spacing property"),
    ]
    assert events[1]["fields"] == {"name": "m", "tokens": ["m-[15px]"]}


def test_as_dict_is_json_ready() -> None:
    payload = convert_props({"m": [1, None, 2], "color": "red"}).as_dict()
    assert payload == {
        "class_name": "m-1 md:m-2",
        "conversions": [{"name": "m", "value": [1, None, 2], "classes": "m-1 md:m-2"}],
        "rejected": [{"name": "color", "reason": "Unknown spacing property 'color'."}],
    }


def test_invalid_input_shapes() -> None:
    with pytest.raises(TailmigrateError):
        convert_props("mb=4")
    with pytest.raises(TailmigrateError):
        convert_props([{"value": 4}])
    with pytest.raises(TailmigrateError):
        convert_props([{"name": "m", "defaultValue": 4}])


def test_entries_past_the_last_breakpoint_are_reported() -> None:
    store = LogStore()
    result = convert_props({"m": [1, 2, 3, 4, 5, 6, 7]}, log_store=store)
    assert result.class_name == "m-1 sm:m-2 md:m-3 lg:m-4 xl:m-5 2xl:m-6"
    events = store.snapshot()
    assert [(event["level"], event["message"]) for event in events] == [
        ("info", "Converted spacing prop"),
        ("warn", "Ignored entries past the last breakpoint"),
    ]
    assert events[1]["fields"] == {"name": "m", "entries": [7]}
