from __future__ import annotations

import pytest

from tailmigrate.errors.base import UnknownPropertyError
from tailmigrate.spacing.convert import ClassToken, class_tokens, convert_spacing, overflow_entries, spacing_classes
from tailmigrate.spacing.values import KeyedValue, SequenceValue


@pytest.mark.parametrize(
    ("prop", "value", "expected"),
    [
        ("margin", 4, "m-4"),
        ("padding", 2, "p-2"),
        ("gap", 6, "gap-6"),
        ("space", 8, "space-8"),
        ("margin", "16px", "m-4"),
        ("padding", "8px", "p-2"),
        ("gap", "24px", "gap-6"),
        ("space", "32px", "space-8"),
        ("margin", "15px", "m-[15px]"),
        ("padding", "7px", "p-[7px]"),
        ("margin", "1rem", "m-4"),
        ("padding", "0.5rem", "p-2"),
        ("gap", "1.5rem", "gap-6"),
        ("margin", "0.45rem", "m-[0.45rem]"),
        ("padding", "1.1rem", "p-[1.1rem]"),
    ],
)
def test_scalar_values(prop: str, value: object, expected: str) -> None:
    assert convert_spacing(prop, value) == expected


@pytest.mark.parametrize(
    ("prop", "value", "expected"),
    [
        ("margin", 0, "m-0"),
        ("margin", "0", "m-0"),
        ("margin", "0px", "m-0"),
        ("margin", "0rem", "m-0"),
        ("padding", "auto", "p-auto"),
        ("margin", "-1", "m-[-4px]"),
        ("margin", "-4px", "m-[-4px]"),
        ("margin", "-1rem", "m-[-1rem]"),
        ("margin", "2px", "m-0.5"),
        ("padding", "6px", "p-1.5"),
        ("gap", "10px", "gap-2.5"),
        ("margin", "5vh", "m-[5vh]"),
        ("padding", "calc(100% - 20px)", "p-[calc(100%-20px)]"),
        ("gap", "clamp(1rem, 2vw, 3rem)", "gap-[clamp(1rem,2vw,3rem)]"),
    ],
)
def test_special_and_fallback_values(prop: str, value: object, expected: str) -> None:
    assert convert_spacing(prop, value) == expected


def test_absent_scalar_produces_no_class() -> None:
    assert convert_spacing("margin", None) == ""


def test_array_values_follow_the_breakpoint_ladder() -> None:
    assert convert_spacing("margin", [2, 4, 6]) == "m-2 sm:m-4 md:m-6"
    assert convert_spacing("margin", [2, "16px", "1rem"]) == "m-2 sm:m-4 md:m-4"
    assert convert_spacing("p", [1, 2, 3, 4, 5, 6]) == "p-1 sm:p-2 md:p-3 lg:p-4 xl:p-5 2xl:p-6"


def test_null_array_entry_keeps_its_position() -> None:
    assert convert_spacing("padding", ["8px", None, "0.5rem"]) == "p-2 md:p-2"
    assert convert_spacing("mx", [None, 4]) == "sm:mx-4"
    assert convert_spacing("mx", [None, None]) == ""


def test_array_entries_past_the_ladder_are_ignored() -> None:
    assert convert_spacing("m", [1, 2, 3, 4, 5, 6, 7]) == "m-1 sm:m-2 md:m-3 lg:m-4 xl:m-5 2xl:m-6"


def test_tuple_is_a_responsive_array() -> None:
    assert convert_spacing("gap", (2, 4)) == "gap-2 sm:gap-4"


def test_object_values_keep_declaration_order() -> None:
    assert convert_spacing("margin", {"base": "8px", "md": 2, "lg": "0.5rem"}) == "m-2 md:m-2 lg:m-2"
    assert convert_spacing("padding", {"base": 4, "lg": "1rem"}) == "p-4 lg:p-4"
    assert convert_spacing("mx", {"base": "16px", "sm": 4, "xl": "1rem"}) == "mx-4 sm:mx-4 xl:mx-4"
    assert convert_spacing("mx", {"lg": 4, "base": 2}) == "lg:mx-4 mx-2"


def test_object_keys_are_not_validated() -> None:
    assert convert_spacing("m", {"tablet": 4}) == "tablet:m-4"


def test_object_null_entries_are_dropped() -> None:
    assert convert_spacing("m", {"base": None, "md": 4}) == "md:m-4"


def test_malformed_leaves_are_never_dropped() -> None:
    assert convert_spacing("m", {"base": [1, 2]}) == "m-[[1,2]]"
    assert convert_spacing("m", [True]) == "m-[true]"


def test_gap_and_space_properties() -> None:
    assert convert_spacing("gap", 4) == "gap-4"
    assert convert_spacing("rowGap", 2) == "gap-y-2"
    assert convert_spacing("columnGap", "1rem") == "gap-x-4"
    assert convert_spacing("space", {"base": "8px", "md": "0.5rem"}) == "space-2 md:space-2"


@pytest.mark.parametrize(
    "value",
    [4, "16px", "calc(1px + 2px)", [2, None, "1rem"], {"base": 1, "md": "auto"}, None, -2],
)
def test_logical_properties_match_their_shorthand(value: object) -> None:
    assert convert_spacing("marginInlineStart", value) == convert_spacing("ms", value)
    assert convert_spacing("marginBlockEnd", value) == convert_spacing("mb", value)
    assert convert_spacing("paddingInline", value) == convert_spacing("px", value)


def test_tagged_values_are_accepted_directly() -> None:
    assert spacing_classes("m", SequenceValue(items=(1, None, 3))) == ("m-1", "md:m-3")
    assert spacing_classes("m", KeyedValue(entries=(("base", 1), ("md", 3)))) == ("m-1", "md:m-3")


def test_unknown_property_raises() -> None:
    with pytest.raises(UnknownPropertyError) as excinfo:
        convert_spacing("marginn", 4)
    assert excinfo.value.property_name == "marginn"
    assert 'Did you mean "margin"?' in str(excinfo.value)


def test_unknown_property_fails_before_looking_at_the_value() -> None:
    with pytest.raises(UnknownPropertyError):
        convert_spacing("color", None)


def test_huge_integers_in_arrays_convert() -> None:
    huge = 10**400
    assert convert_spacing("m", [2, -huge]) == f"m-2 sm:m-[-{4 * huge}px]"


def test_inset_properties_convert() -> None:
    assert convert_spacing("inset", 4) == "inset-4"
    assert convert_spacing("insetX", [1, "8px"]) == "inset-x-1 sm:inset-x-2"
    assert convert_spacing("insetY", {"base": 0, "md": "15px"}) == "inset-y-0 md:inset-y-[15px]"


def test_class_tokens_expose_their_suffix() -> None:
    tokens = class_tokens("p", {"base": 2, "md": "15px"})
    assert [token.text for token in tokens] == ["p-2", "md:p-[15px]"]
    assert [token.is_fallback for token in tokens] == [False, True]
    assert tokens[1] == ClassToken(breakpoint="md:", prefix="p", suffix="[15px]")


def test_overflow_entries_lists_what_the_ladder_cannot_hold() -> None:
    assert overflow_entries([1, 2, 3, 4, 5, 6, 7, None, "8px"]) == (7, "8px")
    assert overflow_entries([1, 2]) == ()
    assert overflow_entries({"base": 1}) == ()
    assert overflow_entries(4) == ()
