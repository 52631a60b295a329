from __future__ import annotations

from .batch import BatchResult, ExtractedProp, PropConversion, RejectedProp, convert_props
from .breakpoints import BREAKPOINT_LADDER, Breakpoint
from .convert import ClassToken, class_tokens, convert_spacing, overflow_entries, spacing_classes
from .literals import parse_attribute_value
from .normalize import normalize_spacing
from .properties import PROPERTY_PREFIXES, SPACING_PROPERTIES, is_spacing_property, resolve_prefix
from .scale import PX_TO_STEP, REM_TO_STEP, SPACING_SCALE, ScaleEntry, length_of, scale_steps
from .values import KeyedValue, ScalarValue, SequenceValue, SpacingValue, classify_spacing_value

__all__ = [
    "BREAKPOINT_LADDER",
    "BatchResult",
    "ClassToken",
    "Breakpoint",
    "ExtractedProp",
    "KeyedValue",
    "PROPERTY_PREFIXES",
    "PX_TO_STEP",
    "PropConversion",
    "REM_TO_STEP",
    "RejectedProp",
    "SPACING_PROPERTIES",
    "SPACING_SCALE",
    "ScalarValue",
    "ScaleEntry",
    "SequenceValue",
    "SpacingValue",
    "class_tokens",
    "classify_spacing_value",
    "convert_props",
    "convert_spacing",
    "is_spacing_property",
    "length_of",
    "normalize_spacing",
    "overflow_entries",
    "parse_attribute_value",
    "resolve_prefix",
    "scale_steps",
    "spacing_classes",
]
