"""Text and JSON encodings for date specifiers and ranges."""
from daterange_lite.codec.json_codec import (
    range_from_dict,
    range_from_json,
    range_to_dict,
    range_to_json,
    specifier_from_dict,
    specifier_to_dict,
)
from daterange_lite.codec.shorthand import format_shorthand, parse_date_specifier

__all__ = [
    "range_from_dict",
    "range_from_json",
    "range_to_dict",
    "range_to_json",
    "specifier_from_dict",
    "specifier_to_dict",
    "format_shorthand",
    "parse_date_specifier",
]
