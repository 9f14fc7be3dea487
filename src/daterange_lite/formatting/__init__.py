"""Human-readable rendering of date specifiers and ranges."""
from daterange_lite.formatting.ui import (
    RANGE_SEPARATOR,
    format_date_string_for_ui,
    format_range_string_for_ui,
    format_timestamp_for_ui,
)

__all__ = [
    "RANGE_SEPARATOR",
    "format_date_string_for_ui",
    "format_range_string_for_ui",
    "format_timestamp_for_ui",
]
