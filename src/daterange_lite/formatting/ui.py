"""Display strings for date specifiers and ranges.

Absolute instants use one fixed layout regardless of process locale:

    15 Jan 2024, 3:45 PM

i.e. day, abbreviated English month, year, then a 12-hour clock time.
Month and meridiem names are spelled out here rather than taken from
strftime("%b") / ("%p"), which follow the C locale.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from daterange_lite.domain.specifier import DateSpecifier
from daterange_lite.domain.types import DateKind, TimeUnit, Timestamp

if TYPE_CHECKING:
    from daterange_lite.domain.range import DateTimeRange

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
RANGE_SEPARATOR = " → "
NOW_LABEL = "now"


def _plural(value: int) -> str:
    return "s" if value > 1 else ""


def _unit_label(unit: TimeUnit | str) -> str:
    # Units are not validated, so a bare string may turn up here.
    return unit.value if isinstance(unit, TimeUnit) else str(unit)


def format_timestamp_for_ui(instant: Timestamp) -> str:
    """Render an instant as "15 Jan 2024, 3:45 PM"."""
    hour12 = instant.hour % 12 or 12
    meridiem = "AM" if instant.hour < 12 else "PM"
    month = MONTH_ABBREVIATIONS[instant.month - 1]
    return f"{instant.day} {month} {instant.year}, {hour12}:{instant.minute:02d} {meridiem}"


def format_date_string_for_ui(date: DateSpecifier) -> str:
    """Render one end of a range: "now", "3 hours ago" or a timestamp."""
    if date.kind is DateKind.RELATIVE:
        if date.value == 0:
            return NOW_LABEL
        return f"{date.value} {_unit_label(date.unit)}{_plural(date.value)} ago"
    return format_timestamp_for_ui(date.instant)


def format_range_string_for_ui(date_range: DateTimeRange) -> str:
    """Render a whole range.

    Trailing windows collapse to "Last N units". Anything else is
    "<from> → <to>", where the first occurrence of the from-string's
    date part (text before its first comma, plus the comma) is cut out
    of the to-string. The cut is textual: same-day absolutes become
    "15 Jan 2024, 3:45 PM →  5:00 PM" with the space after the comma kept.
    """
    if date_range.is_trailing_window():
        start = date_range.from_
        return f"Last {start.value} {_unit_label(start.unit)}{_plural(start.value)}"

    formatted_from = format_date_string_for_ui(date_range.from_)
    date_part = formatted_from.split(",")[0]
    formatted_to = format_date_string_for_ui(date_range.to).replace(f"{date_part},", "", 1)
    return f"{formatted_from}{RANGE_SEPARATOR}{formatted_to}"
