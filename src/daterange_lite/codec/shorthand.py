"""Compact text form of date specifiers, as typed on a command line.

Accepted input:
    now                       RelativeDate(MINUTE, 0)
    15m, 3h, 2d               RelativeDate(unit, n)
    3h ago, 3 hours, 1 day    long forms, optional trailing "ago"
    2024-01-15T15:45          anything datetime.fromisoformat() accepts
"""
from __future__ import annotations

import logging
import re
from datetime import datetime

from daterange_lite.domain.specifier import (
    AbsoluteDate,
    DateSpecifier,
    InvalidDateSpecifier,
    RelativeDate,
)
from daterange_lite.domain.types import DateKind, TimeUnit

log = logging.getLogger(__name__)

_SUFFIXES: dict[str, TimeUnit] = {
    "m": TimeUnit.MINUTE,
    "h": TimeUnit.HOUR,
    "d": TimeUnit.DAY,
}
_UNIT_SUFFIX = {unit: suffix for suffix, unit in _SUFFIXES.items()}

_RELATIVE_RE = re.compile(
    r"^(?P<value>\d+)\s*(?P<unit>m|h|d|minutes?|hours?|days?)(?:\s+ago)?$"
)


def parse_date_specifier(text: str) -> DateSpecifier:
    """Parse shorthand or ISO-8601 text into a DateSpecifier."""
    cleaned = text.strip().lower()
    if cleaned == "now":
        return RelativeDate(TimeUnit.MINUTE, 0)

    match = _RELATIVE_RE.match(cleaned)
    if match:
        unit_text = match.group("unit")
        unit = _SUFFIXES[unit_text] if unit_text in _SUFFIXES else TimeUnit(unit_text.rstrip("s"))
        date = RelativeDate(unit, int(match.group("value")))
        log.debug("parsed %r as %r", text, date)
        return date

    try:
        instant = datetime.fromisoformat(text.strip())
    except ValueError:
        raise InvalidDateSpecifier(
            f"Cannot parse {text!r}: expected 'now', '<n>m|h|d' or an ISO-8601 timestamp"
        ) from None
    log.debug("parsed %r as absolute %s", text, instant.isoformat())
    return AbsoluteDate(instant)


def format_shorthand(date: DateSpecifier) -> str:
    """Inverse of parse_date_specifier: "now", "3h" or ISO-8601."""
    if date.kind is DateKind.RELATIVE:
        if date.value == 0:
            return "now"
        return f"{date.value}{_UNIT_SUFFIX[date.unit]}"
    return date.instant.isoformat()
