"""JSON encoding for date specifiers and ranges.

Specifier payloads:
    {"kind": "relative", "unit": "hour", "value": 3}
    {"kind": "absolute", "instant": "2024-01-15T15:45:00"}

Range payload:
    {"from": <specifier>, "to": <specifier>}

A missing or null end in a range payload takes the DateTimeRange default.
Every decoding failure surfaces as InvalidDateSpecifier.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any

from daterange_lite.domain.range import DateTimeRange
from daterange_lite.domain.specifier import (
    AbsoluteDate,
    DateSpecifier,
    InvalidDateSpecifier,
    RelativeDate,
)
from daterange_lite.domain.types import DateKind, Position, TimeUnit

log = logging.getLogger(__name__)


def specifier_to_dict(date: DateSpecifier) -> dict[str, Any]:
    if date.kind is DateKind.RELATIVE:
        return {
            "kind": DateKind.RELATIVE.value,
            "unit": TimeUnit(date.unit).value,
            "value": date.value,
        }
    return {
        "kind": DateKind.ABSOLUTE.value,
        "instant": date.instant.isoformat(),
    }


def specifier_from_dict(obj: Any) -> DateSpecifier:
    if not isinstance(obj, dict):
        raise InvalidDateSpecifier(f"Expected an object, got {type(obj).__name__}")
    try:
        kind = DateKind(obj["kind"])
    except KeyError:
        raise InvalidDateSpecifier("Missing 'kind'") from None
    except ValueError as exc:
        raise InvalidDateSpecifier(f"Unknown kind: {obj['kind']!r}") from exc

    if kind is DateKind.RELATIVE:
        return _relative_from_dict(obj)
    return _absolute_from_dict(obj)


def _relative_from_dict(obj: dict[str, Any]) -> RelativeDate:
    try:
        unit = TimeUnit(obj["unit"])
        value = obj["value"]
    except KeyError as exc:
        raise InvalidDateSpecifier(f"Relative date missing {exc.args[0]!r}") from None
    except ValueError as exc:
        raise InvalidDateSpecifier(
            f"Unknown unit: {obj['unit']!r}. Use 'minute', 'hour', or 'day'."
        ) from exc
    # bool is an int subclass; reject it explicitly
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidDateSpecifier(f"Relative value must be an integer, got {value!r}")
    return RelativeDate(unit, value)


def _absolute_from_dict(obj: dict[str, Any]) -> AbsoluteDate:
    try:
        raw = obj["instant"]
    except KeyError:
        raise InvalidDateSpecifier("Absolute date missing 'instant'") from None
    try:
        instant = datetime.fromisoformat(raw)
    except (TypeError, ValueError) as exc:
        raise InvalidDateSpecifier(f"Invalid ISO-8601 instant: {raw!r}") from exc
    return AbsoluteDate(instant)


def range_to_dict(date_range: DateTimeRange) -> dict[str, Any]:
    return {
        Position.FROM.value: specifier_to_dict(date_range.from_),
        Position.TO.value: specifier_to_dict(date_range.to),
    }


def range_from_dict(obj: Any) -> DateTimeRange:
    if not isinstance(obj, dict):
        raise InvalidDateSpecifier(f"Expected an object, got {type(obj).__name__}")
    ends: dict[str, DateSpecifier | None] = {}
    for position in Position:
        raw = obj.get(position.value)
        if raw is None:
            log.debug("range payload has no %r end, using default", position.value)
            ends[position.value] = None
        else:
            ends[position.value] = specifier_from_dict(raw)
    return DateTimeRange(ends[Position.FROM.value], ends[Position.TO.value])


def range_to_json(date_range: DateTimeRange) -> str:
    return json.dumps(range_to_dict(date_range), separators=(",", ":"))


def range_from_json(text: str | bytes) -> DateTimeRange:
    """Decode a range from JSON text."""
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidDateSpecifier(f"Malformed JSON: {exc.msg}") from exc
    except UnicodeDecodeError as exc:
        raise InvalidDateSpecifier(f"Payload is not valid UTF-8: {exc.reason}") from exc
    return range_from_dict(obj)
