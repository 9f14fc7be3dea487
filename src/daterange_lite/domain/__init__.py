"""Domain model for daterange-lite.

Re-exports all public types for convenient access:
    from daterange_lite.domain import DateTimeRange, RelativeDate, AbsoluteDate
"""
from daterange_lite.domain.clock import get_date_hours_ago
from daterange_lite.domain.range import DateTimeRange
from daterange_lite.domain.specifier import (
    AbsoluteDate,
    DateSpecifier,
    InvalidDateSpecifier,
    RelativeDate,
)
from daterange_lite.domain.types import (
    DateKind,
    Position,
    TimeUnit,
    Timestamp,
)

__all__ = [
    "get_date_hours_ago",
    "DateTimeRange",
    "AbsoluteDate",
    "DateSpecifier",
    "InvalidDateSpecifier",
    "RelativeDate",
    "DateKind",
    "Position",
    "TimeUnit",
    "Timestamp",
]
