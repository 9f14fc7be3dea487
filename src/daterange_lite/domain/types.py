"""Shared enums, type aliases and constants used across the domain."""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import TypeAlias

Timestamp: TypeAlias = datetime  # naive, local wall-clock time


class TimeUnit(str, Enum):
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"


class Position(str, Enum):
    """Which end of a range is being read or written."""
    FROM = "from"
    TO = "to"


class DateKind(str, Enum):
    """Discriminant of the DateSpecifier union."""
    RELATIVE = "relative"
    ABSOLUTE = "absolute"


# Default range: "the last hour, ending now"
DEFAULT_FROM_UNIT = TimeUnit.HOUR
DEFAULT_FROM_VALUE = 1
DEFAULT_TO_UNIT = TimeUnit.MINUTE

# AbsoluteDate() with no instant points this many hours into the past
DEFAULT_ABSOLUTE_HOURS_AGO = 1
