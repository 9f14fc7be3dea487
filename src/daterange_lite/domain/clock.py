"""Clock access for the domain.

Everything that needs "the current time" goes through now(), so tests
can pin the clock with monkeypatch instead of racing the wall clock.
"""
from __future__ import annotations

from datetime import datetime, timedelta

from daterange_lite.domain.types import DEFAULT_ABSOLUTE_HOURS_AGO, Timestamp


def now() -> Timestamp:
    """Current local wall-clock time."""
    return datetime.now()


def get_date_hours_ago(hours: int = DEFAULT_ABSOLUTE_HOURS_AGO) -> Timestamp:
    """Current time minus `hours` hours of wall-clock time.

    Minutes, seconds and microseconds are carried over from now()
    unchanged. Crossing midnight rolls the date back as well.
    """
    return now() - timedelta(hours=hours)
