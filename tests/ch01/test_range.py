"""Tests for DateTimeRange construction, positions and resolution."""
from datetime import datetime, timedelta

import pytest

from daterange_lite.domain.range import DateTimeRange
from daterange_lite.domain.specifier import AbsoluteDate, RelativeDate
from daterange_lite.domain.types import Position, TimeUnit


# ── Construction ──

def test_default_range_is_last_hour():
    r = DateTimeRange()
    assert r.from_.is_relative() is True
    assert r.from_.unit == TimeUnit.HOUR
    assert r.from_.value == 1
    assert r.to.is_relative() is True
    assert r.to.value == 0


def test_explicit_none_takes_defaults():
    r = DateTimeRange(None, None)
    assert r.from_ == RelativeDate(TimeUnit.HOUR, 1)
    assert r.to == RelativeDate(TimeUnit.MINUTE, 0)


def test_each_end_defaults_independently():
    start = AbsoluteDate(datetime(2024, 1, 15, 9, 0))
    r = DateTimeRange(from_=start)
    assert r.from_ is start
    assert r.to == RelativeDate(TimeUnit.MINUTE, 0)

    end = RelativeDate(TimeUnit.DAY, 1)
    r = DateTimeRange(to=end)
    assert r.from_ == RelativeDate(TimeUnit.HOUR, 1)
    assert r.to is end


def test_reversed_range_is_accepted():
    r = DateTimeRange(
        AbsoluteDate(datetime(2024, 1, 16)),
        AbsoluteDate(datetime(2024, 1, 15)),
    )
    start, end = r.resolve()
    assert start > end


# ── Positions ──

def test_get_date_for_position():
    start = RelativeDate(TimeUnit.DAY, 2)
    end = RelativeDate(TimeUnit.HOUR, 1)
    r = DateTimeRange(start, end)
    assert r.get_date_for_position(Position.FROM) is start
    assert r.get_date_for_position(Position.TO) is end


def test_plain_strings_select_positions():
    start = RelativeDate(TimeUnit.DAY, 2)
    end = RelativeDate(TimeUnit.HOUR, 1)
    r = DateTimeRange(start, end)
    assert r.get_date_for_position("from") is start
    assert r.get_date_for_position("to") is end


@pytest.mark.parametrize("position", ["until", "", None, 42, "FROM"])
def test_anything_but_from_reads_to(position):
    end = RelativeDate(TimeUnit.HOUR, 1)
    r = DateTimeRange(RelativeDate(TimeUnit.DAY, 2), end)
    assert r.get_date_for_position(position) is end


def test_set_from_leaves_to_unchanged():
    r = DateTimeRange()
    original_to = r.to
    new_from = AbsoluteDate(datetime(2024, 1, 15, 9, 0))
    result = r.set_date_for_position(new_from, Position.FROM)
    assert result is None
    assert r.get_date_for_position(Position.FROM) is new_from
    assert r.to is original_to


def test_set_to_leaves_from_unchanged():
    r = DateTimeRange()
    original_from = r.from_
    new_to = AbsoluteDate(datetime(2024, 1, 15, 9, 0))
    r.set_date_for_position(new_to, Position.TO)
    assert r.get_date_for_position(Position.TO) is new_to
    assert r.from_ is original_from


@pytest.mark.parametrize("position", ["until", "", None, "FROM"])
def test_anything_but_from_writes_to(position):
    r = DateTimeRange()
    original_from = r.from_
    new_to = RelativeDate(TimeUnit.MINUTE, 5)
    r.set_date_for_position(new_to, position)
    assert r.get_date_for_position(Position.TO) is new_to
    assert r.from_ is original_from


# ── Trailing window ──

def test_default_is_trailing_window():
    assert DateTimeRange().is_trailing_window() is True


def test_absolute_end_is_not_trailing_window():
    r = DateTimeRange(to=AbsoluteDate(datetime(2024, 1, 15)))
    assert r.is_trailing_window() is False


def test_relative_end_in_the_past_is_not_trailing_window():
    r = DateTimeRange(to=RelativeDate(TimeUnit.MINUTE, 5))
    assert r.is_trailing_window() is False


# ── Resolution ──

def test_resolve_default_range(fixed_now):
    start, end = DateTimeRange().resolve()
    assert start == fixed_now - timedelta(hours=1)
    assert end == fixed_now


def test_resolve_shares_one_now():
    now = datetime(2024, 1, 15, 15, 45)
    r = DateTimeRange(RelativeDate(TimeUnit.DAY, 1), RelativeDate(TimeUnit.HOUR, 2))
    assert r.resolve(now) == (datetime(2024, 1, 14, 15, 45), datetime(2024, 1, 15, 13, 45))


def test_resolve_mixed_range():
    now = datetime(2024, 1, 15, 15, 45)
    start = datetime(2024, 1, 10, 8, 0)
    r = DateTimeRange(AbsoluteDate(start), RelativeDate(TimeUnit.MINUTE, 0))
    assert r.resolve(now) == (start, now)
