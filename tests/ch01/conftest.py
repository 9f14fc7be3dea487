"""Shared fixtures for Chapter 1 domain tests."""
from __future__ import annotations

from datetime import datetime

import pytest

from daterange_lite.domain import clock

# Mid-afternoon, away from any hour or day boundary
FIXED_NOW = datetime(2024, 1, 15, 15, 45, 30, 250_000)


@pytest.fixture()
def fixed_now(monkeypatch) -> datetime:
    """Pin clock.now() to FIXED_NOW for the duration of a test."""
    monkeypatch.setattr(clock, "now", lambda: FIXED_NOW)
    return FIXED_NOW


@pytest.fixture()
def set_now(monkeypatch):
    """Factory that pins clock.now() to an arbitrary datetime."""

    def _set(value: datetime) -> datetime:
        monkeypatch.setattr(clock, "now", lambda: value)
        return value

    return _set
