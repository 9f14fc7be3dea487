"""Shared fixtures for Chapter 4 CLI tests."""
from __future__ import annotations

from datetime import datetime

import pytest

from daterange_lite.domain import clock

FIXED_NOW = datetime(2024, 1, 15, 15, 45)


@pytest.fixture()
def fixed_now(monkeypatch) -> datetime:
    monkeypatch.setattr(clock, "now", lambda: FIXED_NOW)
    return FIXED_NOW
