"""Date specifiers: the two ways to name one end of a time range.

    RelativeDate(unit, value)  "value units ago"; value 0 means "now"
    AbsoluteDate(instant)      a fixed, already-resolved instant

DateSpecifier is the union of the two. Each variant carries a `kind`
discriminant that callers switch on; is_relative() is a thin wrapper
over it.

Neither variant validates its input. A negative value or a unit outside
TimeUnit is stored as given and produces whatever the formatter makes
of it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import TypeAlias

from daterange_lite.domain import clock
from daterange_lite.domain.types import DateKind, TimeUnit, Timestamp


class InvalidDateSpecifier(ValueError):
    """Raised when external input cannot be turned into a DateSpecifier."""


UNIT_DELTAS: dict[TimeUnit, timedelta] = {
    TimeUnit.MINUTE: timedelta(minutes=1),
    TimeUnit.HOUR: timedelta(hours=1),
    TimeUnit.DAY: timedelta(days=1),
}


@dataclass(frozen=True, slots=True)
class RelativeDate:
    """An offset from the evaluation moment, re-resolved on every use."""
    unit: TimeUnit
    value: int
    kind: DateKind = field(default=DateKind.RELATIVE, init=False)

    def is_relative(self) -> bool:
        return self.kind is DateKind.RELATIVE

    def resolve(self, now: Timestamp | None = None) -> Timestamp:
        """Concrete instant `value` units before `now` (default: clock.now())."""
        if now is None:
            now = clock.now()
        return now - UNIT_DELTAS[self.unit] * self.value


@dataclass(frozen=True, slots=True)
class AbsoluteDate:
    """A concrete point in time.

    Built without an instant, it captures "one hour ago" once, at
    construction. The value does not drift as time passes.
    """
    instant: Timestamp = field(default_factory=clock.get_date_hours_ago)
    kind: DateKind = field(default=DateKind.ABSOLUTE, init=False)

    def is_relative(self) -> bool:
        return self.kind is DateKind.RELATIVE

    def resolve(self, now: Timestamp | None = None) -> Timestamp:
        return self.instant


DateSpecifier: TypeAlias = RelativeDate | AbsoluteDate
