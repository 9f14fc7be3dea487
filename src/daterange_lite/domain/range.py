"""DateTimeRange: a "from" and a "to" DateSpecifier.

The range is a plain value holder. It does not check that `from_` lies
before `to`; a reversed range formats and resolves like any other.

Position handling is a two-way branch: Position.FROM (or the string
"from") selects `from_`, and every other value selects `to`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from daterange_lite.domain import clock
from daterange_lite.domain.specifier import DateSpecifier, RelativeDate
from daterange_lite.domain.types import (
    DEFAULT_FROM_UNIT,
    DEFAULT_FROM_VALUE,
    DEFAULT_TO_UNIT,
    DateKind,
    Position,
    Timestamp,
)

log = logging.getLogger(__name__)


@dataclass(slots=True)
class DateTimeRange:
    """Range of interest. Defaults to the last hour, ending now."""
    from_: DateSpecifier | None = None
    to: DateSpecifier | None = None

    def __post_init__(self) -> None:
        if self.from_ is None:
            self.from_ = RelativeDate(DEFAULT_FROM_UNIT, DEFAULT_FROM_VALUE)
        if self.to is None:
            self.to = RelativeDate(DEFAULT_TO_UNIT, 0)

    def is_trailing_window(self) -> bool:
        """True for "last N units": both ends relative and `to` is now."""
        return (
            self.from_.kind is DateKind.RELATIVE
            and self.to.kind is DateKind.RELATIVE
            and self.to.value == 0
        )

    def get_date_for_position(self, position: Position | str) -> DateSpecifier:
        if position == Position.FROM:
            return self.from_
        return self.to

    def set_date_for_position(self, date: DateSpecifier, position: Position | str) -> None:
        """Replace one end of the range in place."""
        if position == Position.FROM:
            self.from_ = date
            log.debug("range from set to %r", date)
        else:
            self.to = date
            log.debug("range to set to %r", date)

    def get_range_string_for_ui(self) -> str:
        """Human-readable range, e.g. "Last 3 hours" or "<from> → <to>"."""
        from daterange_lite.formatting.ui import format_range_string_for_ui

        return format_range_string_for_ui(self)

    def resolve(self, now: Timestamp | None = None) -> tuple[Timestamp, Timestamp]:
        """Concrete (start, end) instants, both relative to one `now`."""
        if now is None:
            now = clock.now()
        return self.from_.resolve(now), self.to.resolve(now)
