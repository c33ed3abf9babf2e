from __future__ import annotations

import logging
from datetime import date, time
from enum import Enum

from daterange.util.date_parser import parse_date, parse_time
from daterange.util.format import (
    DateGranularity,
    HumaniseConfig,
    TimePrefix,
    humanise_date,
    humanise_date_time,
    humanise_time,
)

_logger = logging.getLogger(__name__)

RANGE_SEPARATOR = " - "


class RangeEnd(str, Enum):
    START = "start"
    END = "end"


class RangeTier(str, Enum):
    SAME_DAY = "same_day"
    SAME_MONTH = "same_month"
    SAME_YEAR = "same_year"
    DIFFERENT_YEARS = "different_years"


class DateRangeFormatter:
    """
    Renders a start/end date pair, with optional times, as a single phrase such as
    "1st - 3rd November 2009" or "1st November 2009 at 10:00 to 11:00".

    Dates and times are parsed on construction; any ParseError propagates to the caller.
    The range is not validated, so an end before the start renders with the same rules.
    """

    __slots__ = ("_start_date", "_end_date", "_start_time", "_end_time")

    def __init__(
        self,
        start_date: str,
        end_date: str,
        start_time: str | None = None,
        end_time: str | None = None,
    ) -> None:
        self._start_date = parse_date(start_date)
        self._end_date = parse_date(end_date)
        self._start_time = parse_time(start_time)
        self._end_time = parse_time(end_time)
        _logger.debug(f"Created {self!r}")

    @property
    def start_date(self) -> date:
        return self._start_date

    @property
    def end_date(self) -> date:
        return self._end_date

    @property
    def start_time(self) -> time | None:
        return self._start_time

    @property
    def end_time(self) -> time | None:
        return self._end_time

    def same_day(self) -> bool:
        return self.start_date == self.end_date

    def same_month(self) -> bool:
        return (
            self.start_date.month == self.end_date.month
            and self.start_date.year == self.end_date.year
        )

    def same_year(self) -> bool:
        return self.start_date.year == self.end_date.year

    @property
    def tier(self) -> RangeTier:
        if self.same_day():
            return RangeTier.SAME_DAY
        if self.same_month():
            return RangeTier.SAME_MONTH
        if self.same_year():
            return RangeTier.SAME_YEAR
        return RangeTier.DIFFERENT_YEARS

    def to_s(self) -> str:
        tier = self.tier
        if tier == RangeTier.SAME_DAY:
            return self._humanise_same_day_range()
        if tier == RangeTier.SAME_MONTH:
            return self._humanise_partial_range(DateGranularity.DAY)
        if tier == RangeTier.SAME_YEAR:
            return self._humanise_partial_range(DateGranularity.MONTH)
        return self._humanise_date_range()

    def __str__(self) -> str:
        return self.to_s()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(start_date={self.start_date!r}, end_date={self.end_date!r},"
            f" start_time={self.start_time!r}, end_time={self.end_time!r})"
        )

    def _date_and_time(self, end: RangeEnd) -> tuple[date, time | None]:
        return {
            RangeEnd.START: (self.start_date, self.start_time),
            RangeEnd.END: (self.end_date, self.end_time),
        }[end]

    def _humanise_date_time(self, end: RangeEnd) -> str:
        d, t = self._date_and_time(end)
        return humanise_date_time(d, t)

    def _humanise_date_range(self) -> str:
        start = self._humanise_date_time(RangeEnd.START)
        end = self._humanise_date_time(RangeEnd.END)
        return f"{start}{RANGE_SEPARATOR}{end}".strip()

    def _humanise_partial_range(self, start_granularity: DateGranularity) -> str:
        # the shared month/year is only elided when neither side has a time
        if self.start_time is not None or self.end_time is not None:
            start = self._humanise_date_time(RangeEnd.START)
        else:
            start = humanise_date(
                self.start_date, HumaniseConfig(date_granularity=start_granularity)
            )
        end = self._humanise_date_time(RangeEnd.END)
        return f"{start}{RANGE_SEPARATOR}{end}".strip()

    def _humanise_same_day_range(self) -> str:
        prefix = TimePrefix.TO if self.start_time is not None else TimePrefix.UNTIL
        end_time = humanise_time(self.end_time, HumaniseConfig(time_prefix=prefix))
        return f"{self._humanise_date_time(RangeEnd.START)} {end_time}".strip()
