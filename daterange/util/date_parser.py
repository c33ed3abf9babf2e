import logging
from dataclasses import dataclass
from datetime import date, datetime, time

from dateutil import parser

_logger = logging.getLogger(__name__)


class ParseError(ValueError):
    pass


@dataclass
class TimeAwareParserResult:
    dt: datetime
    has_time: bool
    has_date: bool


class TimeAwareParser(parser.parser):
    def _build_naive(self, res, default):  # type: ignore
        naive = super()._build_naive(res, default)
        return TimeAwareParserResult(
            dt=naive, has_time=res.hour is not None, has_date=res.day is not None
        )


time_aware_parser = TimeAwareParser()


def _parse(raw: str) -> TimeAwareParserResult:
    try:
        return time_aware_parser.parse(raw, ignoretz=True)  # type: ignore
    except (parser.ParserError, OverflowError) as e:
        _logger.debug(f"Could not parse {raw!r}: {e}")
        raise ParseError(f"Could not parse {raw!r}") from e


def parse_date(raw_date: str) -> date:
    result = _parse(raw_date)
    if not result.has_date:
        _logger.debug(f"Rejecting {raw_date!r}: no day component")
        raise ParseError(f"Could not parse date {raw_date!r}: no day given")
    return result.dt.date()


def parse_time(raw_time: str | None) -> time | None:
    if raw_time is None:
        return None

    result = _parse(raw_time)
    if not result.has_time:
        _logger.debug(f"Rejecting {raw_time!r}: no hour component")
        raise ParseError(f"Could not parse time {raw_time!r}: no hour given")
    return result.dt.time()
