import calendar
from dataclasses import dataclass
from datetime import date, time
from enum import Enum

from daterange.util.formatting import ordinalize


class DateGranularity(str, Enum):
    FULL = "full"
    MONTH = "month"
    DAY = "day"


class TimePrefix(str, Enum):
    AT = "at"
    TO = "to"
    UNTIL = "until"


@dataclass(frozen=True)
class HumaniseConfig:
    date_granularity: DateGranularity = DateGranularity.FULL
    time_prefix: TimePrefix = TimePrefix.AT
    time_format: str = "%H:%M"


DEFAULT_CONFIG = HumaniseConfig()


def humanise_date(d: date, config: HumaniseConfig = DEFAULT_CONFIG) -> str:
    day = ordinalize(d.day)
    if config.date_granularity == DateGranularity.DAY:
        return day
    if config.date_granularity == DateGranularity.MONTH:
        return f"{day} {calendar.month_name[d.month]}"
    return f"{day} {calendar.month_name[d.month]} {d.year}"


def humanise_time(t: time | None, config: HumaniseConfig = DEFAULT_CONFIG) -> str:
    if t is None:
        return ""
    return f"{config.time_prefix.value} {t.strftime(config.time_format)}".strip()


def humanise_date_time(
    d: date, t: time | None, config: HumaniseConfig = DEFAULT_CONFIG
) -> str:
    return f"{humanise_date(d, config)} {humanise_time(t, config)}".strip()
