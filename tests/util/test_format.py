from datetime import date, time

from daterange.util.format import (
    DateGranularity,
    HumaniseConfig,
    TimePrefix,
    humanise_date,
    humanise_date_time,
    humanise_time,
)

NOVEMBER_1_2009 = date(2009, 11, 1)
TEN_AM = time(10, 0)


def test__humanise_date__default_config__renders_full_date() -> None:
    assert humanise_date(NOVEMBER_1_2009) == "1st November 2009"


def test__humanise_date__month_granularity__omits_year() -> None:
    config = HumaniseConfig(date_granularity=DateGranularity.MONTH)
    assert humanise_date(NOVEMBER_1_2009, config) == "1st November"


def test__humanise_date__day_granularity__renders_ordinal_only() -> None:
    config = HumaniseConfig(date_granularity=DateGranularity.DAY)
    assert humanise_date(NOVEMBER_1_2009, config) == "1st"


def test__humanise_time__no_time__renders_empty() -> None:
    assert humanise_time(None) == ""
    assert humanise_time(None, HumaniseConfig(time_prefix=TimePrefix.UNTIL)) == ""


def test__humanise_time__zero_pads_with_prefix() -> None:
    assert humanise_time(time(9, 5)) == "at 09:05"
    assert humanise_time(TEN_AM, HumaniseConfig(time_prefix=TimePrefix.TO)) == "to 10:00"
    assert humanise_time(TEN_AM, HumaniseConfig(time_prefix=TimePrefix.UNTIL)) == "until 10:00"


def test__humanise_date_time__with_and_without_time__joins_and_strips() -> None:
    assert humanise_date_time(NOVEMBER_1_2009, TEN_AM) == "1st November 2009 at 10:00"
    assert humanise_date_time(NOVEMBER_1_2009, None) == "1st November 2009"
