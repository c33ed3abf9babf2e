import argparse
import logging
import sys

from daterange.formatter import DateRangeFormatter
from daterange.settings import get_settings
from daterange.util.date_parser import ParseError

_logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="daterange",
        description="Format a date range as a single human-readable phrase",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  daterange 2009-11-1 2009-11-3
  daterange 2009-11-1 2009-11-1 --start-time 10:00 --end-time 11:00
        """,
    )
    parser.add_argument("start_date", help="Start date, e.g. 2009-11-1")
    parser.add_argument("end_date", help="End date, e.g. 2010-12-8")
    parser.add_argument("--start-time", help="Start time, e.g. 10:00")
    parser.add_argument("--end-time", help="End time, e.g. 11:00")
    return parser


def _configure_logging() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level, format=settings.log_format, datefmt=settings.log_date_format
    )


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging()

    try:
        formatter = DateRangeFormatter(
            args.start_date, args.end_date, args.start_time, args.end_time
        )
    except ParseError as e:
        _logger.debug(f"Rejected arguments {args}")
        print(f"daterange: {e}", file=sys.stderr)
        return 2

    print(formatter)
    return 0


if __name__ == "__main__":
    sys.exit(main())
