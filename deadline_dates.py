"""
Calendar helpers for the renewal deadline engine.

Year and month arithmetic goes through ``dateutil.relativedelta`` so that
day overflow clamps to the last valid day of the target month
(2016-02-29 + 1 year -> 2017-02-28).
"""

import logging
from datetime import date, datetime
from typing import Optional, Union

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime, str, None]

_PARSE_DEFAULT = datetime(2000, 1, 1)
_PARSE_CHECK_DEFAULT = datetime(1999, 1, 1)


def as_date(value: Union[date, datetime]) -> date:
    """Drop the time component of a datetime; dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def parse_registration_date(value: DateLike) -> Optional[date]:
    """
    Parse a registration date from a date, datetime or string.

    Accepts ISO dates, TSDR-style ``YYYYMMDD`` and long-form dates such as
    ``March 1, 2015``. Returns None for empty or unparseable input and for
    text without a year (``"March 1"``, ``"Monday"``, ``"12:00"``).
    """
    if value is None:
        return None
    if isinstance(value, (date, datetime)):
        return as_date(value)
    if not isinstance(value, str) or not value.strip():
        return None

    # Missing components come from a fixed default, never from today.
    text = value.strip()
    try:
        parsed = date_parser.parse(text, default=_PARSE_DEFAULT)
        # A year that follows the default was never in the text.
        if date_parser.parse(text, default=_PARSE_CHECK_DEFAULT).year != parsed.year:
            logger.debug("Registration date %r has no year", value)
            return None
        return parsed.date()
    except (ValueError, OverflowError) as exc:
        logger.debug("Unparseable registration date %r: %s", value, exc)
        return None


def days_between(start: date, end: date) -> int:
    """Signed whole days from ``start`` to ``end``."""
    return (as_date(end) - as_date(start)).days


def add_years(start: date, years: int) -> date:
    return start + relativedelta(years=years)


def add_years_months(start: date, years: int, months: int) -> date:
    return start + relativedelta(years=years, months=months)
