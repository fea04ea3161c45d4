from typing import Union
from datetime import datetime, date

from dateutil.relativedelta import relativedelta
from pandas import Timestamp

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

DateLike = Union[str, date, datetime, Timestamp]


class InvalidDateError(ValueError):
    """Raised when a date string cannot be parsed as a calendar date."""


def to_date(date_like: DateLike) -> date:
    """
    Convert a string, datetime or pandas Timestamp to a plain date.
    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' string formats.
    """
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        text = date_like.strip()
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(text, fmt).date()
            except ValueError:
                continue
        raise InvalidDateError(f"Unsupported date string format: {date_like!r}")
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def add_months(date_like: DateLike, months: int) -> date:
    """
    Shift a date by whole calendar months, clipping to month end (Jan 31 + 1M = Feb 28/29).
    """
    return to_date(date_like) + relativedelta(months=months)
