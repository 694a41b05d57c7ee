"""Calendar arithmetic on plain (year, month, day) dates.

Nothing here touches time-of-day or timezones: ISO strings are split into
fields and built with ``datetime.date`` so every host counts the same days.
"""

from __future__ import annotations

import re
from datetime import date, datetime

from prorata.core.exceptions import InvalidDateError

_ISO_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


def is_leap_year(year: int) -> bool:
    """Gregorian rule: divisible by 4, except centuries not divisible by 400."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def parse_date(value: date | str) -> date:
    """Read ``value`` as a calendar date.

    Accepts a ``date``, a ``datetime`` (its calendar date is kept) or a
    ``YYYY-MM-DD`` string.

    Raises:
        InvalidDateError: for any other input or an impossible date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDateError(value)

    match = _ISO_DATE.match(value.strip())
    if match is None:
        raise InvalidDateError(value)
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidDateError(value) from exc


def day_count_inclusive(start: date | str, end: date | str) -> int:
    """Days spanned by ``[start, end]``, counting both ends.

    A single-day span counts 1. A reversed span is not clamped and yields 0
    or a negative count.
    """
    return (parse_date(end) - parse_date(start)).days + 1


def overlaps(a_start: date | str, a_end: date | str,
             b_start: date | str, b_end: date | str) -> bool:
    """True when two ranges intersect; ranges that only touch do not count."""
    return parse_date(a_start) < parse_date(b_end) and parse_date(a_end) > parse_date(b_start)
