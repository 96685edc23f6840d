"""Helper functions that convert between calendar timestamps and :class:`.DecimalTime`.

Time of day is carried through the conversions as an integer count of microseconds, the
resolution of ``datetime``. Going from a fraction back to a clock reading rounds to the nearest
microsecond, and never rounds past the last microsecond of the day.
"""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime, time, timezone

# Local Imports
from ..common.exceptions import InvalidDecimalTimeError, InvalidTimestampError
from ..common.logger import decimalTimeLogError
from .constants import (
    MICROSECONDS_PER_DAY,
    MICROSECONDS_PER_SECOND,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from .decimal_time import DecimalTime
from .gregorian import buildDatetime, dateFromDayOfYear


def seconds2hms(total_seconds: int) -> tuple[int, int, int]:
    """Convert whole seconds elapsed in a day to hour, minute, second format."""
    hour, remainder = divmod(total_seconds, SECONDS_PER_HOUR)
    minute, second = divmod(remainder, SECONDS_PER_MINUTE)

    return hour, minute, second


def microsecondsIntoDay(date_time: datetime) -> int:
    """Return the number of microseconds elapsed since midnight of `date_time`'s date."""
    seconds = (
        date_time.hour * SECONDS_PER_HOUR + date_time.minute * SECONDS_PER_MINUTE + date_time.second
    )
    return seconds * MICROSECONDS_PER_SECOND + date_time.microsecond


def dayFractionToMicroseconds(decimal_day: float) -> int:
    """Convert a day fraction in [0, 1) to whole microseconds since midnight.

    Rounds to the nearest microsecond. Fractions close enough to ``1.0`` to round up to a full
    day are held on the last microsecond of the same day.
    """
    total = round(float(decimal_day) * MICROSECONDS_PER_DAY)
    return min(total, MICROSECONDS_PER_DAY - 1)


def datetimeToDecimalTime(date_time: datetime) -> DecimalTime:
    """Convert a ``datetime`` object to a :class:`.DecimalTime`.

    The wall clock fields of `date_time` are used as given. A timezone tag, if present, is
    ignored; use :func:`.utcDatetimeToDecimalTime` to read an aware instant in UTC.

    Args:
        date_time (datetime): ``datetime`` object to be converted.

    Returns:
        DecimalTime: Converted :class:`.DecimalTime` object.
    """
    if not isinstance(date_time, datetime):
        decimalTimeLogError("Error: `date_time` must be a `datetime.datetime` object.")
        raise TypeError(type(date_time))

    return DecimalTime(
        year=date_time.year,
        day_of_year=date_time.timetuple().tm_yday,
        decimal_day=microsecondsIntoDay(date_time) / MICROSECONDS_PER_DAY,
    )


def calendarToDecimalTime(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    microsecond: int = 0,
) -> DecimalTime:
    """Convert calendar fields in ymdhms form to a :class:`.DecimalTime`.

    Args:
        year (``int``): calendar year
        month (``int``): month of the year
        day (``int``): day of the month
        hour (``int``, optional): hour of the day. Defaults to 0.
        minute (``int``, optional): minute of the hour. Defaults to 0.
        second (``int``, optional): second of the minute. Defaults to 0.
        microsecond (``int``, optional): microsecond of the second. Defaults to 0.

    Raises:
        InvalidTimestampError: if the fields do not form a valid date and time

    Returns:
        :class:`.DecimalTime`: corresponding decimal time
    """
    return datetimeToDecimalTime(buildDatetime(year, month, day, hour, minute, second, microsecond))


def utcDatetimeToDecimalTime(instant: datetime) -> DecimalTime:
    """Convert a timezone-aware ``datetime`` to a :class:`.DecimalTime` of its UTC calendar fields.

    Raises:
        InvalidTimestampError: if `instant` is naive, or its UTC date is outside the calendar
            library's range
    """
    if not isinstance(instant, datetime):
        decimalTimeLogError("Error: `instant` must be a `datetime.datetime` object.")
        raise TypeError(type(instant))

    if instant.tzinfo is None or instant.utcoffset() is None:
        msg = f"Cannot read UTC calendar fields from naive timestamp {instant.isoformat()}"
        decimalTimeLogError(msg)
        raise InvalidTimestampError(msg)

    try:
        utc_instant = instant.astimezone(timezone.utc)
    except OverflowError as err:
        msg = f"Cannot shift {instant.isoformat()} to UTC: {err}"
        decimalTimeLogError(msg)
        raise InvalidTimestampError(msg) from err

    return datetimeToDecimalTime(utc_instant.replace(tzinfo=None))


def decimalTimeToDatetime(decimal_time: DecimalTime) -> datetime:
    """Convert a :class:`.DecimalTime` to a naive ``datetime`` object.

    Args:
        decimal_time (DecimalTime): :class:`.DecimalTime` object to be converted.

    Raises:
        InvalidDecimalTimeError: if `day_of_year` is not an integer day of `year`, or if
            `decimal_day` is outside of [0, 1)

    Returns:
        datetime: Converted ``datetime`` object.
    """
    calendar_date = dateFromDayOfYear(decimal_time.year, decimal_time.day_of_year)

    # Also rejects NaN, which fails every comparison
    if not 0.0 <= decimal_time.decimal_day < 1.0:
        msg = f"`decimal_day` must be in [0, 1). Received: {decimal_time.decimal_day}"
        decimalTimeLogError(msg)
        raise InvalidDecimalTimeError(msg)

    total_microseconds = dayFractionToMicroseconds(decimal_time.decimal_day)
    seconds, microsecond = divmod(total_microseconds, MICROSECONDS_PER_SECOND)
    hour, minute, second = seconds2hms(seconds)

    return datetime.combine(calendar_date, time(hour, minute, second, microsecond))


def decimalTimeToUTCDatetime(decimal_time: DecimalTime) -> datetime:
    """Convert a :class:`.DecimalTime` to a ``datetime`` tagged as UTC, without shifting it."""
    return decimalTimeToDatetime(decimal_time).replace(tzinfo=timezone.utc)
