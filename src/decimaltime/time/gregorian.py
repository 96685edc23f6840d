"""Calendar capabilities the conversion engine relies on.

Every rule about month lengths, leap years, and valid clock fields is taken from the standard
``datetime`` and ``calendar`` modules. These helpers only translate their failures into the
package's exception types so callers see a consistent error taxonomy.
"""

from __future__ import annotations

# Standard Library Imports
import calendar
import operator
from datetime import date, datetime, timedelta, tzinfo

# Local Imports
from ..common.exceptions import InvalidDecimalTimeError, InvalidTimestampError
from ..common.logger import decimalTimeLogError


def isLeapYear(year: int) -> bool:
    """Return whether `year` is a leap year in the proleptic Gregorian calendar."""
    return calendar.isleap(year)


def daysInYear(year: int) -> int:
    """Return the number of days in `year`, either 365 or 366."""
    return 365 + int(calendar.isleap(year))


def buildDatetime(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    microsecond: int = 0,
    tz: tzinfo | None = None,
) -> datetime:
    """Validate calendar fields and construct the corresponding ``datetime``.

    Args:
        year (``int``): calendar year
        month (``int``): month of the year (1-12)
        day (``int``): day of the month
        hour (``int``, optional): hour of the day (0-23). Defaults to 0.
        minute (``int``, optional): minute of the hour (0-59). Defaults to 0.
        second (``int``, optional): second of the minute (0-59). Defaults to 0.
        microsecond (``int``, optional): microsecond of the second. Defaults to 0.
        tz (``tzinfo``, optional): timezone tag to attach. Defaults to ``None`` (naive).

    Raises:
        InvalidTimestampError: if the fields do not form a valid date and time

    Returns:
        ``datetime``: the validated timestamp
    """
    try:
        return datetime(year, month, day, hour, minute, second, microsecond, tzinfo=tz)
    except (ValueError, OverflowError) as err:
        msg = (
            f"Invalid calendar timestamp {year}-{month}-{day} "
            f"{hour}:{minute}:{second}.{microsecond}: {err}"
        )
        decimalTimeLogError(msg)
        raise InvalidTimestampError(msg) from err


def dateFromDayOfYear(year: int, day_of_year: int) -> date:
    """Return the date that is `day_of_year` days into `year`, counting January 1st as day 1.

    Raises:
        InvalidDecimalTimeError: if either value isn't an integer, if the year is outside the
            calendar library's range, or if the
            ordinal day lands outside of `year` (day 0, or past December 31st)
    """
    try:
        year = operator.index(year)
        day_of_year = operator.index(day_of_year)
    except TypeError as err:
        msg = f"Year and day_of_year must be integers. Received: year={year!r}, day_of_year={day_of_year!r}"
        decimalTimeLogError(msg)
        raise InvalidDecimalTimeError(msg) from err

    try:
        result = date(year, 1, 1) + timedelta(days=day_of_year - 1)
    except (ValueError, OverflowError) as err:
        msg = f"Invalid day_of_year={day_of_year} for year={year}: {err}"
        decimalTimeLogError(msg)
        raise InvalidDecimalTimeError(msg) from err

    if result.year != year:
        msg = f"Invalid day_of_year={day_of_year} for year={year}: year has {daysInYear(year)} days"
        decimalTimeLogError(msg)
        raise InvalidDecimalTimeError(msg)

    return result
