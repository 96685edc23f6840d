"""Defines the :class:`.DecimalTime` class.

A :class:`.DecimalTime` names an instant by its year, the 1-based ordinal day within that year,
and the elapsed fraction of that day:

.. code-block:: python

    noon = DecimalTime(2025, 73, 0.5)
    noon.toDatetime()  # datetime(2025, 3, 14, 12, 0)
    noon.format("%Y.%D.%F")  # "2025.73.5"

Construction never validates the fields. An impossible value, such as day 366 of a common year,
is reported only when it is converted back to a calendar timestamp.
"""

from __future__ import annotations

# Standard Library Imports
from dataclasses import dataclass
from typing import TYPE_CHECKING

# Local Imports
from .constants import DEFAULT_TEMPLATE

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from datetime import datetime


@dataclass
class DecimalTime:
    """Class representing a date and time as a year, an ordinal day, and a day fraction."""

    year: int
    """``int``: proleptic Gregorian calendar year."""

    day_of_year: int
    """``int``: 1-based ordinal day within :attr:`.year`, January 1st is day 1."""

    decimal_day: float
    """``float``: elapsed fraction of the day in [0, 1). 0.0 is midnight, 0.5 is noon."""

    @classmethod
    def fromDatetime(cls, date_time: datetime) -> DecimalTime:
        """Create a :class:`.DecimalTime` from the wall clock fields of a ``datetime``.

        See Also:
            :func:`.datetimeToDecimalTime`
        """
        # Local Imports
        from .conversions import datetimeToDecimalTime

        return datetimeToDecimalTime(date_time)

    @classmethod
    def fromDatetimeUTC(cls, instant: datetime) -> DecimalTime:
        """Create a :class:`.DecimalTime` from the UTC calendar fields of an aware ``datetime``.

        See Also:
            :func:`.utcDatetimeToDecimalTime`
        """
        # Local Imports
        from .conversions import utcDatetimeToDecimalTime

        return utcDatetimeToDecimalTime(instant)

    @classmethod
    def fromCalendar(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
    ) -> DecimalTime:
        """Create a :class:`.DecimalTime` from calendar fields in ymdhms form.

        See Also:
            :func:`.calendarToDecimalTime`
        """
        # Local Imports
        from .conversions import calendarToDecimalTime

        return calendarToDecimalTime(year, month, day, hour, minute, second, microsecond)

    def toDatetime(self) -> datetime:
        """Return the naive ``datetime`` this value denotes.

        Raises:
            InvalidDecimalTimeError: if the fields don't name a real moment of :attr:`.year`
        """
        # Local Imports
        from .conversions import decimalTimeToDatetime

        return decimalTimeToDatetime(self)

    def toDatetimeUTC(self) -> datetime:
        """Return :meth:`.toDatetime` tagged as UTC."""
        # Local Imports
        from .conversions import decimalTimeToUTCDatetime

        return decimalTimeToUTCDatetime(self)

    def format(self, template: str) -> str:
        """Render this value through `template`.

        See Also:
            :func:`.formatDecimalTime` for the supported directives.
        """
        # Local Imports
        from .formatting import formatDecimalTime

        return formatDecimalTime(self, template)

    def __str__(self):
        """Return this value rendered with :data:`.DEFAULT_TEMPLATE`."""
        return self.format(DEFAULT_TEMPLATE)
