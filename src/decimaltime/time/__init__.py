"""Contains the :class:`.DecimalTime` type and its conversions to and from calendar timestamps.

Calendar arithmetic is delegated entirely to the standard ``datetime`` module through
:mod:`.gregorian`; this package only decides how a clock reading maps onto a day fraction.
"""

from __future__ import annotations

# Local Imports
from .conversions import (
    calendarToDecimalTime,
    datetimeToDecimalTime,
    decimalTimeToDatetime,
    decimalTimeToUTCDatetime,
    utcDatetimeToDecimalTime,
)
from .decimal_time import DecimalTime
from .formatting import formatDecimalTime

__all__ = [
    "DecimalTime",
    "calendarToDecimalTime",
    "datetimeToDecimalTime",
    "decimalTimeToDatetime",
    "decimalTimeToUTCDatetime",
    "formatDecimalTime",
    "utcDatetimeToDecimalTime",
]
