"""Contains all the custom-defined exceptions used in the decimal time package."""

from __future__ import annotations


class DecimalTimeError(Exception):
    """Base exception for failed conversions between calendar and decimal time."""


class InvalidTimestampError(DecimalTimeError, ValueError):
    """Calendar fields do not form a valid date and time."""


class InvalidDecimalTimeError(DecimalTimeError, ValueError):
    """A :class:`.DecimalTime` names no real moment of its year."""
