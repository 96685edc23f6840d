"""Fixed clock quantities used when splitting a day into fractions."""

from __future__ import annotations

SECONDS_PER_MINUTE: int = 60
"""``int``: number of seconds in a minute."""

SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
"""``int``: number of seconds in an hour."""

SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR
"""``int``: number of seconds in a civil day, leap seconds are not represented."""

MICROSECONDS_PER_SECOND: int = 1_000_000
"""``int``: resolution of the standard ``datetime`` type."""

MICROSECONDS_PER_DAY: int = SECONDS_PER_DAY * MICROSECONDS_PER_SECOND
"""``int``: number of microseconds in a civil day."""

DEFAULT_TEMPLATE: str = "%Y.%d.%F"
"""``str``: template used when a :class:`.DecimalTime` is printed without one."""
