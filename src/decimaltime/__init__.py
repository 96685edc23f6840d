"""Main Module Documentation.

Converts between calendar timestamps and decimal time: a year, an ordinal day of that year, and
the elapsed fraction of the day. The top-level module also serves as the command line entry
point that prints a moment in decimal time.
"""

from __future__ import annotations

# Standard Library Imports
import os
import sys

# Local Imports
from .common.exceptions import DecimalTimeError, InvalidDecimalTimeError, InvalidTimestampError
from .time import (
    DecimalTime,
    calendarToDecimalTime,
    datetimeToDecimalTime,
    decimalTimeToDatetime,
    decimalTimeToUTCDatetime,
    formatDecimalTime,
    utcDatetimeToDecimalTime,
)

__version__ = "0.1.0"

__all__ = [
    "DecimalTime",
    "DecimalTimeError",
    "InvalidDecimalTimeError",
    "InvalidTimestampError",
    "calendarToDecimalTime",
    "datetimeToDecimalTime",
    "decimalTimeToDatetime",
    "decimalTimeToUTCDatetime",
    "formatDecimalTime",
    "main",
    "runDecimalTime",
    "utcDatetimeToDecimalTime",
]


def runDecimalTime(
    template: str | None = None,
    utc_offset_hours: float | None = None,
    timestamp=None,
    show_utc: bool = False,
    now=None,
) -> str:
    """Render a moment in decimal time.

    Args:
        template (``str``, optional): template with ``%`` directives. Defaults to ``None``, which
            uses the config value.
        utc_offset_hours (``float``, optional): hours east of UTC used to read the current time.
            Defaults to ``None``, which uses the config value.
        timestamp (``datetime``, optional): naive wall clock time, read at the UTC offset, to render
            instead of the current time.
        show_utc (``bool``, optional): whether to append the same moment as a UTC-tagged calendar
            timestamp. Defaults to ``False``.
        now (``datetime``, optional): aware instant standing in for the current time.

    Returns:
        ``str``: the rendered decimal time
    """
    # Local Imports
    from .common.logger import Logger
    from .config.display_config import DisplayConfig

    logger = Logger("decimaltime")
    display_cfg = DisplayConfig.fromBehavioralConfig(
        template=template,
        utc_offset_hours=utc_offset_hours,
        timestamp=timestamp,
    )

    instant = display_cfg.instant(now)
    wall_clock = instant.replace(tzinfo=None)
    decimal_time = DecimalTime.fromDatetime(wall_clock)
    logger.debug(f"Converted {wall_clock.isoformat()} to {decimal_time!r}")

    rendered = decimal_time.format(display_cfg.template)
    if show_utc:
        utc_time = DecimalTime.fromDatetimeUTC(instant).toDatetimeUTC()
        rendered = f"{rendered} {utc_time.isoformat()}"

    return rendered


def main() -> None:
    """Decimal time command line entry point.

    This is the function that the :command:`decimaltime` command points to. See :mod:`.cli` for
    details on what command line options are available.
    """
    # Third Party Imports
    from pydantic import ValidationError

    # Local Imports
    from .common.behavioral_config import CONFIG_ENV_VARIABLE, BehavioralConfig
    from .common.cli import getCommandLineParser
    from .common.logger import decimalTimeLogCritical

    parser = getCommandLineParser()
    cli_args = parser.parse_args()

    if config_path := os.environ.get(CONFIG_ENV_VARIABLE):
        BehavioralConfig(config_path)

    try:
        rendered = runDecimalTime(
            template=cli_args.template,
            utc_offset_hours=cli_args.utc_offset_hours,
            timestamp=cli_args.timestamp,
            show_utc=cli_args.show_utc,
        )
    except (DecimalTimeError, ValidationError) as err:
        decimalTimeLogCritical(f"Conversion failed: {err}")
        sys.exit(1)

    print(rendered)  # noqa: T201
