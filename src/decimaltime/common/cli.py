"""Define the command line interface for the decimal time tool."""

from __future__ import annotations

# Standard Library Imports
import argparse
from datetime import datetime

# Local Imports
from .logger import decimalTimeLogError


def timestampChecker(timestamp):
    """Checks for valid ISO 8601 timestamps passed to the CLI parser.

    Args:
        timestamp (``str``): timestamp given to CLI parser.

    Raises:
        ValueError: if the string is not an ISO 8601 timestamp

    Returns:
        ``datetime``: parsed timestamp
    """
    try:
        return datetime.fromisoformat(timestamp)
    except ValueError:
        decimalTimeLogError("Bad timestamp given to CLI")
        raise


def getCommandLineParser():
    """Create parser for command line arguments.

    Returns:
        ``argparse.ArgumentParser``: valid parser object
    """
    parser = argparse.ArgumentParser(description="Decimal Time Command Line Interface")

    parser.add_argument(
        "timestamp",
        metavar="TIMESTAMP",
        nargs="?",
        default=None,
        type=timestampChecker,
        help="ISO 8601 timestamp to convert. DEFAULT: the current time",
    )

    parser.add_argument(
        "-f",
        "--format",
        dest="template",
        metavar="TEMPLATE",
        default=None,
        type=str,
        help="Template with %%Y, %%d, %%D, %%f, %%F directives. DEFAULT: config value",
    )

    parser.add_argument(
        "-o",
        "--utc-offset",
        dest="utc_offset_hours",
        metavar="HOURS",
        default=None,
        type=float,
        help="Hours east of UTC used for the current time. DEFAULT: config value",
    )

    parser.add_argument(
        "-u",
        "--utc",
        dest="show_utc",
        action="store_true",
        default=False,
        help="Also print the same moment as a UTC calendar timestamp",
    )

    return parser
