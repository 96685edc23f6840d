"""Render a :class:`.DecimalTime` through a small ``%``-directive template language.

Supported directives:

=========  ==============================================================
Directive  Output
=========  ==============================================================
``%Y``     year, no padding
``%d``     day of the year, zero-padded to three digits
``%D``     day of the year, no padding
``%f``     day fraction in positional form, e.g. ``0.5`` or ``0.0``
``%F``     digits of ``%f`` after the point, e.g. ``5`` or ``0``
``%%``     a literal ``%``
=========  ==============================================================

Any other ``%`` pair, and a trailing ``%``, is copied to the output unchanged.
"""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import format_float_positional

# Type Checking Imports
if TYPE_CHECKING:
    # Local Imports
    from .decimal_time import DecimalTime


ESCAPE: str = "%"
"""``str``: character that starts a two-character directive."""


def fractionText(decimal_day: float) -> str:
    """Return the shortest positional text of `decimal_day` with at least one fractional digit."""
    return format_float_positional(float(decimal_day), trim="0")


def fractionDigits(decimal_day: float) -> str:
    """Return :func:`.fractionText` without its leading ``"0."``."""
    text = fractionText(decimal_day)
    if text.startswith("0."):
        return text[2:]
    return text


def renderDirective(decimal_time: DecimalTime, directive: str) -> str | None:
    """Return the text for a single directive character, or ``None`` if it isn't recognized."""
    if directive == "Y":
        return str(decimal_time.year)
    if directive == "d":
        return f"{decimal_time.day_of_year:03d}"
    if directive == "D":
        return str(decimal_time.day_of_year)
    if directive == "f":
        return fractionText(decimal_time.decimal_day)
    if directive == "F":
        return fractionDigits(decimal_time.decimal_day)
    if directive == ESCAPE:
        return ESCAPE
    return None


def formatDecimalTime(decimal_time: DecimalTime, template: str) -> str:
    """Substitute each directive in `template` with the matching field of `decimal_time`.

    Args:
        decimal_time (:class:`.DecimalTime`): value to render
        template (``str``): text containing ``%`` directives

    Returns:
        ``str``: rendered text. Unrecognized directives are kept literally.
    """
    output = []
    index = 0
    while index < len(template):
        char = template[index]
        if char == ESCAPE and index + 1 < len(template):
            rendered = renderDirective(decimal_time, template[index + 1])
            if rendered is not None:
                output.append(rendered)
                index += 2
                continue

        output.append(char)
        index += 1

    return "".join(output)
