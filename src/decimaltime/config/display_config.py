"""Submodule defining the settings used to print a decimal time from the command line."""

# ruff: noqa: TCH003

from __future__ import annotations

# Standard Library Imports
from datetime import datetime, timedelta, timezone

# Third Party Imports
from pydantic import BaseModel, Field, field_validator

# Local Imports
from ..common.behavioral_config import BehavioralConfig
from ..time.constants import SECONDS_PER_HOUR


class DisplayConfig(BaseModel):
    """Configuration defining what moment is printed, and how."""

    template: str = Field(min_length=1)
    """``str``: template with ``%`` directives used to render the value."""

    utc_offset_hours: float = Field(default=0.0, gt=-24.0, lt=24.0)
    """``float``: fixed offset from UTC applied to the current time. Defaults to 0."""

    timestamp: datetime | None = None
    """``datetime | None``: moment to print. Defaults to ``None``, meaning the current time."""

    @field_validator("timestamp")
    @classmethod
    def ignore_tzinfo(cls, val: datetime | None):
        """Remove any timezone info from the timestamp, its wall clock fields are used as given."""
        if val is not None and val.tzinfo:
            val = val.replace(tzinfo=None)
        return val

    @classmethod
    def fromBehavioralConfig(cls, **overrides) -> DisplayConfig:
        """Build a :class:`.DisplayConfig` from the shared config, replacing any non-``None`` overrides."""
        display = BehavioralConfig.getConfig().display
        cfg_dict = {
            "template": display.Template,
            "utc_offset_hours": display.UTCOffsetHours,
        }
        cfg_dict.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**cfg_dict)

    @property
    def zone(self) -> timezone:
        """``timezone``: fixed-offset zone described by :attr:`.utc_offset_hours`."""
        return timezone(timedelta(seconds=round(self.utc_offset_hours * SECONDS_PER_HOUR)))

    def instant(self, now: datetime | None = None) -> datetime:
        """Return the moment to print, tagged with :attr:`.zone`.

        Args:
            now (``datetime``, optional): aware instant standing in for the current time.

        Returns:
            ``datetime``: :attr:`.timestamp` read as a wall clock time in :attr:`.zone` if set,
            otherwise `now` shifted into :attr:`.zone`.
        """
        if self.timestamp is not None:
            return self.timestamp.replace(tzinfo=self.zone)
        if now is None:
            now = datetime.now(timezone.utc)
        return now.astimezone(self.zone)

    def localTimestamp(self, now: datetime | None = None) -> datetime:
        """Return the naive wall clock time to print.

        See Also:
            :meth:`.instant`
        """
        return self.instant(now).replace(tzinfo=None)
