from __future__ import annotations

# Standard Library Imports
import subprocess
import sys
from datetime import datetime, timezone

# Third Party Imports
import pytest

# Decimal Time Imports
import decimaltime
from decimaltime import DecimalTime, main, runDecimalTime
from decimaltime.common.behavioral_config import CONFIG_ENV_VARIABLE

# Local Imports
from . import TEST_PI_DAY_NOON

# ruff: noqa: S603


def testPublicInterface():
    """Test that the conversions are exposed at the top level."""
    for name in decimaltime.__all__:
        assert hasattr(decimaltime, name)

    assert decimaltime.decimalTimeToDatetime(DecimalTime(2025, 73, 0.5)) == TEST_PI_DAY_NOON


def testRunFixedTimestamp():
    """Test rendering a given timestamp."""
    assert runDecimalTime(timestamp=TEST_PI_DAY_NOON) == "2025.073.5"
    assert runDecimalTime(template="%Y.%D.%F", timestamp=TEST_PI_DAY_NOON) == "2025.73.5"
    assert runDecimalTime(template="%D", timestamp=TEST_PI_DAY_NOON, show_utc=True) == (
        "73 2025-03-14T12:00:00+00:00"
    )


def testRunShowUTCWithOffset():
    """Test that the UTC timestamp names the same moment as the decimal form, not its wall clock time."""
    now = datetime(2025, 3, 14, 12, tzinfo=timezone.utc)
    rendered = runDecimalTime(template="%D.%F", utc_offset_hours=1.0, show_utc=True, now=now)
    decimal_form, utc_form = rendered.split(" ")
    assert decimal_form == runDecimalTime(template="%D.%F", timestamp=datetime(2025, 3, 14, 13))
    assert utc_form == "2025-03-14T12:00:00+00:00"

    # A given timestamp is a wall clock time at the offset
    local_noon = datetime(2025, 3, 14, 13)
    assert runDecimalTime(template="%D", utc_offset_hours=1.0, timestamp=local_noon, show_utc=True) == (
        "73 2025-03-14T12:00:00+00:00"
    )

    # Shifting back to UTC can cross into the previous day
    assert runDecimalTime(
        template="%D", utc_offset_hours=1.0, timestamp=datetime(2025, 3, 14, 0, 30), show_utc=True
    ) == "73 2025-03-13T23:30:00+00:00"


def testRunNow():
    """Test rendering the current time."""
    rendered = runDecimalTime(template="%Y|%D|%f", utc_offset_hours=1.0)
    year, day_of_year, fraction = rendered.split("|")
    assert int(year) >= 2025
    assert 1 <= int(day_of_year) <= 366
    assert 0.0 <= float(fraction) < 1.0


@pytest.mark.cli()
def testMain(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture):
    """Test the command line entry point."""
    monkeypatch.setattr(sys, "argv", ["decimaltime", "2025-03-14T12:00:00", "-f", "%Y.%D.%F"])
    main()
    assert capsys.readouterr().out.strip() == "2025.73.5"


@pytest.mark.cli()
def testMainConfigVariable(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture, tmp_path):
    """Test that the command line tool reads a custom config file from the environment."""
    config_path = tmp_path / "display.config"
    config_path.write_text("[display]\nTemplate = %%D|%%F\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VARIABLE, str(config_path))
    monkeypatch.setattr(sys, "argv", ["decimaltime", "2025-03-14T18:00:00"])
    main()
    assert capsys.readouterr().out.strip() == "73|75"


@pytest.mark.cli()
def testMainBadOffset(monkeypatch: pytest.MonkeyPatch):
    """Test that an invalid offset exits with an error status."""
    monkeypatch.setattr(sys, "argv", ["decimaltime", "-o", "30"])
    with pytest.raises(SystemExit) as exit_info:
        main()

    assert exit_info.value.code == 1


@pytest.mark.cli()
def testModuleCommand():
    """Test that the module can be ran using `python -m`."""
    assert subprocess.call([sys.executable, "-m", "decimaltime", "-h"]) == 0
