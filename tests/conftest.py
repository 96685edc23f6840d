from __future__ import annotations

# Standard Library Imports
import logging
from typing import TYPE_CHECKING

# Third Party Imports
import pytest

# Decimal Time Imports
from decimaltime.common.behavioral_config import CONFIG_ENV_VARIABLE, BehavioralConfig
from decimaltime.common.logger import ROOT_LOGGER_NAME
from decimaltime.time import DecimalTime

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _patchMissingEnvVariables(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Automatically delete each environment variable, if set.

    Args:
        monkeypatch (:class:`pytest.MonkeyPatch`): monkeypatch obj to track changes

    Note:
        This is used so tests can assume a "blank" configuration, and it won't
        overwrite a user's custom-set environment variables.
    """
    with monkeypatch.context() as m_patch:
        m_patch.delenv(CONFIG_ENV_VARIABLE, raising=False)
        yield
        # Make sure we reset the config after each test function
        BehavioralConfig()


@pytest.fixture(autouse=True)
def _resetPackageLogger() -> Iterator[None]:
    """Drop handlers that tests attached to the package logger, so they don't outlive captured streams."""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture(name="pi_day_noon")
def getPiDayNoon() -> DecimalTime:
    """Return noon of March 14th 2025 as a :class:`.DecimalTime`."""
    return DecimalTime(2025, 73, 0.5)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest options without an .ini file."""
    config.addinivalue_line("markers", "cli: mark test as exercising the command line tool")
