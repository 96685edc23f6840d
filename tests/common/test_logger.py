from __future__ import annotations

# Standard Library Imports
import logging
import os

# Third Party Imports
import pytest

# Decimal Time Imports
from decimaltime.common import pathSafeTime
from decimaltime.common.logger import (
    ROOT_LOGGER_NAME,
    Logger,
    decimalTimeLogCritical,
    decimalTimeLogDebug,
    decimalTimeLogError,
    decimalTimeLogInfo,
    decimalTimeLogWarning,
)

# Local Imports
from .. import FIXTURE_DATA_DIR

CORRECT_OUTPUT: list[list[str | int]] = [
    ["test", logging.DEBUG, "This is a debug message."],
    ["test", logging.INFO, "This is an info message."],
    ["test", logging.WARNING, "This is a warning message."],
    ["test", logging.ERROR, "This is an error message."],
    ["test", logging.CRITICAL, "This is a critical message."],
]

CORRECT_FILE_OUTPUT: list[list[str | int]] = [
    ["test_logger", "DEBUG", "This is a debug message.\n"],
    ["test_logger", "INFO", "This is an info message.\n"],
    ["test_logger", "WARNING", "This is a warning message.\n"],
    ["test_logger", "ERROR", "This is an error message.\n"],
    ["test_logger", "CRITICAL", "This is a critical message.\n"],
]


def testStdout(caplog: pytest.LogCaptureFixture):
    """Test the logger's output to `sys.stdout`."""
    logger = Logger("test", level=logging.DEBUG)
    assert logger.filename == "stdout"
    logger.debug("This is a debug message.")
    logger.info("This is an info message.")
    logger.warning("This is a warning message.")
    logger.error("This is an error message.")
    logger.critical("This is a critical message.")

    assert len(caplog.record_tuples) == 5
    for item, record_tuple in enumerate(caplog.record_tuples):
        assert record_tuple == tuple(CORRECT_OUTPUT[item])


@pytest.mark.datafiles(FIXTURE_DATA_DIR)
def testLogfile(datafiles: str):
    """Test the logger's output to a logfile."""
    saved_cwd = os.getcwd()
    os.chdir(datafiles)
    file_logger = Logger("logfile-test", level=logging.DEBUG, path="logs/")
    try:
        file_logger.debug("This is a debug message.")
        file_logger.info("This is an info message.")
        file_logger.warning("This is a warning message.")
        file_logger.error("This is an error message.")
        file_logger.critical("This is a critical message.")

        with open(file_logger.filename, encoding="utf-8") as logfile:
            line_count = 0
            for item, line in enumerate(logfile):
                assert line.split(" - ")[1:] == CORRECT_FILE_OUTPUT[item]
                line_count += 1

            assert line_count == 5
    finally:
        for handler in list(file_logger.handlers):
            handler.close()
            file_logger.removeHandler(handler)
        os.chdir(saved_cwd)


def testOneLineHelpers(caplog: pytest.LogCaptureFixture):
    """Test the helpers that log to the top-level package logger."""
    caplog.set_level(logging.DEBUG, logger=ROOT_LOGGER_NAME)
    decimalTimeLogDebug("debug")
    decimalTimeLogInfo("info")
    decimalTimeLogWarning("warning")
    decimalTimeLogError("error")
    decimalTimeLogCritical("critical")

    assert caplog.record_tuples == [
        (ROOT_LOGGER_NAME, logging.DEBUG, "debug"),
        (ROOT_LOGGER_NAME, logging.INFO, "info"),
        (ROOT_LOGGER_NAME, logging.WARNING, "warning"),
        (ROOT_LOGGER_NAME, logging.ERROR, "error"),
        (ROOT_LOGGER_NAME, logging.CRITICAL, "critical"),
    ]


def testPathSafeTime():
    """Test that the log file timestamp has no path separators or colons."""
    stamp = pathSafeTime()
    assert ":" not in stamp
    assert "." not in stamp
    assert "/" not in stamp
