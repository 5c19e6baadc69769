"""
A Pytest plugin to configure logging for pytest sessions.

Logging is only reconfigured when `--txtype-log-level` is given, otherwise
pytest's builtin logging handles the classifier's log records.
"""

import sys
from pathlib import Path

import pytest

from .logging import LogLevel, configure_logging


def pytest_addoption(parser):  # noqa: D103
    logging_group = parser.getgroup(
        "logging", "Arguments related to logging from the transaction type classifier."
    )
    logging_group.addoption(
        "--txtype-log-level",  # --log-level is defined by pytest's built-in logging
        action="store",
        default=None,
        type=LogLevel.from_cli,
        dest="txtype_log_level",
        help=(
            "The logging level to use in the test session: DEBUG, VERBOSE, INFO, WARNING, "
            "ERROR or CRITICAL. An integer in [0, 50] may be also provided."
        ),
    )
    logging_group.addoption(
        "--txtype-log-file",
        action="store",
        default=None,
        type=Path,
        dest="txtype_log_file",
        help="Write the classifier's log records to this file.",
    )


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:
    """Initialize logging for pytest sessions when a log level was requested."""
    log_level = config.getoption("txtype_log_level")
    if log_level is None:
        return
    configure_logging(
        log_level=log_level,
        log_file=config.getoption("txtype_log_file"),
        stream=sys.stdout,
    )


def pytest_report_header(config: pytest.Config) -> list[str]:
    """Show the log file path in the test session header."""
    if log_file := config.getoption("txtype_log_file"):
        return [f"Log file: {log_file}"]
    return []
