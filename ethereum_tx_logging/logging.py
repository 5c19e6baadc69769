"""
Logging for the transaction type classifier.

Adds a `VERBOSE` level between DEBUG and INFO, used to trace which detection
rule classified a transaction, and `configure_logging`, shared by the command
line tool and the pytest plugin.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, TextIO, Union, cast

VERBOSE_LEVEL = 15

logging.addLevelName(VERBOSE_LEVEL, "VERBOSE")


class TxTypeLogger(logging.Logger):
    """Logger with a `verbose` method for the custom level."""

    def verbose(self, msg: object, *args, **kwargs) -> None:
        """Log a message with VERBOSE level severity (15)."""
        if self.isEnabledFor(VERBOSE_LEVEL):
            self._log(VERBOSE_LEVEL, msg, args, **kwargs)


logging.setLoggerClass(TxTypeLogger)


def get_logger(name: str) -> TxTypeLogger:
    """Get a logger typed with the `verbose` method."""
    return cast(TxTypeLogger, logging.getLogger(name))


logger = get_logger(__name__)


class UTCFormatter(logging.Formatter):
    """Formats record times in UTC, e.g. `2021-01-01 00:00:00.000+00:00`."""

    def formatTime(self, record, datefmt=None):  # noqa: D102,N802
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return created.isoformat(sep=" ", timespec="milliseconds")


class LogLevel:
    """Parse a log level given on the command line or in `env.yaml`."""

    @classmethod
    def from_cli(cls, value: str) -> int:
        """Return the numeric level for a level name, in any case, or a number."""
        if value.isdigit():
            return int(value)
        level = logging.getLevelName(value.upper())
        if isinstance(level, int):
            return level
        raise ValueError(
            f"Invalid log level '{value}'. Expected one of: "
            "DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL or a number."
        )


def configure_logging(
    log_level: Union[int, str] = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    stream: Optional[TextIO] = None,
    log_format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
) -> Optional[logging.FileHandler]:
    """
    Replace the handlers of the root logger.

    Records are written to `log_file` and `stream`, whichever are given. The
    command line tool passes stderr so its result on stdout stays clean.
    Returns the file handler, if any.
    """
    root_logger = logging.getLogger()
    if isinstance(log_level, str):
        log_level = LogLevel.from_cli(log_level)
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    file_handler = None
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(exist_ok=True, parents=True)
        file_handler = logging.FileHandler(log_path, mode="w")
        file_handler.setFormatter(UTCFormatter(fmt=log_format))
        root_logger.addHandler(file_handler)

    if stream is not None:
        stream_handler = logging.StreamHandler(stream)
        stream_handler.setFormatter(UTCFormatter(fmt=log_format))
        root_logger.addHandler(stream_handler)

    logger.verbose("Logging configured")
    return file_handler
