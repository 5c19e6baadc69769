"""Logging for the transaction type classifier."""

from .logging import (
    VERBOSE_LEVEL,
    LogLevel,
    TxTypeLogger,
    UTCFormatter,
    configure_logging,
    get_logger,
)

__all__ = [
    "VERBOSE_LEVEL",
    "LogLevel",
    "TxTypeLogger",
    "UTCFormatter",
    "configure_logging",
    "get_logger",
]
