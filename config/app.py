"""
A module for managing application configurations.

Classes:
- AppConfig: Holds the defaults of the command line tool.
"""

from pathlib import Path

from pydantic import BaseModel


class AppConfig(BaseModel):
    """A class for accessing application-wide defaults."""

    DEFAULT_LOG_LEVEL: str = "INFO"
    """The log level used when neither the command line nor `env.yaml` sets one."""

    DEFAULT_LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    """The format of the log records written to stderr."""

    DEFAULT_ENV_FILE: Path = Path("env.yaml")
    """The environment configuration file, relative to the working directory."""

    ENV_FILE_VARIABLE: str = "TXTYPE_ENV_FILE"
    """The environment variable that points to an environment configuration file."""
