"""
A module for exposing the user's environment configuration.

This module is responsible for loading, parsing, and validating the
environment configuration from an `env.yaml` file. It uses Pydantic to ensure
that the configuration adheres to expected formats and types.

Classes:
- Config: Represents the overall configuration structure with validation.
- EnvConfig: Loads the configuration and exposes it as Python objects.

Usage:
- Initialize an instance of EnvConfig to load the configuration.
- Access configuration values via attributes (e.g., EnvConfig().common_hardfork).

Example `env.yaml`:

```yaml
common_hardfork: london
log_level: VERBOSE
```
"""

import os
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from ethereum_tx_forks import Fork
from ethereum_tx_logging import LogLevel
from ethereum_tx_types import NetworkContext

from .app import AppConfig


class Config(BaseModel):
    """
    Represents the overall environment configuration.

    Attributes:
    - common_hardfork (Fork | None): The hardfork of the network that
      transactions are detected for, when the transaction names none.
    - log_level (str | int | None): The log level of the command line tool.

    """

    common_hardfork: Fork | None = None
    log_level: str | int | None = None

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str | int | None) -> str | int | None:
        """Check that the log level is a level name or number."""
        if value is not None:
            LogLevel.from_cli(str(value))
        return value


class EnvConfig(Config):
    """
    Loads and validates environment configuration from `env.yaml`.

    This is a wrapper class for the Config model. It reads a config file
    from disk into a Config model and then exposes it.

    The file is looked up at `path` if given, then at the path in the
    `TXTYPE_ENV_FILE` environment variable, then at `env.yaml` in the working
    directory. Only the last one is optional.
    """

    def __init__(self, path: Path | str | None = None):
        """Init for the EnvConfig class."""
        config = AppConfig()
        if path is None:
            path = os.environ.get(config.ENV_FILE_VARIABLE) or None
        required = path is not None
        env_path = Path(path) if path is not None else config.DEFAULT_ENV_FILE

        if not env_path.exists():
            if required:
                raise FileNotFoundError(f"The configuration file '{env_path}' does not exist.")
            super().__init__()
            return

        with env_path.open("r") as file:
            config_data: Dict[str, Any] | None = yaml.safe_load(file)
        if config_data is None:
            config_data = {}
        if not isinstance(config_data, dict):
            raise ValueError(
                f"Invalid configuration: '{env_path}' must contain a mapping, "
                f"got {type(config_data).__name__}"
            )
        try:
            # Validate and parse with Pydantic
            super().__init__(**config_data)
        except ValidationError as e:
            raise ValueError(f"Invalid configuration: {e}") from e

    def network_context(self) -> NetworkContext:
        """Return the detection context described by the configuration."""
        if self.common_hardfork is None:
            return NetworkContext()
        return NetworkContext(common_hardfork=self.common_hardfork.network_name())
