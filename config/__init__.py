"""
Initializes the config package.

The config package is responsible for loading the classifier's application
defaults and the user's environment configuration, making them accessible to
the command line tool.
"""

# This import is done to facilitate cleaner imports in the project
# `from config import AppConfig` instead of `from config.app import AppConfig`
from .app import AppConfig
from .env import Config, EnvConfig

__all__ = ["AppConfig", "Config", "EnvConfig"]
