"""Configuration loading for SQS Janitor."""

from .config import Config, ConfigurationError
from .paths import default_config_path, resolve_config_path

__all__ = ["Config", "ConfigurationError", "default_config_path", "resolve_config_path"]
