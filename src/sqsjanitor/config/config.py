"""Configuration management for SQS Janitor."""

import logging
import tomllib
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, ClassVar, Final

from sqsjanitor.features.queues.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS: Final[int] = 8
DEFAULT_PURGE_BUFFER_SIZE: Final[int] = 8
DEFAULT_CONNECT_TIMEOUT: Final[float] = 5.0
DEFAULT_READ_TIMEOUT: Final[float] = 15.0


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass(frozen=True)
class Config:
    """Application configuration."""

    # AWS connection settings; ``None`` defers to the boto3 default chain
    aws_region: str | None = None
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = None
    aws_profile: str | None = None
    endpoint_url: str | None = None

    # Fetch and purge tuning
    max_workers: int = DEFAULT_MAX_WORKERS
    purge_buffer_size: int = DEFAULT_PURGE_BUFFER_SIZE
    queue_name_prefix: str | None = None
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    read_timeout: float = DEFAULT_READ_TIMEOUT

    # Log file path
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects and validate ranges."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                object.__setattr__(self, f.name, Path(value).expanduser() if value.strip() else None)

        self._validate()

    def _validate(self) -> None:
        for name in ("aws_region", "aws_access_key_id", "aws_secret_access_key", "aws_profile",
                     "endpoint_url", "queue_name_prefix"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ConfigurationError(f"{name} must be a string, got {type(value).__name__}")

        for name in ("max_workers", "purge_buffer_size"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
        if self.max_workers < 1:
            raise ConfigurationError(f"max_workers must be at least 1, got {self.max_workers}")
        if self.purge_buffer_size < 0:
            raise ConfigurationError(
                f"purge_buffer_size must not be negative, got {self.purge_buffer_size}"
            )

        for name in ("connect_timeout", "read_timeout"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                raise ConfigurationError(f"{name} must be a positive number, got {value!r}")

    def merged_with(self, **overrides: Any) -> "Config":
        """Return a copy with every non-``None`` override applied.

        Command line flags are passed through here so they win over file values.
        """
        changes = {key: value for key, value in overrides.items() if value is not None}
        if not changes:
            return self
        return replace(self, **changes)

    @classmethod
    def load(cls, config_file: Path) -> "Config":
        """Load configuration from a TOML file.

        Args:
            config_file: Location of the TOML file. A missing file yields defaults.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigurationError: If the file cannot be parsed or holds invalid values.
        """
        if cls._instance is not None and cls._loaded_from == config_file:
            return cls._instance

        if not config_file.exists():
            logger.debug("No config file at %s; using defaults", config_file)
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                raise ConfigurationError(f"Failed to read {config_file}: {e}") from e

            known = {f.name for f in fields(cls)}
            for key in sorted(set(config_dict) - known):
                logger.warning("Ignoring unknown config key %r in %s", key, config_file)
                _ = config_dict.pop(key)

            try:
                instance = cls(**config_dict)
            except ConfigurationError as e:
                raise ConfigurationError(f"Invalid configuration in {config_file}: {e}") from e
            logger.info("Using config file: %s", config_file)

        cls._instance = instance
        cls._loaded_from = config_file
        return instance


__all__ = [
    "Config",
    "ConfigurationError",
    "DEFAULT_CONNECT_TIMEOUT",
    "DEFAULT_MAX_WORKERS",
    "DEFAULT_PURGE_BUFFER_SIZE",
    "DEFAULT_READ_TIMEOUT",
]
