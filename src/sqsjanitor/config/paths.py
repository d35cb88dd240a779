"""Shared path utilities for configuration and log locations.

Policy:
- Config: ``--config`` flag, then ``SQSJANITOR_CONFIG``, then
  ``~/.sqsjanitor.toml``.
- Logs: no log file unless one is configured; ``default_log_file`` is the
  suggested location under the user's state directory.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


ENV_CONFIG_PATH: Final[str] = "SQSJANITOR_CONFIG"
CONFIG_FILE_NAME: Final[str] = ".sqsjanitor.toml"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def default_config_path() -> Path:
    """Get the default path to the TOML config file (``~/.sqsjanitor.toml``)."""

    return (Path.home() / CONFIG_FILE_NAME).resolve()


def resolve_config_path(
    explicit_path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> Path:
    """Return the config file location after applying flag and env overrides."""

    return resolve_overridable_path(
        explicit_path=explicit_path,
        env=env,
        env_var=ENV_CONFIG_PATH,
        default_factory=default_config_path,
    )


def default_log_file() -> Path:
    """Get the suggested log file path under ``$XDG_STATE_HOME``."""

    state_home = os.environ.get("XDG_STATE_HOME", "").strip()
    base = Path(state_home) if state_home else Path.home() / ".local" / "state"
    return (base / "sqsjanitor" / "sqsjanitor.log").expanduser().resolve()


__all__ = [
    "CONFIG_FILE_NAME",
    "ENV_CONFIG_PATH",
    "default_config_path",
    "default_log_file",
    "resolve_config_path",
    "resolve_overridable_path",
]
