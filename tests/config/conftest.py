"""Shared pytest fixtures for configuration-focused tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes TOML text to a temporary config file."""

    def _write(text: str) -> Path:
        config_file = tmp_path / "sqsjanitor.toml"
        _ = config_file.write_text(text, encoding="utf-8")
        return config_file

    return _write
