"""Shared pytest fixtures: isolated configuration and a stubbed boto3 SQS client."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import boto3
import pytest
from botocore.stub import Stubber


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Point config and AWS files at an empty temp dir and reset the config singleton."""

    import sqsjanitor.config.config as config_module

    monkeypatch.setenv("SQSJANITOR_CONFIG", str(tmp_path / "absent.toml"))
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "aws_config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "aws_credentials"))
    for name in ("AWS_PROFILE", "AWS_DEFAULT_PROFILE", "AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY"):
        monkeypatch.delenv(name, raising=False)

    config_module.Config._instance = None  # pyright: ignore[reportPrivateUsage]
    config_module.Config._loaded_from = None  # pyright: ignore[reportPrivateUsage]
    try:
        yield None
    finally:
        config_module.Config._instance = None  # pyright: ignore[reportPrivateUsage]
        config_module.Config._loaded_from = None  # pyright: ignore[reportPrivateUsage]


@pytest.fixture
def sqs_client() -> Any:
    """Real boto3 SQS client with dummy credentials; pair with ``sqs_stubber``."""

    return boto3.client(
        "sqs",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@pytest.fixture
def sqs_stubber(sqs_client: Any) -> Iterator[Stubber]:
    """Activate a ``Stubber`` on ``sqs_client`` and verify it was fully consumed."""

    with Stubber(sqs_client) as stubber:
        yield stubber
        stubber.assert_no_pending_responses()
