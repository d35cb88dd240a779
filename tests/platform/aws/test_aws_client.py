"""Tests for building the boto3 SQS client from configuration."""

import pytest

from sqsjanitor.config import Config, ConfigurationError
from sqsjanitor.platform.aws import build_sqs_client

CREDENTIALS = {"aws_access_key_id": "testing", "aws_secret_access_key": "testing"}


def test_client_uses_region_endpoint_and_timeouts() -> None:
    settings = Config(
        aws_region="eu-west-1",
        endpoint_url="http://localhost:4566",
        connect_timeout=1.5,
        read_timeout=7.0,
        max_workers=32,
        **CREDENTIALS,
    )

    client = build_sqs_client(settings)

    assert client.meta.region_name == "eu-west-1"  # pyright: ignore[reportAttributeAccessIssue]
    assert client.meta.endpoint_url == "http://localhost:4566"  # pyright: ignore[reportAttributeAccessIssue]
    config = client.meta.config  # pyright: ignore[reportAttributeAccessIssue]
    assert config.connect_timeout == 1.5
    assert config.read_timeout == 7.0
    assert config.max_pool_connections == 32


def test_pool_never_smaller_than_botocore_default() -> None:
    client = build_sqs_client(Config(aws_region="us-east-1", max_workers=2, **CREDENTIALS))

    assert client.meta.config.max_pool_connections == 10  # pyright: ignore[reportAttributeAccessIssue]


def test_unknown_profile_is_a_configuration_error() -> None:
    with pytest.raises(ConfigurationError, match="Cannot create SQS client"):
        _ = build_sqs_client(Config(aws_profile="does-not-exist", aws_region="us-east-1"))


def test_missing_region_is_a_configuration_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("AWS_DEFAULT_REGION", raising=False)
    monkeypatch.delenv("AWS_REGION", raising=False)

    with pytest.raises(ConfigurationError):
        _ = build_sqs_client(Config(**CREDENTIALS))
