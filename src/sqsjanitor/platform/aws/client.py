"""Where: platform/aws/client.py
What: Build the boto3 SQS client once from resolved configuration.
Why: Inject one explicitly constructed client instead of a process-wide global.
"""

from __future__ import annotations

import boto3
from botocore.config import Config as BotoConfig
from botocore.exceptions import BotoCoreError

from sqsjanitor.config import Config
from sqsjanitor.features.queues.domain.errors import ConfigurationError
from sqsjanitor.features.queues.usecases.ports import SQSClientPort


def build_sqs_client(settings: Config) -> SQSClientPort:
    """Create an SQS client honoring explicit credentials, profile and timeouts.

    botocore's own retry behaviour is left at its defaults; nothing above it retries.

    Raises:
        ConfigurationError: If the session or client cannot be constructed
            (unknown profile, missing region, ...).
    """
    try:
        session = boto3.session.Session(
            aws_access_key_id=settings.aws_access_key_id,
            aws_secret_access_key=settings.aws_secret_access_key,
            region_name=settings.aws_region,
            profile_name=settings.aws_profile,
        )
        return session.client(
            "sqs",
            endpoint_url=settings.endpoint_url,
            config=BotoConfig(
                connect_timeout=settings.connect_timeout,
                read_timeout=settings.read_timeout,
                max_pool_connections=max(10, settings.max_workers),
            ),
        )
    except BotoCoreError as exc:
        raise ConfigurationError(f"Cannot create SQS client: {exc}") from exc


__all__ = ["build_sqs_client"]
