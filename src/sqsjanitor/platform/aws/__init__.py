"""AWS client construction."""

from .client import build_sqs_client

__all__ = ["build_sqs_client"]
