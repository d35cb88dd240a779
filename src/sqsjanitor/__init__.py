"""SQS Janitor: inspect SQS queue backlogs and purge the ones you pick."""

__version__ = "0.3.0"
