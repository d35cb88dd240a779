"""Command line interface package."""

from sqsjanitor.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
