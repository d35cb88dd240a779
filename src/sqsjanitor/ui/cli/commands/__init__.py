"""Command execution package for CLI."""

from sqsjanitor.ui.cli.commands.executor import CommandExecutor
from sqsjanitor.ui.cli.commands.list import ListCommand
from sqsjanitor.ui.cli.commands.purge import PurgeCommand

__all__ = [
    "CommandExecutor",
    "ListCommand",
    "PurgeCommand",
]
