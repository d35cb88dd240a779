"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final

from sqsjanitor.config import Config


@final
@dataclass(slots=True)
class ListArgs:
    """Command line arguments for the ``list`` subcommand."""

    command: Literal["list"]
    settings: Config
    plain: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class PurgeArgs:
    """Command line arguments for the ``purge`` subcommand."""

    command: Literal["purge"]
    settings: Config
    queue_url: str
    verbose: bool
    quiet: bool


CLIArgs = ListArgs | PurgeArgs

__all__ = ["CLIArgs", "ListArgs", "PurgeArgs"]
