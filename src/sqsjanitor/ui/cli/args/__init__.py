"""Command line argument handling package."""

from sqsjanitor.ui.cli.args.parser import ArgumentParser
from sqsjanitor.ui.cli.args.options import CLIArgs, ListArgs, PurgeArgs

__all__ = ["ArgumentParser", "CLIArgs", "ListArgs", "PurgeArgs"]
