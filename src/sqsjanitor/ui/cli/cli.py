"""Command line interface for SQS Janitor."""

import sys
from typing import final

from sqsjanitor.features.queues import SqsJanitorError
from sqsjanitor.platform.logging import logger
from sqsjanitor.ui.cli.args import ArgumentParser
from sqsjanitor.ui.cli.args.options import CLIArgs, ListArgs
from sqsjanitor.ui.cli.commands import ListCommand, PurgeCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, ListArgs):
                exit_code = ListCommand(args).execute()
            else:
                exit_code = PurgeCommand(args).execute()

            if exit_code != 0:
                sys.exit(exit_code)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except SqsJanitorError as e:
            logger.error("%s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures call ``sys.exit(...)``
        from ``CommandProcessor``, so this return is only reached on success.
    """
    CommandProcessor.process_command()
    return 0
