"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from sqsjanitor.config import Config, ConfigurationError, resolve_config_path
from sqsjanitor.config.paths import default_log_file
from sqsjanitor.platform.logging import logger, setup_logger
from sqsjanitor.ui.cli.args.options import CLIArgs, ListArgs, PurgeArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        common = argparse.ArgumentParser(add_help=False)
        ArgumentParser._configure_common_options(common)

        parser = argparse.ArgumentParser(
            prog="sqsjanitor",
            description="SQS Janitor - list SQS queues with their backlog and purge the ones you pick.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        list_parser = subparsers.add_parser(
            "list",
            parents=[common],
            help="Show queues and their approximate message counts; press enter to purge",
        )
        _ = list_parser.add_argument(
            "--plain",
            action="store_true",
            help="Print the queue table and exit instead of opening the interactive list",
        )

        purge_parser = subparsers.add_parser(
            "purge",
            parents=[common],
            help="Purge a single queue by URL",
        )
        _ = purge_parser.add_argument(
            "queue_url",
            type=str,
            help="URL of the queue to purge",
            metavar="QUEUE_URL",
        )

        return parser

    @staticmethod
    def _configure_common_options(parser: argparse.ArgumentParser) -> None:
        """Attach connection, tuning and verbosity flags shared by every subcommand."""

        _ = parser.add_argument(
            "--config",
            type=str,
            help="Config file (default: $SQSJANITOR_CONFIG or ~/.sqsjanitor.toml)",
            metavar="PATH",
        )
        _ = parser.add_argument("--aws-region", type=str, help="AWS region")
        _ = parser.add_argument("--aws-access-key-id", type=str, help="AWS access key id")
        _ = parser.add_argument("--aws-secret-access-key", type=str, help="AWS secret access key")
        _ = parser.add_argument("--aws-profile", type=str, help="AWS shared-credentials profile")
        _ = parser.add_argument(
            "--endpoint-url",
            type=str,
            help="Override the SQS endpoint (e.g. a local emulator)",
        )
        _ = parser.add_argument(
            "--max-workers",
            type=int,
            help="Number of concurrent attribute fetches",
        )
        _ = parser.add_argument(
            "--prefix",
            type=str,
            help="Only list queues whose name starts with PREFIX",
        )
        _ = parser.add_argument(
            "--log-file",
            type=str,
            nargs="?",
            const=str(default_log_file()),
            help="Also write debug logs to a file (default location when no path is given)",
            metavar="PATH",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed fetch information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If the configuration is invalid or validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        _ = setup_logger(console_level=log_level)

        try:
            settings = ArgumentParser._load_settings(parsed_args)
        except ConfigurationError as e:
            logger.error("%s", e)
            sys.exit(1)

        if settings.log_file is not None:
            _ = setup_logger(log_file=settings.log_file, console_level=log_level)

        command: str = parsed_args.command

        if command == "list":
            return ListArgs(
                command="list",
                settings=settings,
                plain=parsed_args.plain,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "purge":
            queue_url: str = parsed_args.queue_url.strip()
            if not queue_url:
                logger.error("Queue URL must not be empty")
                sys.exit(1)
            return PurgeArgs(
                command="purge",
                settings=settings,
                queue_url=queue_url,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _load_settings(parsed_args: argparse.Namespace) -> Config:
        """Load the config file and apply command line overrides on top."""

        config_path = resolve_config_path(parsed_args.config)
        if parsed_args.config and not config_path.exists():
            raise ConfigurationError(f"Config file does not exist: {config_path}")

        configuration = Config.load(config_path)
        return configuration.merged_with(
            aws_region=parsed_args.aws_region,
            aws_access_key_id=parsed_args.aws_access_key_id,
            aws_secret_access_key=parsed_args.aws_secret_access_key,
            aws_profile=parsed_args.aws_profile,
            endpoint_url=parsed_args.endpoint_url,
            max_workers=parsed_args.max_workers,
            queue_name_prefix=parsed_args.prefix,
            log_file=Path(parsed_args.log_file) if parsed_args.log_file else None,
        )
