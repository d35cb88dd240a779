"""src/sqsjanitor/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Build the SQS client once and inject it into every command.
"""

from abc import ABC, abstractmethod

from sqsjanitor.config import Config
from sqsjanitor.features.queues import SQSClientPort
from sqsjanitor.platform.aws import build_sqs_client
from sqsjanitor.ui.cli.args.options import CLIArgs


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: CLIArgs
    settings: Config
    client: SQSClientPort

    def __init__(self, args: CLIArgs, client: SQSClientPort | None = None) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            client: Pre-built SQS client; built from ``args.settings`` when omitted.
        """
        self.args = args
        self.settings = args.settings
        self.client = client if client is not None else build_sqs_client(self.settings)

    @abstractmethod
    def execute(self) -> int:
        """Execute the command.

        Returns:
            Process exit code.
        """
        pass
