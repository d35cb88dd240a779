"""Purge a single queue from the command line."""

import logging
from typing import final

from sqsjanitor.features.queues import RemoteCallError, purge_queue
from sqsjanitor.platform.logging import QueueEvent, log_queue_event, logger
from sqsjanitor.ui.cli.args.options import PurgeArgs
from sqsjanitor.ui.cli.commands.executor import CommandExecutor


@final
class PurgeCommand(CommandExecutor):
    """Purge the queue named on the command line."""

    args: PurgeArgs

    def execute(self) -> int:
        queue_url = self.args.queue_url
        try:
            purge_queue(self.client, queue_url)
        except RemoteCallError as e:
            log_queue_event(
                logger, logging.ERROR, QueueEvent.PURGE_ERROR, "Failed to purge %s: %s", queue_url, e,
                queue_url=queue_url, error_message=str(e.cause or e),
            )
            return 1

        log_queue_event(
            logger, logging.INFO, QueueEvent.PURGE_SUCCESS, "Purged %s", queue_url,
            queue_url=queue_url,
        )
        return 0
