"""Reindex action that shells out to an external indexing command."""

import logging
import subprocess
import time

from infosquito.config import ReindexConfig
from infosquito.exceptions import ReindexError
from infosquito.infrastructure.interfaces import ReindexAction

logger = logging.getLogger(__name__)


class CommandReindexAction(ReindexAction):
    """Runs the configured reindex command and waits for it to finish."""

    def __init__(self, config: ReindexConfig):
        self._config = config

    def reindex(self) -> None:
        """
        Runs the reindex command.

        Raises:
            ReindexError: If the command cannot be started, exits non-zero,
                or exceeds the configured timeout.
        """
        command = self._config.command
        logger.info("Reindex started", extra={"command": command})
        started = time.monotonic()

        try:
            subprocess.run(
                command,
                check=True,
                timeout=self._config.timeout_seconds,
            )
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired, OSError) as e:
            logger.exception("Reindex command failed", extra={"command": command})
            raise ReindexError(command, cause=e) from e

        logger.info(
            "Reindex completed",
            extra={
                "command": command,
                "duration_seconds": round(time.monotonic() - started, 3),
            },
        )
