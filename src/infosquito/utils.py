import logging
import threading

logger = logging.getLogger(__name__)


class Sleeper:
    """
    Blocking sleep that another thread or a signal handler can cut short.

    An interrupted sleep is logged and otherwise treated as if the full delay
    had elapsed. An interrupt that lands while the sleep is just starting can
    be missed, so it is a best-effort wake-up rather than a cancellation.
    """

    def __init__(self):
        self._wake = threading.Event()

    def sleep(self, seconds: float) -> None:
        if self._wake.wait(timeout=seconds):
            self._wake.clear()
            logger.warning("Sleep interrupted", extra={"seconds": seconds})

    def interrupt(self) -> None:
        self._wake.set()


def close_quietly(resource, name: str) -> None:
    """Closes a pika connection or channel, logging but not raising errors."""
    try:
        if resource.is_open:
            resource.close()
    except Exception:
        logger.debug("Ignoring error while closing %s", name, exc_info=True)
