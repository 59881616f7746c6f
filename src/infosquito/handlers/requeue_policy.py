"""Policies applied before a failed message is handed back to the broker."""

import logging
from abc import ABC, abstractmethod

from infosquito.domain import Message
from infosquito.utils import Sleeper

logger = logging.getLogger(__name__)


class RequeueDelayPolicy(ABC):
    """Decides how long to hold a failed message before requeueing it."""

    @abstractmethod
    def wait(self, message: Message) -> None:
        """Called right before the message is rejected with requeue."""


class BlockingRequeueDelay(RequeueDelayPolicy):
    """Blocks the consumer for the full retry interval."""

    def __init__(self, retry_interval_seconds: float, sleeper: Sleeper):
        self._retry_interval_seconds = retry_interval_seconds
        self._sleeper = sleeper

    def wait(self, message: Message) -> None:
        logger.warning(
            "Requeuing message after %s seconds",
            self._retry_interval_seconds,
            extra={
                "routing_key": message.routing_key,
                "delivery_tag": message.delivery_tag,
            },
        )
        self._sleeper.sleep(self._retry_interval_seconds)
