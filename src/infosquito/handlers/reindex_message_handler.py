"""Handler for reindex request messages."""

import logging

from infosquito.domain import Message, Outcome
from infosquito.handlers.base import MessageHandler
from infosquito.handlers.requeue_policy import RequeueDelayPolicy
from infosquito.infrastructure.interfaces import MessageBroker, ReindexAction

logger = logging.getLogger(__name__)


class ReindexMessageHandler(MessageHandler):
    """Triggers a reindex and acknowledges or requeues the request."""

    def __init__(self, action: ReindexAction, requeue_policy: RequeueDelayPolicy):
        self._action = action
        self._requeue_policy = requeue_policy

    def process(self, message: Message, broker: MessageBroker) -> Outcome:
        """
        Runs the reindex action for a reindex request.

        A successful run acknowledges the message. Any failure is logged,
        the requeue policy is given the chance to delay, and the message is
        rejected with requeue so the broker delivers it again.

        Args:
            message: The reindex request.
            broker: The broker used to settle the delivery.

        Returns:
            ACK on success, REJECT_REQUEUE on failure.
        """
        logger.info(
            "Reindex requested",
            extra={
                "routing_key": message.routing_key,
                "redelivered": message.redelivered,
            },
        )

        try:
            self._action.reindex()
            broker.acknowledge(message.delivery_tag)
        except Exception:
            logger.exception(
                "Data store reindexing failed",
                extra={"routing_key": message.routing_key},
            )
            self._requeue_policy.wait(message)
            broker.reject(message.delivery_tag, requeue=True)
            return Outcome.REJECT_REQUEUE

        logger.info(
            "Reindex request completed", extra={"routing_key": message.routing_key}
        )
        return Outcome.ACK
