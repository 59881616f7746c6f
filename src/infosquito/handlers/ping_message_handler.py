"""Handler for health-check ping events."""

import logging

from infosquito.domain import PONG_ROUTING_KEY, Message, Outcome, PongMessage
from infosquito.handlers.base import MessageHandler
from infosquito.infrastructure.interfaces import MessageBroker

logger = logging.getLogger(__name__)


class PingMessageHandler(MessageHandler):
    """Acknowledges a ping and answers it with a pong event."""

    def process(self, message: Message, broker: MessageBroker) -> Outcome:
        # Acked before the pong is published; a failed publish does not redeliver.
        broker.acknowledge(message.delivery_tag)
        logger.info(
            "Ping received",
            extra={
                "routing_key": message.routing_key,
                "body": message.body.decode("utf-8", errors="replace"),
            },
        )
        broker.publish(PONG_ROUTING_KEY, PongMessage().model_dump())
        return Outcome.ACK
