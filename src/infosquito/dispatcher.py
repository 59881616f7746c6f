"""Routes delivered messages to the handler registered for their routing key."""

import logging

from infosquito.domain import Message, Outcome
from infosquito.handlers import HandlerRegistry
from infosquito.infrastructure.interfaces import MessageBroker

logger = logging.getLogger(__name__)


class Dispatcher:
    """Dispatches messages from one broker to registered handlers."""

    def __init__(self, registry: HandlerRegistry, broker: MessageBroker):
        self._registry = registry
        self._broker = broker

    def route(self, message: Message) -> Outcome:
        """
        Invokes the handler registered for the message's routing key.

        A message whose routing key has no handler is neither acknowledged
        nor rejected, so it stays unacked on this channel until the channel
        closes.

        Args:
            message: The delivered message.

        Returns:
            The handler's Outcome, or IGNORE when no handler matched.
        """
        handler = self._registry.get(message.routing_key)
        if handler is None:
            # TODO: decide whether unhandled keys should be acked or rejected.
            logger.warning(
                "No handler for routing key, leaving message unacknowledged",
                extra={
                    "routing_key": message.routing_key,
                    "delivery_tag": message.delivery_tag,
                },
            )
            return Outcome.IGNORE

        outcome = handler.process(message, self._broker)
        logger.info(
            "Message dispatched",
            extra={"routing_key": message.routing_key, "outcome": outcome.value},
        )
        return outcome
