"""RabbitMQ message broker implementation."""

import json
import logging
from collections.abc import Callable
from typing import Any

from pika.adapters.blocking_connection import BlockingChannel

from infosquito.config import RabbitMQConfig
from infosquito.domain import BINDING_ROUTING_KEYS, Message
from infosquito.exceptions import EventPublishError
from infosquito.infrastructure.interfaces import MessageBroker

logger = logging.getLogger(__name__)


class RabbitMQBroker(MessageBroker):
    """Message broker implementation over a single pika blocking channel."""

    def __init__(self, channel: BlockingChannel, config: RabbitMQConfig):
        self._channel = channel
        self._config = config

    def publish(self, routing_key: str, payload: dict) -> None:
        """
        Publishes a message to the configured exchange.

        Args:
            routing_key: The routing key for message routing.
            payload: The message data as a dictionary.

        Raises:
            EventPublishError: If publishing fails.
        """
        try:
            self._channel.basic_publish(
                exchange=self._config.exchange_name,
                routing_key=routing_key,
                body=json.dumps(payload),
            )
            logger.info(
                "Event published",
                extra={
                    "exchange": self._config.exchange_name,
                    "routing_key": routing_key,
                },
            )
        except Exception as e:
            logger.exception(
                "Failed to publish event", extra={"routing_key": routing_key}
            )
            raise EventPublishError(routing_key, cause=e) from e

    def acknowledge(self, delivery_tag: int) -> None:
        """Acknowledges a message, removing it from the queue."""
        self._channel.basic_ack(delivery_tag=delivery_tag)

    def reject(self, delivery_tag: int, requeue: bool = True) -> None:
        """Rejects a message, asking the broker to redeliver it by default."""
        self._channel.basic_reject(delivery_tag=delivery_tag, requeue=requeue)

    def consume(self, callback: Callable[[Message], Any]) -> None:
        """
        Consumes messages from the reindex queue until the channel stops.

        Args:
            callback: Function called with each delivered message.
        """

        def on_message(ch, method, properties, body):
            callback(
                Message(
                    delivery_tag=method.delivery_tag,
                    routing_key=method.routing_key,
                    body=body,
                    redelivered=bool(method.redelivered),
                    headers=properties.headers if properties else None,
                )
            )

        self._channel.basic_consume(
            queue=self._config.queue_name,
            on_message_callback=on_message,
        )
        logger.info("Started consuming", extra={"queue": self._config.queue_name})
        self._channel.start_consuming()

    def setup(self) -> None:
        """Declares the topic exchange and the reindex queue, then binds them."""
        self._channel.exchange_declare(
            exchange=self._config.exchange_name,
            exchange_type="topic",
            durable=self._config.exchange_durable,
            auto_delete=self._config.exchange_auto_delete,
        )

        # Shared, restart-surviving queue
        self._channel.queue_declare(
            queue=self._config.queue_name,
            durable=True,
            auto_delete=False,
            exclusive=False,
        )
        for routing_key in BINDING_ROUTING_KEYS:
            self._channel.queue_bind(
                queue=self._config.queue_name,
                exchange=self._config.exchange_name,
                routing_key=routing_key,
            )

        logger.info(
            "Queue infrastructure ready",
            extra={
                "queue": self._config.queue_name,
                "exchange": self._config.exchange_name,
                "routing_keys": list(BINDING_ROUTING_KEYS),
            },
        )
