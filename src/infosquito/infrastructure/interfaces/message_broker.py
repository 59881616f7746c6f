"""Abstract interface for message broker operations."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from infosquito.domain import Message


class MessageBroker(ABC):
    """Abstract base class for message broker backends."""

    @abstractmethod
    def publish(self, routing_key: str, payload: dict) -> None:
        """
        Publishes a message to the configured exchange.

        Args:
            routing_key: The routing key for message routing.
            payload: The message data as a dictionary.

        Raises:
            EventPublishError: If publishing fails.
        """

    @abstractmethod
    def acknowledge(self, delivery_tag: int) -> None:
        """
        Acknowledges a message, removing it from the queue permanently.

        Args:
            delivery_tag: The message delivery tag.
        """

    @abstractmethod
    def reject(self, delivery_tag: int, requeue: bool = True) -> None:
        """
        Rejects a message.

        Args:
            delivery_tag: The message delivery tag.
            requeue: Whether the broker should redeliver the message.
        """

    @abstractmethod
    def consume(self, callback: Callable[[Message], Any]) -> None:
        """
        Consumes messages from the configured queue, blocking until the
        consumer stops or the channel fails.

        Args:
            callback: Function called once per delivered message.
        """

    @abstractmethod
    def setup(self) -> None:
        """Declares the exchange and queue and binds the routing keys."""
