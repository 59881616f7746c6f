"""Common contract for routing-key message handlers."""

from abc import ABC, abstractmethod

from infosquito.domain import Message, Outcome
from infosquito.infrastructure.interfaces import MessageBroker


class MessageHandler(ABC):
    """Processes one delivery and settles it on the broker it came from."""

    @abstractmethod
    def process(self, message: Message, broker: MessageBroker) -> Outcome:
        """
        Processes a delivered message.

        Args:
            message: The delivery to process.
            broker: The broker the message was received on, used to
                acknowledge, reject or publish replies.

        Returns:
            The Outcome that was applied to the delivery.
        """
