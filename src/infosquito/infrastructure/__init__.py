"""Infrastructure layer exports."""

from infosquito.infrastructure.command_reindex import CommandReindexAction
from infosquito.infrastructure.connection import ConnectionManager
from infosquito.infrastructure.rabbitmq_broker import RabbitMQBroker

__all__ = [
    "CommandReindexAction",
    "ConnectionManager",
    "RabbitMQBroker",
]
