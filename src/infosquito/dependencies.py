"""Dependency injection configuration for the infosquito service."""

from infosquito.config import AppConfig
from infosquito.domain import (
    PING_ROUTING_KEY,
    REINDEX_ALL_ROUTING_KEY,
    REINDEX_DATA_ROUTING_KEY,
)
from infosquito.handlers import (
    BlockingRequeueDelay,
    HandlerRegistry,
    PingMessageHandler,
    ReindexMessageHandler,
)
from infosquito.infrastructure import (
    CommandReindexAction,
    ConnectionManager,
    RabbitMQBroker,
)
from infosquito.infrastructure.interfaces import ReindexAction
from infosquito.supervisor import Supervisor
from infosquito.utils import Sleeper


def get_registry(
    config: AppConfig, action: ReindexAction, sleeper: Sleeper
) -> HandlerRegistry:
    """Returns the registry wiring each routing key to its handler."""
    reindex_handler = ReindexMessageHandler(
        action,
        BlockingRequeueDelay(config.reindex.retry_interval_seconds, sleeper),
    )

    registry = HandlerRegistry()
    registry.register(REINDEX_ALL_ROUTING_KEY, reindex_handler)
    registry.register(REINDEX_DATA_ROUTING_KEY, reindex_handler)
    registry.register(PING_ROUTING_KEY, PingMessageHandler())
    return registry


def get_supervisor(config: AppConfig, sleeper: Sleeper) -> Supervisor:
    """Returns a supervisor wired to RabbitMQ and the reindex command."""
    return Supervisor(
        config=config,
        connections=ConnectionManager(config.backoff, sleeper),
        registry=get_registry(config, CommandReindexAction(config.reindex), sleeper),
        broker_factory=lambda channel: RabbitMQBroker(channel, config.rabbitmq),
        sleeper=sleeper,
    )
