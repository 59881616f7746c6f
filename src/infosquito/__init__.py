from infosquito.backoff import BackoffPolicy
from infosquito.config import AppConfig, RabbitMQConfig, ReindexConfig, load_config
from infosquito.exceptions import EventPublishError, ReindexError
from infosquito.logging import setup_logging

__all__ = [
    "setup_logging",
    "EventPublishError",
    "ReindexError",
    "AppConfig",
    "BackoffPolicy",
    "RabbitMQConfig",
    "ReindexConfig",
    "load_config",
]
