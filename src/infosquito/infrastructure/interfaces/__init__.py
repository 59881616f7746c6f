"""Abstract interfaces for infrastructure dependencies."""

from infosquito.infrastructure.interfaces.message_broker import MessageBroker
from infosquito.infrastructure.interfaces.reindex_action import ReindexAction

__all__ = ["MessageBroker", "ReindexAction"]
