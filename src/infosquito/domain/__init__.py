"""Domain layer exports."""

from infosquito.domain.models import (
    BINDING_ROUTING_KEYS,
    EVENTS_BINDING_PATTERN,
    PING_ROUTING_KEY,
    PONG_ROUTING_KEY,
    REINDEX_ALL_ROUTING_KEY,
    REINDEX_DATA_ROUTING_KEY,
    Message,
    Outcome,
    PongMessage,
)

__all__ = [
    "BINDING_ROUTING_KEYS",
    "EVENTS_BINDING_PATTERN",
    "PING_ROUTING_KEY",
    "PONG_ROUTING_KEY",
    "REINDEX_ALL_ROUTING_KEY",
    "REINDEX_DATA_ROUTING_KEY",
    "Message",
    "Outcome",
    "PongMessage",
]
