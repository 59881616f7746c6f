"""Domain models for the reindex notifier."""

from enum import Enum
from typing import Any

from pydantic import BaseModel

REINDEX_ALL_ROUTING_KEY = "index.all"
REINDEX_DATA_ROUTING_KEY = "index.data"
PING_ROUTING_KEY = "events.infosquito.ping"
PONG_ROUTING_KEY = "events.infosquito.pong"
EVENTS_BINDING_PATTERN = "events.infosquito.#"

BINDING_ROUTING_KEYS = (
    REINDEX_ALL_ROUTING_KEY,
    REINDEX_DATA_ROUTING_KEY,
    EVENTS_BINDING_PATTERN,
)


class Message(BaseModel, frozen=True):
    """A single delivery taken off the reindex queue."""

    delivery_tag: int
    routing_key: str
    body: bytes
    redelivered: bool = False
    headers: dict[str, Any] | None = None


class PongMessage(BaseModel, frozen=True):
    """Reply published in response to a ping event."""

    pong_from: str = "infosquito"


class Outcome(str, Enum):
    """What a dispatch did with a delivery."""

    ACK = "ack"
    REJECT_REQUEUE = "reject_requeue"
    IGNORE = "ignore"
