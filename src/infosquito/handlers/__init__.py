"""Message handlers and their registry."""

from infosquito.handlers.base import MessageHandler
from infosquito.handlers.ping_message_handler import PingMessageHandler
from infosquito.handlers.registry import HandlerRegistry
from infosquito.handlers.reindex_message_handler import ReindexMessageHandler
from infosquito.handlers.requeue_policy import BlockingRequeueDelay, RequeueDelayPolicy

__all__ = [
    "BlockingRequeueDelay",
    "HandlerRegistry",
    "MessageHandler",
    "PingMessageHandler",
    "ReindexMessageHandler",
    "RequeueDelayPolicy",
]
