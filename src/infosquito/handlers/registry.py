"""Lookup table from routing key to message handler."""

from infosquito.handlers.base import MessageHandler


class HandlerRegistry:
    """
    Maps exact routing keys to handlers.

    Keys are matched literally; binding wildcards such as
    ``events.infosquito.#`` are not patterns here. A key with no handler is a
    normal state and :meth:`get` returns ``None`` for it.
    """

    def __init__(self):
        self._handlers: dict[str, MessageHandler] = {}

    def register(self, routing_key: str, handler: MessageHandler) -> None:
        if routing_key in self._handlers:
            raise ValueError(f"Handler already registered for '{routing_key}'")
        self._handlers[routing_key] = handler

    def get(self, routing_key: str) -> MessageHandler | None:
        return self._handlers.get(routing_key)

    def routing_keys(self) -> list[str]:
        return sorted(self._handlers)
