"""Custom exceptions for the infosquito service."""


class EventPublishError(Exception):
    """Raised when publishing an event to the message broker fails."""

    def __init__(self, routing_key: str, cause: Exception | None = None):
        self.routing_key = routing_key
        self.cause = cause
        super().__init__(f"Failed to publish event with routing key '{routing_key}'")


class ReindexError(Exception):
    """Raised when the external reindex action fails."""

    def __init__(self, command: list[str], cause: Exception | None = None):
        self.command = command
        self.cause = cause
        super().__init__(f"Reindex command '{' '.join(command)}' failed")
