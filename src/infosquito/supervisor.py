"""Top-level loop that keeps the service connected and subscribed."""

import logging
from collections.abc import Callable

from pika.adapters.blocking_connection import BlockingChannel, BlockingConnection

from infosquito.config import AppConfig
from infosquito.dispatcher import Dispatcher
from infosquito.handlers import HandlerRegistry
from infosquito.infrastructure import ConnectionManager
from infosquito.infrastructure.interfaces import MessageBroker
from infosquito.utils import Sleeper, close_quietly

logger = logging.getLogger(__name__)


class Supervisor:
    """
    Owns the broker connection lifecycle.

    Each cycle connects (retrying with backoff), opens one channel, declares
    the topology and consumes until something fails. The channel and the
    connection are then closed, and after a fixed delay the next cycle
    starts. :meth:`run` never returns.
    """

    def __init__(
        self,
        config: AppConfig,
        connections: ConnectionManager,
        registry: HandlerRegistry,
        broker_factory: Callable[[BlockingChannel], MessageBroker],
        sleeper: Sleeper,
    ):
        self._config = config
        self._connections = connections
        self._registry = registry
        self._broker_factory = broker_factory
        self._sleeper = sleeper

    @property
    def reconnect_delay(self) -> float:
        return self._config.backoff.initial_delay

    def run(self) -> None:
        """Runs connect/subscribe cycles for the lifetime of the process."""
        while True:
            self.run_once()
            logger.info(
                "Reconnecting to AMQP broker",
                extra={"delay_seconds": self.reconnect_delay},
            )
            self._sleeper.sleep(self.reconnect_delay)

    def run_once(self) -> None:
        """Runs a single connect, subscribe and tear-down cycle."""
        connection = self._connections.connect(str(self._config.rabbitmq.uri))
        try:
            self._subscribe(connection)
        except Exception:
            logger.exception("AMQP session failed")
        finally:
            close_quietly(connection, "connection")

    def _subscribe(self, connection: BlockingConnection) -> None:
        channel = connection.channel()
        try:
            broker = self._broker_factory(channel)
            broker.setup()
            dispatcher = Dispatcher(self._registry, broker)
            logger.info(
                "Subscribed to AMQP broker",
                extra={"handled_routing_keys": self._registry.routing_keys()},
            )
            broker.consume(dispatcher.route)
            logger.warning("Message consumption stopped")
        except Exception:
            logger.exception("Error occurred during message processing")
        finally:
            close_quietly(channel, "channel")
