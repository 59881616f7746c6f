"""Entry point for the infosquito service."""

import signal

from ddtrace import patch

from infosquito.config import load_config
from infosquito.dependencies import get_supervisor
from infosquito.logging import setup_logging
from infosquito.utils import Sleeper

logger = setup_logging()
patch(logging=True)


def main():
    """Starts the reindex notifier and keeps it subscribed forever."""
    logger.info("Starting infosquito service")
    config = load_config()
    sleeper = Sleeper()

    def _wake(signum, frame):
        logger.info("SIGHUP received, cutting current sleep short")
        sleeper.interrupt()

    signal.signal(signal.SIGHUP, _wake)

    supervisor = get_supervisor(config, sleeper)
    supervisor.run()


if __name__ == "__main__":
    main()
