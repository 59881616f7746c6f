import logging
import sys

from pythonjsonlogger import jsonlogger


def setup_logging():
    """
    Configures structured JSON logging for the service.

    Installs a JSON formatter carrying timestamp, level, logger name, message,
    trace_id and span_id on a stdout stream handler attached to the root
    logger. pika's connection chatter is lowered to WARNING so that the
    service's own reconnect messages are the ones that show up.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
    )
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    for logger_name in ["pika", "pika.adapters", "pika.connection"]:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    return root_logger
