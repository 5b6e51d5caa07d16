"""Module to create a logger instance."""

import logging
import sys
from logging import Formatter, Logger, StreamHandler

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


class StdoutFilter(logging.Filter):
    """Class to redirect logs to stdout."""

    def filter(self, record):
        """Redirect to stdout only logs with level lower or equal then WARNING."""
        return record.levelno <= logging.WARNING


class StderrFilter(logging.Filter):
    """Class to redirect logs to stderr."""

    def filter(self, record):
        """Redirect to stderr only logs with level greater or equal then ERROR."""
        return record.levelno >= logging.ERROR


def create_logger(name: str, level: str | int | None = None) -> Logger:
    """Create a logger with 2 stream handlers.

    Log to stdout messages with level lower or equal then WARNING otherwise log them
    to stderr. Handlers are attached only the first time a logger with the given name
    is requested, following calls just update the level.
    """
    logger = logging.getLogger(name)
    error_msg = None
    if level is not None:
        try:
            logger.setLevel(level)
        except ValueError:
            error_msg = f"Invalid log level: {level}"

    if not logger.handlers:
        formatter = Formatter(LOG_FORMAT)

        stdout_handler = StreamHandler(sys.stdout)
        stdout_handler.setFormatter(formatter)
        stdout_handler.addFilter(StdoutFilter())
        logger.addHandler(stdout_handler)

        stderr_handler = StreamHandler()
        stderr_handler.setFormatter(formatter)
        stderr_handler.addFilter(StderrFilter())
        logger.addHandler(stderr_handler)

    if error_msg is not None:
        logger.error(error_msg)

    return logger
