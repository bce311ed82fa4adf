"""Logging setup for the owlviz command line."""

import logging
import sys

LOGGER_NAME = "owlviz"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> None:
    """Configure the package logger.

    Records go to stderr, so text and JSON output on stdout stay clean.
    Calling this again replaces the handlers installed before.

    Args:
        level: Logging level for the package logger and its handlers.
        log_file: Optional path that receives a copy of every record.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
