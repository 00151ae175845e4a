"""Logging configuration for cavy."""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO, Union

LOGGER_NAME = "cavy"

LOG_FORMAT = "%(asctime)s [%(levelname)-8s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: Union[int, str] = logging.INFO,
                  stream: Optional[TextIO] = None,
                  log_file: Optional[Path] = None) -> logging.Logger:
    """
    Set up console logging for the cavy logger tree.

    Only the ``cavy`` logger is touched, so the host application's own
    logging setup is left alone. Calling this again replaces the handlers
    installed by the previous call.

    Args:
        level: Minimum log level to emit
        stream: Console stream, stdout by default
        log_file: Optional file path to also write logs to

    Returns:
        The configured ``cavy`` logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
