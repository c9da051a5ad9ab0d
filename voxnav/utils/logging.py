"""
Package-wide logging for voxnav.

Graph building and searches report through a single ``voxnav`` logger.
Applications embedding voxnav can swap it for their own logger.
"""

import logging
from logging import Logger

LOG_FORMAT = "[%(name)s] %(levelname)s: %(message)s"


def create_logger(name: str, level: int = logging.INFO) -> Logger:
    """
    Gets a named logger that writes to the console.

    A console handler is attached only if the logger has none yet, so calling
    this repeatedly for the same name is harmless. Records still propagate to
    ancestor loggers, where pytest's ``caplog`` collects them.

    :param name: The name of the logger.
    :param level: The minimum level of records to emit.
    :return: The configured logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.propagate = True

    return logger


_global_logger = create_logger("voxnav")


def get_global_logger() -> Logger:
    """
    Gets the logger used throughout voxnav.

    :return: The active voxnav logger.
    """
    return _global_logger


def set_global_logger(logger: Logger) -> None:
    """
    Routes all voxnav log records to another logger.

    :param logger: The logger to use from now on.
    """
    global _global_logger
    _global_logger = logger
