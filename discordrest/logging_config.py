"""
Logging configuration for discordrest

Provides the package logger and its child loggers.
"""

import logging
import sys
from typing import Union

ROOT_LOGGER_NAME = "discordrest"


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Get a configured logger for the package.

    The stdout handler is only attached to the package root logger; child
    loggers (e.g. ``discordrest.cdn.builder``) propagate to it.

    Args:
        name: The logger name (default: discordrest)

    Returns:
        Configured logger instance
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)

    # Only configure if not already configured
    if not root.handlers:
        root.setLevel(logging.INFO)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)

        formatter = logging.Formatter(
            '[%(name)s] %(levelname)s: %(message)s'
        )
        console_handler.setFormatter(formatter)

        root.addHandler(console_handler)

    if name == ROOT_LOGGER_NAME:
        return root
    return logging.getLogger(name)


def set_log_level(level: Union[int, str]) -> None:
    """
    Set the level of the package root logger.

    Args:
        level: A logging level number or name such as "DEBUG"
    """
    if isinstance(level, str):
        level = level.upper()
    get_logger().setLevel(level)


# Default logger instance
logger = get_logger()
