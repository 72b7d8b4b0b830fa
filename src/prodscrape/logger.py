"""
Logging for prodscrape.

Every module logs through a child of the ``prodscrape`` logger; only the
package root owns a handler, so records are written once.
"""
import logging
import sys
from typing import Optional

from .config import Config

ROOT_LOGGER_NAME = "prodscrape"


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    level: Optional[str] = None,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    (Re)configure a logger with a single stdout handler.

    Args:
        name: Logger name
        level: Log level name, defaults to Config.LOG_LEVEL
        format_string: Record format, defaults to Config.LOG_FORMAT

    Returns:
        The configured logger
    """
    configured = logging.getLogger(name)
    numeric_level = getattr(logging, (level or Config.LOG_LEVEL).upper(), logging.INFO)
    configured.setLevel(numeric_level)

    for handler in list(configured.handlers):
        configured.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or Config.LOG_FORMAT))
    configured.addHandler(handler)
    configured.propagate = False

    return configured


logger = setup_logger()


def get_logger(name: str) -> logging.Logger:
    """
    Get a module logger under the ``prodscrape`` namespace.

    Does not touch handlers, so calling it repeatedly is cheap and never
    duplicates output.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
