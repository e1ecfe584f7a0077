"""Logging helpers shared by the ssh1key loaders, ciphers and writers."""

import logging
from typing import Iterable

PACKAGE_LOGGERS = (
    'ssh1key',
    'ssh1key.core.loaders',
    'ssh1key.core.crypto',
    'ssh1key.core.serializers',
)


def get_logger(name: str) -> logging.Logger:
    """Returns the module logger for name.

    Records always propagate, so an application's basicConfig() picks
    them up. Until the root logger has a handler the level defaults to
    WARNING, which keeps key comments logged at debug level quiet.

    Args:
        name: Logger name (typically __name__)
    """
    logger = logging.getLogger(name)
    logger.propagate = True
    if not logging.getLogger().handlers:
        logger.setLevel(logging.WARNING)
    return logger


def configure_loggers(level: int, names: Iterable[str] = PACKAGE_LOGGERS) -> None:
    """Sets level on each named logger and keeps it propagating."""
    for name in names:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.propagate = True
