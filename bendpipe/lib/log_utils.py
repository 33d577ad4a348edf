"""Diagnostic sink for the package.

Messages go to the ``logging`` logger named after the package. When
``config.DEBUG`` is set they are also echoed to the console.
"""

from __future__ import annotations

import logging

from .. import config

logger = logging.getLogger(config.PACKAGE_NAME)


def log(message: str, level: int = logging.INFO, force_console: bool = False) -> None:
    """
    Write a diagnostic message.

    Args:
        message: Text to log
        level: A ``logging`` level (INFO, WARNING, ...)
        force_console: Echo to the console even when DEBUG is off
    """
    if config.DEBUG or force_console:
        print(message)
    logger.log(level, message)
