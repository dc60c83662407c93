"""Logging setup utilities for snakectl.

Configures logging for the whole package based on the logging
configuration settings.
"""

from __future__ import annotations

import logging
import sys

from snakectl.config.settings import LoggingConfig


def setup_logging(config: LoggingConfig | None = None, console: bool = True) -> None:
    """Configure logging for the snakectl package.

    Sets up the 'snakectl' logger with the specified level, format, and
    optional file handler.

    Args:
        config: Logging configuration. If None, uses defaults
                (INFO level, stderr output).
        console: Attach a stderr handler. Pass False while curses owns
                 the screen; records then go to ``config.file`` only.
    """
    if config is None:
        config = LoggingConfig()

    root_logger = logging.getLogger("snakectl")
    root_logger.setLevel(getattr(logging, config.level.upper(), logging.INFO))

    formatter = logging.Formatter(config.format)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if config.file:
        file_handler = logging.FileHandler(config.file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    if not root_logger.handlers:
        root_logger.addHandler(logging.NullHandler())

    root_logger.info("Logging initialized at %s level", config.level)
