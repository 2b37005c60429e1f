"""Logging setup for the decoder and the CLI."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "fru_eeprom_reader"


def get_logger(
    level: str = "WARNING",
    console: Optional[Console] = None,
    name: str = LOGGER_NAME,
) -> logging.Logger:
    """
    Get a logger that renders through rich.

    Args:
        level: Log level name, e.g. "DEBUG".
        console: Console to log to; a stderr console if omitted.
        name: Logger name.

    Returns:
        Configured logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)

    return logger
