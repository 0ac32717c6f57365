"""Logging setup utilities."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOGGER_NAME = "mkfilep"

# Marks handlers installed here so a later call can swap them out.
_OWNED_ATTR = "_mkfilep_owned"


def configure_logging(*, level: str | int = logging.WARNING, log_path: Path | None = None) -> logging.Logger:
    """Configure the ``mkfilep`` logger.

    Records go to stderr so stdout only ever carries the command's own result
    line. Calling this again replaces the handlers from the previous call.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, _OWNED_ATTR, False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(fmt="%(asctime)s %(levelname)s %(name)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")

    stream_handler = logging.StreamHandler(stream=sys.stderr)
    stream_handler.setFormatter(formatter)
    setattr(stream_handler, _OWNED_ATTR, True)
    logger.addHandler(stream_handler)

    if log_path:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        setattr(file_handler, _OWNED_ATTR, True)
        logger.addHandler(file_handler)

    return logger


__all__ = ["LOGGER_NAME", "configure_logging"]
