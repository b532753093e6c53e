"""Logging setup shared by the library and the server."""

from __future__ import annotations

import logging

from docmark.config import DOCMARK_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_CONFIGURED_LOGGERS = ("docmark", "server")

_configured = False


def configure_logging(level: str | int | None = None) -> None:
    """Attach a single stream handler to the docmark and server loggers.

    Calling this again only updates the level; handlers are never stacked.
    """
    global _configured

    resolved = level if level is not None else DOCMARK_LOG_LEVEL
    formatter = logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT)
    for name in _CONFIGURED_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(resolved)
        if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
            handler = logging.StreamHandler()
            handler.setFormatter(formatter)
            logger.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger, installing the default handlers on first use."""
    if not _configured:
        configure_logging()
    return logging.getLogger(name)
