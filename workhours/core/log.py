"""Logging setup for the service's namespaced loggers."""

from __future__ import annotations

import logging

LOGGER_NAMESPACE = "workhours"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a child of the service logger, e.g. ``workhours.api``."""

    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Attach a single stream handler to the service logger.

    Calling this again only updates the level.
    """

    root = logging.getLogger(LOGGER_NAMESPACE)
    root.setLevel(level)
    if not any(handler.get_name() == LOGGER_NAMESPACE for handler in root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(LOGGER_NAMESPACE)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    return root


__all__ = ["LOGGER_NAMESPACE", "configure_logging", "get_logger"]
