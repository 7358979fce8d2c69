"""Core configuration and infrastructure helpers."""

from .config import (
    ACCESS_LOG,
    ALLOWED_CORS_ORIGINS,
    HOST,
    LOG_LEVEL,
    PORT,
    RELOAD,
)
from .log import configure_logging, get_logger

__all__ = [
    "ACCESS_LOG",
    "ALLOWED_CORS_ORIGINS",
    "HOST",
    "LOG_LEVEL",
    "PORT",
    "RELOAD",
    "configure_logging",
    "get_logger",
]
