"""In-memory work hours tracking service."""

__version__ = "0.1.0"
