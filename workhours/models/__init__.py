"""Data model exports."""

from .user import User

__all__ = ["User"]
