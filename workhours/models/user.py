"""Data model for tracked users."""

from __future__ import annotations

from sqlmodel import Field as ORMField, SQLModel


class User(SQLModel):
    """Person accruing worked hours."""

    id: int = ORMField(ge=1)
    name: str = ORMField(min_length=1)
    hours_worked: int = ORMField(default=0, ge=0)


__all__ = ["User"]
