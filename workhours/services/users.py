"""Helpers for user domain objects."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

from ..models import User


def user_to_dict(user: User) -> Dict[str, Any]:
    """Serialise a user to the API's camelCase shape."""

    return {
        "id": user.id,
        "name": user.name,
        "hoursWorked": user.hours_worked,
    }


def users_to_list(users: Iterable[User]) -> List[Dict[str, Any]]:
    return [user_to_dict(user) for user in users]


__all__ = ["user_to_dict", "users_to_list"]
