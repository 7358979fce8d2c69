"""Thread-safe in-memory registry of users."""

from __future__ import annotations

import threading
from typing import List, Optional

from ..models import User

NAME_REQUIRED_MESSAGE = "Name is required and must be a non-empty string"
USER_NOT_FOUND_MESSAGE = "User not found"
INVALID_HOURS_MESSAGE = "Invalid hoursToAdd value"


class UserStoreError(Exception):
    """Base class for store failures."""


class InvalidUserInput(UserStoreError):
    """Raised when an operation receives unusable input."""


class UserNotFound(UserStoreError):
    """Raised when no user matches the requested id."""

    def __init__(self, user_id: int) -> None:
        super().__init__(USER_NOT_FOUND_MESSAGE)
        self.user_id = user_id


class UserStore:
    """Ordered collection of users plus the id counter that feeds it.

    Both fields sit behind one lock, so an id is never handed out without
    the matching user being appended in the same step. Callers only ever
    receive copies of the stored records.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._users: List[User] = []
        self._next_id = 1

    def list(self) -> List[User]:
        with self._lock:
            return [user.model_copy() for user in self._users]

    def get(self, user_id: int) -> User:
        with self._lock:
            return self._require(user_id).model_copy()

    def create(self, name: str) -> User:
        """Append a new user with zero hours and return it."""

        normalized = _clean_name(name)
        if not normalized:
            raise InvalidUserInput(NAME_REQUIRED_MESSAGE)

        with self._lock:
            user = User(id=self._next_id, name=normalized, hours_worked=0)
            self._next_id += 1
            self._users.append(user)
            return user.model_copy()

    def update_name(self, user_id: int, name: Optional[str]) -> User:
        """Replace the user's name; a blank name leaves it as it was."""

        normalized = _clean_name(name)
        with self._lock:
            user = self._require(user_id)
            if normalized:
                user.name = normalized
            return user.model_copy()

    def add_hours(self, user_id: int, hours: int) -> User:
        """Increase the user's worked hours by a non-negative amount."""

        with self._lock:
            user = self._require(user_id)
            if isinstance(hours, bool) or not isinstance(hours, int) or hours < 0:
                raise InvalidUserInput(INVALID_HOURS_MESSAGE)
            user.hours_worked += hours
            return user.model_copy()

    def delete(self, user_id: int) -> User:
        with self._lock:
            return self._users.pop(self._index_of(user_id))

    def clear(self) -> List[User]:
        """Drop every user and restart ids at 1."""

        with self._lock:
            self._users.clear()
            self._next_id = 1
            return []

    def _require(self, user_id: int) -> User:
        return self._users[self._index_of(user_id)]

    def _index_of(self, user_id: int) -> int:
        # Caller must hold the lock.
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        raise UserNotFound(user_id)


def _clean_name(name: Optional[str]) -> str:
    if not isinstance(name, str):
        return ""
    return name.strip()


__all__ = [
    "INVALID_HOURS_MESSAGE",
    "NAME_REQUIRED_MESSAGE",
    "USER_NOT_FOUND_MESSAGE",
    "InvalidUserInput",
    "UserNotFound",
    "UserStore",
    "UserStoreError",
]
