"""Service layer helpers."""

from .store import (
    INVALID_HOURS_MESSAGE,
    NAME_REQUIRED_MESSAGE,
    USER_NOT_FOUND_MESSAGE,
    InvalidUserInput,
    UserNotFound,
    UserStore,
    UserStoreError,
)
from .users import user_to_dict, users_to_list

__all__ = [
    "INVALID_HOURS_MESSAGE",
    "NAME_REQUIRED_MESSAGE",
    "USER_NOT_FOUND_MESSAGE",
    "InvalidUserInput",
    "UserNotFound",
    "UserStore",
    "UserStoreError",
    "user_to_dict",
    "users_to_list",
]
