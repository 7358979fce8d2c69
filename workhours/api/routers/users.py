"""User CRUD and hours tracking endpoints."""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends

from ...core import get_logger
from ...services import UserStore, user_to_dict, users_to_list
from ..dependencies import get_store

router = APIRouter(tags=["users"])

logger = get_logger("api")


def _field(body: Any, key: str) -> Any:
    """Read a key from a JSON body that may not be an object at all."""

    if isinstance(body, dict):
        return body.get(key)
    return None


@router.get("/users")
def list_users(store: UserStore = Depends(get_store)) -> List[Dict[str, Any]]:
    """List all users in creation order."""

    return users_to_list(store.list())


@router.get("/users/{user_id}")
def get_user(user_id: int, store: UserStore = Depends(get_store)) -> Dict[str, Any]:
    return user_to_dict(store.get(user_id))


@router.post("/users", status_code=201)
def create_user(
    body: Any = Body(None), store: UserStore = Depends(get_store)
) -> Dict[str, Any]:
    """Register a new user with zero hours worked."""

    user = store.create(_field(body, "name"))
    logger.info("Created user %s (%s)", user.id, user.name)
    return user_to_dict(user)


@router.put("/users/{user_id}")
def update_user(
    user_id: int, body: Any = Body(None), store: UserStore = Depends(get_store)
) -> Dict[str, Any]:
    """Rename a user. A blank name keeps the current one."""

    user = store.update_name(user_id, _field(body, "name"))
    logger.info("User %s is now named %s", user.id, user.name)
    return user_to_dict(user)


@router.patch("/users/{user_id}")
def add_user_hours(
    user_id: int, body: Any = Body(None), store: UserStore = Depends(get_store)
) -> Dict[str, Any]:
    """Add worked hours to a user's running total."""

    hours = _field(body, "hoursToAdd")
    user = store.add_hours(user_id, hours)
    logger.info(
        "Added %s hours to user %s, total %s", hours, user.id, user.hours_worked
    )
    return user_to_dict(user)


@router.delete("/users")
def delete_all_users(store: UserStore = Depends(get_store)) -> List[Dict[str, Any]]:
    """Remove every user and restart ids at 1."""

    remaining = store.clear()
    logger.info("Deleted all users")
    return users_to_list(remaining)


@router.delete("/users/{user_id}")
def delete_user(user_id: int, store: UserStore = Depends(get_store)) -> Dict[str, Any]:
    user = store.delete(user_id)
    logger.info("Deleted user %s (%s)", user.id, user.name)
    return user_to_dict(user)


__all__ = ["router"]
