"""FastAPI dependencies shared by the routers."""

from __future__ import annotations

from fastapi import Request

from ..services import UserStore


def get_store(request: Request) -> UserStore:
    """Return the store the running application was built with."""

    return request.app.state.store


__all__ = ["get_store"]
