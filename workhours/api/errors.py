"""Translate store errors into plain-text HTTP responses."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from ..core import get_logger
from ..services import (
    INVALID_HOURS_MESSAGE,
    NAME_REQUIRED_MESSAGE,
    USER_NOT_FOUND_MESSAGE,
    InvalidUserInput,
    UserNotFound,
)

logger = get_logger("api")

MALFORMED_BODY_MESSAGE = "Request body must be valid JSON"

_BODY_MESSAGES = {
    "POST": NAME_REQUIRED_MESSAGE,
    "PATCH": INVALID_HOURS_MESSAGE,
}


async def user_not_found_handler(request: Request, exc: UserNotFound) -> PlainTextResponse:
    logger.warning("%s %s: no user with id %s", request.method, request.url.path, exc.user_id)
    return PlainTextResponse(str(exc), status_code=404)


async def invalid_input_handler(request: Request, exc: InvalidUserInput) -> PlainTextResponse:
    logger.warning("%s %s: %s", request.method, request.url.path, exc)
    return PlainTextResponse(str(exc), status_code=400)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> PlainTextResponse:
    """Unparseable ids read as unknown users; unparseable bodies as bad input."""

    errors = exc.errors()
    if any(error.get("loc", ("",))[0] == "path" for error in errors):
        logger.warning("%s %s: id is not an integer", request.method, request.url.path)
        return PlainTextResponse(USER_NOT_FOUND_MESSAGE, status_code=404)

    message = _BODY_MESSAGES.get(request.method, MALFORMED_BODY_MESSAGE)
    logger.warning(
        "%s %s: malformed request (%s)",
        request.method,
        request.url.path,
        ", ".join(str(error.get("type")) for error in errors),
    )
    return PlainTextResponse(message, status_code=400)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UserNotFound, user_not_found_handler)
    app.add_exception_handler(InvalidUserInput, invalid_input_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)


__all__ = ["MALFORMED_BODY_MESSAGE", "register_exception_handlers"]
