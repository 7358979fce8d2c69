"""FastAPI application factory and configuration."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api import register_exception_handlers, register_routes
from .api.middleware import log_requests
from .core import (
    ACCESS_LOG,
    ALLOWED_CORS_ORIGINS,
    LOG_LEVEL,
    configure_logging,
    get_logger,
)
from .services import UserStore

logger = get_logger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Work hours API ready with %d users", len(app.state.store.list()))
    yield
    logger.info("Work hours API shutting down")


def create_app(store: Optional[UserStore] = None) -> FastAPI:
    """Build the application around ``store``, or a fresh empty one."""

    configure_logging(LOG_LEVEL)

    app = FastAPI(title="Work Hours API", version=__version__, lifespan=lifespan)
    app.state.store = store if store is not None else UserStore()

    if ACCESS_LOG:
        app.middleware("http")(log_requests)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    register_routes(app)
    return app


app = create_app()

