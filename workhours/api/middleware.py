"""Per-request access logging."""

from __future__ import annotations

import time

from fastapi import Request

from ..core import get_logger

access_logger = get_logger("access")


async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception as exc:
        duration_ms = (time.perf_counter() - start) * 1000
        access_logger.error(
            "%s %s failed: %s: %s (%.2fms)",
            request.method,
            request.url.path,
            type(exc).__name__,
            exc,
            duration_ms,
        )
        raise

    duration_ms = (time.perf_counter() - start) * 1000
    client = request.client.host if request.client else "-"
    access_logger.info(
        '%s "%s %s" %s %.2fms',
        client,
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response


__all__ = ["log_requests"]
