from __future__ import annotations

import time
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from treino.core.logging import bind_request, get_logger


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        rid = bind_request(
            request.headers.get("X-Request-ID"),
            method=request.method,
            path=request.url.path,
        )
        log = get_logger()
        log.info("request.start")

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            log.exception("request.error")
            raise
        duration_ms = (time.perf_counter() - started) * 1000.0

        response.headers["X-Request-ID"] = rid
        log.info(
            "request.end",
            status_code=response.status_code,
            duration_ms=round(duration_ms, 2),
        )
        return response
