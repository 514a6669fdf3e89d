import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from structlog.contextvars import bind_contextvars, clear_contextvars

from clover_reader.observability.logging import log
from clover_reader.observability.prometheus import (
    HTTP_REQUEST_DURATION_SECONDS,
    HTTP_REQUESTS_TOTAL,
)

REQUEST_ID_HEADER = "X-Request-Id"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Binds a request id into the structlog context, echoes it back as a header,
    and records per-request counters/latency in the Prometheus registry.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        clear_contextvars()
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        bind_contextvars(request_id=request_id, path=request.url.path)

        started = time.perf_counter()
        try:
            response: Response = await call_next(request)
        except Exception:
            log().exception("http_request_failed", method=request.method)
            raise
        elapsed = time.perf_counter() - started

        HTTP_REQUESTS_TOTAL.labels(
            method=request.method,
            path=request.url.path,
            status=str(response.status_code),
        ).inc()
        HTTP_REQUEST_DURATION_SECONDS.labels(
            method=request.method, path=request.url.path
        ).observe(elapsed)

        response.headers[REQUEST_ID_HEADER] = request_id
        log().info(
            "http_request_completed",
            method=request.method,
            status_code=response.status_code,
            latency_ms=int(elapsed * 1000),
        )
        return response
