"""
Core middleware registration for the FastAPI application.

Adds a request ID to every request and logs its timing.
"""
from __future__ import annotations

import time
import uuid
from typing import Callable

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from hostelcare.config.logging import get_logger

logger = get_logger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that adds a unique request ID to each incoming request.

    The request ID is stored in request.state.request_id and echoed back
    in the X-Request-ID response header. An upstream ID is reused.
    """

    def __init__(self, app: ASGIApp, header_name: str = "X-Request-ID"):
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(self.header_name) or str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers[self.header_name] = request_id
        return response


class TimingMiddleware(BaseHTTPMiddleware):
    """
    Measures each request and logs it with the route that handled it.

    The log line names the endpoint and its portal (Student or Admin) and
    carries the student id when the path has one.
    Adds an X-Process-Time header with the duration in seconds.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        response = await call_next(request)
        process_time = time.perf_counter() - start_time
        response.headers["X-Process-Time"] = f"{process_time:.4f}"

        # set by the router while handling the request
        route = request.scope.get("route")
        endpoint = (
            getattr(route, "name", None)
            or getattr(request.scope.get("endpoint"), "__name__", None)
            or "unmatched"
        )
        tags = getattr(route, "tags", None) or []
        portal = str(tags[0]) if tags else None

        log = logger.warning if response.status_code >= 500 else logger.info
        log(
            f"{portal or '-'} {endpoint} {request.method} {request.url.path} "
            f"-> {response.status_code} ({process_time:.4f}s)",
            extra={
                "request_id": getattr(request.state, "request_id", "unknown"),
                "endpoint": endpoint,
                "portal": portal,
                "student_id": request.path_params.get("student_id"),
                "method": request.method,
                "status_code": response.status_code,
                "process_time": round(process_time, 4),
            },
        )
        return response


def register_middlewares(app: FastAPI) -> None:
    """
    Register core middlewares. The last middleware added runs first, so the
    request ID is assigned before timing starts.
    """
    app.add_middleware(TimingMiddleware)
    app.add_middleware(RequestIDMiddleware)
