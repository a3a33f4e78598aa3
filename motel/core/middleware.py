"""
HTTP middleware: request correlation ids and one access log line per call.
"""

from __future__ import annotations

import time
import uuid
from typing import Callable

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from motel.core.logging import get_logger, request_id as request_id_ctx

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Tags each request with an id.

    An incoming X-Request-ID header is reused, otherwise a UUID4 is
    generated. The id is exposed on request.state, in the logging context
    and echoed back in the response header.
    """

    def __init__(self, app: ASGIApp, header_name: str = REQUEST_ID_HEADER):
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(self.header_name) or str(uuid.uuid4())
        request.state.request_id = request_id

        token = request_id_ctx.set(request_id)
        try:
            response = await call_next(request)
        finally:
            request_id_ctx.reset(token)

        response.headers[self.header_name] = request_id
        return response


class AccessLogMiddleware(BaseHTTPMiddleware):
    """
    Times every request and logs its outcome.

    Server errors are logged at warning level, unhandled exceptions at
    error level with traceback before being re-raised. The duration is
    returned in the X-Process-Time header.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.perf_counter()
        context = {
            "request_id": getattr(request.state, "request_id", None),
            "method": request.method,
            "url": request.url.path,
        }

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                f"Request processing failed: {exc}",
                extra={**context, "error_type": type(exc).__name__},
                exc_info=True,
            )
            raise

        elapsed = time.perf_counter() - start
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"

        log = logger.warning if response.status_code >= 500 else logger.info
        log(
            "Request completed",
            extra={**context, "status_code": response.status_code, "process_time": f"{elapsed:.4f}s"},
        )
        return response


def register_middlewares(app: FastAPI) -> None:
    """
    Register the core middlewares.

    The last middleware added runs first, so the request id is assigned
    before the access log reads it.
    """
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestIDMiddleware)
