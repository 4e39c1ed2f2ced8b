"""Request logging middleware for structured logging."""

import logging
import time
from typing import Callable
from uuid import uuid4

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from vtvnews.utils.logging import get_logger, request_id_var

logger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log HTTP requests with structured data."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid4())
        request.state.request_id = request_id
        token = request_id_var.set(request_id)

        method = request.method
        path = request.url.path
        client_ip = request.client.host if request.client else "unknown"
        start_time = time.perf_counter()

        logger.info(
            f"{method} {path}",
            extra={"endpoint": path, "method": method, "client_ip": client_ip},
        )

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"{method} {path} ERROR: {e}",
                extra={
                    "endpoint": path,
                    "method": method,
                    "status_code": 500,
                    "duration_ms": round(duration_ms, 2),
                    "client_ip": client_ip,
                },
                exc_info=True,
            )
            raise
        finally:
            request_id_var.reset(token)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status_code = response.status_code
        logger.log(
            logging.INFO if status_code < 400 else logging.WARNING,
            f"{method} {path} {status_code}",
            extra={
                "endpoint": path,
                "method": method,
                "status_code": status_code,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
                "request_id": request_id,
            },
        )
        response.headers["X-Request-ID"] = request_id
        return response
