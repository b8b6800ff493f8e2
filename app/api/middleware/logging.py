# 📄 File: app/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# This file keeps a diary of every request made to our plant care app, recording what was asked for,
# how long it took to respond and whether there were any problems.
# 🧪 Purpose (Technical Summary):
# Request logging middleware emitting one structured performance record per request (method, path,
# status, duration, client) through the StructuredLogger, with slow-request warnings.
# 🔗 Dependencies:
# Starlette BaseHTTPMiddleware, app.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# app.main.py (middleware registration)

import time
from typing import Any, Dict

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.utils.logging import get_logger

from . import get_middleware_config, should_exclude_path

logger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware for API monitoring

    Features:
    - Request/response timing
    - Structured log records (JSON when LOG_FORMAT=json)
    - Slow request warnings
    - Error correlation through the request ID log context
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)
        config = get_middleware_config("logging")
        self.slow_request_ms = config.get("slow_request_ms", 1000)

    async def dispatch(self, request: Request, call_next) -> Response:
        """
        Process and log HTTP requests/responses
        """
        # Skip logging for excluded paths
        if should_exclude_path("logging", request.url.path):
            return await call_next(request)

        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"HTTP {request.method} {request.url.path} failed after {duration_ms:.2f}ms: {e}",
                extra={"event_type": "http_error", **self._client_info(request)},
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.performance.log_request(
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            extra=self._client_info(request),
        )

        if duration_ms > self.slow_request_ms:
            logger.warning(
                f"Slow request: {request.method} {request.url.path} took {duration_ms:.2f}ms",
                extra={"event_type": "slow_request", "duration_ms": round(duration_ms, 2)},
            )

        return response

    def _client_info(self, request: Request) -> Dict[str, Any]:
        return {
            "client_ip": request.client.host if request.client else None,
            "user_agent": request.headers.get("user-agent"),
            "query": str(request.query_params) or None,
        }
