# 📄 File: app/api/middleware/error_handling.py
# 🧭 Purpose (Layman Explanation):
# This file catches any errors that happen in our app and turns them into friendly, consistent error messages,
# and stamps every request with an ID so problems can be traced in the logs.
# 🧪 Purpose (Technical Summary):
# Global error handling middleware: assigns request/correlation IDs (log context), adds timing headers
# and converts unhandled exceptions into the standard JSON error envelope.
# 🔗 Dependencies:
# Starlette BaseHTTPMiddleware, app.shared.core.exceptions, app.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# app.main.py (middleware registration, shared error envelope builder)

import logging
import time
import traceback
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from fastapi import HTTPException, Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.config.settings import get_settings
from app.shared.core.exceptions import PlantCareException, exception_to_dict, is_client_error
from app.shared.utils.logging import log_context

from . import CORRELATION_ID_HEADER, REQUEST_ID_HEADER

logger = logging.getLogger(__name__)


def build_error_response(
    request: Request,
    status_code: int,
    code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    timestamp: Optional[datetime] = None,
) -> JSONResponse:
    """Standard ``{"error": {...}}`` envelope shared by middleware and exception handlers."""
    request_id = getattr(request.state, "request_id", None)
    response = JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "details": details or {},
                "timestamp": (timestamp or datetime.now(timezone.utc)).isoformat(),
                "request_id": request_id,
            }
        },
    )
    if request_id:
        response.headers[REQUEST_ID_HEADER] = request_id
    return response


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Global error handling middleware for the Plant Care API

    Domain exceptions are rendered by the application's exception handlers;
    this middleware is the last line for everything else. It also owns the
    request ID used by the log context and the error envelope.
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)
        self.settings = get_settings()

        # Error type to HTTP status code mapping
        self.error_status_map = {
            ValueError: 400,
            ConnectionError: 503,
            TimeoutError: 504,
        }

    async def dispatch(self, request: Request, call_next) -> Response:
        """
        Process request and handle any exceptions that occur

        Args:
            request: HTTP request
            call_next: Next middleware or endpoint

        Returns:
            HTTP response
        """
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        correlation_id = request.headers.get(CORRELATION_ID_HEADER)
        request.state.request_id = request_id

        start_time = time.perf_counter()

        with log_context(request_id=request_id, correlation_id=correlation_id):
            try:
                response = await call_next(request)
            except Exception as exc:
                response = self._handle_exception(request, exc)

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Response-Time"] = f"{time.perf_counter() - start_time:.3f}s"
        return response

    def _handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        """
        Handle exception and create appropriate error response
        """
        status_code = self._get_status_code(exc)
        error_code, error_message, error_details = self._get_error_info(exc)

        if not is_client_error(exc) and status_code >= 500:
            logger.error(
                f"Unhandled error on {request.method} {request.url.path}: {exc}",
                exc_info=True,
            )
        else:
            logger.warning(f"Request error on {request.method} {request.url.path}: {exc}")

        # Add debug information in development
        if self.settings.DEBUG and not self.settings.is_production:
            error_details = {
                **error_details,
                "debug": {
                    "exception_type": type(exc).__name__,
                    "traceback": traceback.format_exception(type(exc), exc, exc.__traceback__),
                },
            }

        response = build_error_response(request, status_code, error_code, error_message, error_details)
        response.headers["X-Error-Code"] = error_code
        return response

    def _get_status_code(self, exc: Exception) -> int:
        if isinstance(exc, (HTTPException, PlantCareException)):
            return exc.status_code

        for exc_type, status_code in self.error_status_map.items():
            if isinstance(exc, exc_type):
                return status_code

        return 500

    def _get_error_info(self, exc: Exception) -> Tuple[str, str, Dict[str, Any]]:
        """
        Extract (error_code, error_message, error_details) from an exception
        """
        if isinstance(exc, PlantCareException):
            payload = exception_to_dict(exc)["error"]
            return payload["code"], payload["message"], payload["details"]

        if isinstance(exc, HTTPException):
            return f"HTTP_{exc.status_code}", str(exc.detail), {}

        if self._get_status_code(exc) >= 500:
            return "INTERNAL_SERVER_ERROR", "An internal server error occurred", {}

        return type(exc).__name__.upper(), str(exc), {}
