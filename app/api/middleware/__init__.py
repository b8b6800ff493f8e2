# 📄 File: app/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the wrappers that every plant care request passes through: one tags the request with an ID
# and turns crashes into tidy error messages, the other writes a log line with the timing.
# 🧪 Purpose (Technical Summary):
# Middleware package: shared header names, per-middleware settings (excluded paths, slow request
# threshold) and the two BaseHTTPMiddleware classes.
# 🔗 Dependencies:
# Starlette BaseHTTPMiddleware components
# 🔄 Connected Modules / Calls From:
# app.main.py (middleware registration)

"""
Order at runtime (outermost first):
    ErrorHandlingMiddleware -> RequestLoggingMiddleware -> routes
"""

from typing import Any, Dict

REQUEST_ID_HEADER = "X-Request-ID"
CORRELATION_ID_HEADER = "X-Correlation-ID"

MIDDLEWARE_CONFIG: Dict[str, Dict[str, Any]] = {
    "logging": {
        # Liveness probes hit this every few seconds
        "exclude_paths": ["/api/v1/health/live", "/favicon.ico"],
        "slow_request_ms": 1000,
    },
}


def get_middleware_config(middleware_name: str) -> Dict[str, Any]:
    return MIDDLEWARE_CONFIG.get(middleware_name, {})


def should_exclude_path(middleware_name: str, path: str) -> bool:
    """True when ``path`` equals, or sits under, one of the middleware's excluded paths."""
    excluded = get_middleware_config(middleware_name).get("exclude_paths", [])
    return any(path == prefix or path.startswith(prefix + "/") for prefix in excluded)


from .error_handling import ErrorHandlingMiddleware  # noqa: E402
from .logging import RequestLoggingMiddleware  # noqa: E402
