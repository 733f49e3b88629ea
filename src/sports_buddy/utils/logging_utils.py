"""
Logging helpers shared by the application entry point and middleware.
"""

import time
from typing import Any, Dict, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from sports_buddy.managers.logging_manager import get_logger

lifecycle_logger = get_logger(prefix="[LIFECYCLE]")
error_logger = get_logger(prefix="[ERROR]")
request_logger = get_logger(name="SportsBuddy.requests", prefix="[REQUEST]")


def log_application_lifecycle(event: str, details: Optional[Dict[str, Any]] = None) -> None:
    """Log an application lifecycle event (startup, shutdown, ...) with its details."""
    if details:
        rendered = ", ".join(f"{key}={value}" for key, value in details.items())
        lifecycle_logger.info("%s: %s", event, rendered)
    else:
        lifecycle_logger.info("%s", event)


def log_error_with_context(error: BaseException, context: Optional[Dict[str, Any]] = None) -> None:
    """Log an exception together with the context it happened in."""
    error_logger.error(
        "%s: %s (context: %s)",
        type(error).__name__,
        error,
        context or {},
        exc_info=error,
    )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status code and duration of every request."""

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        duration = time.time() - start_time
        request_logger.info(
            "%s %s -> %d (%.3fs)",
            request.method,
            request.url.path,
            response.status_code,
            duration,
        )
        return response
