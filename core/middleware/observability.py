"""
Observability middleware.

This middleware adds request logging and correlation ids.
The correlation id is kept in a context variable so log records
emitted anywhere during the request can carry it.
"""

import contextvars
import logging
import time
import uuid
from typing import Callable, Optional

from django.http import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "HTTP_X_CORRELATION_ID"

_correlation_id: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "correlation_id", default=None
)


def get_correlation_id() -> Optional[str]:
    """Return the correlation id of the current request, if any."""
    return _correlation_id.get()


class RequestLoggingMiddleware:
    """
    Middleware for request observability.

    This middleware:
    1. Assigns a correlation id (or reuses the caller's X-Correlation-ID)
    2. Logs request start and completion with duration
    3. Adds the correlation id to response headers
    """

    def __init__(self, get_response: Callable):
        """Initialize middleware."""
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """
        Process request and add observability.

        Args:
            request: HTTP request

        Returns:
            HTTP response with observability headers
        """
        correlation_id = request.META.get(CORRELATION_HEADER) or str(uuid.uuid4())
        request.correlation_id = correlation_id  # type: ignore
        token = _correlation_id.set(correlation_id)

        start_time = time.time()
        logger.info(
            "Request started",
            extra={
                "method": request.method,
                "path": request.path,
                "remote_addr": request.META.get("REMOTE_ADDR"),
            },
        )

        try:
            response = self.get_response(request)
        except Exception as e:
            logger.error(
                "Request failed",
                extra={
                    "method": request.method,
                    "path": request.path,
                    "error_type": type(e).__name__,
                    "duration_ms": round((time.time() - start_time) * 1000, 2),
                },
                exc_info=True,
            )
            raise
        else:
            self._log_response(request, response, time.time() - start_time)
            response["X-Correlation-ID"] = correlation_id
            return response
        finally:
            _correlation_id.reset(token)

    def _log_response(self, request, response, duration):
        """Log structured response information."""
        log_extra = {
            "method": request.method,
            "path": request.path,
            "status_code": response.status_code,
            "duration_ms": round(duration * 1000, 2),
        }
        if response.status_code >= 500:
            logger.error("Request completed with server error", extra=log_extra)
        elif response.status_code >= 400:
            logger.warning("Request completed with client error", extra=log_extra)
        else:
            logger.info("Request completed successfully", extra=log_extra)
