"""
API exception handlers.

This module provides custom exception handling for REST API responses.
Every error is rendered as ``{"success": false, "error": {"code", "message", ...}}``.
"""

import logging
from typing import Any, Dict, Optional

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.domain.exceptions import (
    ActivationLimitExceededError,
    ActivationNotFoundError,
    AlreadyMemberError,
    DomainException,
    InfrastructureError,
    KeyNotFoundError,
    MemberNotFoundError,
    NotATeamMemberError,
    SeatLimitExceededError,
)

logger = logging.getLogger(__name__)

NOT_FOUND_ERRORS = (KeyNotFoundError, MemberNotFoundError, ActivationNotFoundError)
FORBIDDEN_ERRORS = (NotATeamMemberError,)
CONFLICT_ERRORS = (ActivationLimitExceededError, SeatLimitExceededError, AlreadyMemberError)


def error_response(
    error: Dict[str, Any], status_code: int, correlation_id: Optional[str]
) -> Response:
    """Build the error envelope shared by every failure."""
    response = Response({"success": False, "error": error}, status=status_code)
    if correlation_id:
        response["X-Correlation-ID"] = correlation_id
    return response


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Custom exception handler for REST API."""
    correlation_id = _get_correlation_id(context)

    if isinstance(exc, DomainException):
        return _handle_domain_exception(exc, correlation_id)

    if isinstance(exc, InfrastructureError):
        logger.error("Infrastructure error: %s", exc, exc_info=True)
        return error_response(
            {"code": exc.code, "message": "Service temporarily unavailable, try again later"},
            status.HTTP_503_SERVICE_UNAVAILABLE,
            correlation_id,
        )

    if isinstance(exc, ValidationError):
        return error_response(
            {"code": "VALIDATION_ERROR", "message": "Invalid request", "fields": exc.detail},
            status.HTTP_400_BAD_REQUEST,
            correlation_id,
        )

    if isinstance(exc, APIException):
        response = exception_handler(exc, context)
        if response:
            code = (
                exc.default_code.upper().replace("-", "_")
                if hasattr(exc, "default_code")
                else "API_ERROR"
            )
            message = response.data.get("detail", exc.default_detail)
            return error_response(
                {"code": code, "message": str(message)}, response.status_code, correlation_id
            )

    if isinstance(exc, Http404):
        return error_response(
            {"code": "NOT_FOUND", "message": "Resource not found"},
            status.HTTP_404_NOT_FOUND,
            correlation_id,
        )

    return _handle_unexpected_exception(exc, correlation_id)


def _get_correlation_id(context: Dict[str, Any]) -> Optional[str]:
    """Extract correlation ID from request context."""
    request = context.get("request")
    if not request:
        return None
    return getattr(request, "correlation_id", None)


def _handle_domain_exception(exc: DomainException, correlation_id: Optional[str]) -> Response:
    """Handle domain-specific exceptions."""
    status_code = status.HTTP_400_BAD_REQUEST
    if isinstance(exc, NOT_FOUND_ERRORS):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, FORBIDDEN_ERRORS):
        status_code = status.HTTP_403_FORBIDDEN
    elif isinstance(exc, CONFLICT_ERRORS):
        status_code = status.HTTP_409_CONFLICT

    logger.warning("Domain exception: %s - %s", exc.code, exc.message)
    return error_response(exc.to_dict(), status_code, correlation_id)


def _handle_unexpected_exception(exc: Exception, correlation_id: Optional[str]) -> Response:
    """Handle unexpected or untracked exceptions."""
    logger.error("Unexpected error: %s", exc, exc_info=True)
    return error_response(
        {"code": "INTERNAL_ERROR", "message": "An internal error occurred"},
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        correlation_id,
    )
