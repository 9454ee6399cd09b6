"""
Staffgate HTTP API - Error Mapping
==================================
Stable transport mapping from engine exceptions to HTTP status codes.
"""

from __future__ import annotations

from typing import Any, Optional

from staffgate.http_api.contracts import HttpApiResponse
from staffgate.permissions.exceptions import (
    AgentNotFound,
    InvalidArgument,
    Unauthenticated,
    Unauthorized,
)

STATUS_OK = 200
STATUS_BAD_REQUEST = 400
STATUS_UNAUTHENTICATED = 401
STATUS_FORBIDDEN = 403
STATUS_NOT_FOUND = 404
STATUS_METHOD_NOT_ALLOWED = 405
STATUS_INTERNAL_ERROR = 500

_EXCEPTION_STATUS = (
    (Unauthenticated, STATUS_UNAUTHENTICATED),
    (Unauthorized, STATUS_FORBIDDEN),
    (AgentNotFound, STATUS_NOT_FOUND),
    (InvalidArgument, STATUS_BAD_REQUEST),
)


def success_response(
    data: Any,
    *,
    message: Optional[str] = None,
) -> HttpApiResponse:
    return HttpApiResponse(success=True, status=STATUS_OK, data=data, message=message)


def error_response(
    *,
    status: int,
    message: str,
    details: Optional[dict[str, Any]] = None,
) -> HttpApiResponse:
    return HttpApiResponse(
        success=False,
        status=status,
        message=message,
        details=details or {},
    )


def map_exception(exc: Exception) -> HttpApiResponse | None:
    """Known engine errors only; None for anything unexpected."""
    for exc_type, status in _EXCEPTION_STATUS:
        if isinstance(exc, exc_type):
            return error_response(status=status, message=str(exc))
    return None


def method_not_allowed() -> HttpApiResponse:
    return error_response(
        status=STATUS_METHOD_NOT_ALLOWED,
        message="Method not allowed",
    )
