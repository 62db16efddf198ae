"""
Error taxonomy for photo search and its HTTP exception handlers
"""

import logging
from enum import Enum
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class GrabPicErrorType(str, Enum):
    """Closed set of failure kinds reported by a search."""

    MISSING_QUERY = "MISSING_QUERY"
    MISSING_ACCESS_KEY = "MISSING_ACCESS_KEY"
    INVALID_ACCESS_KEY = "INVALID_ACCESS_KEY"
    INVALID_COUNT = "INVALID_COUNT"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
    NO_RESULTS_FOUND = "NO_RESULTS_FOUND"
    NETWORK_ERROR = "NETWORK_ERROR"
    API_ERROR = "API_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class ApiErrorReason(str, Enum):
    """Which part of the exchange with the photo API went wrong."""

    HTTP_ERROR = "HTTP_ERROR"
    NOT_FOUND = "NOT_FOUND"
    PARSE_ERROR = "PARSE_ERROR"
    MALFORMED_RESPONSE = "MALFORMED_RESPONSE"
    NO_VALID_URLS = "NO_VALID_URLS"


class GrabPicError(Exception):
    """Base exception for every search failure.

    Args:
        message (str): Human-readable description
        status_code (Optional[int]): HTTP-style status; defaults per subclass
        details (Optional[dict]): Extra debugging context

    The underlying exception, when there is one, is chained with
    ``raise ... from exc`` and exposed as :attr:`cause`.
    """

    error_type: GrabPicErrorType = GrabPicErrorType.UNKNOWN_ERROR
    default_status_code: int = 500
    summary: str = "Internal error"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code or self.default_status_code
        self.details = details or {}
        super().__init__(self.message)

    @property
    def cause(self) -> Optional[BaseException]:
        return self.__cause__

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.summary,
            "details": self.message,
            "error_type": self.error_type.value,
            "status_code": self.status_code,
        }


class MissingQueryError(GrabPicError):
    """Query absent, blank, not a string or too long"""

    error_type = GrabPicErrorType.MISSING_QUERY
    default_status_code = 400
    summary = "Invalid query parameter"


class MissingAccessKeyError(GrabPicError):
    """Access key absent or blank"""

    error_type = GrabPicErrorType.MISSING_ACCESS_KEY
    default_status_code = 400
    summary = "Missing access key"


class InvalidAccessKeyError(GrabPicError):
    """Access key too short, or rejected by the API (401)"""

    error_type = GrabPicErrorType.INVALID_ACCESS_KEY
    default_status_code = 400
    summary = "Authentication failed"


class InvalidCountError(GrabPicError):
    """Invalid count, orientation or size option"""

    error_type = GrabPicErrorType.INVALID_COUNT
    default_status_code = 400
    summary = "Invalid search options"


class RateLimitExceededError(GrabPicError):
    error_type = GrabPicErrorType.RATE_LIMIT_EXCEEDED
    default_status_code = 429
    summary = "Rate limit exceeded"


class NoResultsFoundError(GrabPicError):
    """The API answered with an empty result list"""

    error_type = GrabPicErrorType.NO_RESULTS_FOUND
    default_status_code = 404
    summary = "No results found"

    def __init__(self, message: str, query: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.query = query


class NetworkError(GrabPicError):
    error_type = GrabPicErrorType.NETWORK_ERROR
    default_status_code = 503
    summary = "Network connection failed"


class ApiError(GrabPicError):
    """The API responded, but not with something usable

    Args:
        message (str): Error message
        status_code (Optional[int]): HTTP status reported to the caller
        reason (ApiErrorReason): Variant of the failure
    Example:
        raise ApiError("Failed to parse API response", reason=ApiErrorReason.PARSE_ERROR)
    """

    error_type = GrabPicErrorType.API_ERROR
    default_status_code = 500

    _summaries = {
        ApiErrorReason.HTTP_ERROR: "API request failed",
        ApiErrorReason.NOT_FOUND: "API endpoint not found",
        ApiErrorReason.PARSE_ERROR: "Invalid API response format",
        ApiErrorReason.MALFORMED_RESPONSE: "Malformed API response",
        ApiErrorReason.NO_VALID_URLS: "No valid URLs extracted",
    }

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        reason: ApiErrorReason = ApiErrorReason.HTTP_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code, details)
        self.reason = reason

    @property
    def summary(self) -> str:  # type: ignore[override]
        return self._summaries.get(self.reason, "API request failed")

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["reason"] = self.reason.value
        return data


class UnknownError(GrabPicError):
    error_type = GrabPicErrorType.UNKNOWN_ERROR
    default_status_code = 500
    summary = "Internal error"


async def grabpic_exception_handler(request: Request, exc: GrabPicError):
    """Render search failures with their own status code"""
    if exc.status_code >= 500:
        logger.error(f"Search error: {exc.error_type.value}: {exc.message}")
    else:
        logger.warning(f"Search error: {exc.error_type.value}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.to_dict()})


async def general_exception_handler(request: Request, exc: Exception):
    """Last-resort handler; reports the failure as UNKNOWN_ERROR without leaking internals"""
    logger.error(
        "Unhandled %s on %s %s",
        type(exc).__name__,
        request.method,
        request.url.path,
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    error = UnknownError("An unexpected error occurred")
    return JSONResponse(status_code=error.status_code, content={"detail": error.to_dict()})
