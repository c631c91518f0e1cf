"""
Error taxonomy for notion-fetch-client.

Every failure raised by this package derives from ``NotionError``:

- ``NotionValidationError``: a payload was rejected locally, before any
  network call.
- ``NotionAPIError``: the server answered with a non-2xx status.
- ``NotionRequestTimeoutError``: the per-attempt deadline elapsed.
- ``NotionNetworkError``: the transport could not complete the call.
- ``NotionDecodeError``: a successful response did not match the expected
  shape.
- ``NotionConfigError``: the client could not be configured.
"""
from typing import Any, Mapping, Optional

from .types import NotionErrorCode, NotionErrorResponse


class NotionError(Exception):
    """Base exception for all notion-fetch-client errors."""
    pass


class NotionConfigError(NotionError):
    """Raised when client configuration cannot be resolved."""
    pass


class NotionValidationError(NotionError, ValueError):
    """Raised when a value exceeds a Notion API size limit."""
    pass


class NotionAPIError(NotionError):
    """Error response returned by the Notion API."""

    def __init__(self, response: NotionErrorResponse, retry_after_ms: Optional[int] = None):
        super().__init__(response["message"])
        self.status: int = response["status"]
        self.code: NotionErrorCode = response["code"]
        self.message: str = response["message"]
        self.body: NotionErrorResponse = response
        self.retry_after_ms = retry_after_ms

    def __repr__(self) -> str:
        return (
            f"NotionAPIError(status={self.status}, code={self.code!r}, "
            f"message={self.message!r}, retry_after_ms={self.retry_after_ms})"
        )

    def is_rate_limited(self) -> bool:
        return self.code == "rate_limited"

    def is_unauthorized(self) -> bool:
        return self.code == "unauthorized"

    def is_not_found(self) -> bool:
        return self.code == "object_not_found"

    def is_validation_error(self) -> bool:
        return self.code == "validation_error"

    def is_server_error(self) -> bool:
        """Check if the status is in the 5xx range."""
        return 500 <= self.status < 600

    def is_retryable(self) -> bool:
        """Rate limited or server error.

        The executor itself only retries rate limited responses; this is the
        signal for callers layering their own policy on top.
        """
        return self.is_rate_limited() or self.is_server_error()


class NotionRequestTimeoutError(NotionError):
    """Raised when a single attempt exceeds its deadline."""

    def __init__(self, message: str = "Request timed out", timeout_ms: Optional[int] = None):
        super().__init__(message)
        self.timeout_ms = timeout_ms


class NotionNetworkError(NotionError):
    """Connectivity failure (DNS, connection reset, etc.)."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class NotionDecodeError(NotionError):
    """Raised when a response payload does not match the expected model."""

    def __init__(self, message: str, payload: Any = None, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.payload = payload
        self.cause = cause


def error_response_from_body(
    body: Any, status: int, status_text: str
) -> NotionErrorResponse:
    """
    Build an error response from a parsed error body.
    Falls back to a generic internal_server_error when the body is not an
    error object.
    """
    if isinstance(body, Mapping) and isinstance(body.get("message"), str) and body.get("code"):
        return {
            "object": "error",
            "status": body["status"] if isinstance(body.get("status"), int) else status,
            "code": body["code"],
            "message": body["message"],
        }
    return generic_error_response(status, status_text)


def generic_error_response(status: int, status_text: str) -> NotionErrorResponse:
    return {
        "object": "error",
        "status": status,
        "code": "internal_server_error",
        "message": status_text or "Unknown error occurred",
    }
