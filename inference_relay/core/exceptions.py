"""
Exception hierarchy for the inference relay.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class RelayException(Exception):
    """Base exception for all relay application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(RelayException):
    """Raised when input validation fails (missing, oversized or malformed input)."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class MalformedReferenceError(RelayException):
    """Raised when a retrieved reference does not point at an s3://bucket/key object."""

    def __init__(
        self,
        message: str,
        uri: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if uri is not None:
            details["uri"] = repr(uri)
        super().__init__(message, details)


class UpstreamError(RelayException):
    """Base exception for failures caused by the Bedrock upstream."""

    pass


class UpstreamServiceError(UpstreamError):
    """Raised when the upstream service rejects or fails a request."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize upstream service error.

        Args:
            message: Error message reported by the upstream
            code: Upstream error code (e.g. ThrottlingException)
            status_code: HTTP status returned by the upstream, if any
            details: Additional context
        """
        self.code = code
        self.status_code = status_code
        details = details or {}
        if code:
            details["code"] = code
        if status_code:
            details["status_code"] = status_code
        super().__init__(message, details)


class UpstreamTimeoutError(UpstreamServiceError):
    """Raised when an upstream call exceeds the request timeout."""

    def __init__(self, operation: str, timeout: float) -> None:
        super().__init__(
            f"Upstream call '{operation}' timed out after {timeout}s",
            code="RequestTimeout",
            status_code=504,
        )


class UpstreamProtocolError(UpstreamError):
    """Raised when the upstream response does not have the expected shape."""

    pass
