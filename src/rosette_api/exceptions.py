"""Client-side exceptions for the Rosette API bindings."""

from __future__ import annotations

from typing import Mapping


class RosetteError(Exception):
    """Base exception for all Rosette API client failures."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        error_code: str | None = None,
        body: object = None,
        headers: Mapping[str, str] | None = None,
        request_id: str | None = None,
        retry_after: float | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_code = error_code
        self.body = body
        self.headers = dict(headers) if headers is not None else {}
        self.request_id = request_id
        self.retry_after = retry_after
        self.cause = cause

    def __str__(self) -> str:  # pragma: no cover - simple formatting
        if self.status_code is None:
            return str(self.args[0])
        parts = [f"{self.status_code}"]
        if self.error_code:
            parts.append(self.error_code)
        return " ".join(parts) + f": {self.args[0]}"


class RosetteConfigurationError(RosetteError):
    """Raised for invalid request settings detected before any network I/O."""

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: object = None,
        bound: object = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.field = field
        self.value = value
        self.bound = bound


class RosetteValidationError(RosetteConfigurationError):
    """Raised when a field value is out of bounds or of the wrong type."""


class RosetteDecodeError(RosetteError):
    """Raised when a wire payload holds a malformed or unrecognized value."""

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: object = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.field = field
        self.value = value


class RosetteHTTPError(RosetteError):
    """Raised for HTTP non-success responses."""


class RosetteAuthError(RosetteHTTPError):
    """Raised for authentication and authorization failures."""


class RosetteRateLimitError(RosetteHTTPError):
    """Raised for HTTP 429 responses."""


class RosetteNetworkError(RosetteError):
    """Raised for transport-level failures like DNS and TCP errors."""


class RosetteTimeoutError(RosetteError):
    """Raised when a request exceeds configured timeout."""
