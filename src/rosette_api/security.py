"""Header redaction and base URL checks."""

from __future__ import annotations

from typing import Mapping
from urllib.parse import urlparse

from .exceptions import RosetteConfigurationError


SENSITIVE_HEADERS = {
    "authorization",
    "user_key",
    "x-rosetteapi-key",
}

LOCAL_HOSTS = {"localhost", "127.0.0.1", "::1"}


def sanitize_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Return headers with the API key redacted for logging."""
    return {
        key: "[REDACTED]" if key.lower() in SENSITIVE_HEADERS else value
        for key, value in headers.items()
    }


def validate_base_url(url: str, *, allow_http: bool = False) -> None:
    """Refuse base URLs that would leak the API key.

    Plain HTTP is accepted for local test servers, or anywhere when
    ``allow_http`` is set.
    """
    if "\x00" in url:
        raise RosetteConfigurationError("Invalid base_url", field="base_url", value=url)
    parsed = urlparse(url)
    if not parsed.scheme or not parsed.netloc:
        raise RosetteConfigurationError(
            "base_url must include scheme and host", field="base_url", value=url
        )
    if parsed.scheme not in {"http", "https"}:
        raise RosetteConfigurationError(
            f"Unsupported base_url scheme: {parsed.scheme}", field="base_url", value=url
        )
    if parsed.scheme == "http" and not allow_http and (parsed.hostname or "").lower() not in LOCAL_HOSTS:
        raise RosetteConfigurationError(
            "Non-HTTPS base_url is not allowed without allow_http=True",
            field="base_url",
            value=url,
        )


def parse_retry_after(raw: str | None) -> float | None:
    """Parse a delta-seconds Retry-After header. Anything else is ignored."""
    if raw is None or not raw.strip():
        return None
    try:
        return max(0.0, float(raw.strip()))
    except ValueError:
        return None
