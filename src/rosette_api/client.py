"""Synchronous and asynchronous clients for the Rosette REST API."""

from __future__ import annotations

import asyncio
import logging
import os
import random
import time
from types import MappingProxyType
from typing import Any, Mapping, Union

import httpx

from .base import WireModel
from .enums import MorphologyFeature
from .exceptions import (
    RosetteAuthError,
    RosetteConfigurationError,
    RosetteDecodeError,
    RosetteHTTPError,
    RosetteNetworkError,
    RosetteRateLimitError,
    RosetteTimeoutError,
)
from .models import (
    CategoriesRequest,
    EntitiesRequest,
    ErrorResponse,
    LanguageRequest,
    MorphologyRequest,
    NameTranslationRequest,
    RelationshipsRequest,
    SentencesRequest,
    SentimentRequest,
    TokensRequest,
)
from .request_options import RequestOptions
from .security import parse_retry_after, sanitize_headers, validate_base_url

logger = logging.getLogger(__name__)

Payload = Union[WireModel, Mapping[str, Any]]


def _coerce_json_payload(payload: Any) -> Any:
    if payload is None:
        return None
    if isinstance(payload, WireModel):
        return payload.to_json()
    if isinstance(payload, Mapping):
        return dict(payload)
    raise RosetteConfigurationError(
        f"request body must be a request model or a mapping, got {type(payload).__name__}",
        field="body",
        value=payload,
    )


def _resolve_request_options(options: RequestOptions | None) -> RequestOptions:
    return options or RequestOptions()


def _normalize_headers(headers: Mapping[str, str] | None) -> dict[str, str]:
    if not headers:
        return {}
    return {str(key): str(value) for key, value in headers.items()}


def _morphology_path(feature: MorphologyFeature | str) -> str:
    try:
        feature = MorphologyFeature(feature)
    except ValueError as exc:
        raise RosetteConfigurationError(
            f"Unknown morphology feature: {feature!r}",
            field="feature",
            value=feature,
            cause=exc,
        ) from exc
    return f"/morphology/{feature.value}"


def _entities_path(linked: bool) -> str:
    return "/entities/linked" if linked else "/entities"


class _BaseRosetteClient:
    default_base_url = "https://api.rosette.com/rest/v1"
    default_timeout = 30.0
    default_max_retries = 3
    default_retriable_methods = frozenset({"GET", "HEAD", "OPTIONS"})
    retryable_status_codes = frozenset({408, 429, 500, 502, 503, 504})
    retry_base_delay = 0.4
    retry_max_delay = 10.0
    jitter_range = 0.35
    user_agent = "rosette-api-python/0.1.0"

    def __init__(
        self,
        *,
        base_url: str | None = None,
        user_key: str | None = None,
        timeout: float = default_timeout,
        max_retries: int = default_max_retries,
        headers: Mapping[str, str] | None = None,
        follow_redirects: bool = True,
        allow_http: bool = False,
        user_key_env_var: str = "ROSETTE_API_KEY",
        base_url_env_var: str = "ROSETTE_API_URL",
    ) -> None:
        self.base_url = (base_url or os.getenv(base_url_env_var) or self.default_base_url).rstrip("/")
        validate_base_url(self.base_url, allow_http=allow_http)
        self.user_key = user_key or os.getenv(user_key_env_var)
        if not self.user_key:
            raise RosetteConfigurationError(
                f"An API key is required: pass user_key or set {user_key_env_var}",
                field="user_key",
            )
        self.timeout = timeout
        self.max_retries = max_retries
        self._default_headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": self.user_agent,
            "user_key": self.user_key,
        }
        if headers:
            self._default_headers.update(_normalize_headers(headers))

        self._client_kwargs = {
            "base_url": self.base_url,
            "timeout": timeout,
            "follow_redirects": follow_redirects,
            "trust_env": False,
        }

    def _request_options(self, options: RequestOptions | None) -> RequestOptions:
        return _resolve_request_options(options)

    @staticmethod
    def _path(path: str) -> str:
        if "://" in path:
            raise ValueError("Full URLs are not allowed in path for request method")
        if not path.startswith("/"):
            raise ValueError("Path must be absolute and start with '/'")
        if "\x00" in path:
            raise ValueError("Invalid path characters")
        return path

    def _headers(self, request_options: RequestOptions) -> dict[str, str]:
        merged = dict(self._default_headers)
        if request_options.headers:
            merged.update(_normalize_headers(request_options.headers))
        return merged

    def _build_request_timeout(self, request_options: RequestOptions) -> float:
        timeout = request_options.timeout if request_options.timeout is not None else self.timeout
        if timeout <= 0:
            raise RosetteConfigurationError("timeout must be greater than 0", field="timeout", value=timeout)
        return float(timeout)

    def _build_max_retries(self, request_options: RequestOptions) -> int:
        max_retries = request_options.max_retries if request_options.max_retries is not None else self.max_retries
        if max_retries < 0:
            raise RosetteConfigurationError(
                "max_retries must be non-negative", field="max_retries", value=max_retries
            )
        return int(max_retries)

    def _should_retry(self, method: str, status_code: int, attempt: int, max_retries: int) -> bool:
        if attempt > max_retries:
            return False
        if method not in self.default_retriable_methods:
            return False
        return status_code in self.retryable_status_codes

    @staticmethod
    def _retry_delay(attempt: int, status_code: int | None = None, retry_after: float | None = None) -> float:
        if status_code == 429 and retry_after is not None:
            return min(max(0.0, retry_after), 60.0)
        base = _BaseRosetteClient.retry_base_delay * (2 ** max(0, attempt - 1))
        jitter = random.uniform(0, _BaseRosetteClient.jitter_range)
        return min(_BaseRosetteClient.retry_max_delay, base + jitter)

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        if response.status_code < 400:
            return
        parsed_body: Any = None
        content_type = response.headers.get("content-type", "")
        raw_body = response.text
        if "application/json" in content_type.lower():
            try:
                parsed_body = response.json()
            except ValueError:
                parsed_body = None

        message = raw_body or "request failed"
        error_code = None
        if isinstance(parsed_body, Mapping):
            try:
                error = ErrorResponse.from_json(parsed_body)
            except RosetteDecodeError:
                error = ErrorResponse()
            message = error.message or message
            error_code = error.code

        kwargs = {
            "status_code": response.status_code,
            "error_code": error_code,
            "body": parsed_body if parsed_body is not None else raw_body,
            "headers": MappingProxyType(dict(response.headers)),
            "request_id": response.headers.get("x-rosetteapi-request-id"),
            "retry_after": parse_retry_after(response.headers.get("Retry-After")),
        }
        logger.debug("Request failed with %s: %s", response.status_code, message)
        if response.status_code in {401, 403}:
            raise RosetteAuthError(message, **kwargs)
        if response.status_code == 429:
            raise RosetteRateLimitError(message, **kwargs)
        raise RosetteHTTPError(message, **kwargs)

    def _parse_response(self, response: httpx.Response) -> Any:
        if response.status_code == 204 or not response.content:
            return None
        content_type = response.headers.get("content-type", "")
        if "application/json" not in content_type.lower():
            return response.text
        return response.json()

    def _log_attempt(self, method: str, path: str, headers: Mapping[str, str], attempt: int) -> None:
        logger.debug("%s %s attempt=%d headers=%s", method, path, attempt, sanitize_headers(headers))

    def _log_retry(self, method: str, path: str, wait: float, reason: object) -> None:
        logger.warning("Retrying %s %s in %.2fs: %s", method, path, wait, reason)


class RosetteClient(_BaseRosetteClient):
    """Synchronous client."""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        user_key: str | None = None,
        timeout: float = _BaseRosetteClient.default_timeout,
        max_retries: int = _BaseRosetteClient.default_max_retries,
        headers: Mapping[str, str] | None = None,
        follow_redirects: bool = True,
        httpx_client: httpx.Client | None = None,
        allow_http: bool = False,
    ) -> None:
        super().__init__(
            base_url=base_url,
            user_key=user_key,
            timeout=timeout,
            max_retries=max_retries,
            headers=headers,
            follow_redirects=follow_redirects,
            allow_http=allow_http,
        )
        self._httpx = httpx_client or httpx.Client(**self._client_kwargs)

    def __enter__(self) -> "RosetteClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._httpx.close()

    def request(
        self,
        method: str,
        path: str,
        *,
        json_data: Any | None = None,
        options: RequestOptions | None = None,
    ) -> Any:
        request_options = self._request_options(options)
        path = self._path(path)
        method = method.upper()
        headers = self._headers(request_options)
        final_json = _coerce_json_payload(json_data)
        retries = self._build_max_retries(request_options)
        timeout = self._build_request_timeout(request_options)

        attempt = 0
        while True:
            attempt += 1
            self._log_attempt(method, path, headers, attempt)
            try:
                response = self._httpx.request(
                    method=method,
                    url=path,
                    headers=headers,
                    json=final_json,
                    timeout=timeout,
                )
            except httpx.TimeoutException as exc:
                if attempt > retries:
                    raise RosetteTimeoutError("Request timed out", cause=exc) from exc
                wait = self._retry_delay(attempt)
                self._log_retry(method, path, wait, exc)
                time.sleep(wait)
                continue
            except httpx.NetworkError as exc:
                if attempt > retries:
                    raise RosetteNetworkError("Network error", cause=exc) from exc
                wait = self._retry_delay(attempt)
                self._log_retry(method, path, wait, exc)
                time.sleep(wait)
                continue

            if response.is_success:
                break
            if self._should_retry(method, response.status_code, attempt, retries):
                wait = self._retry_delay(
                    attempt,
                    status_code=response.status_code,
                    retry_after=parse_retry_after(response.headers.get("Retry-After")),
                )
                self._log_retry(method, path, wait, response.status_code)
                time.sleep(wait)
                continue
            break

        self._raise_for_status(response)
        return self._parse_response(response)

    def ping(self, *, options: RequestOptions | None = None) -> dict[str, Any]:
        return self.request("GET", "/ping", options=options)

    def info(self, *, options: RequestOptions | None = None) -> dict[str, Any]:
        return self.request("GET", "/info", options=options)

    def language(self, request: LanguageRequest | Payload, *, options: RequestOptions | None = None) -> dict[str, Any]:
        return self.request("POST", "/language", json_data=request, options=options)

    def morphology(
        self,
        request: MorphologyRequest | Payload,
        feature: MorphologyFeature | str = MorphologyFeature.COMPLETE,
        *,
        options: RequestOptions | None = None,
    ) -> dict[str, Any]:
        return self.request("POST", _morphology_path(feature), json_data=request, options=options)

    def entities(
        self,
        request: EntitiesRequest | Payload,
        *,
        linked: bool = False,
        options: RequestOptions | None = None,
    ) -> dict[str, Any]:
        return self.request("POST", _entities_path(linked), json_data=request, options=options)

    def categories(self, request: CategoriesRequest | Payload, *, options: RequestOptions | None = None) -> dict[str, Any]:
        return self.request("POST", "/categories", json_data=request, options=options)

    def sentiment(self, request: SentimentRequest | Payload, *, options: RequestOptions | None = None) -> dict[str, Any]:
        return self.request("POST", "/sentiment", json_data=request, options=options)

    def relationships(
        self,
        request: RelationshipsRequest | Payload,
        *,
        options: RequestOptions | None = None,
    ) -> dict[str, Any]:
        return self.request("POST", "/relationships", json_data=request, options=options)

    def tokens(self, request: TokensRequest | Payload, *, options: RequestOptions | None = None) -> dict[str, Any]:
        return self.request("POST", "/tokens", json_data=request, options=options)

    def sentences(self, request: SentencesRequest | Payload, *, options: RequestOptions | None = None) -> dict[str, Any]:
        return self.request("POST", "/sentences", json_data=request, options=options)

    def translated_name(
        self,
        request: NameTranslationRequest | Payload,
        *,
        options: RequestOptions | None = None,
    ) -> dict[str, Any]:
        return self.request("POST", "/translated-name", json_data=request, options=options)


class AsyncRosetteClient(_BaseRosetteClient):
    """Asynchronous client."""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        user_key: str | None = None,
        timeout: float = _BaseRosetteClient.default_timeout,
        max_retries: int = _BaseRosetteClient.default_max_retries,
        headers: Mapping[str, str] | None = None,
        follow_redirects: bool = True,
        httpx_client: httpx.AsyncClient | None = None,
        allow_http: bool = False,
    ) -> None:
        super().__init__(
            base_url=base_url,
            user_key=user_key,
            timeout=timeout,
            max_retries=max_retries,
            headers=headers,
            follow_redirects=follow_redirects,
            allow_http=allow_http,
        )
        self._httpx = httpx_client or httpx.AsyncClient(**self._client_kwargs)

    async def __aenter__(self) -> "AsyncRosetteClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._httpx.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        json_data: Any | None = None,
        options: RequestOptions | None = None,
    ) -> Any:
        request_options = self._request_options(options)
        path = self._path(path)
        method = method.upper()
        headers = self._headers(request_options)
        final_json = _coerce_json_payload(json_data)
        retries = self._build_max_retries(request_options)
        timeout = self._build_request_timeout(request_options)

        attempt = 0
        while True:
            attempt += 1
            self._log_attempt(method, path, headers, attempt)
            try:
                response = await self._httpx.request(
                    method=method,
                    url=path,
                    headers=headers,
                    json=final_json,
                    timeout=timeout,
                )
            except httpx.TimeoutException as exc:
                if attempt > retries:
                    raise RosetteTimeoutError("Request timed out", cause=exc) from exc
                wait = self._retry_delay(attempt)
                self._log_retry(method, path, wait, exc)
                await asyncio.sleep(wait)
                continue
            except httpx.NetworkError as exc:
                if attempt > retries:
                    raise RosetteNetworkError("Network error", cause=exc) from exc
                wait = self._retry_delay(attempt)
                self._log_retry(method, path, wait, exc)
                await asyncio.sleep(wait)
                continue

            if response.is_success:
                break
            if self._should_retry(method, response.status_code, attempt, retries):
                wait = self._retry_delay(
                    attempt,
                    status_code=response.status_code,
                    retry_after=parse_retry_after(response.headers.get("Retry-After")),
                )
                self._log_retry(method, path, wait, response.status_code)
                await asyncio.sleep(wait)
                continue
            break

        self._raise_for_status(response)
        return self._parse_response(response)

    async def ping(self, *, options: RequestOptions | None = None) -> dict[str, Any]:
        return await self.request("GET", "/ping", options=options)

    async def info(self, *, options: RequestOptions | None = None) -> dict[str, Any]:
        return await self.request("GET", "/info", options=options)

    async def language(self, request: LanguageRequest | Payload, *, options: RequestOptions | None = None) -> dict[str, Any]:
        return await self.request("POST", "/language", json_data=request, options=options)

    async def morphology(
        self,
        request: MorphologyRequest | Payload,
        feature: MorphologyFeature | str = MorphologyFeature.COMPLETE,
        *,
        options: RequestOptions | None = None,
    ) -> dict[str, Any]:
        return await self.request("POST", _morphology_path(feature), json_data=request, options=options)

    async def entities(
        self,
        request: EntitiesRequest | Payload,
        *,
        linked: bool = False,
        options: RequestOptions | None = None,
    ) -> dict[str, Any]:
        return await self.request("POST", _entities_path(linked), json_data=request, options=options)

    async def categories(self, request: CategoriesRequest | Payload, *, options: RequestOptions | None = None) -> dict[str, Any]:
        return await self.request("POST", "/categories", json_data=request, options=options)

    async def sentiment(self, request: SentimentRequest | Payload, *, options: RequestOptions | None = None) -> dict[str, Any]:
        return await self.request("POST", "/sentiment", json_data=request, options=options)

    async def relationships(
        self,
        request: RelationshipsRequest | Payload,
        *,
        options: RequestOptions | None = None,
    ) -> dict[str, Any]:
        return await self.request("POST", "/relationships", json_data=request, options=options)

    async def tokens(self, request: TokensRequest | Payload, *, options: RequestOptions | None = None) -> dict[str, Any]:
        return await self.request("POST", "/tokens", json_data=request, options=options)

    async def sentences(self, request: SentencesRequest | Payload, *, options: RequestOptions | None = None) -> dict[str, Any]:
        return await self.request("POST", "/sentences", json_data=request, options=options)

    async def translated_name(
        self,
        request: NameTranslationRequest | Payload,
        *,
        options: RequestOptions | None = None,
    ) -> dict[str, Any]:
        return await self.request("POST", "/translated-name", json_data=request, options=options)
