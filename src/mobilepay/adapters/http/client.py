"""HTTP adapter – HttpxHttpClient."""
from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, Protocol

import httpx

from mobilepay.adapters.http.errors import payments_error_from_response
from mobilepay.kernel.errors import (
    MobilePayError,
    ResponseDecodingError,
    TransportError,
    TransportTimeoutError,
)
from mobilepay.observability.logging import SensitiveFieldsFilter, get_logger

MEDIA_TYPE = "application/json"

_BODYLESS_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})

_log = get_logger(__name__)

ErrorMapper = Callable[[httpx.Response], MobilePayError]
RequestCompletionCallback = Callable[[httpx.Request, httpx.Response], None]


class RequestAuthenticator(Protocol):
    """Computes request-specific headers from the final URL and raw body."""

    def headers_for(self, url: str, body: bytes) -> Mapping[str, str]: ...


def encode_json(payload: Any) -> bytes:
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


class HttpxHttpClient:
    """Thin async httpx wrapper with structured error mapping.

    ``headers`` are frozen at construction. Every request gets a fresh copy,
    extended with whatever ``authenticator`` returns for that request, so a
    single client can be shared by concurrent tasks.
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        headers: Mapping[str, str] | None = None,
        timeout: float = 10.0,
        authenticator: RequestAuthenticator | None = None,
        error_mapper: ErrorMapper = payments_error_from_response,
        test_mode: bool = False,
        on_request_completed: RequestCompletionCallback | None = None,
        **kwargs: Any,
    ) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, **kwargs)
        self._headers: Mapping[str, str] = MappingProxyType(dict(headers or {}))
        self._authenticator = authenticator
        self._error_mapper = error_mapper
        self._test_mode = test_mode
        self._on_request_completed = on_request_completed
        self._redactor = SensitiveFieldsFilter()

    @property
    def headers(self) -> Mapping[str, str]:
        return self._headers

    async def __aenter__(self) -> "HttpxHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("POST", url, **kwargs)

    async def put(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("PUT", url, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("DELETE", url, **kwargs)

    def build_request(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
    ) -> httpx.Request:
        body = encode_json(json) if json is not None else b""
        headers = dict(self._headers)
        headers["Accept"] = MEDIA_TYPE
        if method.upper() not in _BODYLESS_METHODS:
            headers["Content-Type"] = MEDIA_TYPE
        request = self._client.build_request(
            method,
            url,
            params=params or None,
            content=body or None,
            headers=headers,
        )
        if self._authenticator is not None:
            request.headers.update(self._authenticator.headers_for(str(request.url), body))
        return request

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
    ) -> httpx.Response:
        request = self.build_request(method, url, params=params, json=json)
        _log.info("requesting", method=request.method, host=request.url.host, path=request.url.path)
        if self._test_mode:
            self._dump_request(request)
        try:
            response = await self._client.send(request)
        except httpx.TimeoutException as exc:
            raise TransportTimeoutError(
                str(request.url), f"HTTP request timed out: {method} {request.url}", cause=exc
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(str(request.url), str(exc), cause=exc) from exc

        if self._on_request_completed is not None:
            self._on_request_completed(request, response)
        if self._test_mode:
            self._dump_response(response)
        if not response.is_success:
            raise self._error_mapper(response)
        return response

    async def request_json(self, method: str, url: str, **kwargs: Any) -> Any:
        """Send a request and decode its JSON body (``None`` for an empty body)."""
        response = await self.request(method, url, **kwargs)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise ResponseDecodingError(
                str(exc), body=response.content, status_code=response.status_code, cause=exc
            ) from exc

    def _dump_request(self, request: httpx.Request) -> None:
        _log.debug(
            "http_request",
            method=request.method,
            url=str(request.url),
            headers=self._redactor.redact(dict(request.headers)),
            body=request.content.decode("utf-8", errors="replace"),
        )

    def _dump_response(self, response: httpx.Response) -> None:
        _log.debug(
            "http_response",
            status_code=response.status_code,
            headers=self._redactor.redact(dict(response.headers)),
            body=response.text,
        )


HttpClient = HttpxHttpClient

__all__ = [
    "HttpClient",
    "HttpxHttpClient",
    "MEDIA_TYPE",
    "RequestAuthenticator",
    "RequestCompletionCallback",
    "encode_json",
]
