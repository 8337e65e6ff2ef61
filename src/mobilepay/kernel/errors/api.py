"""API errors – non-2xx responses returned by the MobilePay backends."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mobilepay.kernel.errors.base import MobilePayError


class ApiError(MobilePayError):
    """A MobilePay backend answered with an error status."""

    default_code = "api_error"

    def __init__(self, message: str, *, status_code: int | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.status_code = status_code


@dataclass(frozen=True)
class ConflictDetail:
    """Structured error body returned by the Payments API (409 and friends)."""

    code: str = ""
    message: str = ""
    correlation_id: str = ""
    origin: str = ""

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> ConflictDetail:
        return cls(
            code=payload.get("code") or "",
            message=payload.get("message") or "",
            correlation_id=payload.get("correlationId") or "",
            origin=payload.get("origin") or "",
        )

    def is_empty(self) -> bool:
        return not (self.code or self.message or self.correlation_id or self.origin)


class ErrorResponse(ApiError):
    """Error reported by the Payments API.

    ``conflict`` is populated when the body decodes as a conflict object;
    otherwise the raw body is kept in ``message``.
    """

    default_code = "error_response"

    def __init__(
        self,
        status_code: int,
        message: str = "",
        *,
        conflict: ConflictDetail | None = None,
        method: str = "",
        url: str = "",
        **kwargs: Any,
    ) -> None:
        text = conflict.message if conflict is not None and not message else message
        prefix = f"{method} {url}".strip()
        super().__init__(
            f"{prefix + ': ' if prefix else ''}{status_code} {text}".strip(),
            status_code=status_code,
            **kwargs,
        )
        self.raw_message = message
        self.conflict = conflict
        self.method = method
        self.url = url


class AuthError(ApiError):
    """AppSwitch rejected the credentials (e.g. missing subscription key)."""

    default_code = "auth_error"


class RateLimitError(ApiError):
    """AppSwitch rate limit exceeded."""

    default_code = "rate_limit_exceeded"
    retryable = True

    def __init__(self, retry_after_seconds: float, **kwargs: Any) -> None:
        kwargs.setdefault("status_code", 429)
        super().__init__("MobilePay rate limit exceeded", **kwargs)
        self.retry_after_seconds = retry_after_seconds


class BadRequestError(ApiError):
    """AppSwitch 4xx carrying a ``Reason``."""

    default_code = "bad_request"

    def __init__(self, reason: str, **kwargs: Any) -> None:
        super().__init__(reason, **kwargs)
        self.reason = reason


class ServerError(ApiError):
    """AppSwitch 5xx carrying a correlation id and error type."""

    default_code = "server_error"
    retryable = True

    def __init__(
        self,
        message: str,
        *,
        error_type: str = "",
        correlation_id: str = "",
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"mobilepay server error detected. Message: {message} "
            f"Type: {error_type} CorrelationId {correlation_id}",
            **kwargs,
        )
        self.server_message = message
        self.error_type = error_type
        self.correlation_id = correlation_id


class ResponseDecodingError(ApiError):
    """The error body could not be decoded."""

    default_code = "response_decoding_error"

    def __init__(self, message: str, *, body: bytes = b"", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.body = body


class ResponseError(ApiError):
    """Error body with a shape we do not recognise."""

    default_code = "response_error"

    def __init__(self, status_code: int, body: str, **kwargs: Any) -> None:
        super().__init__(
            f"Unknown error. Status {status_code} Body: {body}",
            status_code=status_code,
            **kwargs,
        )
        self.body = body


__all__ = [
    "ApiError",
    "AuthError",
    "BadRequestError",
    "ConflictDetail",
    "ErrorResponse",
    "RateLimitError",
    "ResponseDecodingError",
    "ResponseError",
    "ServerError",
]
