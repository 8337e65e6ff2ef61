"""Infrastructure errors – transport failures talking to MobilePay."""

from __future__ import annotations

from typing import Any

from mobilepay.kernel.errors.base import MobilePayError


class TransportError(MobilePayError):
    """The request could not be delivered or the response not received."""

    default_code = "transport_error"
    retryable = True

    def __init__(self, url: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Request to '{url}' failed", **kwargs)
        self.url = url


class TransportTimeoutError(TransportError):
    """The request exceeded the configured timeout."""

    default_code = "transport_timeout"


__all__ = ["TransportError", "TransportTimeoutError"]
