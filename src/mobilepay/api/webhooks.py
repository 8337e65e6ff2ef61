"""Payments API – webhook subscriptions."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from mobilepay.adapters.http import HttpxHttpClient
from mobilepay.kernel.errors import ArgError
from mobilepay.observability.logging import get_logger
from mobilepay.security.webhooks import WebhookVerifier

_log = get_logger(__name__)


class WebhookEvent(str, Enum):
    PAYMENT_RESERVED = "payment.reserved"
    PAYMENT_EXPIRED = "payment.expired"
    PAYMENTPOINT_ACTIVATED = "paymentpoint.activated"


def _event_names(events: Sequence[WebhookEvent | str]) -> list[str]:
    return [e.value if isinstance(e, WebhookEvent) else e for e in events]


@dataclasses.dataclass(frozen=True)
class WebhookCreateParams:
    """``url`` must be HTTPS; MobilePay lower-cases scheme and host."""
    url: str
    events: Sequence[WebhookEvent | str]

    def to_payload(self) -> dict[str, Any]:
        return {"events": _event_names(self.events), "url": self.url}


@dataclasses.dataclass(frozen=True)
class WebhookUpdateParams:
    url: str
    events: Sequence[WebhookEvent | str]

    def to_payload(self) -> dict[str, Any]:
        return {"url": self.url, "events": _event_names(self.events)}


@dataclasses.dataclass(frozen=True)
class Webhook:
    webhook_id: str
    url: str
    events: tuple[str, ...] = ()
    signature_key: str = dataclasses.field(default="", repr=False)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> Webhook:
        return cls(
            webhook_id=payload.get("webhookId", ""),
            url=payload.get("url", ""),
            events=tuple(payload.get("events") or ()),
            signature_key=payload.get("signatureKey", ""),
        )

    def verifier(self, headers: Mapping[str, str]) -> WebhookVerifier:
        """Start verifying an inbound delivery for this subscription."""
        return WebhookVerifier(headers, self.url, self.signature_key)


def _require_id(webhook_id: str) -> None:
    if not webhook_id:
        _log.error("webhook_id_missing")
        raise ArgError("webhookId", "cannot be empty")


class WebhookService:
    """``v1/webhooks``."""

    BASE_PATH = "v1/webhooks"

    def __init__(self, http: HttpxHttpClient) -> None:
        self._http = http

    async def list(self) -> tuple[Webhook, ...]:
        data = await self._http.request_json("GET", self.BASE_PATH)
        return tuple(Webhook.from_payload(w) for w in (data or {}).get("webhooks") or ())

    async def create(self, params: WebhookCreateParams | None) -> Webhook:
        if params is None:
            _log.error("webhook_params_missing")
            raise ArgError("createRequest", "cannot be nil")
        data = await self._http.request_json("POST", self.BASE_PATH, json=params.to_payload())
        return Webhook.from_payload(data or {})

    async def get(self, webhook_id: str) -> Webhook:
        _require_id(webhook_id)
        data = await self._http.request_json("GET", f"{self.BASE_PATH}/{webhook_id}")
        return Webhook.from_payload(data or {})

    async def update(self, webhook_id: str, params: WebhookUpdateParams | None) -> Webhook:
        _require_id(webhook_id)
        if params is None:
            _log.error("webhook_params_missing")
            raise ArgError("updateRequest", "cannot be nil")
        data = await self._http.request_json(
            "PUT", f"{self.BASE_PATH}/{webhook_id}", json=params.to_payload()
        )
        return Webhook.from_payload(data or {})

    async def delete(self, webhook_id: str) -> None:
        _require_id(webhook_id)
        await self._http.request("DELETE", f"{self.BASE_PATH}/{webhook_id}")


__all__ = [
    "Webhook",
    "WebhookCreateParams",
    "WebhookEvent",
    "WebhookService",
    "WebhookUpdateParams",
]
