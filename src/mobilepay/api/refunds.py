"""Payments API – refunds."""
from __future__ import annotations

import dataclasses
from typing import Any

from mobilepay.adapters.http import HttpxHttpClient
from mobilepay.api.options import RefundsListOptions
from mobilepay.kernel.errors import ArgError
from mobilepay.observability.logging import get_logger

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class RefundParams:
    idempotency_key: str
    payment_id: str
    amount: int
    reference: str = ""
    description: str = ""

    def to_payload(self) -> dict[str, Any]:
        return {
            "idempotencyKey": self.idempotency_key,
            "paymentId": self.payment_id,
            "amount": self.amount,
            "reference": self.reference,
            "description": self.description,
        }


@dataclasses.dataclass(frozen=True)
class Refund:
    refund_id: str
    payment_id: str
    amount: int
    remaining_amount: int = 0
    description: str = ""
    reference: str = ""
    created_on: str = ""

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> Refund:
        return cls(
            refund_id=payload.get("refundId", ""),
            payment_id=payload.get("paymentId", ""),
            amount=payload.get("amount", 0),
            remaining_amount=payload.get("remainingAmount", 0),
            description=payload.get("description", ""),
            reference=payload.get("reference", ""),
            created_on=payload.get("createdOn", ""),
        )


@dataclasses.dataclass(frozen=True)
class RefundsPage:
    refunds: tuple[Refund, ...]
    page_size: int
    next_page_number: int

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> RefundsPage:
        return cls(
            refunds=tuple(Refund.from_payload(r) for r in payload.get("refunds") or ()),
            page_size=payload.get("pageSize", 0),
            next_page_number=payload.get("nextPageNumber", 0),
        )


class RefundService:
    """``v1/refunds`` – reached through ``client.payments.refunds``."""

    BASE_PATH = "v1/refunds"

    def __init__(self, http: HttpxHttpClient) -> None:
        self._http = http

    async def list(self, options: RefundsListOptions | None = None) -> RefundsPage:
        options = options or RefundsListOptions()
        data = await self._http.request_json("GET", self.BASE_PATH, params=options.to_query())
        return RefundsPage.from_payload(data or {})

    async def create(self, params: RefundParams | None) -> Refund:
        if params is None:
            _log.error("refund_params_missing")
            raise ArgError("refundParams", "cannot be nil")
        data = await self._http.request_json("POST", self.BASE_PATH, json=params.to_payload())
        return Refund.from_payload(data or {})


__all__ = ["Refund", "RefundParams", "RefundService", "RefundsPage"]
