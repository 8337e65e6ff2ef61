"""Payments API – payments: create, look up, capture, cancel."""
from __future__ import annotations

import dataclasses
from typing import Any

from mobilepay.adapters.http import HttpxHttpClient
from mobilepay.api.options import ListOptions
from mobilepay.api.refunds import RefundService
from mobilepay.kernel.errors import ArgError
from mobilepay.observability.logging import get_logger

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class PaymentParams:
    """Body of a payment creation request.

    ``idempotency_key`` makes retried creations safe: MobilePay returns the
    original payment instead of creating a second one.
    """
    amount: int
    idempotency_key: str
    payment_point_id: str
    redirect_uri: str
    reference: str
    description: str = ""

    def to_payload(self) -> dict[str, Any]:
        return {
            "amount": self.amount,
            "idempotencyKey": self.idempotency_key,
            "paymentPointId": self.payment_point_id,
            "redirectUri": self.redirect_uri,
            "reference": self.reference,
            "description": self.description,
        }


@dataclasses.dataclass(frozen=True)
class Payment:
    payment_id: str = ""
    amount: int = 0
    description: str = ""
    payment_point_id: str = ""
    reference: str = ""
    mobile_pay_app_redirect_uri: str = ""
    state: str = ""
    initiated_on: str = ""
    last_updated_on: str = ""
    merchant_id: str = ""
    iso_currency_code: str = ""
    payment_point_name: str = ""

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> Payment:
        return cls(
            payment_id=payload.get("paymentId", ""),
            amount=payload.get("amount", 0),
            description=payload.get("description", ""),
            payment_point_id=payload.get("paymentPointId", ""),
            reference=payload.get("reference", ""),
            mobile_pay_app_redirect_uri=payload.get("mobilePayAppRedirectUri", ""),
            state=payload.get("state", ""),
            initiated_on=payload.get("initiatedOn", ""),
            last_updated_on=payload.get("lastUpdatedOn", ""),
            merchant_id=payload.get("merchantId", ""),
            iso_currency_code=payload.get("isoCurrencyCode", ""),
            payment_point_name=payload.get("paymentPointName", ""),
        )


@dataclasses.dataclass(frozen=True)
class PaymentsPage:
    payments: tuple[Payment, ...]
    page_size: int
    next_page_number: int

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> PaymentsPage:
        return cls(
            payments=tuple(Payment.from_payload(p) for p in payload.get("payments") or ()),
            page_size=payload.get("pageSize", 0),
            next_page_number=payload.get("nextPageNumber", 0),
        )


@dataclasses.dataclass(frozen=True)
class CreatePaymentResponse:
    payment_id: str
    mobile_pay_app_redirect_uri: str

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> CreatePaymentResponse:
        return cls(
            payment_id=payload.get("paymentId", ""),
            mobile_pay_app_redirect_uri=payload.get("mobilePayAppRedirectUri", ""),
        )


def _require_id(payment_id: str) -> None:
    if not payment_id:
        _log.error("payment_id_missing")
        raise ArgError("paymentId", "cannot be empty")


class PaymentService:
    """``v1/payments``. Refunds hang off ``refunds`` to mirror the REST layout."""

    BASE_PATH = "v1/payments"

    def __init__(self, http: HttpxHttpClient, refunds: RefundService | None = None) -> None:
        self._http = http
        self.refunds = refunds or RefundService(http)

    async def list(self, options: ListOptions | None = None) -> PaymentsPage:
        options = options or ListOptions()
        data = await self._http.request_json("GET", self.BASE_PATH, params=options.to_query())
        return PaymentsPage.from_payload(data or {})

    async def find(self, payment_id: str) -> Payment:
        _require_id(payment_id)
        data = await self._http.request_json("GET", f"{self.BASE_PATH}/{payment_id}")
        return Payment.from_payload(data or {})

    async def create(self, params: PaymentParams | None) -> CreatePaymentResponse:
        if params is None:
            _log.error("payment_params_missing")
            raise ArgError("paymentParams", "cannot be nil")
        data = await self._http.request_json("POST", self.BASE_PATH, json=params.to_payload())
        return CreatePaymentResponse.from_payload(data or {})

    async def cancel(self, payment_id: str) -> None:
        _require_id(payment_id)
        await self._http.request("POST", f"{self.BASE_PATH}/{payment_id}/cancel")

    async def capture(self, payment_id: str, amount: int) -> None:
        _require_id(payment_id)
        await self._http.request(
            "POST", f"{self.BASE_PATH}/{payment_id}/capture", json={"amount": amount}
        )


__all__ = [
    "CreatePaymentResponse",
    "Payment",
    "PaymentParams",
    "PaymentService",
    "PaymentsPage",
]
