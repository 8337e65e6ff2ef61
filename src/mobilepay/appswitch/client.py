"""AppSwitch – AppSwitchClient (signed reservation/capture API)."""
from __future__ import annotations

from typing import Any

from mobilepay.adapters.http import HttpxHttpClient, RequestCompletionCallback, appswitch_error_from_response
from mobilepay.appswitch.auth import SignatureAuthenticator
from mobilepay.appswitch.config import AppSwitchConfig
from mobilepay.appswitch.models import (
    CanceledReservation,
    CaptureParams,
    CapturedReservation,
    GetReservationsParams,
    PaymentStatus,
    PaymentTransaction,
    RefundedReservation,
    RefundParams,
    Reservation,
    format_url_timestamp,
)
from mobilepay.kernel.errors import ArgError
from mobilepay.observability.logging import get_logger
from mobilepay.security.signing import RequestSigner

_log = get_logger(__name__)


class AppSwitchClient:
    """Client for the legacy AppSwitch API.

    Every request carries the subscription key and an ``AuthenticationSignature``
    produced by :class:`~mobilepay.security.signing.RequestSigner` from the
    configured key pair. A key pair that does not match fails before anything
    is sent.
    """

    def __init__(
        self,
        config: AppSwitchConfig,
        *,
        signer: RequestSigner | None = None,
        on_request_completed: RequestCompletionCallback | None = None,
        **httpx_kwargs: Any,
    ) -> None:
        self.config = config
        self._signer = signer or RequestSigner(config.key_pair)
        self._http = HttpxHttpClient(
            config.url,
            headers=config.headers(),
            timeout=config.timeout,
            authenticator=SignatureAuthenticator(self._signer),
            error_mapper=appswitch_error_from_response,
            test_mode=config.test_mode,
            on_request_completed=on_request_completed,
            **httpx_kwargs,
        )

    @property
    def merchant_id(self) -> str:
        return self.config.merchant_id

    async def __aenter__(self) -> "AppSwitchClient":
        await self._http.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._http.__aexit__(*args)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def get_payment_status(self, order_id: str) -> PaymentStatus:
        data = await self._http.request_json("GET", self._order_path(order_id))
        return PaymentStatus.from_payload(data or {})

    async def get_transactions(self, order_id: str) -> list[PaymentTransaction]:
        data = await self._http.request_json("GET", f"{self._order_path(order_id)}/transactions")
        return [PaymentTransaction.from_payload(t) for t in data or ()]

    async def get_reservations(self, params: GetReservationsParams) -> list[Reservation]:
        """Reservations made by the merchant between ``date_from`` and ``date_to``."""
        path = (
            f"/reservations/merchants/{self.merchant_id}/"
            f"{format_url_timestamp(params.date_from)}/{format_url_timestamp(params.date_to)}"
        )
        data = await self._http.request_json("GET", path, params=params.to_query())
        return [Reservation.from_payload(r) for r in data or ()]

    async def cancel_reservation(self, order_id: str) -> CanceledReservation:
        data = await self._http.request_json("DELETE", self._reservation_path(order_id))
        return CanceledReservation.from_payload(data or {})

    async def refund(self, order_id: str, params: RefundParams) -> RefundedReservation:
        """Refund all or part of a captured amount (possible up to a year after capture)."""
        data = await self._http.request_json(
            "PUT", self._order_path(order_id), json=params.to_payload()
        )
        return RefundedReservation.from_payload(data or {})

    async def capture(self, order_id: str, params: CaptureParams) -> CapturedReservation:
        """Capture a reservation; the amount rules depend on its capture type."""
        data = await self._http.request_json(
            "PUT", self._reservation_path(order_id), json=params.to_payload()
        )
        return CapturedReservation.from_payload(data or {})

    def _order_path(self, order_id: str) -> str:
        self._require_order_id(order_id)
        return f"/merchants/{self.merchant_id}/orders/{order_id}"

    def _reservation_path(self, order_id: str) -> str:
        self._require_order_id(order_id)
        return f"/reservations/merchants/{self.merchant_id}/orders/{order_id}"

    @staticmethod
    def _require_order_id(order_id: str) -> None:
        if not order_id:
            _log.error("order_id_missing")
            raise ArgError("orderId", "cannot be empty")


__all__ = ["AppSwitchClient"]
