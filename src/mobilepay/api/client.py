"""Payments API – MobilePayClient."""
from __future__ import annotations

from typing import Any

from mobilepay.adapters.http import HttpxHttpClient, RequestCompletionCallback, payments_error_from_response
from mobilepay.api.config import MobilePayConfig
from mobilepay.api.payments import PaymentService
from mobilepay.api.refunds import RefundService
from mobilepay.api.webhooks import WebhookService


class MobilePayClient:
    """Entry point to the MobilePay App Payment API.

    Usage::

        async with MobilePayClient(MobilePayConfig(client_id, api_key)) as mp:
            created = await mp.payments.create(params)
            await mp.payments.capture(created.payment_id, 1000)
    """

    def __init__(
        self,
        config: MobilePayConfig,
        *,
        on_request_completed: RequestCompletionCallback | None = None,
        **httpx_kwargs: Any,
    ) -> None:
        self.config = config
        self._http = HttpxHttpClient(
            config.base_url,
            headers=config.headers(),
            timeout=config.timeout,
            error_mapper=payments_error_from_response,
            on_request_completed=on_request_completed,
            **httpx_kwargs,
        )
        self.payments = PaymentService(self._http)
        self.webhooks = WebhookService(self._http)

    @property
    def refunds(self) -> RefundService:
        return self.payments.refunds

    async def __aenter__(self) -> "MobilePayClient":
        await self._http.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._http.__aexit__(*args)

    async def aclose(self) -> None:
        await self._http.aclose()


__all__ = ["MobilePayClient"]
