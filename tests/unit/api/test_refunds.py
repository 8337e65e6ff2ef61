"""Unit tests for api.refunds – RefundService."""
from __future__ import annotations

import asyncio
import json

import httpx
import pytest
import respx

from mobilepay.api import MobilePayClient, MobilePayConfig, RefundParams, RefundsListOptions
from mobilepay.kernel.errors import ArgError

BASE = "https://api.mobilepay.dk"
PAYMENT_ID = "223aa5c6-ad2c-4a3c-b1e2-f3a3c5d1a1b8"
REFUND_PAYLOAD = {
    "refundId": "r-1",
    "paymentId": PAYMENT_ID,
    "amount": 500,
    "remainingAmount": 550,
    "description": "Broken cup",
    "reference": "ref-r-1",
    "createdOn": "2022-02-21T10:00:00Z",
}


def _client() -> MobilePayClient:
    return MobilePayClient(MobilePayConfig(client_id="client-id", api_key="api-key"))


class TestRefundsListOptions:
    def test_payment_id_is_always_sent(self) -> None:
        assert RefundsListOptions().to_query() == {"pageSize": 10, "pageNumber": 1, "paymentId": ""}

    def test_optional_filters_only_when_set(self) -> None:
        query = RefundsListOptions(
            page_size=20,
            payment_id=PAYMENT_ID,
            created_after="2022-01-01T00:00",
        ).to_query()
        assert query == {
            "pageSize": 20,
            "pageNumber": 1,
            "paymentId": PAYMENT_ID,
            "createdAfter": "2022-01-01T00:00",
        }


class TestRefundService:
    def test_reached_through_payments(self) -> None:
        mp = _client()
        assert mp.refunds is mp.payments.refunds
        asyncio.run(mp.aclose())

    @respx.mock
    def test_list(self) -> None:
        route = respx.get(url__startswith=f"{BASE}/v1/refunds").mock(
            return_value=httpx.Response(
                200, json={"pageSize": 10, "nextPageNumber": 0, "refunds": [REFUND_PAYLOAD]}
            )
        )

        async def run() -> None:
            async with _client() as mp:
                page = await mp.payments.refunds.list(RefundsListOptions(payment_id=PAYMENT_ID))
            assert len(page.refunds) == 1
            refund = page.refunds[0]
            assert refund.refund_id == "r-1"
            assert refund.remaining_amount == 550
            params = route.calls.last.request.url.params
            assert params["paymentId"] == PAYMENT_ID
            assert "paymentPointId" not in params

        asyncio.run(run())

    @respx.mock
    def test_create(self) -> None:
        route = respx.post(f"{BASE}/v1/refunds").mock(
            return_value=httpx.Response(201, json=REFUND_PAYLOAD)
        )
        params = RefundParams(
            idempotency_key="idem-r-1",
            payment_id=PAYMENT_ID,
            amount=500,
            reference="ref-r-1",
            description="Broken cup",
        )

        async def run() -> None:
            async with _client() as mp:
                refund = await mp.refunds.create(params)
            assert refund.amount == 500
            assert json.loads(route.calls.last.request.content) == {
                "idempotencyKey": "idem-r-1",
                "paymentId": PAYMENT_ID,
                "amount": 500,
                "reference": "ref-r-1",
                "description": "Broken cup",
            }

        asyncio.run(run())

    def test_create_requires_params(self) -> None:
        async def run() -> None:
            async with _client() as mp:
                with pytest.raises(ArgError, match="refundParams is invalid because cannot be nil"):
                    await mp.refunds.create(None)

        asyncio.run(run())
