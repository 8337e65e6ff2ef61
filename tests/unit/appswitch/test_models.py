"""Unit tests for appswitch.models."""
from __future__ import annotations

from datetime import datetime

import pytest

from mobilepay.appswitch import GetReservationsParams, PaymentStatusType, PaymentTransaction
from mobilepay.appswitch.models import format_url_timestamp, parse_timestamp
from mobilepay.kernel.errors import ResponseDecodingError


class TestTimestamps:
    def test_parse_with_milliseconds(self) -> None:
        assert parse_timestamp("2016-04-08T07:45:36.533") == datetime(2016, 4, 8, 7, 45, 36, 533000)

    @pytest.mark.parametrize("value", ["", "2016-04-08T07:45:36", "yesterday"])
    def test_parse_rejects_other_shapes(self, value: str) -> None:
        with pytest.raises(ResponseDecodingError):
            parse_timestamp(value)

    def test_url_format(self) -> None:
        assert format_url_timestamp(datetime(2020, 10, 3, 20, 53, 59)) == "2020-10-03T20_53"

    def test_transaction_with_bad_timestamp(self) -> None:
        with pytest.raises(ResponseDecodingError):
            PaymentTransaction.from_payload({"TimeStamp": "08/04/2016"})


class TestParams:
    def test_customer_filter_is_optional(self) -> None:
        params = GetReservationsParams(datetime(2020, 1, 1), datetime(2020, 1, 2))
        assert params.to_query() == {}
        assert GetReservationsParams(
            datetime(2020, 1, 1), datetime(2020, 1, 2), customer_id="c"
        ).to_query() == {"customerId": "c"}

    def test_status_values(self) -> None:
        assert PaymentStatusType("TotalRefund") is PaymentStatusType.TOTAL_REFUND
