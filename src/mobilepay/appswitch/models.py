"""AppSwitch – request and response types."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from enum import Enum
from typing import Any

from mobilepay.kernel.errors import ResponseDecodingError

# ISO8601 (UTC) with milliseconds, as returned by AppSwitch
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%f"
# Dates embedded in reservation URLs
URL_TIMESTAMP_FORMAT = "%Y-%m-%dT%H_%M"


class PaymentStatusType(str, Enum):
    RESERVED = "Reserved"
    CANCELLED = "Cancelled"
    CAPTURED = "Captured"
    TOTAL_REFUND = "TotalRefund"
    PARTIAL_REFUND = "PartialRefund"
    REJECTED = "Rejected"


class CaptureType(str, Enum):
    FULL = "Full"
    PARTIAL = "Partial"


def parse_timestamp(value: str) -> datetime:
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError as exc:
        raise ResponseDecodingError(f"invalid AppSwitch timestamp {value!r}", cause=exc) from exc


def format_url_timestamp(value: datetime) -> str:
    return value.strftime(URL_TIMESTAMP_FORMAT)


@dataclasses.dataclass(frozen=True)
class PaymentStatus:
    latest_payment_status: str
    transaction_id: str
    original_amount: float

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> PaymentStatus:
        return cls(
            latest_payment_status=payload.get("LatestPaymentStatus", ""),
            transaction_id=payload.get("TransactionId", ""),
            original_amount=payload.get("OriginalAmount", 0.0),
        )


@dataclasses.dataclass(frozen=True)
class PaymentTransaction:
    timestamp: datetime
    payment_status: str
    transaction_id: str
    amount: float

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> PaymentTransaction:
        return cls(
            timestamp=parse_timestamp(payload.get("TimeStamp", "")),
            payment_status=payload.get("PaymentStatus", ""),
            transaction_id=payload.get("TransactionId", ""),
            amount=payload.get("Amount", 0.0),
        )


@dataclasses.dataclass(frozen=True)
class Reservation:
    timestamp: str
    order_id: str
    transaction_id: str
    amount: float
    capture_type: str

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> Reservation:
        return cls(
            timestamp=payload.get("TimeStamp", ""),
            order_id=payload.get("OrderId", ""),
            transaction_id=payload.get("TransactionId", ""),
            amount=payload.get("Amount", 0.0),
            capture_type=payload.get("CaptureType", ""),
        )


@dataclasses.dataclass(frozen=True)
class GetReservationsParams:
    """Time window (embedded in the path) and optional customer filter."""
    date_from: datetime
    date_to: datetime
    customer_id: str = ""

    def to_query(self) -> dict[str, str]:
        return {"customerId": self.customer_id} if self.customer_id else {}


@dataclasses.dataclass(frozen=True)
class CanceledReservation:
    transaction_id: str

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> CanceledReservation:
        return cls(transaction_id=payload.get("TransactionId", ""))


@dataclasses.dataclass(frozen=True)
class RefundParams:
    amount: float
    bulk_ref: str = ""

    def to_payload(self) -> dict[str, Any]:
        return {"Amount": self.amount, "BulkRef": self.bulk_ref}


@dataclasses.dataclass(frozen=True)
class RefundedReservation:
    transaction_id: str
    original_transaction_id: str
    remainder: float

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> RefundedReservation:
        return cls(
            transaction_id=payload.get("TransactionId", ""),
            original_transaction_id=payload.get("OriginalTransactionId", ""),
            remainder=payload.get("Remainder", 0.0),
        )


@dataclasses.dataclass(frozen=True)
class CaptureParams:
    """For a ``Full`` reservation only the reserved amount may be captured;
    a ``Partial`` one accepts 0 < amount <= reserved and releases the rest."""
    amount: float
    bulk_ref: str = ""

    def to_payload(self) -> dict[str, Any]:
        return {"Amount": self.amount, "BulkRef": self.bulk_ref}


@dataclasses.dataclass(frozen=True)
class CapturedReservation:
    transaction_id: str

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> CapturedReservation:
        return cls(transaction_id=payload.get("TransactionId", ""))


__all__ = [
    "CanceledReservation",
    "CaptureParams",
    "CaptureType",
    "CapturedReservation",
    "GetReservationsParams",
    "PaymentStatus",
    "PaymentStatusType",
    "PaymentTransaction",
    "RefundParams",
    "RefundedReservation",
    "Reservation",
    "TIMESTAMP_FORMAT",
    "URL_TIMESTAMP_FORMAT",
    "format_url_timestamp",
    "parse_timestamp",
]
