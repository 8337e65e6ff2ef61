"""Payments API – list query options."""
from __future__ import annotations

import dataclasses
from typing import Any

from mobilepay.kernel.errors import ArgError


@dataclasses.dataclass(frozen=True)
class ListOptions:
    """Page-number based pagination parameters."""
    page_size: int = 10
    page_number: int = 1

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ArgError("page_size", "must be >= 1")
        if self.page_number < 1:
            raise ArgError("page_number", "must be >= 1")

    def to_query(self) -> dict[str, Any]:
        return {"pageSize": self.page_size, "pageNumber": self.page_number}


@dataclasses.dataclass(frozen=True)
class RefundsListOptions(ListOptions):
    """Refund listing filters; ``payment_id`` is always sent, the rest only when set."""
    payment_id: str = ""
    payment_point_id: str = ""
    created_before: str = ""
    created_after: str = ""

    def to_query(self) -> dict[str, Any]:
        query = super().to_query()
        query["paymentId"] = self.payment_id
        optional = {
            "paymentPointId": self.payment_point_id,
            "createdBefore": self.created_before,
            "createdAfter": self.created_after,
        }
        query.update({k: v for k, v in optional.items() if v})
        return query


__all__ = ["ListOptions", "RefundsListOptions"]
