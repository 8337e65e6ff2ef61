"""Application-layer errors – invalid arguments passed to API operations."""

from __future__ import annotations

from typing import Any

from mobilepay.kernel.errors.base import MobilePayError


class ArgError(MobilePayError):
    """An argument passed to an API operation is invalid."""

    default_code = "invalid_argument"

    def __init__(self, arg: str, reason: str, **kwargs: Any) -> None:
        super().__init__(f"{arg} is invalid because {reason}", **kwargs)
        self.arg = arg
        self.reason = reason


__all__ = ["ArgError"]
