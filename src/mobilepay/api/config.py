"""Payments API – immutable client configuration."""
from __future__ import annotations

from dataclasses import dataclass, field

from mobilepay import __version__

DEFAULT_BASE_URL = "https://api.mobilepay.dk"
TEST_BASE_URL = "https://api.sandbox.mobilepay.dk"
DEFAULT_TIMEOUT = 10.0
USER_AGENT = f"mobilepay-python/{__version__}"
IBM_CLIENT_ID_HEADER = "x-ibm-client-id"


@dataclass(frozen=True)
class MobilePayConfig:
    """Credentials and endpoint of the MobilePay App Payment API."""

    client_id: str = field(repr=False)
    api_key: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = USER_AGENT

    def headers(self) -> dict[str, str]:
        """Return a fresh copy of the headers sent with every request."""
        return {
            IBM_CLIENT_ID_HEADER: self.client_id,
            "Authorization": f"Bearer {self.api_key}",
            "User-Agent": self.user_agent,
        }


__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "IBM_CLIENT_ID_HEADER",
    "MobilePayConfig",
    "TEST_BASE_URL",
    "USER_AGENT",
]
