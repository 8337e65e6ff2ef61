"""AppSwitch – immutable client configuration."""
from __future__ import annotations

from dataclasses import dataclass, field

from mobilepay.adapters.http import MEDIA_TYPE
from mobilepay.security.keys import SigningKeyPair

APPSWITCH_API_URL = "https://api.mobeco.dk/appswitch/api/v1"
DEFAULT_TIMEOUT = 5.0
SUBSCRIPTION_HEADER = "Ocp-Apim-Subscription-Key"
TEST_MODE_HEADER = "Test-mode"


@dataclass(frozen=True)
class AppSwitchConfig:
    """Merchant identity, subscription key and signing keys for AppSwitch."""

    merchant_id: str
    subscription_key: str = field(repr=False)
    key_pair: SigningKeyPair = field(repr=False)
    url: str = APPSWITCH_API_URL
    timeout: float = DEFAULT_TIMEOUT
    test_mode: bool = False

    def headers(self) -> dict[str, str]:
        """Return a fresh copy of the static headers; the signature is added per request."""
        headers = {
            "Content-Type": MEDIA_TYPE,
            "Accept": MEDIA_TYPE,
            SUBSCRIPTION_HEADER: self.subscription_key,
        }
        if self.test_mode:
            headers[TEST_MODE_HEADER] = "true"
        return headers


__all__ = [
    "APPSWITCH_API_URL",
    "AppSwitchConfig",
    "DEFAULT_TIMEOUT",
    "SUBSCRIPTION_HEADER",
    "TEST_MODE_HEADER",
]
