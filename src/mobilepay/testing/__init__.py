"""Testing support – key generation and webhook signature forging.

Import in your ``conftest.py``::

    pytest_plugins = ["mobilepay.testing.fixtures"]
"""

from mobilepay.testing.keys import generate_key_pair, private_key_pem, public_key_pem
from mobilepay.testing.webhooks import sign_webhook, webhook_headers

__all__ = [
    "generate_key_pair",
    "private_key_pem",
    "public_key_pem",
    "sign_webhook",
    "webhook_headers",
]
