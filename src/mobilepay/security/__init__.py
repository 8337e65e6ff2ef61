"""Security – request signing keys, AppSwitch signatures and webhook verification."""
from mobilepay.security.keys import SigningKeyPair, load_private_key, load_public_key
from mobilepay.security.signing import AUTH_SIGNATURE_HEADER, RequestSigner
from mobilepay.security.webhooks import SIGNATURE_HEADER, WebhookVerifier, verify_webhook

__all__ = [
    "AUTH_SIGNATURE_HEADER",
    "RequestSigner",
    "SIGNATURE_HEADER",
    "SigningKeyPair",
    "WebhookVerifier",
    "load_private_key",
    "load_public_key",
    "verify_webhook",
]
