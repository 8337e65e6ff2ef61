"""Security – inbound webhook verification."""
from mobilepay.security.webhooks.verifier import SIGNATURE_HEADER, WebhookVerifier, verify_webhook

__all__ = ["SIGNATURE_HEADER", "WebhookVerifier", "verify_webhook"]
