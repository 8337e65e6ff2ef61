"""Security – AppSwitch request signing."""
from mobilepay.security.signing.digest import legacy_digest, payload_digest, signed_payload
from mobilepay.security.signing.signer import AUTH_SIGNATURE_HEADER, RequestSigner

__all__ = [
    "AUTH_SIGNATURE_HEADER",
    "RequestSigner",
    "legacy_digest",
    "payload_digest",
    "signed_payload",
]
