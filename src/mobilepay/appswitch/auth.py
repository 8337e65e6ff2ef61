"""AppSwitch – per-request signature headers."""
from __future__ import annotations

from mobilepay.security.signing import AUTH_SIGNATURE_HEADER, RequestSigner


class SignatureAuthenticator:
    """Adds ``AuthenticationSignature`` computed over the final URL and body."""

    def __init__(self, signer: RequestSigner) -> None:
        self._signer = signer

    def headers_for(self, url: str, body: bytes) -> dict[str, str]:
        return {AUTH_SIGNATURE_HEADER: self._signer.sign(url, body)}


__all__ = ["SignatureAuthenticator"]
