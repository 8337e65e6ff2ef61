"""Request signing – RequestSigner (RS256 JWS over the legacy payload digest)."""
from __future__ import annotations

import jwt
from jwt import PyJWS

from mobilepay.kernel.errors import ConfigurationError, KeyMismatchError
from mobilepay.observability.logging import get_logger
from mobilepay.security.keys import SigningKeyPair
from mobilepay.security.signing.digest import payload_digest

__all__ = ["AUTH_SIGNATURE_HEADER", "RequestSigner"]

AUTH_SIGNATURE_HEADER = "AuthenticationSignature"

_log = get_logger(__name__)


class RequestSigner:
    """Produce the ``AuthenticationSignature`` header value for a request.

    The signed payload is the absolute request URL (query included) followed
    by the raw body. Its SHA-1 digest is base64 encoded and signed with RS256;
    the result is returned in JWS compact serialisation.

    Signing is a two-phase contract: :meth:`produce` creates the JWS and
    :meth:`self_check` re-parses it and verifies it against the public key of
    the pair. :meth:`sign` runs both and only returns a token that verified,
    so an inconsistent key pair fails here instead of at the backend.

    Instances hold no mutable state and may be shared between threads.
    """

    ALGORITHM = "RS256"

    def __init__(self, key_pair: SigningKeyPair) -> None:
        self._key_pair = key_pair
        self._jws = PyJWS(algorithms=[self.ALGORITHM])

    @property
    def key_pair(self) -> SigningKeyPair:
        return self._key_pair

    def sign(self, url: str, body: bytes | None = None) -> str:
        """Return the compact signature for a request to *url* carrying *body*."""
        digest = payload_digest(url, body)
        token = self.produce(digest)
        self.self_check(token, digest)
        _log.debug("request_signed", url=url, body_length=len(body or b""))
        return token

    def produce(self, digest: bytes) -> str:
        """Sign *digest* with the private key and serialise it compactly."""
        try:
            # go-jose style protected header: {"alg": "RS256"} without "typ"
            return self._jws.encode(
                digest,
                self._key_pair.private_key,
                algorithm=self.ALGORITHM,
                headers={"typ": None},
            )
        except (jwt.PyJWTError, TypeError, ValueError) as exc:
            raise ConfigurationError(f"Could not sign request: {exc}", cause=exc) from exc

    def self_check(self, token: str, digest: bytes) -> None:
        """Re-parse *token* and verify it against the public key of the pair."""
        try:
            recovered = self._jws.decode(
                token,
                self._key_pair.public_key,
                algorithms=[self.ALGORITHM],
            )
        except jwt.PyJWTError as exc:
            _log.error("request_signature_self_check_failed", error=str(exc))
            raise KeyMismatchError(
                "Request signature does not verify with the configured public key",
                cause=exc,
            ) from exc
        if recovered != digest:
            raise KeyMismatchError("Request signature carries an unexpected payload")
