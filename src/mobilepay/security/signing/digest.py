"""Request signing – payload canonicalisation and the legacy SHA-1 digest.

SHA-1 is used here only because the AppSwitch backend recomputes this exact
digest. Do not reuse :func:`legacy_digest` for anything else.
"""
from __future__ import annotations

import base64
import hashlib

from mobilepay.kernel.errors import TransientComputationError

__all__ = ["legacy_digest", "payload_digest", "signed_payload"]


def signed_payload(url: str, body: bytes | None = None) -> bytes:
    """Return ``url || body``; nothing is appended when there is no body."""
    payload = url.encode("utf-8")
    if body:
        payload += body
    return payload


def legacy_digest(payload: bytes) -> bytes:
    """Base64 (standard alphabet, padded) SHA-1 digest of *payload*."""
    try:
        digest = hashlib.sha1(payload).digest()
    except ValueError as exc:
        # FIPS builds of OpenSSL refuse SHA-1
        raise TransientComputationError(f"SHA-1 unavailable: {exc}", cause=exc) from exc
    return base64.b64encode(digest)


def payload_digest(url: str, body: bytes | None = None) -> bytes:
    return legacy_digest(signed_payload(url, body))
