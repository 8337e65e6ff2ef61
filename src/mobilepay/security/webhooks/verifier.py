"""Webhook verification – HMAC-SHA1 check of inbound MobilePay webhooks."""
from __future__ import annotations

import base64
import hashlib
import hmac
from collections.abc import Iterable, Mapping

from mobilepay.kernel.errors import (
    MissingVerifierPropertiesError,
    SignatureMismatchError,
    TransientComputationError,
    VerifierStateError,
)
from mobilepay.observability.logging import get_logger

__all__ = ["SIGNATURE_HEADER", "WebhookVerifier", "verify_webhook"]

SIGNATURE_HEADER = "x-mobilepay-signature"

_log = get_logger(__name__)


def _header(headers: Mapping[str, str], name: str) -> str:
    value = headers.get(name)
    if value is None:
        for key, candidate in headers.items():
            if key.lower() == name:
                return candidate
        return ""
    return value


class WebhookVerifier:
    """Verify that a webhook body was sent by MobilePay.

    The expected signature is ``base64(HMAC-SHA1(signature_key, webhook_url || body))``
    and arrives in the ``x-mobilepay-signature`` header.

    Usage::

        verifier = WebhookVerifier(request.headers, WEBHOOK_URL, SIGNATURE_KEY)
        async for chunk in request.stream():
            verifier.write(chunk)
        verifier.ensure()

    A verifier is single use: after :meth:`ensure` has run, both
    :meth:`write` and :meth:`ensure` raise :class:`VerifierStateError`.
    Do not share an instance between requests or threads.
    """

    def __init__(
        self,
        headers: Mapping[str, str],
        webhook_url: str,
        signature_key: str,
    ) -> None:
        signature = _header(headers, SIGNATURE_HEADER)
        if not webhook_url or not signature:
            raise MissingVerifierPropertiesError()
        self._webhook_url = webhook_url.encode("utf-8")
        self._signature = signature.encode("utf-8")
        try:
            self._mac = hmac.new(signature_key.encode("utf-8"), self._webhook_url, hashlib.sha1)
        except ValueError as exc:
            raise TransientComputationError(f"HMAC-SHA1 unavailable: {exc}", cause=exc) from exc
        self._finalized = False

    @property
    def finalized(self) -> bool:
        return self._finalized

    def write(self, chunk: bytes) -> int:
        """Feed a chunk of the raw body; returns the number of bytes consumed."""
        if self._finalized:
            raise VerifierStateError("write() called on a finalised webhook verifier")
        self._mac.update(chunk)
        return len(chunk)

    def write_all(self, chunks: Iterable[bytes]) -> int:
        return sum(self.write(chunk) for chunk in chunks)

    def ensure(self) -> None:
        """Finalise and compare in constant time.

        Raises :class:`SignatureMismatchError` when the body does not match.
        """
        if self._finalized:
            raise VerifierStateError("ensure() called twice on a webhook verifier")
        self._finalized = True
        computed = base64.b64encode(self._mac.digest())
        if hmac.compare_digest(computed, self._signature):
            return
        _log.warning("webhook_signature_mismatch", webhook_url=self._webhook_url.decode("utf-8"))
        raise SignatureMismatchError(computed.decode("ascii"))


def verify_webhook(
    headers: Mapping[str, str],
    webhook_url: str,
    signature_key: str,
    body: bytes,
) -> None:
    """One-shot verification of a fully buffered body."""
    verifier = WebhookVerifier(headers, webhook_url, signature_key)
    verifier.write(body)
    verifier.ensure()
