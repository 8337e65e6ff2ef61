"""Security errors – key material, request signing and webhook verification."""

from __future__ import annotations

from typing import Any

from mobilepay.kernel.errors.base import MobilePayError


class ConfigurationError(MobilePayError):
    """Key material or client configuration is malformed or inconsistent."""

    default_code = "configuration_error"


class KeyMismatchError(ConfigurationError):
    """A freshly produced request signature did not verify with the public key."""

    default_code = "key_mismatch"


class MissingVerifierPropertiesError(ConfigurationError):
    """Webhook URL or inbound signature header is empty."""

    default_code = "missing_verifier_properties"

    def __init__(self, message: str = "missing verifier properties", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class IntegrityError(MobilePayError):
    """A message failed an integrity check."""

    default_code = "integrity_error"


class SignatureMismatchError(IntegrityError):
    """The computed webhook signature differs from the received one."""

    default_code = "signature_mismatch"

    def __init__(self, computed: str, **kwargs: Any) -> None:
        super().__init__(f"Computed unexpected signature of: {computed}", **kwargs)
        self.computed = computed


class TransientComputationError(MobilePayError):
    """An underlying cryptographic primitive failed unexpectedly.

    Inputs are always well-formed byte strings, so this is fatal rather than
    retryable (e.g. SHA-1 disabled by a FIPS-restricted OpenSSL build).
    """

    default_code = "computation_error"


class VerifierStateError(MobilePayError):
    """A webhook verifier was used after it had been finalised."""

    default_code = "verifier_state_error"


__all__ = [
    "ConfigurationError",
    "IntegrityError",
    "KeyMismatchError",
    "MissingVerifierPropertiesError",
    "SignatureMismatchError",
    "TransientComputationError",
    "VerifierStateError",
]
