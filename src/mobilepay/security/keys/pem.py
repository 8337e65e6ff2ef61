"""Security keys – SigningKeyPair and PEM parsing (cryptography-backed)."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from mobilepay.kernel.errors import ConfigurationError

__all__ = [
    "SigningKeyPair",
    "load_private_key",
    "load_public_key",
]


def _as_bytes(value: str | bytes) -> bytes:
    return value.encode() if isinstance(value, str) else value


def load_private_key(pem: str | bytes, password: str | bytes | None = None) -> rsa.RSAPrivateKey:
    """Parse an RSA private key from PEM.

    Both PKCS#1 (``BEGIN RSA PRIVATE KEY``, optionally encrypted with
    ``Proc-Type: 4,ENCRYPTED``) and PKCS#8 encodings are accepted.
    """
    secret = _as_bytes(password) if password else None
    try:
        key = serialization.load_pem_private_key(_as_bytes(pem).strip(), password=secret)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise ConfigurationError(f"Could not parse private key: {exc}", cause=exc) from exc
    if not isinstance(key, rsa.RSAPrivateKey):
        raise ConfigurationError(f"Expected an RSA private key, got {type(key).__name__}")
    return key


def load_public_key(pem: str | bytes) -> rsa.RSAPublicKey:
    """Parse an RSA public key (``BEGIN PUBLIC KEY`` or ``BEGIN RSA PUBLIC KEY``)."""
    try:
        key = serialization.load_pem_public_key(_as_bytes(pem).strip())
    except (ValueError, UnsupportedAlgorithm) as exc:
        raise ConfigurationError(f"Could not parse public key: {exc}", cause=exc) from exc
    if not isinstance(key, rsa.RSAPublicKey):
        raise ConfigurationError(f"Expected an RSA public key, got {type(key).__name__}")
    return key


@dataclass(frozen=True)
class SigningKeyPair:
    """RSA key pair used to sign AppSwitch requests.

    The pair is not checked for consistency on construction; call
    :meth:`matches` for a local check. :class:`~mobilepay.security.signing.RequestSigner`
    verifies every signature it produces against ``public_key``.
    """

    private_key: rsa.RSAPrivateKey
    public_key: rsa.RSAPublicKey

    def __post_init__(self) -> None:
        if not isinstance(self.private_key, rsa.RSAPrivateKey):
            raise ConfigurationError("private_key must be an RSA private key")
        if not isinstance(self.public_key, rsa.RSAPublicKey):
            raise ConfigurationError("public_key must be an RSA public key")

    @classmethod
    def from_pem(
        cls,
        private_pem: str | bytes,
        public_pem: str | bytes,
        password: str | bytes | None = None,
    ) -> SigningKeyPair:
        return cls(load_private_key(private_pem, password), load_public_key(public_pem))

    @classmethod
    def from_files(
        cls,
        private_path: str | Path,
        public_path: str | Path,
        password: str | bytes | None = None,
    ) -> SigningKeyPair:
        try:
            private_pem = Path(private_path).read_bytes()
            public_pem = Path(public_path).read_bytes()
        except OSError as exc:
            raise ConfigurationError(f"Could not read key file: {exc}", cause=exc) from exc
        return cls.from_pem(private_pem, public_pem, password)

    @classmethod
    def from_private_key(cls, private_key: rsa.RSAPrivateKey) -> SigningKeyPair:
        """Build a pair whose public half is derived from *private_key*."""
        return cls(private_key, private_key.public_key())

    def matches(self) -> bool:
        """Return ``True`` when ``public_key`` belongs to ``private_key``."""
        return self.private_key.public_key().public_numbers() == self.public_key.public_numbers()
