"""Security – RSA key material for request signing."""
from mobilepay.security.keys.pem import SigningKeyPair, load_private_key, load_public_key

__all__ = ["SigningKeyPair", "load_private_key", "load_public_key"]
