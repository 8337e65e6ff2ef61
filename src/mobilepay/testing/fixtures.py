"""Testing fixtures – pytest fixtures for signing and webhook tests.

Import in your ``conftest.py``::

    pytest_plugins = ["mobilepay.testing.fixtures"]
"""
from __future__ import annotations

import pytest

from mobilepay.security.keys import SigningKeyPair
from mobilepay.testing.keys import generate_key_pair


@pytest.fixture(scope="session")
def signing_key_pair() -> SigningKeyPair:
    return generate_key_pair()


@pytest.fixture(scope="session")
def foreign_key_pair() -> SigningKeyPair:
    """A second, unrelated pair for mismatch scenarios."""
    return generate_key_pair()


__all__ = ["foreign_key_pair", "signing_key_pair"]
