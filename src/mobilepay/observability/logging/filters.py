"""Observability – SensitiveFieldsFilter."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

# lower-case; header names and log keys are compared case-insensitively
DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "api_key", "apikey", "authorization", "password", "secret", "token",
    "signature_key", "private_key_password",
    "ocp-apim-subscription-key", "authenticationsignature", "x-ibm-client-id",
    "x-mobilepay-signature",
})


class SensitiveFieldsFilter:
    """Replace values of sensitive keys with ``[REDACTED]``."""

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: Iterable[str] | None = None) -> None:
        fields = DEFAULT_SENSITIVE_FIELDS if sensitive_fields is None else sensitive_fields
        self._fields = frozenset(f.lower() for f in fields)

    def is_sensitive(self, key: str) -> bool:
        return key.lower() in self._fields

    def redact(self, data: Mapping[str, Any]) -> dict[str, Any]:
        return {k: (self.REDACTED if self.is_sensitive(k) else v) for k, v in data.items()}

    def redact_deep(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Recursively redact nested mappings and lists of mappings."""
        return {
            k: self.REDACTED if self.is_sensitive(k) else self._redact_value(v)
            for k, v in data.items()
        }

    def _redact_value(self, value: Any) -> Any:
        if isinstance(value, Mapping):
            return self.redact_deep(value)
        if isinstance(value, (list, tuple)):
            return type(value)(self._redact_value(v) for v in value)
        return value


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter"]
