"""Observability – structured logging helpers."""
from mobilepay.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from mobilepay.observability.logging.factory import JsonLoggerFactory
from mobilepay.observability.logging.processors import expand_mobilepay_errors, get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "expand_mobilepay_errors",
    "get_logger",
]
