"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog

from mobilepay.kernel.errors import MobilePayError


def expand_mobilepay_errors(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Replace :class:`MobilePayError` values with their structured form.

    ``_log.warning("capture_failed", error=err)`` then renders ``code``,
    ``retryable`` and ``detail`` instead of a bare message.
    """
    for key, value in event_dict.items():
        if isinstance(value, MobilePayError):
            event_dict[key] = value.to_dict()
    return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger, optionally with *initial_values* bound.

    Module-level loggers are lazy proxies; they pick up whatever
    :meth:`JsonLoggerFactory.configure` installs later.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["expand_mobilepay_errors", "get_logger"]
