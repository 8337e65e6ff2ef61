"""Unit tests for observability logging – redaction and JSON configuration."""
from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from mobilepay.kernel.errors import RateLimitError

from mobilepay.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    expand_mobilepay_errors,
    get_logger,
)


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    level = root.level
    yield
    structlog.reset_defaults()
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)


# ---------------------------------------------------------------------------
# SensitiveFieldsFilter
# ---------------------------------------------------------------------------
class TestSensitiveFieldsFilter:
    def test_redacts_credential_headers(self) -> None:
        headers = {
            "Ocp-Apim-Subscription-Key": "sub",
            "AuthenticationSignature": "eyJ...",
            "Authorization": "Bearer k",
            "x-ibm-client-id": "client",
            "Accept": "application/json",
        }
        result = SensitiveFieldsFilter().redact(headers)
        assert result["Accept"] == "application/json"
        for name in ("Ocp-Apim-Subscription-Key", "AuthenticationSignature", "Authorization", "x-ibm-client-id"):
            assert result[name] == SensitiveFieldsFilter.REDACTED

    def test_redacts_all_default_fields(self) -> None:
        result = SensitiveFieldsFilter().redact({field: "v" for field in DEFAULT_SENSITIVE_FIELDS})
        assert set(result.values()) == {SensitiveFieldsFilter.REDACTED}

    def test_redact_is_shallow(self) -> None:
        result = SensitiveFieldsFilter().redact({"headers": {"password": "p"}})
        assert result["headers"] == {"password": "p"}

    def test_redact_deep(self) -> None:
        result = SensitiveFieldsFilter().redact_deep(
            {"event": "http_request", "headers": {"x-mobilepay-signature": "sig", "Host": "h"}}
        )
        assert result["headers"]["x-mobilepay-signature"] == SensitiveFieldsFilter.REDACTED
        assert result["headers"]["Host"] == "h"
        assert result["event"] == "http_request"

    def test_custom_fields(self) -> None:
        f = SensitiveFieldsFilter(frozenset({"merchant_id"}))
        assert f.redact({"merchant_id": "m", "password": "p"}) == {
            "merchant_id": SensitiveFieldsFilter.REDACTED,
            "password": "p",
        }

    def test_custom_fields_are_case_insensitive(self) -> None:
        f = SensitiveFieldsFilter(["Merchant_ID"])
        assert f.is_sensitive("merchant_id")
        assert f.is_sensitive("MERCHANT_ID")

    def test_redact_deep_walks_lists(self) -> None:
        result = SensitiveFieldsFilter().redact_deep(
            {"attempts": [{"token": "t", "n": 1}, {"token": "u", "n": 2}], "tags": ("a", "b")}
        )
        assert result["attempts"] == [
            {"token": SensitiveFieldsFilter.REDACTED, "n": 1},
            {"token": SensitiveFieldsFilter.REDACTED, "n": 2},
        ]
        assert result["tags"] == ("a", "b")


# ---------------------------------------------------------------------------
# expand_mobilepay_errors
# ---------------------------------------------------------------------------
class TestExpandMobilePayErrors:
    def test_replaces_errors_with_dict(self) -> None:
        err = RateLimitError(30)
        event = expand_mobilepay_errors(None, "warning", {"event": "throttled", "error": err})
        assert event["error"] == err.to_dict()
        assert event["error"]["retryable"] is True

    def test_leaves_other_values(self) -> None:
        exc = ValueError("x")
        event = expand_mobilepay_errors(None, "info", {"event": "e", "exc": exc, "n": 1})
        assert event == {"event": "e", "exc": exc, "n": 1}


# ---------------------------------------------------------------------------
# JsonLoggerFactory / get_logger
# ---------------------------------------------------------------------------
class TestJsonLoggerFactory:
    def test_emits_redacted_json(self, restore_logging: None, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.DEBUG)
        get_logger("mobilepay.test").info("requesting", signature_key="s3cr3t", path="/v1/payments")

        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "requesting"
        assert record["signature_key"] == SensitiveFieldsFilter.REDACTED
        assert record["path"] == "/v1/payments"
        assert record["level"] == "info"
        assert record["logger"] == "mobilepay.test"
        assert "timestamp" in record

    def test_redacts_bound_context(self, restore_logging: None, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure()
        structlog.contextvars.bind_contextvars(api_key="k3y", merchant="APPDK0000000000")
        try:
            get_logger("mobilepay.test").info("requesting", password="pw")
        finally:
            structlog.contextvars.clear_contextvars()

        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record["api_key"] == SensitiveFieldsFilter.REDACTED
        assert record["password"] == SensitiveFieldsFilter.REDACTED
        assert record["merchant"] == "APPDK0000000000"

    def test_level_filters(self, restore_logging: None, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        get_logger("mobilepay.test").debug("hidden")
        assert "hidden" not in capsys.readouterr().err

    def test_get_logger_binds_initial_values(
        self, restore_logging: None, capsys: pytest.CaptureFixture[str]
    ) -> None:
        JsonLoggerFactory.configure()
        get_logger("mobilepay.test", merchant="APPDK0000000000").warning("bound")
        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record["merchant"] == "APPDK0000000000"

    def test_errors_render_structured(
        self, restore_logging: None, capsys: pytest.CaptureFixture[str]
    ) -> None:
        JsonLoggerFactory.configure()
        get_logger("mobilepay.test").warning("throttled", error=RateLimitError(5))
        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record["error"]["code"] == "rate_limit_exceeded"
        assert record["error"]["retryable"] is True
