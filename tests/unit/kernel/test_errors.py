"""Unit tests for the mobilepay error hierarchy."""
from __future__ import annotations

import json

import pytest

from mobilepay.kernel.errors import (
    ApiError,
    ArgError,
    AuthError,
    BadRequestError,
    ConfigurationError,
    ConflictDetail,
    ErrorResponse,
    IntegrityError,
    KeyMismatchError,
    MissingVerifierPropertiesError,
    MobilePayError,
    RateLimitError,
    ResponseDecodingError,
    ResponseError,
    ServerError,
    SignatureMismatchError,
    TransientComputationError,
    TransportError,
    TransportTimeoutError,
    VerifierStateError,
)


# ---------------------------------------------------------------------------
# MobilePayError
# ---------------------------------------------------------------------------
class TestMobilePayError:
    def test_default_code(self) -> None:
        err = MobilePayError("boom")
        assert err.code == "mobilepay_error"
        assert err.message == "boom"

    def test_str_is_message(self) -> None:
        assert str(ArgError("orderId", "cannot be empty")) == "orderId is invalid because cannot be empty"

    def test_to_dict(self) -> None:
        err = MobilePayError("boom", code="custom", detail={"k": "v"})
        assert err.to_dict() == {
            "error": "MobilePayError",
            "code": "custom",
            "message": "boom",
            "retryable": False,
            "detail": {"k": "v"},
        }

    def test_to_json(self) -> None:
        payload = json.loads(RateLimitError(5.0).to_json())
        assert payload["error"] == "RateLimitError"
        assert payload["retryable"] is True

    def test_cause_is_chained(self) -> None:
        cause = ValueError("inner")
        err = MobilePayError("outer", cause=cause)
        assert err.__cause__ is cause
        assert err.to_dict()["cause"] == "ValueError('inner')"

    def test_repr(self) -> None:
        assert repr(ArgError("x", "y")) == "ArgError(code='invalid_argument', message='x is invalid because y')"

    @pytest.mark.parametrize(
        "err, retryable",
        [
            (RateLimitError(1.0), True),
            (ServerError("m"), True),
            (TransportTimeoutError("https://x"), True),
            (BadRequestError("InvalidAmount"), False),
            (KeyMismatchError("k"), False),
            (TransientComputationError("sha1"), False),
        ],
    )
    def test_retryable(self, err: MobilePayError, retryable: bool) -> None:
        assert err.retryable is retryable


# ---------------------------------------------------------------------------
# Hierarchy
# ---------------------------------------------------------------------------
class TestHierarchy:
    @pytest.mark.parametrize(
        "exc_type, parent",
        [
            (KeyMismatchError, ConfigurationError),
            (MissingVerifierPropertiesError, ConfigurationError),
            (SignatureMismatchError, IntegrityError),
            (TransientComputationError, MobilePayError),
            (VerifierStateError, MobilePayError),
            (ErrorResponse, ApiError),
            (AuthError, ApiError),
            (RateLimitError, ApiError),
            (BadRequestError, ApiError),
            (ServerError, ApiError),
            (ResponseDecodingError, ApiError),
            (ResponseError, ApiError),
            (TransportTimeoutError, TransportError),
        ],
    )
    def test_subclass(self, exc_type: type, parent: type) -> None:
        assert issubclass(exc_type, parent)
        assert issubclass(exc_type, MobilePayError)

    def test_integrity_is_not_configuration(self) -> None:
        assert not issubclass(SignatureMismatchError, ConfigurationError)


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------
class TestMessages:
    def test_missing_verifier_properties(self) -> None:
        assert MissingVerifierPropertiesError().message == "missing verifier properties"

    def test_signature_mismatch_carries_computed(self) -> None:
        err = SignatureMismatchError("abc=")
        assert err.computed == "abc="
        assert err.message == "Computed unexpected signature of: abc="

    def test_arg_error(self) -> None:
        err = ArgError("paymentId", "cannot be empty")
        assert err.arg == "paymentId"
        assert err.reason == "cannot be empty"
        assert err.message == "paymentId is invalid because cannot be empty"

    def test_rate_limit(self) -> None:
        err = RateLimitError(30.0)
        assert err.status_code == 429
        assert err.retry_after_seconds == 30.0
        assert err.message == "MobilePay rate limit exceeded"

    def test_server_error(self) -> None:
        err = ServerError("oops", error_type="Internal", correlation_id="c-1", status_code=500)
        assert err.server_message == "oops"
        assert "CorrelationId c-1" in err.message
        assert err.status_code == 500

    def test_response_error(self) -> None:
        err = ResponseError(418, "teapot")
        assert err.message == "Unknown error. Status 418 Body: teapot"

    def test_transport_default_message(self) -> None:
        assert TransportError("https://x").message == "Request to 'https://x' failed"


# ---------------------------------------------------------------------------
# ErrorResponse / ConflictDetail
# ---------------------------------------------------------------------------
class TestErrorResponse:
    def test_conflict_from_payload(self) -> None:
        detail = ConflictDetail.from_payload(
            {"code": "1001", "message": "dup", "correlationId": "c", "origin": "MPY"}
        )
        assert detail == ConflictDetail("1001", "dup", "c", "MPY")
        assert not detail.is_empty()

    def test_empty_conflict(self) -> None:
        assert ConflictDetail.from_payload({}).is_empty()

    def test_message_falls_back_to_conflict(self) -> None:
        err = ErrorResponse(
            409, conflict=ConflictDetail(message="dup"), method="POST", url="https://x/v1/payments"
        )
        assert err.message == "POST https://x/v1/payments: 409 dup"
        assert err.raw_message == ""
        assert err.status_code == 409

    def test_raw_message(self) -> None:
        err = ErrorResponse(500, "gateway down")
        assert err.conflict is None
        assert err.raw_message == "gateway down"
        assert err.message == "500 gateway down"
