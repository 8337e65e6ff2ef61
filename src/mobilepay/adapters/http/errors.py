"""HTTP adapter – map error responses to the kernel error taxonomy."""
from __future__ import annotations

import json
from typing import Any

import httpx

from mobilepay.kernel.errors import (
    ApiError,
    AuthError,
    BadRequestError,
    ConflictDetail,
    ErrorResponse,
    RateLimitError,
    ResponseDecodingError,
    ResponseError,
    ServerError,
)

__all__ = ["appswitch_error_from_response", "payments_error_from_response"]


def _decode_object(body: bytes, status: int) -> dict[str, Any] | ResponseDecodingError:
    try:
        payload = json.loads(body)
    except ValueError as exc:
        return ResponseDecodingError(str(exc), body=body, status_code=status, cause=exc)
    if not isinstance(payload, dict):
        return ResponseDecodingError(
            f"expected a JSON object, got {type(payload).__name__}",
            body=body,
            status_code=status,
        )
    return payload


def _field(payload: dict[str, Any], name: str) -> Any:
    """Case-insensitive lookup; AppSwitch is not consistent about key casing."""
    if name in payload:
        return payload[name]
    lowered = name.lower()
    for key, value in payload.items():
        if key.lower() == lowered:
            return value
    return None


def _text(body: bytes) -> str:
    return body.decode("utf-8", errors="replace")


def payments_error_from_response(response: httpx.Response) -> ErrorResponse:
    """Payments API: every error body is a conflict object, or free text."""
    body = response.content
    conflict: ConflictDetail | None = None
    message = ""
    if body:
        try:
            payload = json.loads(body)
        except ValueError:
            payload = None
        if isinstance(payload, dict):
            conflict = ConflictDetail.from_payload(payload)
            if conflict.is_empty():
                conflict = None
        if conflict is None:
            message = _text(body)
    request = response.request
    return ErrorResponse(
        response.status_code,
        message,
        conflict=conflict,
        method=request.method,
        url=str(request.url),
    )


def _auth_error(body: bytes, status: int) -> ApiError:
    payload = _decode_object(body, status)
    if isinstance(payload, ResponseDecodingError):
        return payload
    message = _field(payload, "message") or ""
    if not message and not _field(payload, "statusCode"):
        return ResponseError(status, _text(body))
    return AuthError(message, status_code=status)


def _bad_request(body: bytes, status: int) -> ApiError:
    payload = _decode_object(body, status)
    if isinstance(payload, ResponseDecodingError):
        return payload
    reason = _field(payload, "Reason") or ""
    if not reason:
        return ResponseError(status, _text(body))
    return BadRequestError(reason, status_code=status)


def _server_error(body: bytes, status: int) -> ApiError:
    payload = _decode_object(body, status)
    if isinstance(payload, ResponseDecodingError):
        return payload
    correlation_id = _field(payload, "CorrelationId") or ""
    error_type = _field(payload, "Errortype") or ""
    message = _field(payload, "Message") or ""
    if correlation_id or error_type or message:
        return ServerError(
            message,
            error_type=error_type,
            correlation_id=correlation_id,
            status_code=status,
        )
    # a 500 may also carry {"Reason": "BackendError"}
    return _bad_request(body, status)


def appswitch_error_from_response(response: httpx.Response) -> ApiError:
    """AppSwitch: classify by status code, then by body shape."""
    status = response.status_code
    body = response.content
    if status == 401:
        return _auth_error(body, status)
    if status == 429:
        raw = response.headers.get("Retry-After", "")
        try:
            retry_after = int(raw)
        except ValueError as exc:
            return ResponseDecodingError(
                f"invalid Retry-After header {raw!r}", body=body, status_code=status, cause=exc
            )
        return RateLimitError(float(retry_after))
    if 400 <= status < 500:
        return _bad_request(body, status)
    return _server_error(body, status)
