"""HTTP adapter – async httpx transport and error classification."""
from mobilepay.adapters.http.client import (
    MEDIA_TYPE,
    HttpClient,
    HttpxHttpClient,
    RequestAuthenticator,
    RequestCompletionCallback,
    encode_json,
)
from mobilepay.adapters.http.errors import appswitch_error_from_response, payments_error_from_response

__all__ = [
    "HttpClient",
    "HttpxHttpClient",
    "MEDIA_TYPE",
    "RequestAuthenticator",
    "RequestCompletionCallback",
    "appswitch_error_from_response",
    "encode_json",
    "payments_error_from_response",
]
