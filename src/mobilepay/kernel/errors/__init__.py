"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    MobilePayError
    ├── ConfigurationError            (security.py)
    │   ├── KeyMismatchError
    │   ├── MissingVerifierPropertiesError
    │   └── ConfigError               (mobilepay.config.validation)
    ├── IntegrityError                (security.py)
    │   └── SignatureMismatchError
    ├── TransientComputationError     (security.py)
    ├── VerifierStateError            (security.py)
    ├── ArgError                      (application.py)
    ├── ApiError                      (api.py)
    │   ├── ErrorResponse
    │   ├── AuthError
    │   ├── RateLimitError
    │   ├── BadRequestError
    │   ├── ServerError
    │   ├── ResponseDecodingError
    │   └── ResponseError
    └── TransportError                (infrastructure.py)
        └── TransportTimeoutError
"""

from mobilepay.kernel.errors.api import (
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
from mobilepay.kernel.errors.application import ArgError
from mobilepay.kernel.errors.base import MobilePayError
from mobilepay.kernel.errors.infrastructure import TransportError, TransportTimeoutError
from mobilepay.kernel.errors.security import (
    ConfigurationError,
    IntegrityError,
    KeyMismatchError,
    MissingVerifierPropertiesError,
    SignatureMismatchError,
    TransientComputationError,
    VerifierStateError,
)

__all__ = [
    "ApiError",
    "ArgError",
    "AuthError",
    "BadRequestError",
    "ConfigurationError",
    "ConflictDetail",
    "ErrorResponse",
    "IntegrityError",
    "KeyMismatchError",
    "MissingVerifierPropertiesError",
    "MobilePayError",
    "RateLimitError",
    "ResponseDecodingError",
    "ResponseError",
    "ServerError",
    "SignatureMismatchError",
    "TransientComputationError",
    "TransportError",
    "TransportTimeoutError",
    "VerifierStateError",
]
