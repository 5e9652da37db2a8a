"""Error taxonomy for Relay API calls.

Every failed call surfaces exactly one ``RelayError``. Callers discriminate on
``err.kind`` rather than on exception subclasses or message text.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Mapping, Optional


class ErrorKind(str, Enum):
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    RATE_LIMIT = "rate_limit"
    NETWORK = "network"
    SERVER = "server"
    TIMEOUT = "timeout"
    GENERIC = "generic"
    UNKNOWN = "unknown"


DEFAULT_MESSAGES: Dict[ErrorKind, str] = {
    ErrorKind.AUTHENTICATION: "Authentication failed",
    ErrorKind.AUTHORIZATION: "Insufficient permissions",
    ErrorKind.NOT_FOUND: "Resource not found",
    ErrorKind.VALIDATION: "Validation failed",
    ErrorKind.RATE_LIMIT: "Rate limit exceeded",
    ErrorKind.NETWORK: "Network request failed. Please check your connection.",
    ErrorKind.SERVER: "Internal server error",
    ErrorKind.TIMEOUT: "Request timeout",
    ErrorKind.GENERIC: "An error occurred",
    ErrorKind.UNKNOWN: "An unknown error occurred",
}

DEFAULT_CODES: Dict[ErrorKind, Optional[str]] = {
    ErrorKind.AUTHENTICATION: "AUTHENTICATION_ERROR",
    ErrorKind.AUTHORIZATION: "AUTHORIZATION_ERROR",
    ErrorKind.NOT_FOUND: "NOT_FOUND",
    ErrorKind.VALIDATION: "VALIDATION_ERROR",
    ErrorKind.RATE_LIMIT: "RATE_LIMIT_ERROR",
    ErrorKind.NETWORK: "NETWORK_ERROR",
    ErrorKind.SERVER: "SERVER_ERROR",
    ErrorKind.TIMEOUT: "TIMEOUT_ERROR",
    ErrorKind.GENERIC: None,
    ErrorKind.UNKNOWN: "UNKNOWN_ERROR",
}

DEFAULT_STATUSES: Dict[ErrorKind, Optional[int]] = {
    ErrorKind.AUTHENTICATION: 401,
    ErrorKind.AUTHORIZATION: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION: 400,
    ErrorKind.RATE_LIMIT: 429,
    ErrorKind.SERVER: 500,
    ErrorKind.TIMEOUT: 408,
}

STATUS_KINDS: Dict[int, ErrorKind] = {
    401: ErrorKind.AUTHENTICATION,
    403: ErrorKind.AUTHORIZATION,
    404: ErrorKind.NOT_FOUND,
    400: ErrorKind.VALIDATION,
    422: ErrorKind.VALIDATION,
    429: ErrorKind.RATE_LIMIT,
    500: ErrorKind.SERVER,
    502: ErrorKind.SERVER,
    503: ErrorKind.SERVER,
    504: ErrorKind.SERVER,
}

RETRYABLE_KINDS = frozenset(
    {ErrorKind.RATE_LIMIT, ErrorKind.NETWORK, ErrorKind.SERVER, ErrorKind.TIMEOUT}
)


def _coerce_retry_after(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


class RelayError(Exception):
    """Single error type for every failed Relay API call.

    Fields are read-only once the error is constructed.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        kind: ErrorKind = ErrorKind.GENERIC,
        status: Optional[int] = None,
        code: Optional[str] = None,
        details: Any = None,
        retry_after: Optional[float] = None,
    ):
        message = message or DEFAULT_MESSAGES[kind]
        super().__init__(message)
        self._kind = kind
        self._message = message
        self._status = status
        self._code = code
        # Mappings are copied; other shapes (lists of field errors) kept as sent.
        self._details = dict(details) if isinstance(details, Mapping) else details
        self._retry_after = retry_after

    @property
    def kind(self) -> ErrorKind:
        return self._kind

    @property
    def message(self) -> str:
        return self._message

    @property
    def status(self) -> Optional[int]:
        return self._status

    @property
    def code(self) -> Optional[str]:
        return self._code

    @property
    def details(self) -> Any:
        return self._details

    @property
    def retry_after(self) -> Optional[float]:
        """Seconds to wait before retrying; only set for RATE_LIMIT."""
        return self._retry_after

    @property
    def is_retryable(self) -> bool:
        return self._kind in RETRYABLE_KINDS

    def __repr__(self) -> str:
        return (
            f"RelayError(kind={self._kind.name}, status={self._status!r}, "
            f"code={self._code!r}, message={self._message!r})"
        )

    # --- Named constructors ------------------------------------------------ #

    @classmethod
    def _of_kind(
        cls,
        kind: ErrorKind,
        message: Optional[str] = None,
        details: Any = None,
        *,
        status: Optional[int] = None,
        retry_after: Optional[float] = None,
    ) -> "RelayError":
        return cls(
            message,
            kind=kind,
            status=status if status is not None else DEFAULT_STATUSES.get(kind),
            code=DEFAULT_CODES[kind],
            details=details,
            retry_after=retry_after,
        )

    @classmethod
    def authentication(cls, message=None, details=None) -> "RelayError":
        return cls._of_kind(ErrorKind.AUTHENTICATION, message, details)

    @classmethod
    def authorization(cls, message=None, details=None) -> "RelayError":
        return cls._of_kind(ErrorKind.AUTHORIZATION, message, details)

    @classmethod
    def not_found(cls, message=None, details=None) -> "RelayError":
        return cls._of_kind(ErrorKind.NOT_FOUND, message, details)

    @classmethod
    def validation(cls, message=None, details=None, *, status=None) -> "RelayError":
        return cls._of_kind(ErrorKind.VALIDATION, message, details, status=status)

    @classmethod
    def rate_limit(
        cls, message=None, retry_after: Optional[float] = None, details=None
    ) -> "RelayError":
        return cls._of_kind(
            ErrorKind.RATE_LIMIT, message, details, retry_after=retry_after
        )

    @classmethod
    def server(cls, message=None, status: int = 500, details=None) -> "RelayError":
        return cls._of_kind(ErrorKind.SERVER, message, details, status=status)

    @classmethod
    def network(cls, message=None, details=None) -> "RelayError":
        return cls._of_kind(ErrorKind.NETWORK, message, details)

    @classmethod
    def timeout(cls, message=None, details=None) -> "RelayError":
        return cls._of_kind(ErrorKind.TIMEOUT, message, details)

    @classmethod
    def unknown(cls, message=None, details=None) -> "RelayError":
        return cls._of_kind(ErrorKind.UNKNOWN, message, details)

    @classmethod
    def from_api_error(cls, payload: Mapping[str, Any]) -> "RelayError":
        """Build a GENERIC error from an API error payload."""
        return cls(
            payload.get("message"),
            kind=ErrorKind.GENERIC,
            status=payload.get("status"),
            code=payload.get("code"),
            details=payload.get("details"),
        )

    @classmethod
    def from_response(
        cls,
        status: int,
        data: Any,
        *,
        retry_after_header: Optional[str] = None,
    ) -> "RelayError":
        """
        Classify a non-2xx response.
        - Kind comes from the fixed status table; anything unlisted is GENERIC
        - Message precedence: body "message", body "error", kind default
        - RATE_LIMIT reads "retry_after" from the body, then the Retry-After header
        """
        body: Mapping[str, Any] = data if isinstance(data, Mapping) else {}
        message = body.get("message") or body.get("error") or None
        if message is not None and not isinstance(message, str):
            message = str(message)
        details = body.get("details")

        kind = STATUS_KINDS.get(status, ErrorKind.GENERIC)

        if kind is ErrorKind.GENERIC:
            return cls(
                message,
                kind=kind,
                status=status,
                code=body.get("code"),
                details=details,
            )
        if kind is ErrorKind.RATE_LIMIT:
            retry_after = _coerce_retry_after(body.get("retry_after"))
            if retry_after is None:
                retry_after = _coerce_retry_after(retry_after_header)
            return cls.rate_limit(message, retry_after, details)
        if kind is ErrorKind.SERVER:
            return cls.server(message, status, details)
        if kind is ErrorKind.VALIDATION:
            return cls.validation(message, details, status=status)
        return cls._of_kind(kind, message, details)


__all__ = [
    "ErrorKind",
    "RelayError",
    "DEFAULT_MESSAGES",
    "DEFAULT_CODES",
    "STATUS_KINDS",
]
