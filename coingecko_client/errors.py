"""Error hierarchy for CoinGecko API failures."""
from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Type


class ErrorKind(str, Enum):
    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    TOO_MANY_REQUESTS = "too_many_requests"
    SERVER_ERROR = "server_error"
    CONNECTION_FAILED = "connection_failed"
    DECODE_ERROR = "decode_error"
    UNKNOWN = "unknown"


class CoinGeckoError(Exception):
    """Base exception for every failed CoinGecko call.

    Carries the upstream HTTP status and raw body when a response was received.
    """

    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body

    def __repr__(self) -> str:
        return f"<{type(self).__name__} kind={self.kind.value} status={self.status_code} message={self.message!r}>"


class BadRequestError(CoinGeckoError):
    kind = ErrorKind.BAD_REQUEST


class UnauthorizedError(CoinGeckoError):
    kind = ErrorKind.UNAUTHORIZED


class ForbiddenError(CoinGeckoError):
    kind = ErrorKind.FORBIDDEN


class NotFoundError(CoinGeckoError):
    kind = ErrorKind.NOT_FOUND


class TooManyRequestsError(CoinGeckoError):
    kind = ErrorKind.TOO_MANY_REQUESTS


class ServerError(CoinGeckoError):
    kind = ErrorKind.SERVER_ERROR


class ConnectionFailedError(CoinGeckoError):
    """Raised when no response was received (DNS, TCP, TLS, timeout)."""

    kind = ErrorKind.CONNECTION_FAILED


class DecodeError(CoinGeckoError):
    """Raised when a 2xx response body is not valid JSON."""

    kind = ErrorKind.DECODE_ERROR


class UnknownError(CoinGeckoError):
    kind = ErrorKind.UNKNOWN


_STATUS_KINDS: Dict[int, ErrorKind] = {
    400: ErrorKind.BAD_REQUEST,
    401: ErrorKind.UNAUTHORIZED,
    403: ErrorKind.FORBIDDEN,
    404: ErrorKind.NOT_FOUND,
    429: ErrorKind.TOO_MANY_REQUESTS,
}

_KIND_ERRORS: Dict[ErrorKind, Type[CoinGeckoError]] = {
    cls.kind: cls
    for cls in (
        BadRequestError,
        UnauthorizedError,
        ForbiddenError,
        NotFoundError,
        TooManyRequestsError,
        ServerError,
        ConnectionFailedError,
        DecodeError,
        UnknownError,
    )
}


def error_kind_for_status(status_code: int) -> ErrorKind:
    if status_code in _STATUS_KINDS:
        return _STATUS_KINDS[status_code]
    if 500 <= status_code <= 599:
        return ErrorKind.SERVER_ERROR
    return ErrorKind.UNKNOWN


def error_class_for_kind(kind: ErrorKind) -> Type[CoinGeckoError]:
    return _KIND_ERRORS[kind]


def error_for_status(status_code: int) -> Type[CoinGeckoError]:
    return error_class_for_kind(error_kind_for_status(status_code))
