from .client import CoinGeckoClient
from .config import (
    COINGECKO_BASE_URL,
    COINGECKO_PRO_BASE_URL,
    PRO_KEY_HEADER,
    CoinGeckoSettings,
)
from .connection import Connection, encode_query
from .endpoints import RequestSpec
from .errors import (
    BadRequestError,
    CoinGeckoError,
    ConnectionFailedError,
    DecodeError,
    ErrorKind,
    ForbiddenError,
    NotFoundError,
    ServerError,
    TooManyRequestsError,
    UnauthorizedError,
    UnknownError,
    error_for_status,
    error_kind_for_status,
)

__version__ = "0.1.0"

__all__ = [
    "BadRequestError",
    "COINGECKO_BASE_URL",
    "COINGECKO_PRO_BASE_URL",
    "CoinGeckoClient",
    "CoinGeckoError",
    "CoinGeckoSettings",
    "Connection",
    "ConnectionFailedError",
    "DecodeError",
    "ErrorKind",
    "ForbiddenError",
    "NotFoundError",
    "PRO_KEY_HEADER",
    "RequestSpec",
    "ServerError",
    "TooManyRequestsError",
    "UnauthorizedError",
    "UnknownError",
    "encode_query",
    "error_for_status",
    "error_kind_for_status",
]
