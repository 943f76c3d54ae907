"""HTTP connection to the CoinGecko API.

Picks the tier base URL, attaches headers, retries transient failures and
turns every failure into a `CoinGeckoError` subclass.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

import httpx
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from .config import CoinGeckoSettings
from .errors import (
    CoinGeckoError,
    ConnectionFailedError,
    DecodeError,
    ErrorKind,
    UnknownError,
    error_for_status,
)

logger = logging.getLogger(__name__)

TRANSIENT_KINDS = frozenset({ErrorKind.CONNECTION_FAILED, ErrorKind.SERVER_ERROR})


def encode_query(query: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Flatten a query mapping into string parameters.

    `None` values are dropped, lists and tuples become one comma-joined value.
    """
    params: Dict[str, str] = {}
    for key, value in (query or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            params[key] = ",".join(str(v) for v in value)
        elif isinstance(value, bool):
            params[key] = str(value).lower()
        else:
            params[key] = str(value)
    return params


def _is_transient(exc: BaseException) -> bool:
    return isinstance(exc, CoinGeckoError) and exc.kind in TRANSIENT_KINDS


class Connection:
    """One `httpx.AsyncClient` bound to the tier base URL and headers from `settings`."""

    def __init__(
        self,
        settings: CoinGeckoSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._settings = settings
        self._client = httpx.AsyncClient(
            base_url=settings.resolved_base_url(),
            headers=settings.headers(),
            timeout=httpx.Timeout(settings.timeout_s),
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    async def get(self, path: str, query: Optional[Mapping[str, Any]] = None) -> Any:
        return await self.request("GET", path, query)

    async def request(
        self,
        method: str,
        path: str,
        query: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        params = encode_query(query)
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self._settings.retries + 1),
            wait=wait_exponential(multiplier=self._settings.retry_backoff_s),
            retry=retry_if_exception(_is_transient),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                return await self._send(method, path, params)

    async def _send(self, method: str, path: str, params: Dict[str, str]) -> Any:
        logger.debug("CoinGecko %s %s params=%s", method, path, params)
        try:
            r = await self._client.request(method, path, params=params)
        except httpx.TransportError as e:
            raise ConnectionFailedError(f"{method} {path} failed: {e!r}") from e
        except httpx.HTTPError as e:
            raise UnknownError(f"{method} {path} failed: {e!r}") from e

        if not r.is_success:
            error_cls = error_for_status(r.status_code)
            raise error_cls(
                f"{method} {path} returned HTTP {r.status_code}",
                status_code=r.status_code,
                body=r.text,
            )

        try:
            return r.json()
        except ValueError as e:
            raise DecodeError(
                f"{method} {path} returned a body that is not JSON",
                status_code=r.status_code,
                body=r.text,
            ) from e

    async def aclose(self):
        await self._client.aclose()
