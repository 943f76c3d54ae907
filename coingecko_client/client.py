from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

import httpx

from . import endpoints
from .config import CoinGeckoSettings
from .connection import Connection
from .endpoints import Days, Ids, RequestSpec


class CoinGeckoClient:
    """Async client for the CoinGecko price endpoints.

    The tier follows the pro API key: with a key every request goes to the pro
    base URL carrying the `x-cg-pro-api-key` header, without one it goes to
    the public API. Responses are returned as decoded JSON, untouched.

    Example:
        async with CoinGeckoClient() as cg:
            await cg.get_prices(ids="bitcoin", currencies="usd")
    """

    def __init__(
        self,
        pro_api_key: Optional[str] = None,
        *,
        settings: Optional[CoinGeckoSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **overrides: Any,
    ):
        unknown = sorted(set(overrides) - set(CoinGeckoSettings.model_fields))
        if unknown:
            raise TypeError(f"CoinGeckoClient got unexpected option(s): {', '.join(unknown)}")
        updates = {k: v for k, v in overrides.items() if v is not None}
        if pro_api_key is not None:
            updates["pro_api_key"] = pro_api_key
        if settings is None:
            settings = CoinGeckoSettings(**updates)
        elif updates:
            settings = CoinGeckoSettings(**{**settings.model_dump(), **updates})
        self.settings = settings
        self.connection = Connection(settings, transport=transport)

    @property
    def is_pro(self) -> bool:
        return self.settings.is_pro

    async def get(self, path: str, query: Optional[Mapping[str, Any]] = None) -> Any:
        return await self.connection.get(path, query)

    async def _fetch(self, spec: RequestSpec) -> Any:
        return await self.connection.request(spec.method, spec.path, spec.query)

    async def get_prices(self, ids: Ids, currencies: Ids = "usd") -> Dict[str, Any]:
        """Current price of each coin in `ids`, per currency in `currencies`."""
        return await self._fetch(endpoints.get_prices(ids, currencies))

    async def get_historical_price_on_date(self, id: str, date: str) -> Dict[str, Any]:
        """Coin snapshot on `date` (DD-MM-YYYY)."""
        return await self._fetch(endpoints.get_historical_price_on_date(id, date))

    async def get_minutely_historical_prices(self, id: str, currency: str = "usd") -> Dict[str, Any]:
        """Prices at 5-minute resolution over the last 24 hours."""
        return await self._fetch(endpoints.get_minutely_historical_prices(id, currency))

    async def get_hourly_historical_prices(self, id: str, days: int, currency: str = "usd") -> Dict[str, Any]:
        """Hourly prices over `days`; above 90 days this is the daily series."""
        return await self._fetch(endpoints.get_hourly_historical_prices(id, days, currency))

    async def get_daily_historical_prices(self, id: str, days: Days, currency: str = "usd") -> Dict[str, Any]:
        return await self._fetch(endpoints.get_daily_historical_prices(id, days, currency))

    async def get_ohlc(self, id: str, days: Days, currency: str = "usd") -> List[List[float]]:
        """[timestamp, open, high, low, close] rows."""
        return await self._fetch(endpoints.get_ohlc(id, days, currency))

    async def supported_currencies(self) -> List[str]:
        return await self._fetch(endpoints.supported_currencies())

    async def get_exchange_rate(self, from_: Ids, to: Ids = "usd") -> Dict[str, Any]:
        """Rate of `from_` expressed in `to`, e.g. bitcoin -> ethereum."""
        return await self._fetch(endpoints.get_exchange_rate(from_, to))

    async def aclose(self):
        await self.connection.aclose()

    async def close(self):
        await self.aclose()

    async def __aenter__(self) -> "CoinGeckoClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
