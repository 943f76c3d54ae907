"""Request builders for the supported CoinGecko endpoints.

Each function maps its arguments to a `RequestSpec`; nothing here talks to the
network. `ids` and `currencies` accept a single string or a sequence of
strings, sequences are sent comma-joined.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Sequence, Union

Ids = Union[str, Sequence[str]]
Days = Union[int, str]

HOURLY_MAX_DAYS = 90


@dataclass(frozen=True)
class RequestSpec:
    path: str
    query: Dict[str, Any] = field(default_factory=dict)
    method: str = "GET"


def get_prices(ids: Ids, currencies: Ids = "usd") -> RequestSpec:
    return RequestSpec("simple/price", {"ids": ids, "vs_currencies": currencies})


def get_historical_price_on_date(id: str, date: str) -> RequestSpec:
    """`date` must be DD-MM-YYYY, e.g. '30-12-2017'."""
    return RequestSpec(f"coins/{id}/history", {"date": date})


def get_minutely_historical_prices(id: str, currency: str = "usd") -> RequestSpec:
    # 5-minute points are only served for the last 24 hours
    return RequestSpec(f"coins/{id}/market_chart", {"vs_currency": currency, "days": 1})


def get_hourly_historical_prices(id: str, days: int, currency: str = "usd") -> RequestSpec:
    """Hourly points are only served up to 90 days back.

    Longer ranges fall back to the daily request in the default currency.
    """
    if days > HOURLY_MAX_DAYS:
        return get_daily_historical_prices(id, days)
    return RequestSpec(f"coins/{id}/market_chart", {"vs_currency": currency, "days": days})


def get_daily_historical_prices(id: str, days: Days, currency: str = "usd") -> RequestSpec:
    return RequestSpec(
        f"coins/{id}/market_chart",
        {"vs_currency": currency, "days": days, "interval": "daily"},
    )


def get_ohlc(id: str, days: Days, currency: str = "usd") -> RequestSpec:
    """`days` is one of 1/7/14/30/90/180/365/'max'; the API rejects anything else."""
    return RequestSpec(f"coins/{id}/ohlc", {"vs_currency": currency, "days": days})


def supported_currencies() -> RequestSpec:
    return RequestSpec("simple/supported_vs_currencies")


def get_exchange_rate(from_: Ids, to: Ids = "usd") -> RequestSpec:
    return get_prices(ids=from_, currencies=to)
