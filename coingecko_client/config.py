"""Client configuration.

Values come from keyword arguments first, then `COINGECKO_*` environment
variables (or a local `.env` file), then the defaults below.
"""
from __future__ import annotations

from typing import Dict, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

COINGECKO_BASE_URL = "https://api.coingecko.com/api/v3/"
COINGECKO_PRO_BASE_URL = "https://pro-api.coingecko.com/api/v3/"
PRO_KEY_HEADER = "x-cg-pro-api-key"
DEFAULT_USER_AGENT = "coingecko-client/0.1.0"


class CoinGeckoSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="COINGECKO_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        frozen=True,
    )

    pro_api_key: Optional[str] = Field(
        default=None,
        description="Pro tier API key. Selects the pro base URL and auth header.",
    )
    base_url: Optional[str] = Field(
        default=None,
        description="Overrides the tier-selected base URL.",
    )
    timeout_s: float = Field(default=30.0, gt=0, description="Per-request timeout (seconds).")
    retries: int = Field(
        default=5,
        ge=0,
        le=20,
        description="Extra attempts on transient failures (network errors, 5xx).",
    )
    retry_backoff_s: float = Field(
        default=0.5,
        ge=0,
        description="First wait between retries; doubles on each attempt.",
    )
    user_agent: str = Field(default=DEFAULT_USER_AGENT, min_length=1)

    @property
    def is_pro(self) -> bool:
        return bool(self.pro_api_key)

    def resolved_base_url(self) -> str:
        if self.base_url:
            return self.base_url if self.base_url.endswith("/") else self.base_url + "/"
        return COINGECKO_PRO_BASE_URL if self.is_pro else COINGECKO_BASE_URL

    def headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json", "User-Agent": self.user_agent}
        if self.is_pro:
            headers[PRO_KEY_HEADER] = self.pro_api_key
        return headers
