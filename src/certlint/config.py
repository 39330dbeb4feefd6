"""
Configuration — typed, validated settings loaded from environment/.env.

Uses pydantic-settings. Sub-settings are plain BaseModel classes populated by
AppSettings via env_nested_delimiter="__", so FEEDS__GTLD_JSON_URL maps to
feeds.gtld_json_url and HTTP__READ_TIMEOUT_SECONDS to http.read_timeout_seconds.
"""

from __future__ import annotations

from pathlib import Path

import httpx
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# ICANN gTLD registry (v2). No ccTLDs, but full delegation/removal dates.
ICANN_GTLD_JSON = "https://www.icann.org/resources/registries/gtlds/v2/gtlds.json"
# IANA list of all TLDs, ccTLDs included, without any dates.
IANA_TLDS = "https://data.iana.org/TLD/tlds-alpha-by-domain.txt"


class FeedSettings(BaseModel):
    """Where the two TLD feeds are fetched from."""

    gtld_json_url: str = Field(default=ICANN_GTLD_JSON, description="ICANN gTLD JSON feed URL")
    tld_list_url: str = Field(default=IANA_TLDS, description="IANA TLD list URL")


class HttpSettings(BaseModel):
    """
    Per-phase timeouts for feed requests, in seconds.

    httpx applies `connect` to TCP connection establishment and, separately,
    to the TLS handshake; there is no separate handshake budget, so a
    handshake may take the full connect timeout. `read` bounds the wait for
    the first response byte and every subsequent one.
    """

    connect_timeout_seconds: float = Field(default=15.0, gt=0)
    read_timeout_seconds: float = Field(default=5.0, gt=0)
    write_timeout_seconds: float = Field(default=5.0, gt=0)
    pool_timeout_seconds: float = Field(default=5.0, gt=0)

    def timeout(self) -> httpx.Timeout:
        return httpx.Timeout(
            connect=self.connect_timeout_seconds,
            read=self.read_timeout_seconds,
            write=self.write_timeout_seconds,
            pool=self.pool_timeout_seconds,
        )


class AppSettings(BaseSettings):
    """
    Root application settings.

    Load order (highest priority first):
      1. Environment variables
      2. .env file
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    feeds: FeedSettings = Field(default_factory=lambda: FeedSettings())
    http: HttpSettings = Field(default_factory=lambda: HttpSettings())
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.strip().upper()
