# src/roomprice/adapters/config.py
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    # App & logging
    ENV: str = Field(default="dev")
    LOG_LEVEL: str = Field(default="INFO")

    # -----------------------------
    # Market data
    # -----------------------------
    # "reference" prices against the embedded catalogue,
    # "http" against an external market-data provider.
    MARKET_DATA_SOURCE: Literal["reference", "http"] = Field(default="reference")
    MARKET_DATA_BASE_URL: str | None = Field(default=None)
    MARKET_DATA_API_KEY: str | None = Field(default=None)
    MARKET_DATA_TIMEOUT_S: float = Field(default=10.0)
    MARKET_DATA_MAX_RETRIES: int = Field(default=2, ge=0)
    MARKET_DATA_BACKOFF_BASE_S: float = Field(default=0.5, ge=0)

    # Used when no reference listing matches (location, room type)
    DEFAULT_MARKET_AVERAGE: int = Field(default=400)

    model_config = SettingsConfigDict(
        env_prefix="ROOMPRICE_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("MARKET_DATA_SOURCE", mode="before")
    @classmethod
    def _lower_source(cls, v: Any) -> Any:
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_level(cls, v: Any) -> Any:
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator("MARKET_DATA_TIMEOUT_S", "DEFAULT_MARKET_AVERAGE", mode="before")
    @classmethod
    def _positive(cls, v: Any) -> Any:
        f = float(v)
        if f <= 0:
            raise ValueError("must be > 0")
        return v


config = AppConfig()
