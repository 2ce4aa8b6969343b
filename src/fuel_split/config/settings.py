from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    currency_symbol: str = Field("₹", alias="FUEL_SPLIT_CURRENCY_SYMBOL")
    number_locale: str = Field("en-IN", alias="FUEL_SPLIT_NUMBER_LOCALE")
    max_fraction_digits: int = Field(2, ge=0, le=6, alias="FUEL_SPLIT_MAX_FRACTION_DIGITS")
    log_level: str = Field("INFO", alias="FUEL_SPLIT_LOG_LEVEL")


@lru_cache
def get_settings() -> Settings:
    return Settings()
