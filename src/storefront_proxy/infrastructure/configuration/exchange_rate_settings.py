from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class ExchangeRateSettings(BaseSettings):
    """
    Settings for the ExchangeRate-API lookup and its in-memory cache.
    """
    exchange_rate_api_key: SecretStr | None = None
    exchange_rate_api_url: str = Field(default="https://v6.exchangerate-api.com/v6")
    exchange_rate_base_currency: str = Field(default="USD")
    exchange_rate_cache_seconds: float = Field(default=3600.0, ge=0)
    exchange_rate_warm_on_startup: bool = True

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
