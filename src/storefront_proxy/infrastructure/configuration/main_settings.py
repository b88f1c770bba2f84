from pathlib import Path

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from storefront_proxy.infrastructure.configuration.exchange_rate_settings import (
    ExchangeRateSettings,
)
from storefront_proxy.infrastructure.configuration.store_settings import StoreSettings


class Settings(StoreSettings, ExchangeRateSettings):
    """
    Combines all settings.
    Inherits from StoreSettings and ExchangeRateSettings.
    """
    app_name: str = "Storefront Proxy"
    env: str = Field(default="local", alias="APP_ENV")
    host: str = "0.0.0.0"
    port: int = 50000
    log_level: str = "INFO"
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:8080"])
    static_dir: Path | None = None

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)
