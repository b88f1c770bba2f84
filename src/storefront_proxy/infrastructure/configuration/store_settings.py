import base64

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreSettings(BaseSettings):
    """
    Settings for the upstream store API (WooCommerce Store API).
    """
    woo_api_url: str = Field(..., description="Store API base URL, e.g. https://shop.example.com/wp-json/wc/store/v1")
    woo_consumer_key: SecretStr | None = None
    woo_consumer_secret: SecretStr | None = None

    proxy_user_agent: str = Field(default="Storefront-Python-Proxy/1.0")
    upstream_timeout_seconds: float = Field(default=15.0, gt=0)
    nonce_store_max_sessions: int = Field(default=1024, ge=1)

    @property
    def has_consumer_credentials(self) -> bool:
        return bool(self.woo_consumer_key and self.woo_consumer_secret)

    def basic_auth_header(self) -> str | None:
        """Basic auth value built from the consumer key pair, or None when incomplete."""
        if not self.has_consumer_credentials:
            return None
        creds = f"{self.woo_consumer_key.get_secret_value()}:{self.woo_consumer_secret.get_secret_value()}"
        encoded = base64.b64encode(creds.encode("utf-8")).decode("utf-8")
        return f"Basic {encoded}"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
