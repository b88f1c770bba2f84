import httpx

from storefront_proxy.application.core.exceptions import ProviderError
from storefront_proxy.application.core.value_objects import ExchangeRates
from storefront_proxy.infrastructure.configuration.exchange_rate_settings import (
    ExchangeRateSettings,
)
from storefront_proxy.infrastructure.observability.logger_factory_service import get_logger
from storefront_proxy.infrastructure.observability.redaction_service import redact_text

logger = get_logger(__name__)

PROVIDER = "exchangerate-api"


class ExchangeRateClient:
    """Fetches the latest USD based conversion rates from ExchangeRate-API."""

    def __init__(self, settings: ExchangeRateSettings, client: httpx.AsyncClient):
        self.settings = settings
        self.base_url = settings.exchange_rate_api_url.rstrip("/")
        self._client = client

    @property
    def is_configured(self) -> bool:
        return self.settings.exchange_rate_api_key is not None and bool(
            self.settings.exchange_rate_api_key.get_secret_value()
        )

    def _latest_url(self) -> str:
        key = self.settings.exchange_rate_api_key.get_secret_value()
        return f"{self.base_url}/{key}/latest/{self.settings.exchange_rate_base_currency}"

    async def fetch_latest(self) -> ExchangeRates:
        if not self.is_configured:
            raise ProviderError(provider=PROVIDER, message="API key is not configured")

        url = self._latest_url()
        logger.info("Fetching exchange rates", url=redact_text(url))
        try:
            response = await self._client.get(url)
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise ProviderError(provider=PROVIDER, message=str(exc) or type(exc).__name__) from exc

        if not isinstance(data, dict):
            data = {}
        rates = data.get("conversion_rates")
        if not response.is_success or data.get("result") != "success" or not rates:
            reason = data.get("error-type") or data.get("result")
            raise ProviderError(
                provider=PROVIDER,
                message=reason or "Unknown error",
                status_code=response.status_code,
            )

        try:
            return ExchangeRates(USD=float(rates["USD"]), ZAR=float(rates["ZAR"]))
        except (KeyError, TypeError, ValueError) as exc:
            raise ProviderError(
                provider=PROVIDER, message=f"Malformed conversion_rates: {exc}"
            ) from exc
