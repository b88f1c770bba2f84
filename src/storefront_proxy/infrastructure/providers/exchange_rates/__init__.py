from storefront_proxy.infrastructure.providers.exchange_rates.exchange_rate_cache import (
    ExchangeRateCache,
)
from storefront_proxy.infrastructure.providers.exchange_rates.exchange_rate_client import (
    ExchangeRateClient,
)

__all__ = [
    "ExchangeRateCache",
    "ExchangeRateClient",
]
