from __future__ import annotations

import asyncio
import time
from collections.abc import Callable

from storefront_proxy.application.core.exceptions import ProviderError
from storefront_proxy.application.core.value_objects import ExchangeRates
from storefront_proxy.infrastructure.observability.logger_factory_service import get_logger
from storefront_proxy.infrastructure.observability.metrics_service import (
    EXCHANGE_RATE_LOOKUPS_TOTAL,
)
from storefront_proxy.infrastructure.providers.exchange_rates.exchange_rate_client import (
    ExchangeRateClient,
)

logger = get_logger(__name__)


class ExchangeRateCache:
    """Serves the last fetched rate pair while it is younger than ``ttl_seconds``.

    A failed or unconfigured lookup answers with ``ExchangeRates.fallback()``
    and leaves the cache untouched, so the next call tries the API again.
    """

    def __init__(
        self,
        client: ExchangeRateClient,
        ttl_seconds: float = 3600.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._client = client
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._cached: ExchangeRates | None = None
        self._fetched_at: float | None = None
        self._lock = asyncio.Lock()

    def _fresh(self) -> ExchangeRates | None:
        if self._cached is None or self._fetched_at is None:
            return None
        if self._clock() - self._fetched_at >= self._ttl_seconds:
            return None
        return self._cached

    async def get_rates(self) -> ExchangeRates:
        cached = self._fresh()
        if cached is not None:
            logger.info("Using cached exchange rates")
            EXCHANGE_RATE_LOOKUPS_TOTAL.labels(source="cache").inc()
            return cached

        if not self._client.is_configured:
            logger.error("EXCHANGE_RATE_API_KEY is not set, serving fallback rates")
            EXCHANGE_RATE_LOOKUPS_TOTAL.labels(source="fallback").inc()
            return ExchangeRates.fallback()

        async with self._lock:
            # another request may have refreshed while we waited
            cached = self._fresh()
            if cached is not None:
                EXCHANGE_RATE_LOOKUPS_TOTAL.labels(source="cache").inc()
                return cached
            try:
                rates = await self._client.fetch_latest()
            except ProviderError as exc:
                logger.error(
                    "Failed to fetch exchange rates, serving fallback rates",
                    error_type=type(exc).__name__,
                    error_details=str(exc),
                )
                EXCHANGE_RATE_LOOKUPS_TOTAL.labels(source="fallback").inc()
                return ExchangeRates.fallback()

            self._cached = rates
            self._fetched_at = self._clock()
            logger.info("Fetched exchange rates", usd=rates.USD, zar=rates.ZAR)
            EXCHANGE_RATE_LOOKUPS_TOTAL.labels(source="api").inc()
            return rates
