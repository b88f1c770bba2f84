from fastapi import APIRouter, Depends

from storefront_proxy.infrastructure.entrypoints.api.dependencies import get_exchange_rate_cache
from storefront_proxy.infrastructure.providers.exchange_rates import ExchangeRateCache

router = APIRouter()


@router.get("/exchange-rates")
async def get_exchange_rates(
    cache: ExchangeRateCache = Depends(get_exchange_rate_cache),
) -> dict[str, float]:
    rates = await cache.get_rates()
    return rates.to_dict()
