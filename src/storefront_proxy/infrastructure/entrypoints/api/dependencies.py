from fastapi import Depends, Header, Request

from storefront_proxy.application.core.value_objects import CartSession
from storefront_proxy.infrastructure.providers.exchange_rates import ExchangeRateCache
from storefront_proxy.infrastructure.providers.store import StoreRelayService


def get_store_relay(request: Request) -> StoreRelayService:
    return request.app.state.store_relay


def get_exchange_rate_cache(request: Request) -> ExchangeRateCache:
    return request.app.state.exchange_rates


async def get_cart_session(
    cart_token: str | None = Header(default=None, alias="Cart-Token"),
    nonce: str | None = Header(default=None, alias="Nonce"),
    relay: StoreRelayService = Depends(get_store_relay),
) -> CartSession:
    """Session context of the current request, built from its headers and the nonce store."""
    return await relay.resolve_session(cart_token, nonce)
