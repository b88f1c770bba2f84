from storefront_proxy.application.core.value_objects.cart_session import CartSession
from storefront_proxy.application.core.value_objects.exchange_rates import ExchangeRates
from storefront_proxy.application.core.value_objects.relay_result import RelayResult

__all__ = [
    "CartSession",
    "ExchangeRates",
    "RelayResult",
]
