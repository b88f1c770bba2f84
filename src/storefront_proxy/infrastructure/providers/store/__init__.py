from storefront_proxy.infrastructure.providers.store.clients.store_http_client import (
    StoreHttpClient,
)
from storefront_proxy.infrastructure.providers.store.nonce_store import NonceStore
from storefront_proxy.infrastructure.providers.store.store_relay_service import StoreRelayService

__all__ = [
    "NonceStore",
    "StoreHttpClient",
    "StoreRelayService",
]
