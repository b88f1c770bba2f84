from storefront_proxy.application.core.exceptions.domain_error import DomainError
from storefront_proxy.application.core.exceptions.infra_error import InfraError
from storefront_proxy.application.core.exceptions.provider_error import ProviderError
from storefront_proxy.application.core.exceptions.store_api_error import StoreApiError
from storefront_proxy.application.core.exceptions.store_unavailable_error import (
    StoreUnavailableError,
)

__all__ = [
    "DomainError",
    "InfraError",
    "ProviderError",
    "StoreApiError",
    "StoreUnavailableError",
]
