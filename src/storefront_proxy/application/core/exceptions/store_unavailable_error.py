from __future__ import annotations

from dataclasses import dataclass

from storefront_proxy.application.core.exceptions.provider_error import ProviderError


@dataclass
class StoreUnavailableError(ProviderError):
    """Transport or parsing failure while talking to the store."""

    cause: str = ""
