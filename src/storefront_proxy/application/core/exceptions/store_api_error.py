from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from storefront_proxy.application.core.exceptions.provider_error import ProviderError


@dataclass
class StoreApiError(ProviderError):
    """The store answered with a non-success status.

    Carries the upstream body and whatever session token/nonce the failing
    response still returned, so the client keeps its session.
    """

    details: Any = None
    session_token: str | None = None
    nonce: str | None = field(default=None, repr=False)
