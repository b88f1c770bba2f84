from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CartSession:
    """Session context of one client request: its cart token and known nonce."""

    cart_token: str | None = None
    nonce: str | None = None
