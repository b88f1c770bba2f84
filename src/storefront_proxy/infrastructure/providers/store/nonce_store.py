from __future__ import annotations

import asyncio
from collections import OrderedDict


class NonceStore:
    """Nonces captured from the store, kept per cart session token.

    Bounded: once ``max_sessions`` tokens are tracked, the least recently
    written session is evicted.
    """

    def __init__(self, max_sessions: int = 1024) -> None:
        self._max_sessions = max_sessions
        self._nonces: OrderedDict[str, str] = OrderedDict()
        self._lock = asyncio.Lock()

    async def get(self, cart_token: str | None) -> str | None:
        if not cart_token:
            return None
        async with self._lock:
            return self._nonces.get(cart_token)

    async def put(self, cart_token: str | None, nonce: str | None) -> None:
        if not cart_token or not nonce:
            return
        async with self._lock:
            self._store(cart_token, nonce)

    async def rebind(
        self, old_token: str | None, new_token: str | None, nonce: str | None = None
    ) -> None:
        """Moves a session's nonce to the token the store just issued.

        The entry under ``old_token`` is dropped. ``nonce``, when given (a
        nonce the client sent with the call), is recorded instead of the
        stored one.
        """
        if not new_token:
            return
        async with self._lock:
            previous = self._nonces.pop(old_token, None) if old_token else None
            carried = nonce or previous
            if carried:
                self._store(new_token, carried)

    def _store(self, cart_token: str, nonce: str) -> None:
        self._nonces[cart_token] = nonce
        self._nonces.move_to_end(cart_token)
        while len(self._nonces) > self._max_sessions:
            self._nonces.popitem(last=False)

    def __len__(self) -> int:
        return len(self._nonces)
