from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class RelayResult:
    status_code: int
    body: Any
    session_token: str | None = None
    nonce: str | None = None
