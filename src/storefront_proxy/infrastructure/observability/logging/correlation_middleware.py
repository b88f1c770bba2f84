"""Pure ASGI middleware tying every log line of a request to its storefront session.

Binds the correlation id, the redacted Cart-Token and the route into
structlog contextvars, echoes the correlation id back to the browser and
logs one completion line per request.
"""

from __future__ import annotations

import time
from typing import Any
from uuid import uuid4

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars

from storefront_proxy.infrastructure.observability.redaction_service import redact_token

logger = structlog.get_logger(context_component="correlation_middleware")

CORRELATION_HEADER = "X-Correlation-ID"


class CorrelationMiddleware:
    """ASGI middleware that binds request and cart session context to structlog."""

    def __init__(self, app: Any) -> None:
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        clear_contextvars()
        correlation_id = _header(scope, CORRELATION_HEADER) or str(uuid4())
        cart_token = _header(scope, "Cart-Token")
        bind_contextvars(
            correlation_id=correlation_id,
            context_endpoint=str(scope.get("path", "/")),
            context_method=str(scope.get("method", "UNKNOWN")),
        )
        if cart_token:
            bind_contextvars(cart_token=redact_token(cart_token))

        http_status = 500
        start = time.perf_counter()

        async def send_with_correlation(message: dict[str, Any]) -> None:
            nonlocal http_status
            if message.get("type") == "http.response.start":
                http_status = message.get("status", 500)
                headers = list(message.get("headers", []))
                headers.append((b"x-correlation-id", correlation_id.encode("latin-1")))
                message = {**message, "headers": headers}
            await send(message)

        try:
            await self.app(scope, receive, send_with_correlation)
        finally:
            await logger.ainfo(
                "Request processed",
                processing_status="SUCCESS" if http_status < 400 else "ERROR",
                processing_duration_ms=round((time.perf_counter() - start) * 1000, 2),
                processing_http_status=http_status,
                has_session=cart_token is not None,
            )


def _header(scope: dict[str, Any], name: str) -> str | None:
    """Case-insensitive lookup in the raw ASGI header list."""
    wanted = name.lower().encode("latin-1")
    for key, value in scope.get("headers", []):
        if key.lower() == wanted:
            return value.decode("latin-1")
    return None
