from __future__ import annotations

import time
from typing import Any

import httpx

from storefront_proxy.application.core.exceptions import StoreApiError, StoreUnavailableError
from storefront_proxy.application.core.value_objects import CartSession, RelayResult
from storefront_proxy.infrastructure.observability.logger_factory_service import get_logger
from storefront_proxy.infrastructure.observability.metrics_service import (
    UPSTREAM_CALLS_TOTAL,
    UPSTREAM_LATENCY_SECONDS,
)
from storefront_proxy.infrastructure.observability.redaction_service import redact_token
from storefront_proxy.infrastructure.providers.store.clients.store_http_client import (
    PROVIDER,
    StoreHttpClient,
)
from storefront_proxy.infrastructure.providers.store.nonce_store import NonceStore
from storefront_proxy.infrastructure.providers.store.store_operations import StoreOperation

logger = get_logger(__name__)

SESSION_HEADERS = ("woocommerce-session", "Cart-Token")
NONCE_HEADERS = ("Nonce", "X-WP-Nonce")


class StoreRelayService:
    """Forwards one client call to the store and keeps the session token and nonce flowing.

    The nonce the store hands out is remembered per cart token, so a
    mutating call only ever carries the nonce of its own session.
    """

    def __init__(self, client: StoreHttpClient, nonces: NonceStore):
        self.client = client
        self.nonces = nonces

    async def resolve_session(
        self, cart_token: str | None, explicit_nonce: str | None = None
    ) -> CartSession:
        """Builds the request's session; a nonce sent by the client wins over the stored one."""
        nonce = explicit_nonce or await self.nonces.get(cart_token)
        return CartSession(cart_token=cart_token or None, nonce=nonce)

    async def execute(
        self, operation: StoreOperation, session: CartSession, json_body: Any = None
    ) -> RelayResult:
        if not operation.carries_session:
            session = CartSession()
        return await self.forward(
            operation.method,
            operation.path,
            session,
            json_body=json_body,
            params=operation.params or None,
            operation_name=operation.name,
            error_message=operation.error_message,
            unavailable_message=operation.unavailable_message,
        )

    async def forward(
        self,
        method: str,
        path: str,
        session: CartSession,
        json_body: Any = None,
        params: dict[str, Any] | None = None,
        operation_name: str = "relay",
        error_message: str = "Store API request failed",
        unavailable_message: str = "Store API request failed.",
    ) -> RelayResult:
        headers: dict[str, str] = {}
        if session.cart_token:
            headers["Cart-Token"] = session.cart_token
        else:
            logger.debug("No cart token from client, store will start a new session", operation=operation_name)
        if session.nonce:
            headers["Nonce"] = session.nonce
        elif method.upper() != "GET":
            logger.warning("No nonce known for session", operation=operation_name)

        start = time.perf_counter()
        try:
            response = await self.client.send(
                method, path, headers=headers, json_data=json_body, params=params
            )
        except StoreUnavailableError as exc:
            UPSTREAM_CALLS_TOTAL.labels(operation=operation_name, outcome="unavailable").inc()
            logger.error(
                "Store API unreachable",
                operation=operation_name,
                error_type=type(exc.__cause__ or exc).__name__,
                error_details=exc.cause,
            )
            raise StoreUnavailableError(
                provider=PROVIDER, message=unavailable_message, cause=exc.cause
            ) from exc
        finally:
            UPSTREAM_LATENCY_SECONDS.labels(operation=operation_name).observe(
                time.perf_counter() - start
            )

        issued_token = _first_header(response, SESSION_HEADERS)
        nonce = await self._capture_nonce(response, session, issued_token, operation_name)
        body = self._parse_body(response, operation_name, unavailable_message)

        if not response.is_success:
            UPSTREAM_CALLS_TOTAL.labels(operation=operation_name, outcome="error").inc()
            message = body.get("message") if isinstance(body, dict) else None
            logger.error(
                "Store API returned an error",
                operation=operation_name,
                error_type="StoreApiError",
                error_code=response.status_code,
                error_details=message,
            )
            raise StoreApiError(
                provider=PROVIDER,
                message=message or error_message,
                status_code=response.status_code,
                details=body,
                session_token=issued_token,
                nonce=nonce,
            )

        UPSTREAM_CALLS_TOTAL.labels(operation=operation_name, outcome="success").inc()
        return RelayResult(
            status_code=response.status_code,
            body=body,
            session_token=issued_token,
            nonce=nonce,
        )

    async def _capture_nonce(
        self,
        response: httpx.Response,
        session: CartSession,
        issued_token: str | None,
        operation_name: str,
    ) -> str | None:
        if issued_token:
            logger.info(
                "Store issued session token",
                operation=operation_name,
                cart_token=redact_token(issued_token),
            )
            await self.nonces.rebind(session.cart_token, issued_token, session.nonce)

        nonce = _first_header(response, NONCE_HEADERS)
        if not nonce:
            return session.nonce
        await self.nonces.put(issued_token or session.cart_token, nonce)
        logger.info("Captured nonce from store response", operation=operation_name)
        return nonce

    @staticmethod
    def _parse_body(
        response: httpx.Response, operation_name: str, unavailable_message: str
    ) -> Any:
        if response.status_code == 204 or not response.content:
            return None if response.status_code == 204 else {}
        try:
            return response.json()
        except ValueError as exc:
            if response.is_success:
                logger.warning("Store API success response was not JSON", operation=operation_name)
                return {}
            UPSTREAM_CALLS_TOTAL.labels(operation=operation_name, outcome="unavailable").inc()
            raise StoreUnavailableError(
                provider=PROVIDER,
                message=unavailable_message,
                status_code=response.status_code,
                cause=f"Store API {operation_name} failed with status {response.status_code}",
            ) from exc


def _first_header(response: httpx.Response, names: tuple[str, ...]) -> str | None:
    for name in names:
        value = response.headers.get(name)
        if value:
            return value
    return None
