from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from prometheus_client import make_asgi_app

from storefront_proxy.infrastructure.configuration.main_settings import Settings
from storefront_proxy.infrastructure.entrypoints.api.cart_router import router as cart_router
from storefront_proxy.infrastructure.entrypoints.api.error_handlers import register_error_handlers
from storefront_proxy.infrastructure.entrypoints.api.exchange_rates_router import (
    router as exchange_rates_router,
)
from storefront_proxy.infrastructure.entrypoints.api.health_router import (
    router as health_router,
)
from storefront_proxy.infrastructure.entrypoints.api.products_router import (
    router as products_router,
)
from storefront_proxy.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
)
from storefront_proxy.infrastructure.observability.logging import CorrelationMiddleware
from storefront_proxy.infrastructure.providers.exchange_rates import (
    ExchangeRateCache,
    ExchangeRateClient,
)
from storefront_proxy.infrastructure.providers.store import (
    NonceStore,
    StoreHttpClient,
    StoreRelayService,
)

logger = LoggerFactoryService.build_logger(__name__)

EXPOSED_HEADERS = ["Cart-Token", "woocommerce-session", "Nonce", "X-Correlation-ID"]


def _log_boot_diagnostics(settings: Settings) -> None:
    def loaded(secret) -> str:
        return "Loaded" if secret is not None and secret.get_secret_value() else "UNDEFINED"

    logger.info("--- BOOT DIAGNOSTICS ---")
    logger.info(f"App Name: {settings.app_name}")
    logger.info(f"Env: {settings.env}")
    logger.info(f"WOO_API_URL: {settings.woo_api_url}")
    logger.info(f"WOO_CONSUMER_KEY: {loaded(settings.woo_consumer_key)}")
    logger.info(f"WOO_CONSUMER_SECRET: {loaded(settings.woo_consumer_secret)}")
    logger.info(f"EXCHANGE_RATE_API_KEY: {loaded(settings.exchange_rate_api_key)}")
    logger.info("------------------------")
    if not settings.has_consumer_credentials:
        logger.error(
            "Store consumer key or secret is missing. Calls needing Basic Auth will fail; "
            "Store API cart calls should still work."
        )


def _build_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        async with httpx.AsyncClient(timeout=settings.upstream_timeout_seconds) as client:
            app.state.store_relay = StoreRelayService(
                StoreHttpClient(settings, client),
                NonceStore(max_sessions=settings.nonce_store_max_sessions),
            )
            app.state.exchange_rates = ExchangeRateCache(
                ExchangeRateClient(settings, client),
                ttl_seconds=settings.exchange_rate_cache_seconds,
            )
            if settings.exchange_rate_warm_on_startup:
                rates = await app.state.exchange_rates.get_rates()
                logger.info(f"Initial exchange rates fetched on startup: {rates.to_dict()}")
            yield

    return lifespan


def create_app(settings: Settings) -> FastAPI:
    LoggerFactoryService.configure_root_logger(settings.log_level)
    _log_boot_diagnostics(settings)

    app = FastAPI(title=settings.app_name, lifespan=_build_lifespan(settings))
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=EXPOSED_HEADERS,
    )
    app.add_middleware(CorrelationMiddleware)
    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(cart_router, prefix="/api")
    app.include_router(products_router, prefix="/api")
    app.include_router(exchange_rates_router, prefix="/api")
    app.mount("/metrics", make_asgi_app())

    # must stay last: a root mount shadows every route added after it
    if settings.static_dir is not None:
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")

    return app
