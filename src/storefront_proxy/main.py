import uvicorn

from storefront_proxy.infrastructure.configuration.main_settings import Settings
from storefront_proxy.infrastructure.entrypoints.api.app_factory import create_app


def dev():
    """Run the proxy server."""
    settings = Settings()
    uvicorn.run(
        "storefront_proxy.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


# Instantiate global app for ASGI
settings = Settings()
app = create_app(settings)
