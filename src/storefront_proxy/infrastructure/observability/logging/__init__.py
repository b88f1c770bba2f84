from storefront_proxy.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)
from storefront_proxy.infrastructure.observability.logging.schema_processor import (
    proxy_schema_processor,
)

__all__ = [
    "CorrelationMiddleware",
    "proxy_schema_processor",
]
