from .app_factory import create_app
from .cart_router import router as cart_router
from .health_router import router as health_router

__all__ = ["cart_router", "create_app", "health_router"]
