from storefront_proxy.infrastructure.configuration.main_settings import Settings

__all__ = ["Settings"]
