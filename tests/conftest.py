import pytest
from fastapi.testclient import TestClient

from storefront_proxy.infrastructure.configuration.main_settings import Settings
from storefront_proxy.infrastructure.entrypoints.api.app_factory import create_app

STORE_URL = "https://shop.example.com/wp-json/wc/store/v1"
RATES_URL = "https://rates.example.com/v6"


@pytest.fixture
def settings():
    return Settings(
        woo_api_url=STORE_URL,
        woo_consumer_key="ck_test",
        woo_consumer_secret="cs_test",
        exchange_rate_api_key=None,
        exchange_rate_api_url=RATES_URL,
        exchange_rate_warm_on_startup=False,
        cors_origins=["http://localhost:8080"],
        static_dir=None,
    )


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client
