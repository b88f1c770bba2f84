import base64

import pytest

from storefront_proxy.infrastructure.configuration.main_settings import Settings


@pytest.fixture
def store_env(monkeypatch):
    monkeypatch.setenv("WOO_API_URL", "https://shop.example.com/wp-json/wc/store/v1")
    monkeypatch.setenv("WOO_CONSUMER_KEY", "ck_env")
    monkeypatch.setenv("WOO_CONSUMER_SECRET", "cs_env")
    monkeypatch.setenv("EXCHANGE_RATE_API_KEY", "rate-env")
    monkeypatch.setenv("PORT", "51000")


def test_settings_load_from_environment(store_env):
    settings = Settings()

    assert settings.woo_api_url == "https://shop.example.com/wp-json/wc/store/v1"
    assert settings.exchange_rate_api_key.get_secret_value() == "rate-env"
    assert settings.port == 51000
    assert settings.exchange_rate_cache_seconds == 3600


def test_basic_auth_header_from_key_pair(store_env):
    settings = Settings()

    expected = base64.b64encode(b"ck_env:cs_env").decode("utf-8")
    assert settings.has_consumer_credentials
    assert settings.basic_auth_header() == f"Basic {expected}"


def test_basic_auth_header_requires_both_halves(store_env, monkeypatch):
    monkeypatch.delenv("WOO_CONSUMER_SECRET")

    settings = Settings()

    assert settings.basic_auth_header() is None


def test_defaults():
    settings = Settings(woo_api_url="https://shop.example.com")

    assert settings.port == 50000
    assert settings.cors_origins == ["http://localhost:8080"]
    assert settings.proxy_user_agent == "Storefront-Python-Proxy/1.0"
