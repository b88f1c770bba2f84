from storefront_proxy.application.core.exceptions import ProviderError, StoreApiError
from storefront_proxy.application.core.value_objects import ExchangeRates


def test_fallback_rates():
    assert ExchangeRates.fallback().to_dict() == {"USD": 1, "ZAR": 19.00}


def test_provider_error_str_includes_status():
    assert str(ProviderError(provider="store", message="boom", status_code=503)) == "store: boom status=503"
    assert str(StoreApiError(provider="store", message="Not found", status_code=404)) == "store: Not found status=404"
