from storefront_proxy.infrastructure.observability.redaction_service import (
    redact_dict,
    redact_text,
    redact_token,
)


def test_redact_dict_hides_session_headers():
    headers = {
        "Cart-Token": "eyJ0eXAiOiJKV1Qi",
        "Nonce": "abc123",
        "Authorization": "Basic Y2s6Y3M=",
        "User-Agent": "Storefront-Python-Proxy/1.0",
    }

    redacted = redact_dict(headers)

    assert redacted["Cart-Token"] == "[REDACTED]"
    assert redacted["Nonce"] == "[REDACTED]"
    assert redacted["Authorization"] == "[REDACTED]"
    assert redacted["User-Agent"] == "Storefront-Python-Proxy/1.0"


def test_redact_text_hides_rate_api_key_in_url():
    url = "https://v6.exchangerate-api.com/v6/abcdef123456/latest/USD"

    assert redact_text(url) == "https://v6.exchangerate-api.com/v6/[REDACTED]/latest/USD"


def test_redact_token_keeps_suffix():
    assert redact_token("0123456789abcdef") == "[REDACTED]...cdef"
    assert redact_token("short") == "[REDACTED]"
    assert redact_token(None) is None
