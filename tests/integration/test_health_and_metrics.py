def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["service"] == "storefront-proxy"


def test_metrics_exposes_proxy_counters(client):
    response = client.get("/metrics/")

    assert response.status_code == 200
    assert "storefront_exchange_rate_lookups_total" in response.text


def test_cors_exposes_session_headers(client):
    response = client.options(
        "/api/cart",
        headers={
            "Origin": "http://localhost:8080",
            "Access-Control-Request-Method": "GET",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:8080"


def test_cors_simple_request_exposes_cart_token(client):
    response = client.get("/health", headers={"Origin": "http://localhost:8080"})

    exposed = response.headers["access-control-expose-headers"]
    assert "Cart-Token" in exposed
    assert "Nonce" in exposed
    assert "X-Correlation-ID" in exposed
