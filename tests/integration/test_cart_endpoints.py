import json

import httpx
import respx

STORE_URL = "https://shop.example.com/wp-json/wc/store/v1"


def _cart_for_token(request: httpx.Request) -> httpx.Response:
    token = request.headers.get("Cart-Token") or "fresh-token"
    return httpx.Response(
        200,
        json={"items": [], "items_count": 0},
        headers={"woocommerce-session": token, "Nonce": f"nonce-{token}"},
    )


def test_init_without_client_token_returns_fresh_token(client):
    with respx.mock(base_url=STORE_URL) as store:
        route = store.get("/cart").respond(
            200,
            json={"items": []},
            headers={"woocommerce-session": "new-session", "Nonce": "nonce-1"},
        )

        response = client.get("/api/init")

    assert response.status_code == 200
    assert response.json() == {"cart": {"items": []}, "cartToken": "new-session"}
    assert response.headers["Cart-Token"] == "new-session"
    assert response.headers["Nonce"] == "nonce-1"
    assert "Cart-Token" not in route.calls.last.request.headers


def test_init_forwards_client_token_and_proxy_headers(client):
    with respx.mock(base_url=STORE_URL) as store:
        route = store.get("/cart").respond(200, json={"items": []})

        response = client.get("/api/init", headers={"Cart-Token": "existing"})

    sent = route.calls.last.request.headers
    assert sent["Cart-Token"] == "existing"
    assert sent["User-Agent"] == "Storefront-Python-Proxy/1.0"
    assert sent["Authorization"].startswith("Basic ")
    # no session header upstream: the client's own token is echoed in the body only
    assert response.json()["cartToken"] == "existing"
    assert "Cart-Token" not in response.headers


def test_get_cart_without_token_succeeds(client):
    with respx.mock(base_url=STORE_URL) as store:
        store.get("/cart").respond(200, json={"items": [{"key": "abc"}]}, headers={"Cart-Token": "issued"})

        response = client.get("/api/cart")

    assert response.status_code == 200
    assert response.json() == {"cart": {"items": [{"key": "abc"}]}, "cartToken": "issued"}
    assert response.headers["Cart-Token"] == "issued"


def test_get_cart_relays_upstream_error_status(client):
    with respx.mock(base_url=STORE_URL) as store:
        store.get("/cart").respond(
            404,
            json={"code": "rest_no_route", "message": "No route was found"},
            headers={"woocommerce-session": "still-valid"},
        )

        response = client.get("/api/cart", headers={"Cart-Token": "abc"})

    assert response.status_code == 404
    body = response.json()
    assert body["message"] == "No route was found"
    assert body["details"]["code"] == "rest_no_route"
    assert response.headers["Cart-Token"] == "still-valid"


def test_init_error_without_message_uses_fallback(client):
    with respx.mock(base_url=STORE_URL) as store:
        store.get("/cart").respond(403, json={"code": "forbidden"})

        response = client.get("/api/init")

    assert response.status_code == 403
    assert response.json()["message"] == "Failed to initialize session from WooCommerce"


def test_transport_failure_yields_500(client):
    with respx.mock(base_url=STORE_URL) as store:
        store.get("/cart").mock(side_effect=httpx.ConnectError("connection refused"))

        response = client.get("/api/cart")

    assert response.status_code == 500
    assert response.json() == {"message": "Failed to fetch cart.", "details": "connection refused"}


def test_add_item_maps_body_and_sends_session_nonce(client):
    with respx.mock(base_url=STORE_URL) as store:
        store.get("/cart").mock(side_effect=_cart_for_token)
        add_route = store.post("/cart/add-item").respond(201, json={"items_count": 1})

        client.get("/api/init", headers={"Cart-Token": "session-a"})
        response = client.post(
            "/api/cart/add",
            json={"productId": 42, "quantity": 2},
            headers={"Cart-Token": "session-a"},
        )

    assert response.status_code == 201
    assert response.json() == {"items_count": 1}
    sent = add_route.calls.last.request
    assert sent.headers["Cart-Token"] == "session-a"
    assert sent.headers["Nonce"] == "nonce-session-a"
    assert json.loads(sent.content) == {"id": 42, "quantity": 2}


def test_nonce_is_not_shared_between_sessions(client):
    with respx.mock(base_url=STORE_URL) as store:
        store.get("/cart").mock(side_effect=_cart_for_token)
        update_route = store.post("/cart/update-item").respond(200, json={"items_count": 3})

        client.get("/api/init", headers={"Cart-Token": "session-a"})
        client.get("/api/init", headers={"Cart-Token": "session-b"})
        client.post(
            "/api/cart/update-item",
            json={"key": "item-1", "quantity": 3},
            headers={"Cart-Token": "session-a"},
        )
        client.post(
            "/api/cart/update-item",
            json={"key": "item-1", "quantity": 3},
            headers={"Cart-Token": "unknown-session"},
        )

    first, second = update_route.calls
    assert first.request.headers["Nonce"] == "nonce-session-a"
    assert "Nonce" not in second.request.headers


def test_client_supplied_nonce_wins(client):
    with respx.mock(base_url=STORE_URL) as store:
        store.get("/cart").mock(side_effect=_cart_for_token)
        remove_route = store.post("/cart/remove-item").respond(200, json={"items": []})

        client.get("/api/init", headers={"Cart-Token": "session-a"})
        client.post(
            "/api/cart/remove-item",
            json={"key": "item-1"},
            headers={"Cart-Token": "session-a", "Nonce": "from-browser"},
        )

    assert remove_route.calls.last.request.headers["Nonce"] == "from-browser"


def test_remove_item_relays_no_content(client):
    with respx.mock(base_url=STORE_URL) as store:
        store.post("/cart/remove-item").respond(204, headers={"woocommerce-session": "rotated"})

        response = client.post(
            "/api/cart/remove-item", json={"key": "item-1"}, headers={"Cart-Token": "old"}
        )

    assert response.status_code == 204
    assert response.content == b""
    assert response.headers["Cart-Token"] == "rotated"


def test_update_item_error_relays_status_and_message(client):
    with respx.mock(base_url=STORE_URL) as store:
        store.post("/cart/update-item").respond(
            400, json={"code": "woocommerce_rest_cart_invalid_key", "message": "Cart item does not exist."}
        )

        response = client.post("/api/cart/update-item", json={"key": "nope", "quantity": 1})

    assert response.status_code == 400
    assert response.json()["message"] == "Cart item does not exist."


def test_mutation_without_body_forwards_nulls(client):
    with respx.mock(base_url=STORE_URL) as store:
        route = store.post("/cart/remove-item").respond(200, json={})

        response = client.post("/api/cart/remove-item")

    assert response.status_code == 200
    assert json.loads(route.calls.last.request.content) == {"key": None}


def test_non_json_error_yields_500(client):
    with respx.mock(base_url=STORE_URL) as store:
        store.post("/cart/add-item").respond(502, text="<html>Bad Gateway</html>")

        response = client.post("/api/cart/add", json={"productId": 1, "quantity": 1})

    assert response.status_code == 500
    assert response.json()["message"] == "Failed to add item to cart."
