import os
import sys
from pathlib import Path

import httpx
import respx
from fastapi.testclient import TestClient

# Add src to path
sys.path.append(str(Path(__file__).parent.parent / "src"))

from storefront_proxy.infrastructure.configuration.main_settings import Settings
from storefront_proxy.infrastructure.entrypoints.api.app_factory import create_app

STORE_URL = "https://mock-store.example.com/wp-json/wc/store/v1"


def _cart(request: httpx.Request) -> httpx.Response:
    token = request.headers.get("Cart-Token") or "simulated-session"
    return httpx.Response(
        200,
        json={"items": [], "items_count": 0},
        headers={"woocommerce-session": token, "Nonce": "simulated-nonce"},
    )


def simulate():
    # Mock env vars
    os.environ["WOO_API_URL"] = STORE_URL
    os.environ["EXCHANGE_RATE_WARM_ON_STARTUP"] = "false"

    print("🚀 Simulating a storefront session against a mocked store...")

    settings = Settings()
    with respx.mock(base_url=STORE_URL) as store, TestClient(create_app(settings)) as client:
        store.get("/cart").mock(side_effect=_cart)
        add_route = store.post("/cart/add-item").respond(201, json={"items_count": 1})

        init = client.get("/api/init")
        token = init.headers.get("Cart-Token")
        print(f"Init: {init.status_code} token={token}")

        added = client.post("/api/cart/add", json={"productId": 7, "quantity": 1}, headers={"Cart-Token": token})
        print(f"Add: {added.status_code} body={added.text}")

        sent_nonce = add_route.calls.last.request.headers.get("Nonce")
        if added.status_code == 201 and sent_nonce == "simulated-nonce":
            print("✅ SUCCESS: session token and nonce relayed.")
            sys.exit(0)
        print(f"❌ FAILURE: nonce sent upstream was {sent_nonce!r}")
        sys.exit(1)


if __name__ == "__main__":
    simulate()
