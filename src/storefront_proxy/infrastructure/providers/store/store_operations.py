from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class StoreOperation:
    """One proxied call: where it goes upstream and how its failures read to the client."""

    name: str
    method: str
    path: str
    error_message: str
    unavailable_message: str
    params: dict[str, Any] = field(default_factory=dict)
    carries_session: bool = True


INIT_SESSION = StoreOperation(
    name="init_session",
    method="GET",
    path="cart",
    error_message="Failed to initialize session from WooCommerce",
    unavailable_message="Failed to initialize session.",
)

GET_CART = StoreOperation(
    name="get_cart",
    method="GET",
    path="cart",
    error_message="Failed to fetch cart",
    unavailable_message="Failed to fetch cart.",
)

LIST_PRODUCTS = StoreOperation(
    name="list_products",
    method="GET",
    path="products",
    error_message="Failed to fetch products",
    unavailable_message="Failed to fetch products.",
    params={"per_page": 100},
    carries_session=False,
)

ADD_ITEM = StoreOperation(
    name="add_item",
    method="POST",
    path="cart/add-item",
    error_message="Failed to add to cart",
    unavailable_message="Failed to add item to cart.",
)

UPDATE_ITEM = StoreOperation(
    name="update_item",
    method="POST",
    path="cart/update-item",
    error_message="Failed to update item quantity",
    unavailable_message="Failed to update item quantity in cart.",
)

REMOVE_ITEM = StoreOperation(
    name="remove_item",
    method="POST",
    path="cart/remove-item",
    error_message="Failed to remove item",
    unavailable_message="Failed to remove item from cart.",
)
