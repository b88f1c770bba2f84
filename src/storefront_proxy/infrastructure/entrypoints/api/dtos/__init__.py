from storefront_proxy.infrastructure.entrypoints.api.dtos.cart_item_dtos import (
    AddItemDTO,
    RemoveItemDTO,
    UpdateItemDTO,
)

__all__ = ["AddItemDTO", "RemoveItemDTO", "UpdateItemDTO"]
