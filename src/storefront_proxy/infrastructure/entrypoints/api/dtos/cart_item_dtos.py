from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _PassThroughDTO(BaseModel):
    """Bodies are relayed as-is: fields are optional and left untyped."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class AddItemDTO(_PassThroughDTO):
    product_id: Any = Field(default=None, alias="productId")
    quantity: Any = None

    def to_store_payload(self) -> dict[str, Any]:
        return {"id": self.product_id, "quantity": self.quantity}


class UpdateItemDTO(_PassThroughDTO):
    key: Any = None
    quantity: Any = None

    def to_store_payload(self) -> dict[str, Any]:
        return {"key": self.key, "quantity": self.quantity}


class RemoveItemDTO(_PassThroughDTO):
    key: Any = None

    def to_store_payload(self) -> dict[str, Any]:
        return {"key": self.key}
