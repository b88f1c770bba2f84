from fastapi import APIRouter, Depends

from storefront_proxy.application.core.value_objects import CartSession
from storefront_proxy.infrastructure.entrypoints.api.dependencies import get_store_relay
from storefront_proxy.infrastructure.providers.store import StoreRelayService
from storefront_proxy.infrastructure.providers.store.store_operations import LIST_PRODUCTS

router = APIRouter()


@router.get("/products")
async def list_products(relay: StoreRelayService = Depends(get_store_relay)):
    result = await relay.execute(LIST_PRODUCTS, CartSession())
    return result.body
