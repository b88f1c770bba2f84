from fastapi import APIRouter, Depends, Response

from storefront_proxy.application.core.value_objects import CartSession, RelayResult
from storefront_proxy.infrastructure.entrypoints.api.dependencies import (
    get_cart_session,
    get_store_relay,
)
from storefront_proxy.infrastructure.entrypoints.api.dtos import (
    AddItemDTO,
    RemoveItemDTO,
    UpdateItemDTO,
)
from storefront_proxy.infrastructure.entrypoints.api.session_headers import session_response
from storefront_proxy.infrastructure.observability.logger_factory_service import get_logger
from storefront_proxy.infrastructure.providers.store import StoreRelayService
from storefront_proxy.infrastructure.providers.store.store_operations import (
    ADD_ITEM,
    GET_CART,
    INIT_SESSION,
    REMOVE_ITEM,
    UPDATE_ITEM,
    StoreOperation,
)

logger = get_logger(__name__)
router = APIRouter()


@router.get("/init")
async def init_session(
    session: CartSession = Depends(get_cart_session),
    relay: StoreRelayService = Depends(get_store_relay),
) -> Response:
    """Opens (or resumes) the cart session and hands the token back to the frontend."""
    result = await relay.execute(INIT_SESSION, session)
    if not result.session_token:
        logger.warning("Store did not issue a session token on init")
    if not result.nonce:
        logger.warning("Store did not return a nonce on init")
    return _cart_state_response(result, session)


@router.get("/cart")
async def get_cart(
    session: CartSession = Depends(get_cart_session),
    relay: StoreRelayService = Depends(get_store_relay),
) -> Response:
    result = await relay.execute(GET_CART, session)
    return _cart_state_response(result, session)


@router.post("/cart/add")
async def add_item(
    body: AddItemDTO | None = None,
    session: CartSession = Depends(get_cart_session),
    relay: StoreRelayService = Depends(get_store_relay),
) -> Response:
    payload = (body or AddItemDTO()).to_store_payload()
    logger.info("Add to cart", product_id=payload["id"], quantity=payload["quantity"])
    return await _mutate(relay, ADD_ITEM, session, payload)


@router.post("/cart/update-item")
async def update_item(
    body: UpdateItemDTO | None = None,
    session: CartSession = Depends(get_cart_session),
    relay: StoreRelayService = Depends(get_store_relay),
) -> Response:
    payload = (body or UpdateItemDTO()).to_store_payload()
    logger.info("Update cart item", item_key=payload["key"], quantity=payload["quantity"])
    return await _mutate(relay, UPDATE_ITEM, session, payload)


@router.post("/cart/remove-item")
async def remove_item(
    body: RemoveItemDTO | None = None,
    session: CartSession = Depends(get_cart_session),
    relay: StoreRelayService = Depends(get_store_relay),
) -> Response:
    payload = (body or RemoveItemDTO()).to_store_payload()
    logger.info("Remove cart item", item_key=payload["key"])
    return await _mutate(relay, REMOVE_ITEM, session, payload)


async def _mutate(
    relay: StoreRelayService, operation: StoreOperation, session: CartSession, payload: dict
) -> Response:
    """Relays a cart mutation, keeping the store's status code and body."""
    result = await relay.execute(operation, session, json_body=payload)
    return session_response(result.body, result.status_code, result.session_token, result.nonce)


def _cart_state_response(result: RelayResult, session: CartSession) -> Response:
    content = {"cart": result.body, "cartToken": result.session_token or session.cart_token}
    return session_response(content, 200, result.session_token, result.nonce)
