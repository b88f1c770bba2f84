from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront_proxy.application.core.exceptions import StoreApiError, StoreUnavailableError
from storefront_proxy.infrastructure.entrypoints.api.session_headers import session_headers
from storefront_proxy.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger(__name__)


async def store_api_error_handler(request: Request, exc: StoreApiError) -> JSONResponse:
    """Relays the store's status code with its payload wrapped as details."""
    return JSONResponse(
        status_code=exc.status_code or status.HTTP_502_BAD_GATEWAY,
        content={"message": exc.message, "details": exc.details},
        headers=session_headers(exc.session_token, exc.nonce),
    )


async def store_unavailable_handler(request: Request, exc: StoreUnavailableError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": exc.message, "details": exc.cause},
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.error(
        "Validation error",
        error_type="RequestValidationError",
        error_details=str(exc.errors()),
        url=str(request.url),
    )
    return JSONResponse(
        status_code=422,
        content=jsonable_encoder({"detail": exc.errors(), "body": exc.body}),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StoreApiError, store_api_error_handler)
    app.add_exception_handler(StoreUnavailableError, store_unavailable_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
