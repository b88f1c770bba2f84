from typing import Any

from fastapi import Response
from fastapi.responses import JSONResponse

CART_TOKEN_HEADER = "Cart-Token"
NONCE_HEADER = "Nonce"


def session_headers(session_token: str | None, nonce: str | None) -> dict[str, str]:
    headers = {}
    if session_token:
        headers[CART_TOKEN_HEADER] = session_token
    if nonce:
        headers[NONCE_HEADER] = nonce
    return headers


def session_response(
    content: Any, status_code: int, session_token: str | None, nonce: str | None
) -> Response:
    """JSON response carrying the refreshed session headers; 204 goes out without a body."""
    headers = session_headers(session_token, nonce)
    if status_code == 204:
        return Response(status_code=204, headers=headers)
    return JSONResponse(content=content, status_code=status_code, headers=headers)
