from typing import Any

import httpx

from storefront_proxy.application.core.exceptions import StoreUnavailableError
from storefront_proxy.infrastructure.configuration.store_settings import StoreSettings
from storefront_proxy.infrastructure.observability.logger_factory_service import get_logger
from storefront_proxy.infrastructure.observability.redaction_service import redact_dict

logger = get_logger(__name__)

PROVIDER = "store"


class StoreHttpClient:
    """Issues raw calls against the store API base URL with the proxy's fixed headers."""

    def __init__(self, settings: StoreSettings, client: httpx.AsyncClient):
        self.settings = settings
        self.base_url = settings.woo_api_url.rstrip("/")
        self._client = client

    def _get_headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": self.settings.proxy_user_agent,
        }
        auth = self.settings.basic_auth_header()
        if auth:
            headers["Authorization"] = auth
        return headers

    def build_url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def send(
        self,
        method: str,
        path: str,
        headers: dict[str, str] | None = None,
        json_data: Any = None,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        url = self.build_url(path)
        request_headers = {**self._get_headers(), **(headers or {})}
        logger.debug(
            "Calling store API",
            url=url,
            http_method=method,
            headers=redact_dict(request_headers),
        )
        try:
            return await self._client.request(
                method,
                url,
                headers=request_headers,
                json=json_data,
                params=params,
            )
        except httpx.HTTPError as exc:
            raise StoreUnavailableError(
                provider=PROVIDER,
                message=f"{method} {url} failed",
                cause=str(exc) or type(exc).__name__,
            ) from exc
