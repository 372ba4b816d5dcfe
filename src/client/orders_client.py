import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://127.0.0.1:8080"
DEFAULT_TIMEOUT = 5.0


@dataclass
class ApiResponse:
    """
    Outcome of one API call. status_code is None when the request never got
    a response (connection refused, timeout).
    """

    status_code: Optional[int]
    body: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status_code is not None and 200 <= self.status_code < 300


class OrdersApiClient:
    """Async client for the order management HTTP API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self.client = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> "OrdersApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        await self.client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> ApiResponse:
        try:
            response = await self.client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e!r}")
            return ApiResponse(status_code=None, error=str(e) or type(e).__name__)

        try:
            body = response.json()
        except ValueError:
            body = response.text
        return ApiResponse(status_code=response.status_code, body=body)

    async def health(self) -> ApiResponse:
        return await self._request("GET", "/health")

    async def create_order(self, symbol: str, side: str, quantity: float, price: float) -> ApiResponse:
        payload: Dict[str, Any] = {
            "symbol": symbol,
            "side": side,
            "quantity": quantity,
            "price": price,
        }
        return await self._request("POST", "/orders", json=payload)

    async def list_orders(self, limit: Optional[int] = None) -> ApiResponse:
        params = {"limit": limit} if limit is not None else None
        return await self._request("GET", "/orders", params=params)

    async def get_order(self, order_id: int) -> ApiResponse:
        return await self._request("GET", f"/orders/{order_id}")

    async def cancel_order(self, order_id: int) -> ApiResponse:
        return await self._request("DELETE", f"/orders/{order_id}")
