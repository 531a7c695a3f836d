"""Async HTTP client for the product catalog API."""

import asyncio
import logging
from typing import Any, List, Optional

import httpx

from src.models import Product

logger = logging.getLogger(__name__)


class CatalogApiError(Exception):
    """Custom exception for catalog API calls."""

    pass


class CatalogApiClient:
    """Thin wrapper over the catalog HTTP surface."""

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def _request(self, failure: str, method: str, url: str, **kwargs) -> Any:
        try:
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise CatalogApiError(f"{failure}: HTTP error! status: {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise CatalogApiError(f"{failure}: {e}") from e
        return response.json()

    async def generate_products(self, count: int = 1000) -> str:
        """Ask the server to generate products; returns the server message."""
        body = await self._request(
            "Failed to generate products", "POST", "/products/generate", json={"count": count}
        )
        return body["message"]

    async def get_all_products(self) -> List[Product]:
        rows = await self._request("Failed to load products", "GET", "/products")
        return [Product(**row) for row in rows]

    async def search_products(self, query: str) -> List[Product]:
        rows = await self._request("Search failed", "GET", "/products/search", params={"q": query})
        return [Product(**row) for row in rows]

    async def count_products(self) -> int:
        body = await self._request("Failed to count products", "GET", "/products/count")
        return body["count"]

    async def delete_all_products(self) -> str:
        body = await self._request("Failed to delete products", "DELETE", "/products")
        return body["message"]

    async def delete_product(self, product_id: int) -> str:
        """Delete one product; a missing id raises CatalogApiError (HTTP 404)."""
        body = await self._request("Failed to delete product", "DELETE", f"/products/{product_id}")
        return body["message"]

    async def health(self) -> dict:
        return await self._request("Health check failed", "GET", "/health")

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
        return False


class LatestSearch:
    """Debounced search where only the most recent query gets an answer.

    Each call waits debounce_seconds before hitting the server. A newer call
    cancels the older one's wait and any result that arrives for a superseded
    query is discarded (returned as None). Cancelling the local task does not
    stop a query the server has already started.
    """

    def __init__(self, client: CatalogApiClient, debounce_seconds: float = 0.3):
        self._client = client
        self._debounce_seconds = debounce_seconds
        self._latest = 0
        self._pending: Optional[asyncio.Task] = None

    async def _run(self, query: str, ticket: int) -> Optional[List[Product]]:
        await asyncio.sleep(self._debounce_seconds)
        results = await self._client.search_products(query)
        if ticket != self._latest:
            logger.debug(f"Discarding stale results for {query!r}")
            return None
        return results

    async def search(self, query: str) -> Optional[List[Product]]:
        """Search for query, or return None if a newer search superseded it."""
        self._latest += 1
        ticket = self._latest
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()

        task = asyncio.create_task(self._run(query, ticket))
        self._pending = task
        try:
            return await task
        except asyncio.CancelledError:
            if ticket != self._latest:
                return None
            raise
