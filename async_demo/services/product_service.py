"""
Product data service.

Provides the simulated product lookup and the remote todo fetch used by the
combined endpoint. Both operations are coroutines so callers can run them
concurrently.
"""

import asyncio
import logging
from typing import Optional, Protocol, runtime_checkable

import httpx
from pydantic import ValidationError

from async_demo.core.config import ProductSettings, config
from async_demo.core.exceptions import RemoteFetchError
from async_demo.domain.models import ProductRecord, RemoteItem

logger = logging.getLogger(__name__)


@runtime_checkable
class ProductDataSource(Protocol):
    """Capability interface for the two lookups joined by the combined handler."""

    async def fetch_product(self, product_id: int) -> ProductRecord:
        ...

    async def fetch_remote_item(self, item_id: int) -> RemoteItem:
        ...


class ProductService:
    """
    Default ProductDataSource backed by a simulated store and a shared httpx client.

    The client is injected and owned by the caller; it is never created or
    closed here.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: Optional[ProductSettings] = None,
    ):
        self.http = http_client
        self.settings = settings or config.product

    @property
    def lookup_delay(self) -> float:
        """Simulated storage latency in seconds."""
        return self.settings.lookup_delay_ms / 1000

    async def fetch_product(self, product_id: int) -> ProductRecord:
        """
        Simulate a storage round trip and return a product.

        Args:
            product_id: Any integer id (not validated)

        Returns:
            ProductRecord named after the id with the configured price
        """
        await asyncio.sleep(self.lookup_delay)

        return ProductRecord(
            id=product_id,
            name=f"Product {product_id}",
            price=self.settings.price,
        )

    async def fetch_remote_item(self, item_id: int) -> RemoteItem:
        """
        Fetch one todo item from the external JSON API.

        Args:
            item_id: Remote resource id, appended to /todos/

        Returns:
            RemoteItem parsed from the response body

        Raises:
            RemoteFetchError: On transport failure, non-2xx status or a body
                that does not match RemoteItem
        """
        path = f"/todos/{item_id}"
        url = str(self.http.base_url).rstrip("/") + path

        try:
            resp = await self.http.get(path)
            resp.raise_for_status()
            data = resp.json()
        except httpx.TimeoutException as e:
            logger.error(f"Remote fetch timeout: {url}")
            raise RemoteFetchError("Remote API timed out", url=url) from e
        except httpx.HTTPStatusError as e:
            logger.error(f"Remote fetch HTTP error: {e}")
            raise RemoteFetchError(
                "Remote API returned an error status",
                url=url,
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Remote fetch transport error for {url}: {e}")
            raise RemoteFetchError(f"Remote API request failed: {e}", url=url) from e
        except ValueError as e:
            logger.error(f"Remote API returned non-JSON body: {url}")
            raise RemoteFetchError(
                "Remote API returned a non-JSON body",
                url=url,
                status_code=resp.status_code,
            ) from e

        try:
            item = RemoteItem.model_validate(data)
        except ValidationError as e:
            logger.error(f"Remote API body did not match RemoteItem: {url}")
            raise RemoteFetchError(
                "Remote API returned an unexpected body",
                url=url,
                status_code=resp.status_code,
            ) from e

        logger.debug(f"Fetched remote item {item.id} from {url}")
        return item
