"""
Combined lookup service.

Runs the product lookup and the remote fetch concurrently and joins them.
"""

import asyncio
import logging
import time

from async_demo.core.exceptions import UpstreamError
from async_demo.domain.models import COMBINED_MESSAGE, CombinedResult
from async_demo.services.product_service import ProductDataSource

logger = logging.getLogger(__name__)


class CombinedService:
    """
    Fan-out/join over a ProductDataSource.

    Holds no per-request state, so one instance can serve concurrent requests.
    """

    def __init__(self, source: ProductDataSource):
        self.source = source

    async def handle(self, item_id: int) -> CombinedResult:
        """
        Fetch the product and the remote item for one id concurrently.

        Both branches are started before either is awaited, so the call takes
        as long as the slower branch. The join waits for both outcomes before
        inspecting them; if either failed, no partial result is returned.

        Args:
            item_id: Id used for both the product and the remote item

        Returns:
            CombinedResult with the fixed explanatory message

        Raises:
            UpstreamError: If either branch raised, chained to the first
                failure in branch order (product, then remote)
        """
        started = time.perf_counter()

        product_task = asyncio.create_task(
            self.source.fetch_product(item_id), name=f"product-{item_id}"
        )
        remote_task = asyncio.create_task(
            self.source.fetch_remote_item(item_id), name=f"remote-{item_id}"
        )

        product, remote_item = await asyncio.gather(
            product_task,
            remote_task,
            return_exceptions=True,
        )

        elapsed_ms = (time.perf_counter() - started) * 1000

        for source, outcome in (("product", product), ("remote", remote_item)):
            if isinstance(outcome, BaseException):
                logger.warning(
                    f"Combined lookup for id {item_id} failed in {source} branch "
                    f"after {elapsed_ms:.0f}ms: {outcome}"
                )
                raise UpstreamError(
                    f"Upstream {source} lookup failed",
                    source=source,
                ) from outcome

        logger.info(f"Combined lookup for id {item_id} completed in {elapsed_ms:.0f}ms")

        return CombinedResult(
            product=product,
            remote_item=remote_item,
            message=COMBINED_MESSAGE,
        )
