"""Tests for the combined fan-out/join service."""

import asyncio
import time
from decimal import Decimal

import httpx
import pytest

from async_demo.core.exceptions import RemoteFetchError, UpstreamError
from async_demo.core.http_client import build_http_client
from async_demo.domain.models import COMBINED_MESSAGE, CombinedResult, ProductRecord, RemoteItem
from async_demo.services.combined_service import CombinedService
from async_demo.services.product_service import ProductService


class FakeDataSource:
    """Data source with fixed per-branch delays and optional remote failure."""

    def __init__(self, product_delay: float = 0.0, remote_delay: float = 0.0, remote_error=None):
        self.product_delay = product_delay
        self.remote_delay = remote_delay
        self.remote_error = remote_error
        self.product_done = False
        self.remote_cancelled = False

    async def fetch_product(self, product_id: int) -> ProductRecord:
        await asyncio.sleep(self.product_delay)
        self.product_done = True
        return ProductRecord(id=product_id, name=f"Product {product_id}", price=Decimal("49.99"))

    async def fetch_remote_item(self, item_id: int) -> RemoteItem:
        try:
            await asyncio.sleep(self.remote_delay)
        except asyncio.CancelledError:
            self.remote_cancelled = True
            raise
        if self.remote_error is not None:
            raise self.remote_error
        return RemoteItem(id=item_id, owner_id=1, title=f"todo {item_id}", completed=False)


class TestConcurrency:
    """Tests for overlapping branch latencies."""

    @pytest.mark.asyncio
    async def test_duration_is_max_not_sum(self):
        """Test 500ms and 300ms branches finish in about 500ms, not 800ms."""
        service = CombinedService(FakeDataSource(product_delay=0.5, remote_delay=0.3))

        start = time.perf_counter()
        await service.handle(1)
        elapsed = time.perf_counter() - start

        assert 0.45 <= elapsed < 0.75

    @pytest.mark.asyncio
    async def test_concurrent_handles_do_not_interfere(self):
        """Test concurrent calls with different ids each get their own results."""
        service = CombinedService(FakeDataSource(product_delay=0.05, remote_delay=0.02))

        first, second = await asyncio.gather(service.handle(1), service.handle(2))

        assert first.product.id == 1
        assert first.remote_item.id == 1
        assert first.product.name == "Product 1"
        assert second.product.id == 2
        assert second.remote_item.id == 2
        assert second.product.name == "Product 2"

    @pytest.mark.asyncio
    async def test_cancellation_cancels_remote_branch(self):
        """Test cancelling the handler does not leave the remote call running."""
        source = FakeDataSource(product_delay=1.0, remote_delay=1.0)
        task = asyncio.create_task(CombinedService(source).handle(1))

        await asyncio.sleep(0.05)
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task

        assert source.remote_cancelled is True


class TestFailures:
    """Tests for all-or-nothing join semantics."""

    @pytest.mark.asyncio
    async def test_remote_failure_raises_upstream_error(self):
        source = FakeDataSource(remote_error=RemoteFetchError("boom", status_code=500))

        with pytest.raises(UpstreamError) as exc_info:
            await CombinedService(source).handle(1)

        assert exc_info.value.source == "remote"
        assert isinstance(exc_info.value.__cause__, RemoteFetchError)

    @pytest.mark.asyncio
    async def test_failure_waits_for_both_branches(self):
        """Test a fast remote failure is only raised after the product branch finished."""
        source = FakeDataSource(product_delay=0.2, remote_error=RemoteFetchError("timeout"))

        start = time.perf_counter()
        with pytest.raises(UpstreamError):
            await CombinedService(source).handle(1)
        elapsed = time.perf_counter() - start

        assert source.product_done is True
        assert elapsed >= 0.15

    @pytest.mark.asyncio
    async def test_product_failure_raises_upstream_error(self):
        class BrokenProducts(FakeDataSource):
            async def fetch_product(self, product_id: int) -> ProductRecord:
                raise RuntimeError("store offline")

        with pytest.raises(UpstreamError) as exc_info:
            await CombinedService(BrokenProducts()).handle(1)

        assert exc_info.value.source == "product"


class TestEndToEnd:
    """Tests against the stub remote API."""

    @pytest.mark.asyncio
    async def test_handle_one(self, http_client, instant_product_settings):
        service = CombinedService(ProductService(http_client, instant_product_settings))

        result = await service.handle(1)

        assert result == CombinedResult(
            product=ProductRecord(id=1, name="Product 1", price=Decimal("49.99")),
            remote_item=RemoteItem(id=1, owner_id=1, title="delectus aut autem", completed=False),
            message="This is an example of async/await that keeps the server responsive.",
        )
        assert result.message == COMBINED_MESSAGE

    @pytest.mark.asyncio
    async def test_remote_500_yields_no_partial_result(self, remote_settings, instant_product_settings):
        http = build_http_client(
            remote_settings,
            transport=httpx.MockTransport(lambda request: httpx.Response(500)),
        )
        service = CombinedService(ProductService(http, instant_product_settings))

        with pytest.raises(UpstreamError):
            await service.handle(1)

        await http.aclose()
