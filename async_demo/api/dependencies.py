"""
FastAPI dependencies for the shared HTTP client and services.
"""

import httpx
from fastapi import Depends, Request

from async_demo.core.http_client import get_http_client
from async_demo.services.combined_service import CombinedService
from async_demo.services.product_service import ProductDataSource, ProductService


def get_shared_http_client(request: Request) -> httpx.AsyncClient:
    """
    Return the AsyncClient opened in the app lifespan.

    Falls back to the lazily created process-wide client when the lifespan
    has not run, which only happens under an ASGI test transport. That
    fallback is the same instance close_http_client releases, so lifespan
    shutdown closes it whichever path opened it; tests that skip the lifespan
    close it themselves.
    """
    client = getattr(request.app.state, "http_client", None)
    if client is None:
        client = get_http_client()
    return client


def get_product_service(
    http_client: httpx.AsyncClient = Depends(get_shared_http_client),
) -> ProductDataSource:
    """Build the product data source around the shared client."""
    return ProductService(http_client)


def get_combined_service(
    source: ProductDataSource = Depends(get_product_service),
) -> CombinedService:
    """Build the fan-out service for one request."""
    return CombinedService(source)
