"""
Shared httpx client factory.

One AsyncClient is kept for the whole process so outbound calls reuse its
connection pool instead of opening a new one per request.
"""

import logging
from typing import Optional

import httpx

from async_demo.core.config import RemoteSettings, config

logger = logging.getLogger(__name__)

# Global client instance
_http_client: Optional[httpx.AsyncClient] = None


def build_http_client(
    settings: Optional[RemoteSettings] = None,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """
    Create an AsyncClient pointed at the external JSON API.

    Args:
        settings: Remote API settings (default from config)
        transport: Optional transport override, used by tests to stub the API

    Returns:
        Configured httpx.AsyncClient
    """
    settings = settings or config.remote
    return httpx.AsyncClient(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.timeout_seconds),
        headers={
            "User-Agent": settings.user_agent,
            "Accept": "application/json",
        },
        follow_redirects=True,
        transport=transport,
    )


def get_http_client() -> httpx.AsyncClient:
    """Get or create the process-wide AsyncClient."""
    global _http_client

    if _http_client is None or _http_client.is_closed:
        logger.info(f"Initializing HTTP client for {config.remote.base_url}")
        _http_client = build_http_client()

    return _http_client


async def close_http_client() -> None:
    """Close the shared client and release its connections."""
    global _http_client

    if _http_client is not None:
        logger.info("Closing HTTP client")
        await _http_client.aclose()
        _http_client = None
