"""
Core infrastructure package.

Provides configuration, logging, the shared HTTP client and exception handling.
"""

from async_demo.core.config import config, Settings
from async_demo.core.exceptions import (
    DemoError,
    ConfigurationError,
    RemoteFetchError,
    UpstreamError,
)

__all__ = [
    "config",
    "Settings",
    "DemoError",
    "ConfigurationError",
    "RemoteFetchError",
    "UpstreamError",
]
