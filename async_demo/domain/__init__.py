"""
Domain models package.
"""

from async_demo.domain.models import (
    COMBINED_MESSAGE,
    CombinedResult,
    ProductRecord,
    RemoteItem,
)

__all__ = [
    "COMBINED_MESSAGE",
    "CombinedResult",
    "ProductRecord",
    "RemoteItem",
]
