"""
Services package.

Contains the product data source and the combined fan-out service.
"""

from async_demo.services.combined_service import CombinedService
from async_demo.services.product_service import ProductDataSource, ProductService

__all__ = [
    "CombinedService",
    "ProductDataSource",
    "ProductService",
]
