"""
FastAPI API package.

Contains routes and dependencies.
"""

from async_demo.api.routes import api_router

__all__ = ["api_router"]
