"""
API routes package.
"""

from fastapi import APIRouter

from async_demo.api.routes import demo

# Create main router
api_router = APIRouter()

# Include sub-routers
api_router.include_router(demo.router, tags=["demo"])

__all__ = ["api_router"]
