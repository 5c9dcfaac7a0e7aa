"""
FastAPI application entry point.

Main application with lifespan management for startup/shutdown.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from async_demo.api.routes import api_router
from async_demo.core.config import config
from async_demo.core.http_client import close_http_client, get_http_client
from async_demo.core.logging import setup_logging

setup_logging(config)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Opens the shared HTTP client on startup and closes it on shutdown.
    """
    logger.info("Starting application...")

    app.state.http_client = get_http_client()
    logger.info(f"HTTP client ready for {config.remote.base_url}")

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")
    app.state.http_client = None
    await close_http_client()
    logger.info("Application shutdown complete")


app = FastAPI(
    title=config.app_name,
    description="Concurrent fan-out/join of a product lookup and a remote API call",
    version=config.version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": config.app_name,
        "version": config.version,
    }


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": config.app_name,
        "version": config.version,
        "docs_url": "/docs",
        "openapi_url": "/openapi.json",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "async_demo.main:app",
        host="0.0.0.0",
        port=8000,
        reload=config.debug,
    )
