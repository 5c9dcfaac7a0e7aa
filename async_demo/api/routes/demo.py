"""
Async fan-out demo routes.

Joins a simulated product lookup with a remote todo fetch.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, status
from pydantic import BaseModel

from async_demo.api.dependencies import get_combined_service
from async_demo.core.exceptions import UpstreamError
from async_demo.domain.models import ProductRecord, RemoteItem
from async_demo.services.combined_service import CombinedService

logger = logging.getLogger(__name__)

router = APIRouter()


class CombinedResponse(BaseModel):
    """Response model for the combined lookup."""

    product: ProductRecord
    todo: RemoteItem
    message: str


@router.get("/combined/{item_id}", response_model=CombinedResponse)
async def get_combined(
    item_id: int = Path(..., gt=0, description="Product and todo id"),
    service: CombinedService = Depends(get_combined_service),
):
    """
    Fetch a product and a remote todo item concurrently.

    Both lookups run at the same time, so the response takes as long as the
    slower one.
    """
    try:
        result = await service.handle(item_id)
    except UpstreamError as e:
        logger.error(f"Combined lookup failed for id {item_id}: {e} ({e.__cause__})")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Upstream service unavailable",
        )

    return CombinedResponse(
        product=result.product,
        todo=result.remote_item,
        message=result.message,
    )
