"""
District endpoints - raw record listing for the dashboard.
"""

import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, Query

from app.models.risk import DistrictListing
from app.services.risk_query_service import get_risk_query_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/districts", tags=["Districts"])


@router.get("", response_model=DistrictListing)
async def list_districts(
    search: Optional[str] = Query(None, max_length=100, description="Case-insensitive substring of the district name")
):
    """
    Get all stored district records, in the stored document shape.

    Failures surface as StoreUnavailable (503) through the app-level handler.
    """
    service = get_risk_query_service()

    # Run the blocking store read in the thread pool
    loop = asyncio.get_event_loop()
    records = await loop.run_in_executor(None, service.list_districts, search)

    logger.info(f"GET /api/districts search={search!r}: {len(records)} records")
    return DistrictListing(
        count=len(records),
        districts=[r.to_document() for r in records],
        search=search,
    )
