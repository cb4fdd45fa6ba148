"""Map routes - one marker per located district record.

Markers are coloured by the dominant family over the full record
(crime only when the crime subset strictly outweighs the health subset).
Records without coordinates are left off the map.
"""

import asyncio
from typing import List, Optional

from fastapi import APIRouter, Query

from app.models.risk import MapMarker
from app.services.risk_query_service import get_risk_query_service


router = APIRouter(prefix="/map", tags=["Map"])


@router.get("/markers", response_model=List[MapMarker])
async def map_markers(
    search: Optional[str] = Query(None, max_length=100, description="Filter districts by name substring")
):
    """
    Get map markers, optionally narrowed to districts matching `search`.
    """
    service = get_risk_query_service()
    loop = asyncio.get_event_loop()
    return await loop.run_in_executor(None, service.map_markers, search)
