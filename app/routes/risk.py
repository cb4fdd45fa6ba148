"""
Risk endpoints - dominant indicator, alert text and trend series.

The trend series is SYNTHETIC: an illustrative split of the dominant
indicator's total over the elapsed weeks of the month, with random jitter.
It is not a forecast and is regenerated on every call.
"""

import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, Query, Response, status

from app.models.risk import ErrorResponse, RiskQueryResult
from app.services.risk_query_service import get_risk_query_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/risk", tags=["Risk"])


@router.get(
    "",
    response_model=RiskQueryResult,
    responses={
        204: {"description": "No category selected yet"},
        400: {"model": ErrorResponse, "description": "EmptyQuery"},
        404: {"model": ErrorResponse, "description": "DistrictNotFound"},
        422: {"model": ErrorResponse, "description": "InvalidDate"},
        503: {"model": ErrorResponse, "description": "StoreUnavailable"},
    },
)
async def get_risk(
    district: Optional[str] = Query(None, max_length=100, description="District name (case-insensitive)"),
    family: Optional[str] = Query(None, description="crime or health"),
    date: Optional[str] = Query(None, description="Reference date, YYYY-MM-DD"),
):
    """
    Summarize the dominant risk of a district as of a date.

    **Returns:**
    - dominant indicator (name, count) within the family's three tracked indicators
    - unit ("cases" / "patients")
    - alertText for the trailing window ending on `date`
    - synthetic weekly series "Week 1" .. the week containing `date`

    With no `family`, nothing is computed and the response is 204.
    """
    service = get_risk_query_service()

    loop = asyncio.get_event_loop()
    result = await loop.run_in_executor(None, service.query, district, family, date)

    if result is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return result
