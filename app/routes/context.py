"""
Context endpoints - static information shown alongside a risk query.

- /context/aqi: static AQI value and band (no live measurement)
- /context/help: hospital and police station contacts
- /context/media: facts images and instruction videos that exist on disk
"""

from fastapi import APIRouter, Query

from app.models.risk import AqiReading, HelpContacts, MediaAssets
from app.services.context_service import get_context_service


router = APIRouter(prefix="/context", tags=["Context"])


@router.get("/aqi", response_model=AqiReading)
async def get_aqi(district: str = Query(..., max_length=100)):
    return get_context_service().get_aqi(district)


@router.get("/help", response_model=HelpContacts)
async def get_help(district: str = Query(..., max_length=100)):
    """Nearest hospital and police station, plus a map center between them."""
    return get_context_service().get_help(district)


@router.get("/media", response_model=MediaAssets)
async def get_media(
    family: str = Query(..., description="crime or health"),
    indicator: str = Query(..., max_length=50, description="Dominant indicator, e.g. Dengue"),
    kind: str = Query("facts", description="facts (images) or instructions (videos)"),
):
    """
    List media for an indicator. Only files that exist are returned;
    an indicator with no media yields an empty list.
    """
    return get_context_service().list_media(family, indicator, kind)
