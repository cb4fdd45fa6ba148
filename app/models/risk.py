"""
Pydantic models for risk queries and their derived results.

DESIGN PRINCIPLE:
- Models reflect data structure, not business logic
- Everything here is ephemeral: built per request, never persisted
"""

from datetime import date
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator


class RiskFamily(str, Enum):
    """Top-level risk grouping selected by the caller."""
    CRIME = "crime"
    HEALTH = "health"


# Unit appended to counts in alert text
FAMILY_UNITS: Dict[RiskFamily, str] = {
    RiskFamily.CRIME: "cases",
    RiskFamily.HEALTH: "patients",
}


class RiskQuery(BaseModel):
    """One user interaction: which district, which family, as of when."""
    district: str
    family: RiskFamily
    reference_date: date


class DominantIndicator(BaseModel):
    name: str = Field(..., description="Indicator with the highest count in the family subset")
    value: int = Field(..., ge=0, description="Its count")


class QueryWindow(BaseModel):
    window_label: str = Field(..., description='Trailing window, e.g. "4-10 Mar"')
    week_bucket_index: int = Field(..., ge=0, le=3, description="Zero-based week-of-month bucket")


class TrendSeries(BaseModel):
    """
    Synthetic weekly series for charting.

    Values are an illustrative approximation of the dominant indicator's
    total spread over the elapsed week buckets, with random jitter. They are
    NOT a statistical trend and are regenerated on every query.
    """
    labels: List[str]
    values: List[int]

    @model_validator(mode="after")
    def _same_length(self) -> "TrendSeries":
        if len(self.labels) != len(self.values):
            raise ValueError("labels and values must have the same length")
        return self


class RiskQueryResult(BaseModel):
    """
    Response payload of a successful risk query.

    Field names follow the frontend contract (camelCase alertText).
    """
    dominant: DominantIndicator
    unit: str = Field(..., description='"cases" for crime, "patients" for health')
    alertText: str
    series: TrendSeries

    class Config:
        json_schema_extra = {
            "example": {
                "dominant": {"name": "Murder", "value": 10},
                "unit": "cases",
                "alertText": 'Last week (4-10 Mar): "Murder" is the major concern in Delhi East with a total of 10 cases as of 2024-03-10.',
                "series": {"labels": ["Week 1", "Week 2"], "values": [7, 5]},
            }
        }


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Error kind, e.g. DistrictNotFound")
    message: str


class MapMarker(BaseModel):
    district: str
    latitude: float
    longitude: float
    family: RiskFamily = Field(..., description="Dominant family, drives marker colour")
    label: str


class AqiReading(BaseModel):
    district: str
    aqi: int = Field(..., ge=0)
    band: str = Field(..., description="good | moderate | poor")
    color: str


class Facility(BaseModel):
    name: str
    address: str = ""
    phone: str = ""
    latitude: float
    longitude: float


class HelpContacts(BaseModel):
    district: str
    hospital: Facility
    police_station: Facility
    center: List[float] = Field(..., description="[lat, lng] midpoint of the two facilities")


class MediaAssets(BaseModel):
    family: RiskFamily
    indicator: str
    kind: str
    assets: List[str] = Field(default_factory=list, description="URLs of assets that exist")


class DistrictListing(BaseModel):
    count: int
    districts: List[Dict]
    search: Optional[str] = None
