"""
Pydantic model for a stored district record.

One record exists per (district, observation date). Records are read-only:
services derive new values from them and never write them back.
"""

import math
from datetime import date as date_type, datetime
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field, field_validator


CRIME_INDICATORS = ("Murder", "Rape", "Abduction", "Theft")
HEALTH_INDICATORS = ("Dengue", "Malaria", "CVD", "Asthma", "COVID19", "Tuberculosis")


def _parse_record_date(value: Any) -> Optional[date_type]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date_type):
        return value
    if isinstance(value, str):
        try:
            return date_type.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


def _count(value: Any) -> int:
    # Missing / null indicator fields read as zero
    if value is None or value == "":
        return 0
    number = float(value)
    if not number.is_integer():
        raise ValueError(f"indicator counts must be whole numbers, got {value!r}")
    return int(number)


def _coordinate(value: Any) -> Optional[float]:
    # Blank, unparseable or non-finite coordinates mean "no location"
    if value is None or value == "":
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


class DistrictRecord(BaseModel):
    """
    Incident counters for one district on one date.

    Lookups by district are case-insensitive; see `matches()`.
    """
    district: str = Field(..., min_length=1, description="District name as stored")
    date: Optional[date_type] = Field(None, description="Observation date (None if stored value is unparseable)")
    crime_counts: Dict[str, int] = Field(default_factory=dict)
    health_counts: Dict[str, int] = Field(default_factory=dict)
    location: Optional[Tuple[float, float]] = Field(None, description="(latitude, longitude)")

    class Config:
        frozen = True

    @field_validator("district")
    @classmethod
    def _district_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("district must not be blank")
        return value

    @field_validator("crime_counts", "health_counts")
    @classmethod
    def _counts_non_negative(cls, value: Dict[str, int]) -> Dict[str, int]:
        negative = {name: count for name, count in value.items() if count < 0}
        if negative:
            raise ValueError(f"indicator counts must be >= 0, got {negative}")
        return value

    def count(self, indicator: str) -> int:
        """Count for a crime or health indicator; absent indicators are 0."""
        if indicator in self.crime_counts:
            return self.crime_counts[indicator]
        return self.health_counts.get(indicator, 0)

    def matches(self, district_name: str) -> bool:
        return self.district.strip().lower() == district_name.strip().lower()

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "DistrictRecord":
        """
        Build a record from the flat stored document shape:

            {"District": "Delhi East", "Date": "2024-03-10",
             "Murder": 10, ..., "Latitude": 28.6, "Longitude": 77.3}

        Raises:
            pydantic.ValidationError: blank district or negative counts
            ValueError: fractional or non-numeric counts
        """
        lat = _coordinate(doc.get("Latitude", doc.get("latitude")))
        lon = _coordinate(doc.get("Longitude", doc.get("longitude")))
        location = (lat, lon) if lat is not None and lon is not None else None

        return cls(
            district=str(doc.get("District") or doc.get("district") or ""),
            date=_parse_record_date(doc.get("Date", doc.get("date"))),
            crime_counts={name: _count(doc.get(name)) for name in CRIME_INDICATORS},
            health_counts={name: _count(doc.get(name)) for name in HEALTH_INDICATORS},
            location=location,
        )

    def to_document(self) -> Dict[str, Any]:
        """Inverse of from_document, used by the listing API and seed script."""
        doc: Dict[str, Any] = {
            "District": self.district,
            "Date": self.date.isoformat() if self.date else None,
        }
        doc.update(self.crime_counts)
        doc.update(self.health_counts)
        if self.location is not None:
            doc["Latitude"], doc["Longitude"] = self.location
        return doc
