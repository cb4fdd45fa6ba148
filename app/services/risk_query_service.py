"""
Risk Query Service - façade for district risk queries.

DESIGN PRINCIPLES (CRITICAL):
- Read-only: records are never modified, computed trends are never stored
- All three inputs (district, family, date) are validated BEFORE the store is read
- Missing indicator fields count as zero; a missing record is an error
- Every failure is terminal for the query (no partial payloads)

FLOW:
    validate → fetch_all() → pick record → classify → window → series → alert
"""

import logging
from datetime import date
from typing import Any, List, Optional, Union

from app.models.district import DistrictRecord
from app.models.risk import (
    FAMILY_UNITS,
    MapMarker,
    RiskFamily,
    RiskQuery,
    RiskQueryResult,
)
from app.services.alert_composer import compose
from app.services.errors import DistrictNotFound, EmptyQuery, StoreUnavailable
from app.services.record_store import RecordStore, get_record_store
from app.services.risk_classifier import classify_dominant, classify_dominant_family
from app.services.trend_synthesizer import TrendSynthesizer, build_trend_synthesizer
from app.services.window_calculator import compute_window, parse_reference_date

logger = logging.getLogger(__name__)


MARKER_LABELS = {
    RiskFamily.CRIME: "High Crime Area",
    RiskFamily.HEALTH: "Health Concern",
}


class RiskQueryService:
    """
    Orchestrates classifier, window calculator, trend synthesizer and
    alert composer over records from a RecordStore.
    """

    def __init__(
        self,
        store: Optional[RecordStore] = None,
        synthesizer: Optional[TrendSynthesizer] = None,
    ):
        self.store = store or get_record_store()
        self.synthesizer = synthesizer or build_trend_synthesizer()

    def query(
        self,
        district_name: Optional[str],
        family: Optional[Union[str, RiskFamily]],
        reference_date: Any,
    ) -> Optional[RiskQueryResult]:
        """
        Compute the dominant indicator, alert text and trend series.

        Args:
            district_name: District to look up (case-insensitive)
            family: "crime" or "health"; None means nothing selected yet
            reference_date: ISO date string or date

        Returns:
            RiskQueryResult, or None when no family has been selected

        Raises:
            EmptyQuery: district or date missing, or family unknown
            InvalidDate: reference_date does not parse
            StoreUnavailable: the record store read failed
            DistrictNotFound: no record for the district
        """
        risk_query = self.validate(district_name, family, reference_date)
        if risk_query is None:
            logger.info(f"No family selected for '{district_name}', nothing to compute")
            return None

        record = self.find_district(risk_query.district, risk_query.reference_date)

        dominant = classify_dominant(record, risk_query.family)
        unit = FAMILY_UNITS[risk_query.family]
        window = compute_window(risk_query.reference_date)
        series = self.synthesizer.synthesize(dominant.value, window.week_bucket_index)

        # Literal date as the caller sent it
        date_text = reference_date.strip() if isinstance(reference_date, str) else risk_query.reference_date.isoformat()
        alert_text = compose(record.district, dominant, unit, window.window_label, date_text)

        logger.info(
            f"✅ Risk query {record.district}/{risk_query.family.value}@{date_text}: "
            f"{dominant.name}={dominant.value} {unit}"
        )

        return RiskQueryResult(
            dominant=dominant,
            unit=unit,
            alertText=alert_text,
            series=series,
        )

    def validate(
        self,
        district_name: Optional[str],
        family: Optional[Union[str, RiskFamily]],
        reference_date: Any,
    ) -> Optional[RiskQuery]:
        """
        Check inputs without touching the store.

        Returns None when family is absent ("nothing selected yet").
        """
        if not district_name or not district_name.strip():
            raise EmptyQuery("Please enter a district first")

        if family is None or (isinstance(family, str) and not family.strip()):
            return None

        try:
            risk_family = RiskFamily(family.strip().lower() if isinstance(family, str) else family)
        except ValueError:
            allowed = ", ".join(f.value for f in RiskFamily)
            raise EmptyQuery(f"Unknown category '{family}'. Choose one of: {allowed}")

        if reference_date is None or (isinstance(reference_date, str) and not reference_date.strip()):
            raise EmptyQuery("Please select a date")

        return RiskQuery(
            district=district_name.strip(),
            family=risk_family,
            reference_date=parse_reference_date(reference_date),
        )

    def _fetch_records(self) -> List[DistrictRecord]:
        try:
            return self.store.fetch_all()
        except Exception as e:
            logger.error(f"❌ Record store read failed: {e}", exc_info=True)
            raise StoreUnavailable("Server error while fetching data.") from e

    def find_district(self, district_name: str, reference_date: Optional[date] = None) -> DistrictRecord:
        """
        Pick the record for a district.

        Preference: exact date match, then the most recent record dated on
        or before reference_date, then the first match in store order.

        Raises:
            DistrictNotFound: no record carries this district name
            StoreUnavailable: the store read failed
        """
        matches = [r for r in self._fetch_records() if r.matches(district_name)]
        if not matches:
            logger.warning(f"District not found: '{district_name}'")
            raise DistrictNotFound(f"District '{district_name}' not found in database")

        if reference_date is None:
            return matches[0]

        exact = [r for r in matches if r.date == reference_date]
        if exact:
            return exact[0]

        earlier = [r for r in matches if r.date is not None and r.date <= reference_date]
        if earlier:
            return max(earlier, key=lambda r: r.date)

        return matches[0]

    def list_districts(self, search: Optional[str] = None) -> List[DistrictRecord]:
        """All records, optionally filtered by a case-insensitive substring."""
        records = self._fetch_records()
        if search and search.strip():
            needle = search.strip().lower()
            records = [r for r in records if needle in r.district.lower()]
        return records

    def map_markers(self, search: Optional[str] = None) -> List[MapMarker]:
        """
        One marker per located record, coloured by dominant family.

        Records without both coordinates are left off the map.
        """
        markers: List[MapMarker] = []
        for record in self.list_districts(search):
            if record.location is None:
                continue
            family = classify_dominant_family(record)
            lat, lon = record.location
            markers.append(MapMarker(
                district=record.district,
                latitude=lat,
                longitude=lon,
                family=family,
                label=MARKER_LABELS[family],
            ))
        return markers


# Global service instance (singleton pattern)
_risk_query_service: Optional[RiskQueryService] = None


def get_risk_query_service() -> RiskQueryService:
    """
    Get or create RiskQueryService singleton instance.

    Returns:
        RiskQueryService: The global risk query service instance
    """
    global _risk_query_service
    if _risk_query_service is None:
        _risk_query_service = RiskQueryService()
    return _risk_query_service


def set_risk_query_service(service: Optional[RiskQueryService]) -> None:
    """Replace the singleton (tests, scripts). Pass None to reset."""
    global _risk_query_service
    _risk_query_service = service
