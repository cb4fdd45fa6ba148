"""
Context Service - static lookups shown next to a risk query.

Three read-only collaborators:
- MediaCatalog: facts images / instruction videos per (family, indicator)
- AqiTable: static air-quality value per district (no live measurement)
- HelpDirectory: nearest hospital and police station per district

All lookups are case-insensitive on the district name. Missing media is
simply not listed; a missing district entry is DistrictNotFound.
"""

import json
import logging
import os
import re
from typing import Dict, Optional, Union

from app.core.settings import settings
from app.models.risk import AqiReading, Facility, HelpContacts, MediaAssets, RiskFamily
from app.services.errors import DistrictNotFound, EmptyQuery

logger = logging.getLogger(__name__)


def _load_json_table(path: str) -> Dict[str, Dict]:
    if not os.path.exists(path):
        logger.warning(f"Static table not found: {path}, using empty table")
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _find_key(table: Dict[str, Dict], district: str) -> Optional[str]:
    wanted = district.strip().lower()
    for key in table:
        if key.strip().lower() == wanted:
            return key
    return None


def _natural_key(name: str):
    # "img2.png" sorts before "img10.png"
    return [int(part) if part.isdigit() else part.lower() for part in re.split(r"(\d+)", name)]


class MediaCatalog:
    """
    Lists media files that actually exist under

        <media_root>/<kind>/<family>/<indicator>/
    """

    KIND_EXTENSIONS = {
        "facts": (".png", ".jpg", ".jpeg", ".gif", ".webp"),
        "instructions": (".mp4", ".webm"),
    }

    def __init__(self, media_root: str, url_prefix: str = "/media"):
        self.media_root = media_root
        self.url_prefix = url_prefix.rstrip("/")

    def list_assets(self, family: Union[str, RiskFamily], indicator: str, kind: str) -> MediaAssets:
        """
        Args:
            family: crime or health
            indicator: dominant indicator name, e.g. "Dengue"
            kind: "facts" (images) or "instructions" (videos)

        Returns:
            MediaAssets with URLs of existing files, natural-sorted
        """
        try:
            risk_family = RiskFamily(family)
        except ValueError:
            raise EmptyQuery(f"Unknown category '{family}'")
        if kind not in self.KIND_EXTENSIONS:
            raise EmptyQuery(f"Unknown media kind '{kind}'. Choose one of: {', '.join(self.KIND_EXTENSIONS)}")
        if not indicator or "/" in indicator or "\\" in indicator or indicator.startswith("."):
            raise EmptyQuery("Please select a date and category first")

        folder = os.path.join(self.media_root, kind, risk_family.value, indicator)
        if not os.path.isdir(folder):
            logger.info(f"No {kind} media for {risk_family.value}/{indicator}")
            return MediaAssets(family=risk_family, indicator=indicator, kind=kind, assets=[])

        extensions = self.KIND_EXTENSIONS[kind]
        files = sorted(
            (name for name in os.listdir(folder)
             if name.lower().endswith(extensions) and os.path.isfile(os.path.join(folder, name))),
            key=_natural_key,
        )
        assets = [f"{self.url_prefix}/{kind}/{risk_family.value}/{indicator}/{name}" for name in files]
        return MediaAssets(family=risk_family, indicator=indicator, kind=kind, assets=assets)


class AqiTable:
    """Static AQI values keyed by district: {"Delhi East": {"aqi": 182}}."""

    # (upper bound inclusive, band, colour)
    BANDS = [
        (100, "good", "green"),
        (200, "moderate", "orange"),
    ]
    WORST_BAND = ("poor", "red")

    def __init__(self, table: Dict[str, Dict]):
        self.table = table

    @classmethod
    def from_file(cls, path: str) -> "AqiTable":
        return cls(_load_json_table(path))

    @classmethod
    def band_for(cls, aqi: int):
        for upper, band, color in cls.BANDS:
            if aqi <= upper:
                return band, color
        return cls.WORST_BAND

    def lookup(self, district: str) -> AqiReading:
        if not district or not district.strip():
            raise EmptyQuery("Please enter a district first")
        key = _find_key(self.table, district)
        if key is None:
            raise DistrictNotFound(f"AQI data not found for district '{district}'")

        aqi = int(self.table[key]["aqi"])
        band, color = self.band_for(aqi)
        return AqiReading(district=key, aqi=aqi, band=band, color=color)


class HelpDirectory:
    """Hospital and police station contacts keyed by district."""

    def __init__(self, table: Dict[str, Dict]):
        self.table = table

    @classmethod
    def from_file(cls, path: str) -> "HelpDirectory":
        return cls(_load_json_table(path))

    def lookup(self, district: str) -> HelpContacts:
        if not district or not district.strip():
            raise EmptyQuery("Please enter a district first")
        key = _find_key(self.table, district)
        if key is None:
            raise DistrictNotFound(f"No help data found for district '{district}'")

        entry = self.table[key]
        hospital = Facility(**entry["hospital"])
        police = Facility(**entry["police_station"])
        center = [
            (hospital.latitude + police.latitude) / 2,
            (hospital.longitude + police.longitude) / 2,
        ]
        return HelpContacts(district=key, hospital=hospital, police_station=police, center=center)


class ContextService:
    """Bundles the three static collaborators behind one singleton."""

    def __init__(
        self,
        media: Optional[MediaCatalog] = None,
        aqi: Optional[AqiTable] = None,
        help_directory: Optional[HelpDirectory] = None,
    ):
        self.media = media or MediaCatalog(settings.MEDIA_ROOT, settings.MEDIA_URL_PREFIX)
        self.aqi = aqi or AqiTable.from_file(settings.AQI_DATA_PATH)
        self.help_directory = help_directory or HelpDirectory.from_file(settings.HELP_DATA_PATH)

    def list_media(self, family: str, indicator: str, kind: str) -> MediaAssets:
        return self.media.list_assets(family, indicator, kind)

    def get_aqi(self, district: str) -> AqiReading:
        return self.aqi.lookup(district)

    def get_help(self, district: str) -> HelpContacts:
        return self.help_directory.lookup(district)


# Global service instance (singleton pattern)
_context_service: Optional[ContextService] = None


def get_context_service() -> ContextService:
    global _context_service
    if _context_service is None:
        _context_service = ContextService()
    return _context_service


def set_context_service(service: Optional[ContextService]) -> None:
    global _context_service
    _context_service = service
