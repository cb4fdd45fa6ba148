"""
Risk classifier - picks the dominant indicator of a district record.

Each family is judged on a fixed three-indicator subset, not on every
indicator the record carries. Pure functions, no I/O.
"""

from typing import Dict, Tuple

from app.models.district import DistrictRecord
from app.models.risk import DominantIndicator, RiskFamily


# Order matters: on an exact tie the first-listed indicator wins
FAMILY_INDICATORS: Dict[RiskFamily, Tuple[str, ...]] = {
    RiskFamily.CRIME: ("Murder", "Rape", "Theft"),
    RiskFamily.HEALTH: ("Dengue", "Malaria", "COVID19"),
}


def classify_dominant(record: DistrictRecord, family: RiskFamily) -> DominantIndicator:
    """
    Return the indicator with the highest count within the family subset.

    A record with none of the subset's fields is read as all-zero and
    classifies to the first-listed indicator with value 0.

    Args:
        record: District record to inspect
        family: crime or health

    Returns:
        DominantIndicator(name, value)
    """
    indicators = FAMILY_INDICATORS[RiskFamily(family)]
    # max() keeps the first maximal element, giving first-listed tie-break
    name = max(indicators, key=record.count)
    return DominantIndicator(name=name, value=record.count(name))


def family_total(record: DistrictRecord, family: RiskFamily) -> int:
    return sum(record.count(name) for name in FAMILY_INDICATORS[RiskFamily(family)])


def classify_dominant_family(record: DistrictRecord) -> RiskFamily:
    """
    Crime vs. health for map marker colouring.

    Crime only when its subset sum strictly exceeds the health subset sum;
    ties resolve to health.
    """
    if family_total(record, RiskFamily.CRIME) > family_total(record, RiskFamily.HEALTH):
        return RiskFamily.CRIME
    return RiskFamily.HEALTH
