"""
Alert composer - the one-line alert shown above the trend chart.
"""

from datetime import date
from typing import Union

from app.models.risk import DominantIndicator


ALERT_TEMPLATE = (
    'Last week ({window}): "{name}" is the major concern in {district} '
    "with a total of {value} {unit} as of {reference_date}."
)


def compose(
    district: str,
    dominant: DominantIndicator,
    unit: str,
    window_label: str,
    reference_date: Union[str, date],
) -> str:
    """
    Fill the fixed alert template.

    The reference date is rendered exactly as the caller supplied it.
    """
    return ALERT_TEMPLATE.format(
        window=window_label,
        name=dominant.name,
        district=district,
        value=dominant.value,
        unit=unit,
        reference_date=reference_date,
    )
