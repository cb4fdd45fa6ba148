import pytest
from pydantic import ValidationError

from app.models.district import DistrictRecord
from app.models.risk import RiskFamily
from app.services.risk_classifier import (
    FAMILY_INDICATORS,
    classify_dominant,
    classify_dominant_family,
)
from conftest import make_record


@pytest.mark.parametrize("family", [RiskFamily.CRIME, RiskFamily.HEALTH])
def test_dominant_value_is_subset_max(records, family):
    for record in records:
        dominant = classify_dominant(record, family)
        expected = max(record.count(name) for name in FAMILY_INDICATORS[family])
        assert dominant.value == expected
        assert dominant.value >= 0
        assert dominant.name in FAMILY_INDICATORS[family]


def test_tie_goes_to_first_listed_indicator():
    record = make_record("North Delhi", Murder=5, Rape=5, Theft=5)
    assert classify_dominant(record, RiskFamily.CRIME).name == "Murder"


def test_tie_between_later_indicators_keeps_subset_order():
    record = make_record("X", Dengue=1, Malaria=7, COVID19=7)
    dominant = classify_dominant(record, RiskFamily.HEALTH)
    assert (dominant.name, dominant.value) == ("Malaria", 7)


def test_abduction_is_not_part_of_crime_subset():
    record = make_record("X", Murder=1, Rape=0, Abduction=50, Theft=2)
    assert classify_dominant(record, RiskFamily.CRIME).name == "Theft"


def test_missing_indicators_classify_as_zero():
    record = DistrictRecord(district="Empty")
    dominant = classify_dominant(record, "health")
    assert (dominant.name, dominant.value) == ("Dengue", 0)


def test_dominant_family_crime_needs_strict_majority():
    assert classify_dominant_family(make_record("A", Murder=4, Theft=2, Dengue=5)) == RiskFamily.CRIME
    assert classify_dominant_family(make_record("B", Murder=3, Theft=2, Dengue=5)) == RiskFamily.HEALTH
    assert classify_dominant_family(make_record("C", Murder=1, COVID19=9)) == RiskFamily.HEALTH


def test_from_document_reads_nulls_as_zero_and_optional_location():
    record = DistrictRecord.from_document({"District": "Shahdara", "Date": "2024-03-10", "Murder": None, "Latitude": 28.6})
    assert record.count("Murder") == 0
    assert record.count("Tuberculosis") == 0
    assert record.location is None
    assert record.date.isoformat() == "2024-03-10"


def test_from_document_rejects_negative_counts():
    with pytest.raises(ValidationError):
        DistrictRecord.from_document({"District": "Bad", "Theft": -1})


def test_from_document_rejects_blank_district():
    with pytest.raises(ValidationError):
        DistrictRecord.from_document({"District": "   ", "Theft": 1})


def test_records_are_immutable(records):
    with pytest.raises(ValidationError):
        records[0].district = "Elsewhere"


def test_matches_is_case_insensitive():
    record = make_record("Delhi East")
    assert record.matches("  delhi EAST ")
    assert not record.matches("Delhi")


def test_from_document_accepts_whole_number_floats():
    record = DistrictRecord.from_document({"District": "X", "Theft": 3.0, "Dengue": "7"})
    assert record.count("Theft") == 3
    assert record.count("Dengue") == 7


@pytest.mark.parametrize("value", [2.7, "1.5", float("nan")])
def test_from_document_rejects_fractional_counts(value):
    with pytest.raises(ValueError):
        DistrictRecord.from_document({"District": "X", "Murder": value})
