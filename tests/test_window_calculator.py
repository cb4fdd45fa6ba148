from datetime import date

import pytest

from app.services.errors import InvalidDate
from app.services.window_calculator import compute_window, parse_reference_date


@pytest.mark.parametrize("reference, label", [
    ("2024-03-03", "1-3 Mar"),
    ("2024-03-20", "14-20 Mar"),
    ("2024-03-10", "4-10 Mar"),
    ("2024-03-01", "1-1 Mar"),
    ("2024-12-07", "1-7 Dec"),
])
def test_window_label(reference, label):
    assert compute_window(reference).window_label == label


@pytest.mark.parametrize("day, bucket", [(1, 0), (7, 0), (8, 1), (14, 1), (15, 2), (22, 3), (28, 3), (31, 3)])
def test_week_bucket_index(day, bucket):
    assert compute_window(date(2024, 3, day)).week_bucket_index == bucket


def test_accepts_date_objects_and_padded_strings():
    assert parse_reference_date(date(2024, 2, 29)) == date(2024, 2, 29)
    assert parse_reference_date(" 2024-02-29 ") == date(2024, 2, 29)


@pytest.mark.parametrize("value", ["2023-02-29", "2024-13-01", "10/03/2024", "", "soon", None, 20240310])
def test_invalid_dates_raise(value):
    with pytest.raises(InvalidDate):
        compute_window(value)
