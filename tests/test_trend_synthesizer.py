import math
import random

import pytest

from app.services.trend_synthesizer import TrendSynthesizer
from conftest import FixedRandom


def test_two_week_series_labels_and_values():
    series = TrendSynthesizer(rng=random.Random(7)).synthesize(21, 1)
    assert series.labels == ["Week 1", "Week 2"]
    assert len(series.values) == 2
    assert all(v >= 0 and math.isfinite(v) for v in series.values)


def test_values_are_floor_of_share_plus_jitter():
    assert TrendSynthesizer(rng=FixedRandom(0.0)).synthesize(21, 1).values == [10, 10]
    # 10.5 + 0.99 * 5 = 15.45
    assert TrendSynthesizer(rng=FixedRandom(0.99)).synthesize(21, 1).values == [15, 15]


def test_values_stay_within_jitter_bound():
    synthesizer = TrendSynthesizer(rng=random.Random(1), jitter_bound=5.0)
    for _ in range(50):
        series = synthesizer.synthesize(40, 3)
        assert series.labels == ["Week 1", "Week 2", "Week 3", "Week 4"]
        assert all(10 <= v < 15 for v in series.values)


def test_same_seed_same_series():
    first = TrendSynthesizer(rng=random.Random(42)).synthesize(30, 2)
    second = TrendSynthesizer(rng=random.Random(42)).synthesize(30, 2)
    assert first == second


def test_zero_total_zero_jitter_gives_zeros():
    series = TrendSynthesizer(rng=random.Random(3), jitter_bound=0.0).synthesize(0, 0)
    assert series.labels == ["Week 1"]
    assert series.values == [0]


@pytest.mark.parametrize("total, bucket", [(-1, 0), (5, -1), (5, 4)])
def test_rejects_out_of_range_inputs(total, bucket):
    with pytest.raises(ValueError):
        TrendSynthesizer().synthesize(total, bucket)
