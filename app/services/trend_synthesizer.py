"""
Trend Synthesizer - synthetic weekly series for the trend chart.

DESIGN PRINCIPLES (CRITICAL):
- The series is ILLUSTRATIVE, not a statistical trend or forecast
- Each week is total / weeks plus independent jitter in [0, bound)
- No smoothing, no monotonicity, no guarantee the values sum to total
- Randomness comes from an injected random.Random so tests can fix it
"""

import logging
import math
import random
from typing import Optional

from app.core.settings import settings
from app.models.risk import TrendSeries

logger = logging.getLogger(__name__)


class TrendSynthesizer:
    """Builds "Week 1".."Week N" series up to the reference week bucket."""

    MAX_WEEK_BUCKET = 3

    def __init__(self, rng: Optional[random.Random] = None, jitter_bound: float = 5.0):
        if jitter_bound < 0:
            raise ValueError("jitter_bound must be >= 0")
        self.rng = rng or random.Random()
        self.jitter_bound = jitter_bound

    def synthesize(self, total: int, week_bucket_index: int) -> TrendSeries:
        """
        Spread `total` across week buckets 0..week_bucket_index.

        Args:
            total: Dominant indicator count (>= 0)
            week_bucket_index: Reference week bucket (0-3)

        Returns:
            TrendSeries with week_bucket_index + 1 labels and values
        """
        if total < 0:
            raise ValueError(f"total must be >= 0, got {total}")
        if not 0 <= week_bucket_index <= self.MAX_WEEK_BUCKET:
            raise ValueError(f"week_bucket_index must be within 0..{self.MAX_WEEK_BUCKET}, got {week_bucket_index}")

        week_count = week_bucket_index + 1
        labels = [f"Week {n}" for n in range(1, week_count + 1)]
        per_week = total / week_count
        values = [
            math.floor(per_week + self.rng.random() * self.jitter_bound)
            for _ in labels
        ]

        logger.debug(f"Synthesized {week_count}-week series from total={total}: {values}")
        return TrendSeries(labels=labels, values=values)


def build_trend_synthesizer() -> TrendSynthesizer:
    """Synthesizer configured from settings (seeded when TREND_RANDOM_SEED is set)."""
    rng = random.Random(settings.TREND_RANDOM_SEED)
    return TrendSynthesizer(rng=rng, jitter_bound=settings.TREND_JITTER_BOUND)
