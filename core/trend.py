"""
core/trend.py
────────────────────────────────────────────────────────────────────────
Linear weight-change trend between the oldest and newest sample.
"""

from __future__ import annotations

import logging
from typing import Iterable

from core.errors import InsufficientDataError
from core.models.results import TrendSummary
from core.series import ChronologicalSeries, SampleLike

_LOG = logging.getLogger(__name__)

MIN_SAMPLES = 2
# direction is the sign of change, except |change| <= 0.1 kg is scale noise
# and counts as maintaining
DIRECTION_DEAD_BAND_KG = 0.1
FAST_PACE_KG_PER_WEEK = 1.0


def calculate_trend(samples: ChronologicalSeries | Iterable[SampleLike]) -> TrendSummary:
    series = ChronologicalSeries.of(samples)
    n = len(series)
    if n < MIN_SAMPLES:
        raise InsufficientDataError(
            "At least 2 progress entries are needed to calculate a trend",
            required=MIN_SAMPLES,
            received=n,
        )

    change = series.last.weight - series.first.weight
    weekly = change / n * 7

    if change < -DIRECTION_DEAD_BAND_KG:
        direction = "losing"
    elif change > DIRECTION_DEAD_BAND_KG:
        direction = "gaining"
    else:
        direction = "maintaining"

    pace = "fast" if abs(weekly) > FAST_PACE_KG_PER_WEEK else "moderate"

    _LOG.debug(
        "trend: n=%d change=%.2f weekly=%.2f direction=%s pace=%s",
        n, change, weekly, direction, pace,
    )
    return TrendSummary(
        total_change=round(change, 2),
        weekly_change=round(weekly, 2),
        direction=direction,
        pace=pace,
    )
