"""
core/plateau.py
────────────────────────────────────────────────────────────────────────
Weight-plateau detection over the most recent two weeks of entries.
"""

from __future__ import annotations

import logging
from typing import Iterable

import numpy as np

from core.models.results import PlateauReport
from core.series import ChronologicalSeries, SampleLike

_LOG = logging.getLogger(__name__)

WINDOW = 14
VARIANCE_THRESHOLD = 0.5  # kg²

PLATEAU_RECOMMENDATIONS = [
    "Consider changing your workout routine",
    "Try intermittent fasting or carb cycling",
    "Ensure you're getting enough sleep",
    "Reassess your calorie intake",
    "Add more variety to your meals",
]


def detect_plateau(samples: ChronologicalSeries | Iterable[SampleLike]) -> PlateauReport:
    series = ChronologicalSeries.of(samples)
    if len(series) < WINDOW:
        return PlateauReport(
            plateau_detected=False,
            duration=0,
            message="Need at least 2 weeks of data to detect plateaus",
        )

    weights = series.most_recent(WINDOW).weights
    variance = float(np.var(weights))  # population variance
    avg = float(weights.mean())
    plateau = variance < VARIANCE_THRESHOLD
    _LOG.debug("plateau check: variance=%.3f avg=%.2f plateau=%s", variance, avg, plateau)

    if plateau:
        return PlateauReport(
            plateau_detected=True,
            duration=WINDOW,
            variance=round(variance, 3),
            average_weight=round(avg, 1),
            message="Your weight has been stable for two weeks. Time to shake things up!",
            recommendations=list(PLATEAU_RECOMMENDATIONS),
        )
    return PlateauReport(
        plateau_detected=False,
        duration=0,
        variance=round(variance, 3),
        average_weight=round(avg, 1),
        message="No plateau detected. Keep up your current routine!",
    )
