# tests/test_series.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone

import numpy as np

from core.models.progress import ProgressSample
from core.series import ChronologicalSeries

START = datetime(2026, 1, 1, 8, 0, tzinfo=timezone.utc)


def _samples(weights):
    return [
        ProgressSample(date=START + timedelta(days=i), weight=w)
        for i, w in enumerate(weights)
    ]


def test_most_recent_first_input_is_reordered():
    newest_first = list(reversed(_samples([80, 79, 78])))
    series = ChronologicalSeries(newest_first)
    assert list(series.weights) == [80, 79, 78]
    assert series.first.date < series.last.date


def test_of_returns_same_series_instance():
    series = ChronologicalSeries(_samples([70, 71]))
    assert ChronologicalSeries.of(series) is series


def test_accepts_plain_dicts():
    series = ChronologicalSeries([
        {"date": "2026-01-02T00:00:00Z", "weight": 71.0},
        {"date": "2026-01-01T00:00:00Z", "weight": 70.0},
    ])
    assert isinstance(series.first, ProgressSample)
    assert series.first.weight == 70.0


def test_most_recent_keeps_oldest_first_order():
    series = ChronologicalSeries(_samples([1, 2, 3, 4, 5]))
    tail = series.most_recent(2)
    assert isinstance(tail, ChronologicalSeries)
    assert list(tail.weights) == [4, 5]
    assert len(series.most_recent(0)) == 0


def test_frame_has_one_row_per_sample():
    series = ChronologicalSeries(_samples([70, 70.5, 71]))
    df = series.frame()
    assert len(df) == 3
    assert np.allclose(df["weight"].to_numpy(), [70, 70.5, 71])
    assert "workout_completed" in df.columns


def test_slicing_returns_series():
    series = ChronologicalSeries(_samples([1, 2, 3]))
    assert isinstance(series[1:], ChronologicalSeries)
    assert series[0].weight == 1


def test_naive_and_aware_dates_sort_together():
    series = ChronologicalSeries([
        {"date": "2026-01-02T08:00:00Z", "weight": 79.5},
        {"date": "2026-01-01T08:00:00", "weight": 80.0},
    ])
    assert list(series.weights) == [80.0, 79.5]
    # naive input is read as UTC
    assert series.first.date == START


def test_mixed_timezones_reach_trend():
    from core.trend import calculate_trend

    trend = calculate_trend([
        {"date": "2026-01-01T08:00:00", "weight": 80},
        {"date": "2026-01-02T08:00:00Z", "weight": 79.5},
    ])
    assert trend.direction == "losing"
