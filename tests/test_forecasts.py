# tests/test_forecasts.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from core import forecasts
from core.models.progress import ProgressSample
from core.models.user import UserProfile

BASE = dict(weight=80, height=180, age=30, gender="male", activity_level="moderate")


# ── weight change rate ───────────────────────────────────────────────
def test_moderate_deficit_is_healthy():
    r = forecasts.predict_weight_change_rate(500)
    assert r["weekly_rate"] == pytest.approx(0.454, abs=1e-3)
    assert r["realistic"] is True
    assert "healthy" in r["recommendation"]


def test_extreme_deficit_is_damped_and_flagged():
    r = forecasts.predict_weight_change_rate(1500, "veryActive")
    # 1500 kcal/day ≈ 1.36 kg/week before 0.8 adaptation and 1.1 activity
    assert r["weekly_rate"] == pytest.approx(1500 * 7 / 3500 * 0.453592 * 0.8 * 1.1, abs=1e-3)
    assert r["realistic"] is False
    assert "aggressive" in r["recommendation"]


def test_tiny_deficit_is_slow():
    assert "slow" in forecasts.predict_weight_change_rate(100)["recommendation"]


# ── macro split ──────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "goal, workout, expected",
    [
        ("lose", None, (40, 30, 30)),
        ("gain", "strength", (40, 40, 20)),
        ("maintain", "endurance", (30, 50, 20)),
    ],
)
def test_macro_split(goal, workout, expected):
    r = forecasts.predict_optimal_macro_split(UserProfile(**BASE, goal=goal), workout)
    assert (r["protein"], r["carbs"], r["fat"]) == expected


def test_macro_split_reasoning_mentions_workout():
    r = forecasts.predict_optimal_macro_split(UserProfile(**BASE, goal="gain"), "strength")
    assert "Additional protein for muscle repair" in r["reasoning"]


# ── performance / recovery / adherence ──────────────────────────────
def test_performance_well_rested_and_fed():
    r = forecasts.predict_workout_performance([], average_sleep_hours=8,
                                              protein_met=True, hydration_met=True, calories_met=True)
    assert r["score"] == 80
    assert "high-intensity" in r["recommendation"]


def test_performance_low_energy_week():
    start = datetime(2026, 1, 1, tzinfo=timezone.utc)
    week = [ProgressSample(date=start + timedelta(days=i), weight=80, energy_level=1) for i in range(7)]
    r = forecasts.predict_workout_performance(week, average_sleep_hours=5)
    assert r["score"] == 15          # 50 - 20 - 15
    assert "Rest" in r["recommendation"]


def test_recovery_hard_session_poor_sleep_capped():
    r = forecasts.predict_recovery_time("high", muscle_soreness=8, sleep_quality=4)
    assert r["hours"] == 72
    assert "2-3 days" in r["recommendation"]


def test_recovery_floor():
    r = forecasts.predict_recovery_time("low", 3, 9, protein_met=True, hydration_met=True)
    assert r["hours"] == 12
    assert "tomorrow" in r["recommendation"]


def test_adherence_low():
    r = forecasts.predict_adherence(None, "hard", False, 5)
    assert r["probability"] == 40
    assert "smaller" in r["tips"][0]


def test_adherence_capped_at_100():
    r = forecasts.predict_adherence(90, "easy", True, 10)
    assert r["probability"] == 100
    assert r["tips"][0] == "Excellent adherence potential!"


# ── meal times ───────────────────────────────────────────────────────
def test_meal_times_for_weight_loss_drop_late_snack():
    times = forecasts.predict_meal_times("lose")
    assert "snack3" not in times
    assert times["breakfast"] == "07:00"


def test_meal_times_shift_around_workouts():
    times = forecasts.predict_meal_times("gain", morning_workout=True, evening_workout=True)
    assert times["breakfast"] == "06:00"
    assert times["snack1"] == "09:00"
    assert times["dinner"] == "19:30"
    assert times["snack3"] == "21:00"
    assert times["snack4"] == "22:00"


# ── supplements ──────────────────────────────────────────────────────
def _names(items):
    return [s["name"] for s in items]


def test_supplements_baseline_for_everyone():
    profile = UserProfile(**BASE, goal="maintain")
    assert _names(forecasts.predict_supplement_needs(profile)) == ["Vitamin D3", "Omega-3"]


def test_supplements_for_active_vegan_gainer():
    profile = UserProfile(**{**BASE, "activity_level": "veryActive"}, goal="gain")
    names = _names(forecasts.predict_supplement_needs(profile, diet="vegan"))
    assert names == [
        "Creatine Monohydrate", "Whey Protein", "Vitamin B12", "Iron", "Vitamin D3", "Omega-3",
    ]
