# tests/test_deficit.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from core.deficit import calculate_calorie_deficit, days_until, recommend_calories
from core.errors import InvalidParameterError
from core.models.user import UserProfile

NOW = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


def test_reference_plan_half_kilo_per_week():
    plan = calculate_calorie_deficit(80, 75, NOW + timedelta(days=70), now=NOW)
    assert plan.days_to_target == 70
    assert plan.weekly_loss == pytest.approx(0.5)
    assert plan.daily_deficit == pytest.approx(0.5 * 3500 / 7 / 2.2, rel=0.05)
    assert plan.feasible is True


def test_gain_goal_gives_negative_deficit():
    plan = calculate_calorie_deficit(60, 65, NOW + timedelta(days=70), now=NOW)
    assert plan.weekly_loss == pytest.approx(-0.5)
    assert plan.daily_deficit < 0
    assert plan.feasible is True


def test_aggressive_timeline_not_feasible():
    plan = calculate_calorie_deficit(80, 60, NOW + timedelta(days=14), now=NOW)
    assert abs(plan.daily_deficit) > 1000
    assert plan.feasible is False


def test_partial_day_rounds_up():
    assert days_until(NOW + timedelta(days=3, hours=1), now=NOW) == 4


def test_naive_target_date_treated_as_utc():
    naive = (NOW + timedelta(days=7)).replace(tzinfo=None)
    assert days_until(naive, now=NOW) == 7


@pytest.mark.parametrize("offset", [timedelta(days=-10), timedelta(0)])
def test_past_or_present_target_date_fails(offset):
    with pytest.raises(InvalidParameterError) as exc:
        calculate_calorie_deficit(80, 75, NOW + offset, now=NOW)
    assert "future" in str(exc.value)


# ── recommend_calories ───────────────────────────────────────────────
PROFILE = UserProfile(
    weight=80, height=180, age=30, gender="male",
    activity_level="moderate", goal="lose",
    target_weight=75, target_date=NOW + timedelta(days=70),
)


def test_recommendation_subtracts_deficit_from_targets():
    rec = recommend_calories(PROFILE, now=NOW)
    assert rec["calories"] == 2145        # 2259 - 113.6
    assert rec["protein"] == 141
    assert rec["feasible"] is True
    assert "2145" in rec["recommendation"]


def test_recommendation_flags_aggressive_goal():
    rushed = UserProfile(**{**PROFILE.model_dump(), "target_weight": 60,
                            "target_date": NOW + timedelta(days=14)})
    rec = recommend_calories(rushed, now=NOW)
    assert rec["feasible"] is False
    assert rec["calories"] == 1200
    assert "too aggressive" in rec["recommendation"]


def test_recommendation_requires_target():
    bare = UserProfile(**{**PROFILE.model_dump(), "target_weight": None})
    with pytest.raises(InvalidParameterError):
        recommend_calories(bare, now=NOW)
