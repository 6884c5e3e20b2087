"""Re-export individual schema modules for easy imports."""

from .analytics import (
    CalorieRecommendationOut,
    ClusterIn,
    ClusterOut,
    DeficitIn,
    MealPlanIn,
    PredictIn,
    ProfileIn,
    ProfileSamplesIn,
    SamplesIn,
)
from .forecast import (
    AdherenceIn,
    MacroSplitIn,
    MealTimesIn,
    PerformanceIn,
    RateIn,
    RecoveryIn,
    SupplementsIn,
)

__all__ = [
    "CalorieRecommendationOut",
    "ClusterIn",
    "ClusterOut",
    "DeficitIn",
    "MealPlanIn",
    "PredictIn",
    "ProfileIn",
    "ProfileSamplesIn",
    "SamplesIn",
    "AdherenceIn",
    "MacroSplitIn",
    "MealTimesIn",
    "PerformanceIn",
    "RateIn",
    "RecoveryIn",
    "SupplementsIn",
]
