"""
core/recipe_clusters.py
────────────────────────────────────────────────────────────────────────
Group candidate recipes by macro profile and rank the groups against a
user's per-meal targets.

Responsibilities
----------------
1.   `recipe_features()` – (calories, protein, carbs, fat) matrix,
     missing values → 0.
2.   `cluster_recipes()` – k-means (k-means++ init, ≤100 iterations)
     on scaled features, then average nutrition + fitness score per
     cluster, best cluster first.

k-means is seeded randomly unless `random_state` (or the
`kmeans_random_state` setting) is given, so cluster *membership* can
vary between calls; the partition property always holds: every input
recipe appears in exactly one returned cluster.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping

import numpy as np
import pandas as pd
from sklearn.cluster import KMeans

from config import settings
from core.errors import InvalidParameterError
from core.macro_calc import per_meal_targets
from core.models.recipe import RecipeCandidate
from core.models.user import UserProfile

_LOG = logging.getLogger(__name__)

KEYS = ["calories", "protein", "carbs", "fat"]
# brings each column to a comparable 0–5 range before distances are taken
FEATURE_SCALE = np.array([1000.0, 100.0, 100.0, 50.0])
SCORE_WEIGHTS = {"calories": 0.4, "protein": 0.3, "carbs": 0.2, "fat": 0.1}

_BANDS = [
    (90, "Excellent match for your goals"),
    (75, "Good match for your goals"),
    (60, "Moderate match - minor adjustments needed"),
]
_FALLBACK = "Consider other options"


# ─────────────────────────────── helpers ────────────────────────────── #
def _as_recipe(r: RecipeCandidate | Mapping[str, Any]) -> RecipeCandidate:
    return r if isinstance(r, RecipeCandidate) else RecipeCandidate.model_validate(r)


def recipe_features(recipes: List[RecipeCandidate]) -> pd.DataFrame:
    rows = [{k: getattr(r.nutrition, k) for k in KEYS} for r in recipes]
    return pd.DataFrame(rows, columns=KEYS).astype(float).fillna(0.0)


def _sub_score(avg: float, target: float) -> float:
    if target <= 0:
        return 100.0 if avg == 0 else 0.0
    return 100 - abs(avg - target) / target * 100


def match_score(avg: Mapping[str, float], targets: Mapping[str, float]) -> float:
    """Weighted closeness to per-meal targets; may go negative."""
    return sum(w * _sub_score(avg[k], targets[k]) for k, w in SCORE_WEIGHTS.items())


def recommendation_for(score: float) -> str:
    for floor, text in _BANDS:
        if score >= floor:
            return text
    return _FALLBACK


# ─────────────────────────────── cluster ────────────────────────────── #
def cluster_recipes(
    recipes: Iterable[RecipeCandidate | Mapping[str, Any]],
    profile: UserProfile,
    k: int = 3,
    random_state: int | None = None,
) -> List[Dict[str, Any]]:
    items = [_as_recipe(r) for r in recipes]
    if not items:
        return []
    if not 1 <= k <= len(items):
        raise InvalidParameterError(
            f"k must be between 1 and the number of recipes ({len(items)})",
            {"k": k, "recipes": len(items)},
        )

    features = recipe_features(items)
    scaled = features.to_numpy() / FEATURE_SCALE

    if random_state is None:
        random_state = settings.kmeans_random_state
    km = KMeans(
        n_clusters=k,
        init="k-means++",
        max_iter=settings.kmeans_max_iter,
        n_init=settings.kmeans_n_init,
        random_state=random_state,
    )
    labels = km.fit_predict(scaled)
    _LOG.debug("clustered %d recipes into k=%d (iterations=%d)", len(items), k, km.n_iter_)

    targets = per_meal_targets(profile)
    clusters: List[Dict[str, Any]] = []
    for cid in range(k):
        members = np.flatnonzero(labels == cid)
        if members.size == 0:
            _LOG.warning("cluster %d came back empty – dropping it", cid)
            continue

        avg = {key: int(round(v)) for key, v in features.iloc[members].mean().items()}
        score = round(match_score(avg, targets), 1)
        clusters.append({
            "id": cid,
            "score": score,
            "recommendation": recommendation_for(score),
            "avg_nutrition": avg,
            "size": int(members.size),
            "recipes": [
                {**items[i].model_dump(), "match_score": score} for i in members
            ],
        })

    clusters.sort(key=lambda c: c["score"], reverse=True)
    return clusters
