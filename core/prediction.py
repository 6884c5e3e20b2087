"""
core/prediction.py
────────────────────────────────────────────────────────────────────────
Weight prediction by degree-2 polynomial least squares.

    x = sample index (0 = oldest), y = weight (kg)
    ŷ(x) = c + b·x + a·x²

Predictions are NOT clamped to physiological bounds. A fit whose r² is
under `settings.low_confidence_r2` is flagged `low_confidence` instead,
and a `DegenerateFitWarning` is emitted, so callers can surface the
uncertainty rather than receive silently-bent numbers.
"""

from __future__ import annotations

import logging
import warnings
from datetime import datetime, timedelta, timezone
from typing import Iterable

import numpy as np
from sklearn.linear_model import LinearRegression
from sklearn.metrics import r2_score
from sklearn.pipeline import make_pipeline
from sklearn.preprocessing import PolynomialFeatures

from config import settings
from core.errors import DegenerateFitWarning, InsufficientDataError, InvalidParameterError
from core.models.results import PredictedPoint, PredictionResult
from core.series import ChronologicalSeries, SampleLike
from core.trend import calculate_trend

_LOG = logging.getLogger(__name__)

DEGREE = 2
MIN_SAMPLES = 2


def _fit(x: np.ndarray, y: np.ndarray):
    model = make_pipeline(
        PolynomialFeatures(degree=DEGREE, include_bias=False),
        LinearRegression(),
    )
    model.fit(x.reshape(-1, 1), y)
    return model


def _coefficients(model) -> tuple[float, float, float]:
    """(a, b, c) for a·x² + b·x + c."""
    reg: LinearRegression = model[-1]
    b, a = (float(v) for v in reg.coef_)
    return a, b, float(reg.intercept_)


def _equation(a: float, b: float, c: float) -> str:
    def term(coef: float, suffix: str) -> str:
        sign = "-" if coef < 0 else "+"
        return f" {sign} {abs(coef):.4f}{suffix}"

    return f"f(x) = {a:.4f}x^2" + term(b, "x") + term(c, "")


def predict_weight(
    samples: ChronologicalSeries | Iterable[SampleLike],
    days_ahead: int | None = None,
    now: datetime | None = None,
) -> PredictionResult:
    series = ChronologicalSeries.of(samples)
    if days_ahead is None:
        days_ahead = settings.default_days_ahead
    if len(series) < MIN_SAMPLES:
        raise InsufficientDataError(
            "Insufficient data for prediction. Please log at least 2 entries.",
            required=MIN_SAMPLES,
            received=len(series),
        )
    if days_ahead <= 0:
        raise InvalidParameterError(
            "days_ahead must be a positive number of days",
            {"days_ahead": days_ahead},
        )

    x = np.arange(len(series), dtype=float)
    y = series.weights
    model = _fit(x, y)

    if np.ptp(y) == 0:
        # flat series: the constant polynomial is an exact fit
        r2 = 1.0
    else:
        r2 = float(r2_score(y, model.predict(x.reshape(-1, 1))))
    a, b, c = _coefficients(model)

    last_index = len(series) - 1
    future_x = np.arange(last_index + 1, last_index + days_ahead + 1, dtype=float)
    future_y = model.predict(future_x.reshape(-1, 1))

    anchor = now or datetime.now(timezone.utc)
    predictions = [
        PredictedPoint(day=i, date=anchor + timedelta(days=i), weight=round(float(w), 1))
        for i, w in enumerate(future_y, start=1)
    ]

    low_confidence = r2 < settings.low_confidence_r2
    if low_confidence:
        _LOG.warning(
            "Low-confidence weight fit (r2=%.3f < %.2f, n=%d)",
            r2, settings.low_confidence_r2, len(series),
        )
        warnings.warn(
            f"r2={r2:.3f} is below {settings.low_confidence_r2}; "
            "long-range predictions are unreliable",
            DegenerateFitWarning,
            stacklevel=2,
        )

    _LOG.debug(
        "predicted %d days from %d samples: first=%.1f last=%.1f",
        days_ahead, len(series), predictions[0].weight, predictions[-1].weight,
    )
    return PredictionResult(
        predictions=predictions,
        equation=_equation(a, b, c),
        r2=round(r2, 4),
        low_confidence=low_confidence,
        trend=calculate_trend(series),
    )
