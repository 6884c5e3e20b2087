"""
Centralised settings loader.

Every field can be overridden through a ``FITGOAL_``-prefixed environment
variable or a local ``.env`` file.
"""

from __future__ import annotations
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


# ------------------------------------------------------------------ #
#  Master settings model
# ------------------------------------------------------------------ #
class _Settings(BaseSettings):
    # ─── runtime ────────────────────────────────────────────────────
    env_name: str = "local"
    log_level: str = "INFO"

    # ─── analytics knobs ────────────────────────────────────────────
    low_confidence_r2: float = Field(0.3, ge=0.0, le=1.0)
    default_days_ahead: int = Field(30, gt=0)
    kmeans_max_iter: int = Field(100, gt=0, le=100)
    kmeans_n_init: int = Field(10, gt=0)
    kmeans_random_state: int | None = None

    # allow unrelated env-vars without crashing
    model_config = {
        "env_prefix": "FITGOAL_",
        "extra": "ignore",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


# ------------------------------------------------------------------ #
#  Cached singleton accessor
# ------------------------------------------------------------------ #
@lru_cache
def _cached() -> _Settings:  # pragma: no cover
    return _Settings()


settings: _Settings = _cached()
