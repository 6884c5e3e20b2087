"""
core/series.py
────────────────────────────────────────────────────────────────────────
`ChronologicalSeries` – the single ordering contract for progress data.

Storage hands entries back most-recent-first; charts want them oldest
first. Every analytics function goes through this wrapper, so index 0 is
always the oldest sample and index -1 the most recent one.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable, Iterator, Mapping, Sequence, Union

import numpy as np
import pandas as pd

from core.models.progress import ProgressSample

SampleLike = Union[ProgressSample, Mapping[str, Any]]


class ChronologicalSeries(Sequence[ProgressSample]):
    """Immutable, oldest-first sequence of `ProgressSample`."""

    def __init__(self, samples: Iterable[SampleLike] = ()) -> None:
        parsed = [
            s if isinstance(s, ProgressSample) else ProgressSample.model_validate(s)
            for s in samples
        ]
        # stable sort: same-instant entries keep their logged order
        self._samples: tuple[ProgressSample, ...] = tuple(
            sorted(parsed, key=lambda s: s.date)
        )

    @classmethod
    def of(cls, samples: "ChronologicalSeries | Iterable[SampleLike]") -> "ChronologicalSeries":
        """Return *samples* unchanged if already a series, else wrap them."""
        if isinstance(samples, cls):
            return samples
        return cls(samples)

    # ───────────────────────────── Sequence ─────────────────────────── #
    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[ProgressSample]:
        return iter(self._samples)

    def __getitem__(self, idx):  # type: ignore[override]
        if isinstance(idx, slice):
            return ChronologicalSeries(self._samples[idx])
        return self._samples[idx]

    def __repr__(self) -> str:
        if not self._samples:
            return "ChronologicalSeries([])"
        return (
            f"ChronologicalSeries(n={len(self)}, "
            f"{self.first.date:%Y-%m-%d}..{self.last.date:%Y-%m-%d})"
        )

    # ──────────────────────────── accessors ─────────────────────────── #
    @property
    def first(self) -> ProgressSample:
        return self._samples[0]

    @property
    def last(self) -> ProgressSample:
        return self._samples[-1]

    @property
    def weights(self) -> np.ndarray:
        return np.array([s.weight for s in self._samples], dtype=float)

    @property
    def dates(self) -> list[datetime]:
        return [s.date for s in self._samples]

    def most_recent(self, n: int) -> "ChronologicalSeries":
        """Last *n* samples, still oldest-first."""
        if n <= 0:
            return ChronologicalSeries()
        return ChronologicalSeries(self._samples[-n:])

    def frame(self) -> pd.DataFrame:
        """One row per sample, columns = ProgressSample fields."""
        rows = [s.model_dump() for s in self._samples]
        df = pd.DataFrame(rows, columns=list(ProgressSample.model_fields))
        return df.reset_index(drop=True)
