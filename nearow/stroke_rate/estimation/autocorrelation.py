################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Autocorrelation-based periodicity detection for magnitude windows.

Scores use the biased autocorrelation estimator of the mean-removed window,
normalized by the lag-0 energy so that every score lies in [-1, 1]:

    score(L) = sum_{i=0}^{N-L-1} x[i] * x[i+L] / sum_{i=0}^{N-1} x[i]^2

The biased estimator weights long lags down by (N - L) / N, which keeps the
fundamental period ahead of its integer multiples. Normalizing by lag 0 only
rescales scores and never moves the arg-max.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from numpy.typing import NDArray


_FLOAT_ARRAY = NDArray[np.float64]

# Default fraction of the window that must overlap at the largest lag. Half
# the window means at least two full periods must fit inside it.
MIN_OVERLAP_RATIO: float = 0.5


class AutocorrelationError(Exception):
    """Raised when the autocorrelation estimator is misconfigured."""


@dataclass(frozen=True)
class FrequencyScoreTable:
    """Autocorrelation scores for one window.

    Attributes:
        scores: Score per candidate lag, where ``scores[i]`` belongs to lag
            ``i + 1``
        window_size: Number of samples in the scored window
        energy: Lag-0 autocorrelation of the mean-removed window. Zero when
            the window is flat or too short to score
    """

    scores: _FLOAT_ARRAY
    window_size: int
    energy: float

    @property
    def max_lag(self) -> int:
        """Return the largest lag present in the table."""
        return int(self.scores.shape[0])

    @property
    def lags(self) -> NDArray[np.int64]:
        """Return the lag associated with each score."""
        return np.arange(1, self.max_lag + 1, dtype=np.int64)

    def score(self, lag: int) -> float:
        """Return the score for a lag in 1..max_lag."""
        if lag < 1 or lag > self.max_lag:
            raise AutocorrelationError(
                f"Lag {lag} outside scored range 1..{self.max_lag}"
            )
        return float(self.scores[lag - 1])

    def is_empty(self) -> bool:
        return self.max_lag == 0


@dataclass(frozen=True)
class AutocorrelationResult:
    """Score table and selected lag for one window.

    Attributes:
        table: Full per-lag score table, kept for diagnostics
        best_lag: Selected period in samples, or 0 when no lag is admissible
    """

    table: FrequencyScoreTable
    best_lag: int


class AutocorrelationEstimator:
    """Select the lag that best explains a repeating motion.

    The admissible lag range is bounded below by ``min_lag`` (the caller's
    plausible-rate ceiling) and above by the overlap rule. Within it, the
    search also starts after the zero-lag lobe: the scores of any signal
    decay smoothly away from lag 0, so lags before the first non-positive
    score say nothing about periodicity.

    Ties resolve to the lowest lag. Autocorrelation peaks again at every
    multiple of the true period, and the shortest one is the fundamental.
    """

    def __init__(
        self,
        *,
        min_overlap_ratio: float = MIN_OVERLAP_RATIO,
        skip_zero_lag_lobe: bool = True,
    ) -> None:
        if not math.isfinite(min_overlap_ratio) or not (
            0.0 < min_overlap_ratio <= 1.0
        ):
            raise AutocorrelationError("min_overlap_ratio must be in (0, 1]")
        self._min_overlap_ratio: float = float(min_overlap_ratio)
        self._skip_zero_lag_lobe: bool = skip_zero_lag_lobe

    def max_lag_for(self, window_size: int) -> int:
        """Return the largest lag that still has enough comparison pairs."""
        if window_size < 2:
            return 0
        min_pairs: int = max(1, math.ceil(window_size * self._min_overlap_ratio))
        return max(0, min(window_size - 1, window_size - min_pairs))

    def score_table(self, window: Sequence[float] | _FLOAT_ARRAY) -> FrequencyScoreTable:
        """Compute the normalized autocorrelation score for every lag."""
        samples: _FLOAT_ARRAY = np.asarray(window, dtype=np.float64)
        if samples.ndim != 1:
            raise AutocorrelationError("window must be one-dimensional")

        window_size: int = int(samples.shape[0])
        max_lag: int = self.max_lag_for(window_size)
        if max_lag == 0:
            return FrequencyScoreTable(
                scores=np.zeros(0, dtype=np.float64),
                window_size=window_size,
                energy=0.0,
            )

        # Mean removal can leave rounding residue on a constant window
        if float(np.ptp(samples)) == 0.0:
            return FrequencyScoreTable(
                scores=np.zeros(max_lag, dtype=np.float64),
                window_size=window_size,
                energy=0.0,
            )

        centered: _FLOAT_ARRAY = samples - np.mean(samples)

        # acf[L] = sum_i x[i] * x[i + L] for L >= 0
        acf: _FLOAT_ARRAY = np.correlate(centered, centered, mode="full")[
            window_size - 1 :
        ]
        energy: float = float(acf[0])

        if not math.isfinite(energy) or energy <= 0.0:
            return FrequencyScoreTable(
                scores=np.zeros(max_lag, dtype=np.float64),
                window_size=window_size,
                energy=0.0,
            )

        scores: _FLOAT_ARRAY = acf[1 : max_lag + 1] / energy

        return FrequencyScoreTable(
            scores=scores, window_size=window_size, energy=energy
        )

    def best_lag(self, table: FrequencyScoreTable, *, min_lag: int = 1) -> int:
        """Return the admissible lag with the highest score, or 0 if none."""
        if table.is_empty() or table.energy <= 0.0:
            return 0

        start_lag: int = max(1, int(min_lag))

        if self._skip_zero_lag_lobe:
            non_positive: NDArray[np.intp] = np.flatnonzero(table.scores <= 0.0)
            if non_positive.size > 0:
                start_lag = max(start_lag, int(non_positive[0]) + 1)

        if start_lag > table.max_lag:
            return 0

        # np.argmax returns the first maximum, so ties go to the lowest lag
        segment: _FLOAT_ARRAY = table.scores[start_lag - 1 :]
        return start_lag + int(np.argmax(segment))

    def estimate(
        self, window: Sequence[float] | _FLOAT_ARRAY, *, min_lag: int = 1
    ) -> AutocorrelationResult:
        """Score a window and select its best lag."""
        table: FrequencyScoreTable = self.score_table(window)
        return AutocorrelationResult(
            table=table, best_lag=self.best_lag(table, min_lag=min_lag)
        )
