################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Result of one stroke rate recalculation."""

from __future__ import annotations

import math
from dataclasses import dataclass

from nearow.stroke_rate.estimation.autocorrelation import FrequencyScoreTable


@dataclass(frozen=True)
class RateUpdate:
    """Stroke rate estimate produced by one scheduler tick.

    Attributes:
        t_sec: Session time of the tick in seconds
        stroke_rate_spm: Instantaneous rate from this tick's window
        smoothed_rate_spm: Moving average over the recent instantaneous
            rates, the value reported to consumers
        best_lag: Selected period in samples, 0 when no lag was admissible
        sample_rate_hz: Effective sampling rate of the window
        sample_count: Number of samples in the window
        table: Per-lag score table for diagnostics
    """

    t_sec: float
    stroke_rate_spm: float
    smoothed_rate_spm: float
    best_lag: int
    sample_rate_hz: float
    sample_count: int
    table: FrequencyScoreTable

    def __post_init__(self) -> None:
        """Validate rate update fields."""
        if not math.isfinite(self.stroke_rate_spm) or self.stroke_rate_spm < 0.0:
            raise ValueError("stroke_rate_spm must be finite and non-negative")
        if not math.isfinite(self.smoothed_rate_spm) or self.smoothed_rate_spm < 0.0:
            raise ValueError("smoothed_rate_spm must be finite and non-negative")
        if self.best_lag < 0:
            raise ValueError("best_lag must be non-negative")
        if self.sample_count < 0:
            raise ValueError("sample_count must be non-negative")
