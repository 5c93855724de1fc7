################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Conversions between sample lags, sampling rates and stroke rates."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from numpy.typing import NDArray


# Seconds per minute
SEC_PER_MIN: float = 60.0


def sampling_rate_hz(timestamps: Sequence[float] | NDArray[np.float64]) -> float:
    """Return the effective sampling rate of a timestamp window.

    Computed as the sample count over the span between the oldest and newest
    timestamps. Returns 0.0 when the span is empty or not finite.
    """
    count: int = len(timestamps)
    if count < 2:
        return 0.0
    span_sec: float = float(timestamps[-1]) - float(timestamps[0])
    if not math.isfinite(span_sec) or span_sec <= 0.0:
        return 0.0
    return count / span_sec


def lag_to_rate_spm(lag_samples: int, sample_rate_hz: float) -> float:
    """Convert a period in samples into strokes per minute.

    A non-positive lag or sampling rate yields 0.0, which downstream reads as
    "no signal yet".
    """
    if lag_samples <= 0:
        return 0.0
    if not math.isfinite(sample_rate_hz) or sample_rate_hz <= 0.0:
        return 0.0
    return SEC_PER_MIN * sample_rate_hz / lag_samples


def min_lag_for_rate(sample_rate_hz: float, max_rate_spm: float) -> int:
    """Return the shortest lag whose implied rate does not exceed the ceiling."""
    if not math.isfinite(sample_rate_hz) or sample_rate_hz <= 0.0:
        return 1
    if not math.isfinite(max_rate_spm) or max_rate_spm <= 0.0:
        return 1
    return max(1, math.ceil(SEC_PER_MIN * sample_rate_hz / max_rate_spm))


def next_power_of_two(n: int) -> int:
    """Return the smallest power of two greater than or equal to n."""
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()
