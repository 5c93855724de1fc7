################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Structured configuration schema for stroke rate estimation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any


# Nominal accelerometer sampling rate in Hz, from a 20 ms sensor delay. Only
# used to size buffers; runtime rates come from sample timestamps
SAMPLE_RATE_HZ: float = 50.0
# Magnitude history horizon in seconds. A 10 s window at 50 Hz gives a 12 SPM
# detection floor once the overlap rule halves the usable lags
HISTORY_SEC: float = 10.0

# Ramp filter coefficient applied to each new reading, unitless in (0, 1)
FILTERING_FACTOR: float = 0.1

# Plausible stroke rate ceiling in strokes per minute
MAX_STROKE_RATE_SPM: float = 60.0
# Fraction of the window that must overlap at the largest scored lag
MIN_OVERLAP_RATIO: float = 0.5
# Start the lag search after the first non-positive score
SKIP_ZERO_LAG_LOBE: bool = True

# Number of instantaneous rates averaged into the reported rate
RATE_HISTORY_SIZE: int = 3
# Time between stroke rate recalculations in seconds
RECALCULATION_PERIOD_SEC: float = 1.0
# Time to wait after session start before the first estimate in seconds
WARMUP_DELAY_SEC: float = 3.0

# Directory for persisted track points, or None for the default location
TRACK_DIRECTORY: str | None = None
# File name of the track point log inside the track directory
TRACK_FILE_NAME: str = "tracks.jsonl"

# Deliver per-sample magnitudes and per-tick score tables to listeners
DEBUG_DIAGNOSTICS: bool = False


class StrokeRateParamsError(Exception):
    """Raised when stroke rate parameter validation fails."""


def _require_positive(value: float, name: str) -> None:
    """Require a finite positive value."""
    if not math.isfinite(value) or value <= 0.0:
        raise StrokeRateParamsError(f"{name} must be positive")


def _require_non_negative(value: float, name: str) -> None:
    """Require a finite non-negative value."""
    if not math.isfinite(value) or value < 0.0:
        raise StrokeRateParamsError(f"{name} must be non-negative")


def _require_positive_int(value: int, name: str) -> None:
    """Require a positive integer value."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise StrokeRateParamsError(f"{name} must be an int")
    if value <= 0:
        raise StrokeRateParamsError(f"{name} must be positive")


@dataclass(frozen=True)
class SamplingParams:
    """Nominal sampling properties used to size the sample buffers."""

    # Nominal accelerometer sampling rate in Hz
    sample_rate_hz: float = SAMPLE_RATE_HZ
    # Magnitude history horizon in seconds
    history_sec: float = HISTORY_SEC


@dataclass(frozen=True)
class RampParams:
    """Ramp filter configuration."""

    # Filter coefficient, unitless in (0, 1)
    alpha: float = FILTERING_FACTOR


@dataclass(frozen=True)
class EstimatorParams:
    """Autocorrelation lag search configuration."""

    # Stroke rate ceiling in strokes per minute
    max_rate_spm: float = MAX_STROKE_RATE_SPM
    # Fraction of the window overlapping at the largest lag
    min_overlap_ratio: float = MIN_OVERLAP_RATIO
    # Start the lag search after the first non-positive score
    skip_zero_lag_lobe: bool = SKIP_ZERO_LAG_LOBE


@dataclass(frozen=True)
class SchedulerParams:
    """Timing of the periodic rate recalculation."""

    # Number of instantaneous rates averaged
    rate_history_size: int = RATE_HISTORY_SIZE
    # Recalculation period in seconds
    recalculation_period_sec: float = RECALCULATION_PERIOD_SEC
    # Warm-up delay in seconds
    warmup_delay_sec: float = WARMUP_DELAY_SEC


@dataclass(frozen=True)
class StorageParams:
    """Track point persistence settings."""

    # Track directory, or None for the default location
    directory: str | None = TRACK_DIRECTORY
    # Track log file name
    file_name: str = TRACK_FILE_NAME


@dataclass(frozen=True)
class DiagParams:
    """Diagnostics settings."""

    # Deliver debug-only events to listeners
    debug_diagnostics: bool = DEBUG_DIAGNOSTICS


@dataclass(frozen=True)
class StrokeRateParams:
    """Complete configuration tree for stroke rate estimation."""

    sampling: SamplingParams
    ramp: RampParams
    estimator: EstimatorParams
    scheduler: SchedulerParams
    storage: StorageParams
    diag: DiagParams

    @classmethod
    def defaults(cls) -> StrokeRateParams:
        """Return the default parameter tree."""
        return cls(
            sampling=SamplingParams(),
            ramp=RampParams(),
            estimator=EstimatorParams(),
            scheduler=SchedulerParams(),
            storage=StorageParams(),
            diag=DiagParams(),
        )

    def validate(self) -> None:
        """Validate parameter invariants and constraints."""
        _require_positive(self.sampling.sample_rate_hz, "sampling.sample_rate_hz")
        _require_positive(self.sampling.history_sec, "sampling.history_sec")

        if not math.isfinite(self.ramp.alpha) or not 0.0 < self.ramp.alpha < 1.0:
            raise StrokeRateParamsError("ramp.alpha must be in (0, 1)")

        _require_positive(self.estimator.max_rate_spm, "estimator.max_rate_spm")
        ratio: float = self.estimator.min_overlap_ratio
        if not math.isfinite(ratio) or not 0.0 < ratio <= 1.0:
            raise StrokeRateParamsError("estimator.min_overlap_ratio must be in (0, 1]")

        _require_positive_int(
            self.scheduler.rate_history_size, "scheduler.rate_history_size"
        )
        _require_positive(
            self.scheduler.recalculation_period_sec,
            "scheduler.recalculation_period_sec",
        )
        _require_non_negative(
            self.scheduler.warmup_delay_sec, "scheduler.warmup_delay_sec"
        )

        if self.storage.directory is not None and not self.storage.directory:
            raise StrokeRateParamsError("storage.directory must be None or non-empty")
        if not self.storage.file_name:
            raise StrokeRateParamsError("storage.file_name must be set")

    def replace(self, **namespace_overrides: Any) -> StrokeRateParams:
        """Return a modified copy of the parameters."""
        return replace(self, **namespace_overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a nested dict representation for debugging."""
        return _dataclass_to_dict(self)


def _dataclass_to_dict(value: Any) -> Any:
    """Convert dataclasses into plain Python values."""
    if hasattr(value, "__dataclass_fields__"):
        return {
            field.name: _dataclass_to_dict(getattr(value, field.name))
            for field in fields(value)
        }
    return value
