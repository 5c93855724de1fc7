################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Per-session state shared by the sample producer and the rate scheduler."""

from __future__ import annotations

import logging
import math
import threading
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from nearow.stroke_rate.buffers.ring_sample_buffer import EmptyBufferError
from nearow.stroke_rate.buffers.ring_sample_buffer import RingSampleBuffer
from nearow.stroke_rate.config.stroke_rate_config import StrokeRateConfig
from nearow.stroke_rate.estimation.autocorrelation import AutocorrelationEstimator
from nearow.stroke_rate.estimation.autocorrelation import AutocorrelationResult
from nearow.stroke_rate.estimation.rate_conversion import lag_to_rate_spm
from nearow.stroke_rate.estimation.rate_conversion import min_lag_for_rate
from nearow.stroke_rate.estimation.rate_conversion import sampling_rate_hz
from nearow.stroke_rate.filters.ramp_filter import RampFilter
from nearow.stroke_rate.filters.ramp_filter import RampFilterError
from nearow.stroke_rate.location.distance_tracker import DistanceTracker
from nearow.stroke_rate.pipeline.rate_dispatcher import RateDispatcher
from nearow.stroke_rate.stroke_types.location_fix import LocationFix
from nearow.stroke_rate.stroke_types.rate_update import RateUpdate
from nearow.stroke_rate.timing.session_clock import SessionClock


_FLOAT_ARRAY = NDArray[np.float64]

_LOG: logging.Logger = logging.getLogger(__name__)


class StrokeRateSessionError(Exception):
    """Raised for stroke rate session contract violations."""


@dataclass(frozen=True)
class SampleWindow:
    """Consistent copy of the magnitude and timestamp buffers.

    Attributes:
        magnitudes: Filtered magnitudes, oldest first
        timestamps: Session time of each magnitude in seconds, oldest first
    """

    magnitudes: _FLOAT_ARRAY
    timestamps: _FLOAT_ARRAY

    def __len__(self) -> int:
        return int(self.magnitudes.shape[0])


class StrokeRateSession:
    """State of one recording session.

    One instance is created per rowing session and handed to both the sample
    producer (``add_accelerometer_reading``) and the scheduler
    (``estimate_rate``). The magnitude and timestamp buffers are the only
    state the two sides share; pushes and snapshot copies happen under one
    lock so a snapshot always pairs index i of both buffers.
    """

    def __init__(
        self,
        config: StrokeRateConfig,
        *,
        dispatcher: RateDispatcher | None = None,
        clock: SessionClock | None = None,
    ) -> None:
        """Create the session buffers sized from the configuration."""
        if not isinstance(config, StrokeRateConfig):
            raise StrokeRateSessionError("config must be a StrokeRateConfig")
        self._config: StrokeRateConfig = config
        self._dispatcher: RateDispatcher = dispatcher or RateDispatcher()
        self._clock: SessionClock = clock or SessionClock()
        self._debug: bool = config.debug_diagnostics()

        capacity: int = config.accel_buffer_capacity()

        # Shared between producer and scheduler, guarded by _lock
        self._lock = threading.Lock()
        self._magnitudes: RingSampleBuffer = RingSampleBuffer(capacity)
        self._timestamps: RingSampleBuffer = RingSampleBuffer(capacity)
        self._last_t_sec: float | None = None
        self._sample_count: int = 0

        # Owned by the producer
        self._ramp: RampFilter = RampFilter(config.params.ramp.alpha)

        # Owned by the scheduler
        self._estimator: AutocorrelationEstimator = AutocorrelationEstimator(
            min_overlap_ratio=config.params.estimator.min_overlap_ratio,
            skip_zero_lag_lobe=config.params.estimator.skip_zero_lag_lobe,
        )
        self._rate_lock = threading.Lock()
        self._rate_history: RingSampleBuffer = RingSampleBuffer(
            config.rate_history_capacity()
        )

        # Owned by the location source
        self._location_lock = threading.Lock()
        self._distance: DistanceTracker = DistanceTracker()

        _LOG.info(
            "Stroke rate session created: %d sample buffer, %d rate history",
            capacity,
            config.rate_history_capacity(),
        )

    @property
    def config(self) -> StrokeRateConfig:
        return self._config

    @property
    def dispatcher(self) -> RateDispatcher:
        return self._dispatcher

    @property
    def clock(self) -> SessionClock:
        return self._clock

    @property
    def sample_count(self) -> int:
        """Return the total number of samples ingested this session."""
        with self._lock:
            return self._sample_count

    @property
    def smoothed_rate_spm(self) -> float:
        """Return the mean of the recent instantaneous rates.

        Reports 0.0 before the first estimate.
        """
        with self._rate_lock:
            try:
                return self._rate_history.mean()
            except EmptyBufferError:
                return 0.0

    @property
    def latest_fix(self) -> LocationFix | None:
        with self._location_lock:
            return self._distance.last_fix

    @property
    def total_distance_m(self) -> float:
        with self._location_lock:
            return self._distance.total_distance_m

    ############################################################################
    # Sample producer
    ############################################################################

    def add_accelerometer_reading(
        self, reading: Sequence[float] | _FLOAT_ARRAY, t_sec: float | None = None
    ) -> float:
        """Filter a raw 3-axis reading and store its magnitude.

        Args:
            reading: Raw acceleration in m/s^2, shape (3,)
            t_sec: Session time of the reading in seconds, or None to stamp
                it with the session clock

        Returns:
            The filtered acceleration magnitude

        Raises:
            StrokeRateSessionError: If the reading or timestamp is rejected.
                A rejected reading leaves the filter state untouched
        """
        timestamp: float = self._checked_timestamp(t_sec)
        try:
            magnitude: float = self._ramp.update_magnitude(reading)
        except RampFilterError as exc:
            raise StrokeRateSessionError(str(exc)) from exc
        self.add_magnitude(magnitude, timestamp)
        return magnitude

    def add_magnitude(self, magnitude: float, t_sec: float | None = None) -> None:
        """Store an already-filtered magnitude and its timestamp."""
        if not math.isfinite(magnitude):
            raise StrokeRateSessionError("magnitude must be finite")

        timestamp: float = self._checked_timestamp(t_sec)

        with self._lock:
            self._require_not_before_last(timestamp)
            self._magnitudes.push(magnitude)
            self._timestamps.push(timestamp)
            self._last_t_sec = timestamp
            self._sample_count += 1

        if self._debug:
            self._dispatcher.publish_acceleration_reading(magnitude)

    def _checked_timestamp(self, t_sec: float | None) -> float:
        """Resolve a sample timestamp and reject it if out of order."""
        timestamp: float = self._clock.now_sec() if t_sec is None else float(t_sec)
        if not math.isfinite(timestamp):
            raise StrokeRateSessionError("t_sec must be finite")
        with self._lock:
            self._require_not_before_last(timestamp)
        return timestamp

    def _require_not_before_last(self, timestamp: float) -> None:
        # Caller holds _lock
        if self._last_t_sec is not None and timestamp < self._last_t_sec:
            raise StrokeRateSessionError(
                f"Timestamp {timestamp} precedes previous sample at "
                f"{self._last_t_sec}"
            )

    def snapshot(self) -> SampleWindow:
        """Return a consistent copy of the occupied sample window."""
        with self._lock:
            return SampleWindow(
                magnitudes=self._magnitudes.snapshot(),
                timestamps=self._timestamps.snapshot(),
            )

    ############################################################################
    # Location source
    ############################################################################

    def add_location_fix(self, fix: LocationFix) -> float:
        """Record a location fix and return the session distance in meters."""
        with self._location_lock:
            total_distance_m: float = self._distance.add_fix(fix)

        self._dispatcher.publish_location(fix, total_distance_m)

        return total_distance_m

    ############################################################################
    # Rate scheduler
    ############################################################################

    def estimate_rate(self, t_sec: float | None = None) -> RateUpdate:
        """Run one recalculation over the current window and publish it.

        Degenerate windows (empty, flat, or with no elapsed time) produce an
        instantaneous rate of 0 rather than an error.
        """
        window: SampleWindow = self.snapshot()

        sample_rate: float = sampling_rate_hz(window.timestamps)
        min_lag: int = min_lag_for_rate(
            sample_rate, self._config.params.estimator.max_rate_spm
        )

        result: AutocorrelationResult = self._estimator.estimate(
            window.magnitudes, min_lag=min_lag
        )
        stroke_rate: float = lag_to_rate_spm(result.best_lag, sample_rate)

        with self._rate_lock:
            self._rate_history.push(stroke_rate)
            smoothed_rate: float = self._rate_history.mean()

        update: RateUpdate = RateUpdate(
            t_sec=self._clock.now_sec() if t_sec is None else float(t_sec),
            stroke_rate_spm=stroke_rate,
            smoothed_rate_spm=smoothed_rate,
            best_lag=result.best_lag,
            sample_rate_hz=sample_rate,
            sample_count=len(window),
            table=result.table,
        )

        _LOG.debug(
            "Stroke rate %.1f spm (smoothed %.1f), lag %d at %.1f Hz over %d samples",
            stroke_rate,
            smoothed_rate,
            result.best_lag,
            sample_rate,
            len(window),
        )

        if self._debug:
            self._dispatcher.publish_autocorrelation_table(result.table)
        self._dispatcher.publish_stroke_rate(update)

        return update
