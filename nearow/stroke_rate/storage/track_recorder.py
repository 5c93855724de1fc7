################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Listener that persists each smoothed rate with the latest location."""

from __future__ import annotations

import logging
from typing import Callable

from nearow.stroke_rate.pipeline.stroke_rate_listener import StrokeRateListener
from nearow.stroke_rate.storage.track_store import TrackStore
from nearow.stroke_rate.stroke_types.location_fix import LocationFix
from nearow.stroke_rate.stroke_types.rate_update import RateUpdate
from nearow.stroke_rate.stroke_types.track_point import TrackPoint
from nearow.stroke_rate.timing.session_clock import wall_clock_ms


_LOG: logging.Logger = logging.getLogger(__name__)


class TrackRecorder(StrokeRateListener):
    """
    Combine every stroke rate update with the latest known location fix and
    append the result to a track store.

    Updates that arrive before the first fix have no position to pair with
    and are not recorded.
    """

    def __init__(
        self,
        store: TrackStore,
        *,
        session_id: int | None = None,
        clock_ms: Callable[[], int] | None = None,
    ) -> None:
        self._store: TrackStore = store
        self._session_id: int = (
            session_id if session_id is not None else store.new_session_id()
        )
        self._clock_ms: Callable[[], int] = clock_ms or wall_clock_ms
        self._last_fix: LocationFix | None = None
        self._recorded_count: int = 0
        self._skipped_count: int = 0

        _LOG.info("Recording session %d to %s", self._session_id, store.path)

    @property
    def session_id(self) -> int:
        return self._session_id

    @property
    def recorded_count(self) -> int:
        return self._recorded_count

    @property
    def skipped_count(self) -> int:
        return self._skipped_count

    def on_location_update(self, fix: LocationFix, total_distance_m: float) -> None:
        self._last_fix = fix

    def on_stroke_rate_update(self, update: RateUpdate) -> None:
        if self._last_fix is None:
            self._skipped_count += 1
            _LOG.debug("No location fix yet, skipping track point")
            return

        point: TrackPoint = TrackPoint(
            session_id=self._session_id,
            timestamp_ms=self._clock_ms(),
            stroke_rate_spm=update.smoothed_rate_spm,
            latitude_deg=self._last_fix.latitude_deg,
            longitude_deg=self._last_fix.longitude_deg,
            speed_mps=self._last_fix.speed_mps,
        )
        self._store.append(point)
        self._recorded_count += 1
