################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Periodic stroke rate recalculation on a background thread."""

from __future__ import annotations

import enum
import logging
import threading
import time
from typing import TYPE_CHECKING
from typing import Callable


if TYPE_CHECKING:
    from nearow.stroke_rate.pipeline.stroke_rate_session import StrokeRateSession


_LOG: logging.Logger = logging.getLogger(__name__)


class RateSchedulerError(Exception):
    """Raised when the scheduler is misused."""


class SchedulerState(enum.Enum):
    WARMING_UP = "warming_up"
    RUNNING = "running"
    STOPPED = "stopped"


class RateEstimationScheduler:
    """
    Recalculate the stroke rate of a session on a fixed cadence.

    After a warm-up delay that lets the buffers fill with real data, the
    scheduler calls ``session.estimate_rate()`` once per period on a single
    thread, so ticks never overlap. A stop request is honored between ticks:
    a tick that has started always runs to completion.
    """

    def __init__(
        self,
        session: StrokeRateSession,
        *,
        time_source: Callable[[], float] | None = None,
    ) -> None:
        self._session: StrokeRateSession = session
        self._period_sec: float = session.config.recalculation_period_sec()
        self._warmup_delay_sec: float = session.config.warmup_delay_sec()
        self._time_source: Callable[[], float] = time_source or time.monotonic

        self._state: SchedulerState = SchedulerState.WARMING_UP
        self._state_lock = threading.Lock()
        self._tick_count: int = 0

        # Threading parameters
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def state(self) -> SchedulerState:
        with self._state_lock:
            return self._state

    @property
    def tick_count(self) -> int:
        """Return the number of completed recalculations."""
        with self._state_lock:
            return self._tick_count

    def start(self) -> None:
        """Start the scheduler thread."""
        if self._thread is not None:
            raise RateSchedulerError("Scheduler already started")
        if self._stop_event.is_set():
            raise RateSchedulerError("Scheduler cannot be restarted after stop")

        self._thread = threading.Thread(
            target=self._run_thread, name="rate_scheduler", daemon=True
        )
        self._thread.start()

    def stop(self, timeout: float | None = None) -> None:
        """
        Request cancellation and wait for the thread to finish its tick.

        :param timeout: The number of seconds to wait, or None to wait forever
        """
        _LOG.debug("Rate scheduler received stop signal")
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
        if self._thread is None or not self._thread.is_alive():
            self._set_state(SchedulerState.STOPPED)

    def should_stop(self) -> bool:
        return self._stop_event.is_set()

    def _run_thread(self) -> None:
        _LOG.info(
            "Rate scheduler warming up for %.2f s, then every %.2f s",
            self._warmup_delay_sec,
            self._period_sec,
        )

        if self._stop_event.wait(timeout=self._warmup_delay_sec):
            self._set_state(SchedulerState.STOPPED)
            return

        self._set_state(SchedulerState.RUNNING)

        next_tick_sec: float = self._time_source()
        while not self._stop_event.is_set():
            self._tick()

            next_tick_sec += self._period_sec
            delay_sec: float = next_tick_sec - self._time_source()
            if delay_sec < 0.0:
                # Overran the period, resynchronize instead of bursting
                next_tick_sec = self._time_source()
                delay_sec = 0.0

            if self._stop_event.wait(timeout=delay_sec):
                break

        self._set_state(SchedulerState.STOPPED)
        _LOG.info("Rate scheduler stopped after %d ticks", self.tick_count)

    def _tick(self) -> None:
        try:
            self._session.estimate_rate()
        except Exception:
            # The next tick supersedes a failed one
            _LOG.exception("Stroke rate recalculation failed")
            return

        with self._state_lock:
            self._tick_count += 1

    def _set_state(self, state: SchedulerState) -> None:
        with self._state_lock:
            self._state = state
