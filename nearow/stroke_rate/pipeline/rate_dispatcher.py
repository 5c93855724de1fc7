################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Fire-and-forget delivery of session events to listeners."""

from __future__ import annotations

import logging
import queue
import threading
from typing import Callable

from nearow.stroke_rate.estimation.autocorrelation import FrequencyScoreTable
from nearow.stroke_rate.pipeline.stroke_rate_listener import StrokeRateListener
from nearow.stroke_rate.stroke_types.location_fix import LocationFix
from nearow.stroke_rate.stroke_types.rate_update import RateUpdate


_LOG: logging.Logger = logging.getLogger(__name__)

# Seconds to wait for queued events to drain when stopping
STOP_TIMEOUT_SEC: float = 5.0


_Event = Callable[[StrokeRateListener], None]


class RateDispatcher:
    """
    Deliver session events to listeners on a dedicated thread.

    Publishing only enqueues, so neither the sample producer nor the
    scheduler ever waits on a slow listener. Events are delivered in publish
    order. Events published while the thread is not running are dropped.
    """

    def __init__(self) -> None:
        self._listeners: list[StrokeRateListener] = []
        self._listeners_lock = threading.Lock()

        # Threading parameters
        self._queue: queue.Queue[_Event | None] = queue.Queue()
        self._thread: threading.Thread | None = None

    def add_listener(self, listener: StrokeRateListener) -> None:
        with self._listeners_lock:
            if listener not in self._listeners:
                self._listeners.append(listener)

    def remove_listener(self, listener: StrokeRateListener) -> None:
        with self._listeners_lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def start(self) -> None:
        """Start the delivery thread."""
        if self._thread is not None:
            return
        self._thread = threading.Thread(
            target=self._run_thread, name="rate_dispatcher", daemon=True
        )
        self._thread.start()

    def stop(self, timeout: float | None = STOP_TIMEOUT_SEC) -> None:
        """Deliver events already queued, then stop the delivery thread."""
        if self._thread is None:
            return
        self._queue.put(None)
        self._thread.join(timeout)
        if self._thread.is_alive():
            _LOG.warning("Dispatcher did not drain within %s s", timeout)
        self._thread = None

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def wait_idle(self) -> None:
        """Block until every event published so far has been delivered."""
        if not self.is_running():
            return
        self._queue.join()

    def publish_acceleration_reading(self, magnitude: float) -> None:
        self._publish(lambda listener: listener.on_acceleration_reading(magnitude))

    def publish_autocorrelation_table(self, table: FrequencyScoreTable) -> None:
        self._publish(lambda listener: listener.on_autocorrelation_table(table))

    def publish_stroke_rate(self, update: RateUpdate) -> None:
        self._publish(lambda listener: listener.on_stroke_rate_update(update))

    def publish_location(self, fix: LocationFix, total_distance_m: float) -> None:
        self._publish(
            lambda listener: listener.on_location_update(fix, total_distance_m)
        )

    def _publish(self, event: _Event) -> None:
        # Events published while nobody listens are dropped
        with self._listeners_lock:
            if not self._listeners:
                return
        if self._thread is None:
            _LOG.debug("Dispatcher not running, dropping event")
            return
        self._queue.put(event)

    def _run_thread(self) -> None:
        while True:
            event: _Event | None = self._queue.get()
            try:
                if event is None:
                    break
                self._deliver(event)
            finally:
                self._queue.task_done()

    def _deliver(self, event: _Event) -> None:
        with self._listeners_lock:
            listeners: list[StrokeRateListener] = list(self._listeners)

        for listener in listeners:
            try:
                event(listener)
            except Exception:
                # A failing listener must not stop delivery to the others
                _LOG.exception("Listener %r raised while handling an event", listener)

