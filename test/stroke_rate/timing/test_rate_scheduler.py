################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for the periodic rate scheduler."""

from __future__ import annotations

import threading
import time
from dataclasses import replace

import pytest

from nearow.stroke_rate.config.stroke_rate_config import StrokeRateConfig
from nearow.stroke_rate.config.stroke_rate_params import StrokeRateParams
from nearow.stroke_rate.timing.rate_scheduler import RateEstimationScheduler
from nearow.stroke_rate.timing.rate_scheduler import RateSchedulerError
from nearow.stroke_rate.timing.rate_scheduler import SchedulerState


WAIT_TIMEOUT_SEC: float = 5.0


def _config(warmup_sec: float, period_sec: float) -> StrokeRateConfig:
    params: StrokeRateParams = StrokeRateParams.defaults()
    return StrokeRateConfig(
        params.replace(
            scheduler=replace(
                params.scheduler,
                warmup_delay_sec=warmup_sec,
                recalculation_period_sec=period_sec,
            )
        )
    )


class _FakeSession:
    """Session stand-in that counts recalculations."""

    def __init__(self, config: StrokeRateConfig, *, fail_first: int = 0) -> None:
        self.config: StrokeRateConfig = config
        self.calls: int = 0
        self.tick_times: list[float] = []
        self._fail_first: int = fail_first
        self.reached = threading.Event()
        self.target_calls: int = 3

    def estimate_rate(self) -> None:
        self.calls += 1
        self.tick_times.append(time.monotonic())
        if self.calls >= self.target_calls:
            self.reached.set()
        if self.calls <= self._fail_first:
            raise RuntimeError("transient failure")


def test_ticks_after_warmup() -> None:
    """Ensure ticks start after the warm-up and repeat every period."""
    session: _FakeSession = _FakeSession(_config(0.1, 0.05))
    scheduler: RateEstimationScheduler = RateEstimationScheduler(
        session  # type: ignore[arg-type]
    )
    assert scheduler.state == SchedulerState.WARMING_UP

    start_sec: float = time.monotonic()
    scheduler.start()
    assert session.reached.wait(WAIT_TIMEOUT_SEC)
    assert scheduler.state == SchedulerState.RUNNING
    scheduler.stop()

    assert scheduler.state == SchedulerState.STOPPED
    assert session.tick_times[0] - start_sec >= 0.1 - 0.01
    assert scheduler.tick_count == session.calls


def test_stop_during_warmup_skips_ticks() -> None:
    """Ensure a stop before the warm-up ends produces no ticks."""
    session: _FakeSession = _FakeSession(_config(10.0, 1.0))
    scheduler: RateEstimationScheduler = RateEstimationScheduler(
        session  # type: ignore[arg-type]
    )
    scheduler.start()
    scheduler.stop(timeout=WAIT_TIMEOUT_SEC)
    assert scheduler.state == SchedulerState.STOPPED
    assert session.calls == 0


def test_no_ticks_after_stop() -> None:
    """Ensure the loop stays quiet once stopped."""
    session: _FakeSession = _FakeSession(_config(0.0, 0.02))
    scheduler: RateEstimationScheduler = RateEstimationScheduler(
        session  # type: ignore[arg-type]
    )
    scheduler.start()
    assert session.reached.wait(WAIT_TIMEOUT_SEC)
    scheduler.stop()
    calls_at_stop: int = session.calls
    time.sleep(0.1)
    assert session.calls == calls_at_stop


def test_failed_tick_does_not_stop_loop() -> None:
    """Ensure a raising recalculation is logged and the next tick runs."""
    session: _FakeSession = _FakeSession(_config(0.0, 0.02), fail_first=2)
    session.target_calls = 4
    scheduler: RateEstimationScheduler = RateEstimationScheduler(
        session  # type: ignore[arg-type]
    )
    scheduler.start()
    assert session.reached.wait(WAIT_TIMEOUT_SEC)
    scheduler.stop()
    assert session.calls >= 4
    assert scheduler.tick_count == session.calls - 2


def test_start_twice_rejected() -> None:
    """Ensure a scheduler runs at most once."""
    session: _FakeSession = _FakeSession(_config(10.0, 1.0))
    scheduler: RateEstimationScheduler = RateEstimationScheduler(
        session  # type: ignore[arg-type]
    )
    scheduler.start()
    with pytest.raises(RateSchedulerError):
        scheduler.start()
    scheduler.stop()


def test_restart_after_stop_rejected() -> None:
    """Ensure a stopped scheduler cannot be started again."""
    session: _FakeSession = _FakeSession(_config(10.0, 1.0))
    scheduler: RateEstimationScheduler = RateEstimationScheduler(
        session  # type: ignore[arg-type]
    )
    scheduler.stop()
    assert scheduler.state == SchedulerState.STOPPED
    with pytest.raises(RateSchedulerError):
        scheduler.start()
