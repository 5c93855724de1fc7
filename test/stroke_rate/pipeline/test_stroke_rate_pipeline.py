################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for the live pipeline lifecycle."""

from __future__ import annotations

import threading
from dataclasses import replace

from nearow.stroke_rate.config.stroke_rate_config import StrokeRateConfig
from nearow.stroke_rate.config.stroke_rate_params import StrokeRateParams
from nearow.stroke_rate.pipeline.stroke_rate_listener import StrokeRateListener
from nearow.stroke_rate.pipeline.stroke_rate_pipeline import StrokeRatePipeline
from nearow.stroke_rate.stroke_types.rate_update import RateUpdate
from nearow.stroke_rate.timing.rate_scheduler import SchedulerState


WAIT_TIMEOUT_SEC: float = 5.0


class _UpdateListener(StrokeRateListener):
    def __init__(self) -> None:
        self.updates: list[RateUpdate] = []
        self.received = threading.Event()

    def on_stroke_rate_update(self, update: RateUpdate) -> None:
        self.updates.append(update)
        self.received.set()


def _fast_config() -> StrokeRateConfig:
    params: StrokeRateParams = StrokeRateParams.defaults()
    return StrokeRateConfig(
        params.replace(
            scheduler=replace(
                params.scheduler, warmup_delay_sec=0.05, recalculation_period_sec=0.05
            )
        )
    )


def test_context_manager_runs_and_stops() -> None:
    """Ensure the pipeline delivers updates while running and then stops."""
    listener: _UpdateListener = _UpdateListener()
    with StrokeRatePipeline(_fast_config(), listener=listener) as pipeline:
        pipeline.session.add_accelerometer_reading([0.0, 0.0, 9.81])
        assert listener.received.wait(WAIT_TIMEOUT_SEC)
        assert pipeline.state == SchedulerState.RUNNING

    assert pipeline.state == SchedulerState.STOPPED
    assert not pipeline.dispatcher.is_running()
    assert listener.updates[0].smoothed_rate_spm == 0.0


def test_listener_added_after_construction() -> None:
    """Ensure listeners can join before the pipeline starts."""
    pipeline: StrokeRatePipeline = StrokeRatePipeline(_fast_config())
    listener: _UpdateListener = _UpdateListener()
    pipeline.add_listener(listener)
    pipeline.start()
    try:
        assert listener.received.wait(WAIT_TIMEOUT_SEC)
    finally:
        pipeline.stop()
    assert pipeline.scheduler.tick_count >= 1
