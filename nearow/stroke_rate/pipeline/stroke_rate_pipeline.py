################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Lifecycle of a live stroke rate pipeline."""

from __future__ import annotations

import logging
from types import TracebackType

from nearow.stroke_rate.config.stroke_rate_config import StrokeRateConfig
from nearow.stroke_rate.pipeline.rate_dispatcher import RateDispatcher
from nearow.stroke_rate.pipeline.stroke_rate_listener import StrokeRateListener
from nearow.stroke_rate.pipeline.stroke_rate_session import StrokeRateSession
from nearow.stroke_rate.timing.rate_scheduler import RateEstimationScheduler
from nearow.stroke_rate.timing.rate_scheduler import SchedulerState
from nearow.stroke_rate.timing.session_clock import SessionClock


_LOG: logging.Logger = logging.getLogger(__name__)


class StrokeRatePipeline:
    """Session, dispatcher and scheduler started and torn down together.

    Usage:
        with StrokeRatePipeline(config, listener=ui_adapter) as pipeline:
            for reading in sensor:
                pipeline.session.add_accelerometer_reading(reading)
    """

    def __init__(
        self,
        config: StrokeRateConfig,
        *,
        listener: StrokeRateListener | None = None,
        clock: SessionClock | None = None,
    ) -> None:
        self._dispatcher: RateDispatcher = RateDispatcher()
        if listener is not None:
            self._dispatcher.add_listener(listener)
        self._session: StrokeRateSession = StrokeRateSession(
            config, dispatcher=self._dispatcher, clock=clock
        )
        self._scheduler: RateEstimationScheduler = RateEstimationScheduler(
            self._session
        )

    @property
    def session(self) -> StrokeRateSession:
        return self._session

    @property
    def dispatcher(self) -> RateDispatcher:
        return self._dispatcher

    @property
    def scheduler(self) -> RateEstimationScheduler:
        return self._scheduler

    @property
    def state(self) -> SchedulerState:
        return self._scheduler.state

    def add_listener(self, listener: StrokeRateListener) -> None:
        self._dispatcher.add_listener(listener)

    def start(self) -> None:
        """Start delivering events, then start the recalculation loop."""
        self._dispatcher.start()
        self._scheduler.start()
        _LOG.info("Stroke rate pipeline started")

    def stop(self) -> None:
        """Stop the recalculation loop, then drain pending events."""
        self._scheduler.stop()
        self._dispatcher.stop()
        _LOG.info("Stroke rate pipeline stopped")

    def __enter__(self) -> StrokeRatePipeline:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.stop()
