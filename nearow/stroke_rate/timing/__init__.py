################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Clocks and periodic scheduling for rowing sessions."""

from nearow.stroke_rate.timing.rate_scheduler import RateEstimationScheduler
from nearow.stroke_rate.timing.rate_scheduler import RateSchedulerError
from nearow.stroke_rate.timing.rate_scheduler import SchedulerState
from nearow.stroke_rate.timing.session_clock import SessionClock
from nearow.stroke_rate.timing.session_clock import wall_clock_ms


__all__ = [
    "RateEstimationScheduler",
    "RateSchedulerError",
    "SchedulerState",
    "SessionClock",
    "wall_clock_ms",
]
