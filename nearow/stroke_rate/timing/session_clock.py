################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Session-relative time sources."""

from __future__ import annotations

import time
from typing import Callable


class SessionClock:
    """Report elapsed seconds since the session started.

    Reads a monotonic time source so that wall-clock adjustments never make
    sample timestamps run backwards.
    """

    def __init__(self, time_source: Callable[[], float] | None = None) -> None:
        self._time_source: Callable[[], float] = time_source or time.monotonic
        self._start_sec: float = self._time_source()

    def now_sec(self) -> float:
        """Return seconds elapsed since construction."""
        return self._time_source() - self._start_sec


def wall_clock_ms() -> int:
    """Return the current wall-clock time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000
