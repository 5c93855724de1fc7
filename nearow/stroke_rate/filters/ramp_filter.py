################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Single-pole ramp filter for 3-axis accelerometer readings."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from numpy.typing import NDArray


_FLOAT_ARRAY = NDArray[np.float64]


class RampFilterError(Exception):
    """Raised when the ramp filter is misconfigured or fed bad input."""


def magnitude(vector: Sequence[float] | _FLOAT_ARRAY) -> float:
    """Return the Euclidean norm of a 3-vector."""
    return float(math.sqrt(vector[0] ** 2 + vector[1] ** 2 + vector[2] ** 2))


class RampFilter:
    """Exponential smoothing applied per axis before taking the magnitude.

    Each call blends the raw reading with the previous filtered reading:

        filtered = raw * alpha + previous * (1 - alpha)

    The filter is stateful, so readings from one stream must be applied in
    arrival order from a single thread.
    """

    def __init__(self, alpha: float) -> None:
        if not math.isfinite(alpha) or not 0.0 < alpha < 1.0:
            raise RampFilterError("alpha must be in the open interval (0, 1)")
        self._alpha: float = float(alpha)
        self._state: _FLOAT_ARRAY = np.zeros(3, dtype=np.float64)

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def state(self) -> _FLOAT_ARRAY:
        """Return a copy of the last filtered reading."""
        return self._state.copy()

    def reset(self) -> None:
        """Return the filter to its zero-initialized state."""
        self._state = np.zeros(3, dtype=np.float64)

    def update(self, reading: Sequence[float] | _FLOAT_ARRAY) -> _FLOAT_ARRAY:
        """Filter one raw reading and return the filtered 3-vector."""
        raw: _FLOAT_ARRAY = np.asarray(reading, dtype=np.float64)
        if raw.shape != (3,):
            raise RampFilterError("reading must have shape (3,)")
        if not np.all(np.isfinite(raw)):
            raise RampFilterError("reading must be finite")

        filtered: _FLOAT_ARRAY = raw * self._alpha + self._state * (1.0 - self._alpha)
        self._state = filtered

        return filtered.copy()

    def update_magnitude(self, reading: Sequence[float] | _FLOAT_ARRAY) -> float:
        """Filter one raw reading and return the norm of the result."""
        return magnitude(self.update(reading))
