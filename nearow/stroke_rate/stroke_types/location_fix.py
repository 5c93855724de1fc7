################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Location fix type delivered by the positioning source."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class LocationFix:
    """Discrete positional fix with its instantaneous speed.

    Attributes:
        latitude_deg: WGS84 latitude in degrees, within [-90, 90]
        longitude_deg: WGS84 longitude in degrees, within [-180, 180]
        speed_mps: Ground speed reported with the fix in m/s, non-negative
        timestamp_ms: Wall-clock time of the fix in milliseconds since the
            Unix epoch, if the source reports one
    """

    latitude_deg: float
    longitude_deg: float
    speed_mps: float = 0.0
    timestamp_ms: int | None = None

    def __post_init__(self) -> None:
        """Validate location fix fields."""
        if not math.isfinite(self.latitude_deg) or abs(self.latitude_deg) > 90.0:
            raise ValueError("latitude_deg must be within [-90, 90]")
        if not math.isfinite(self.longitude_deg) or abs(self.longitude_deg) > 180.0:
            raise ValueError("longitude_deg must be within [-180, 180]")
        if not math.isfinite(self.speed_mps) or self.speed_mps < 0.0:
            raise ValueError("speed_mps must be finite and non-negative")
        if self.timestamp_ms is not None and self.timestamp_ms < 0:
            raise ValueError("timestamp_ms must be non-negative")
