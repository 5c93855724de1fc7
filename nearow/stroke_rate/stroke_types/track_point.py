################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Persisted rate and location record."""

from __future__ import annotations

import math
from dataclasses import asdict
from dataclasses import dataclass
from typing import Any
from typing import Mapping


@dataclass(frozen=True)
class TrackPoint:
    """One stroke rate sample tied to a location within a rowing session.

    Attributes:
        session_id: Positive identifier of the rowing session
        timestamp_ms: Wall-clock time in milliseconds since the Unix epoch
        stroke_rate_spm: Smoothed stroke rate in strokes per minute
        latitude_deg: Latitude of the latest fix in degrees
        longitude_deg: Longitude of the latest fix in degrees
        speed_mps: Speed of the latest fix in m/s
    """

    session_id: int
    timestamp_ms: int
    stroke_rate_spm: float
    latitude_deg: float
    longitude_deg: float
    speed_mps: float

    def __post_init__(self) -> None:
        """Validate track point fields."""
        if isinstance(self.session_id, bool) or not isinstance(self.session_id, int):
            raise ValueError("session_id must be an int")
        if self.session_id <= 0:
            raise ValueError("session_id must be positive")
        if self.timestamp_ms < 0:
            raise ValueError("timestamp_ms must be non-negative")
        for name in ("stroke_rate_spm", "latitude_deg", "longitude_deg", "speed_mps"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be finite")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TrackPoint:
        """Build a track point from a decoded record."""
        return cls(
            session_id=int(data["session_id"]),
            timestamp_ms=int(data["timestamp_ms"]),
            stroke_rate_spm=float(data["stroke_rate_spm"]),
            latitude_deg=float(data["latitude_deg"]),
            longitude_deg=float(data["longitude_deg"]),
            speed_mps=float(data["speed_mps"]),
        )
