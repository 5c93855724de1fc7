################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Accumulate distance travelled between consecutive location fixes."""

from __future__ import annotations

import math

from nearow.stroke_rate.stroke_types.location_fix import LocationFix


# WGS84 mean earth radius in meters
EARTH_RADIUS_M: float = 6371008.8


def great_circle_distance_m(start: LocationFix, end: LocationFix) -> float:
    """Return the haversine distance between two fixes in meters."""
    lat1: float = math.radians(start.latitude_deg)
    lat2: float = math.radians(end.latitude_deg)
    dlat: float = lat2 - lat1
    dlon: float = math.radians(end.longitude_deg - start.longitude_deg)

    a: float = (
        math.sin(dlat / 2.0) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2.0) ** 2
    )
    # Clamp against rounding just above 1 for antipodal points
    a = min(1.0, max(0.0, a))

    return 2.0 * EARTH_RADIUS_M * math.asin(math.sqrt(a))


class DistanceTracker:
    """Sum the path length of a session from its location fixes."""

    def __init__(self) -> None:
        self._last_fix: LocationFix | None = None
        self._total_distance_m: float = 0.0

    @property
    def last_fix(self) -> LocationFix | None:
        """Return the most recent fix, if any."""
        return self._last_fix

    @property
    def total_distance_m(self) -> float:
        return self._total_distance_m

    def reset(self) -> None:
        self._last_fix = None
        self._total_distance_m = 0.0

    def add_fix(self, fix: LocationFix) -> float:
        """Record a fix and return the new total distance in meters."""
        if self._last_fix is not None:
            self._total_distance_m += great_circle_distance_m(self._last_fix, fix)
        self._last_fix = fix
        return self._total_distance_m
