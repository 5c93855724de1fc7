################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Type definitions for stroke rate estimation."""

from __future__ import annotations

from nearow.stroke_rate.stroke_types.location_fix import LocationFix
from nearow.stroke_rate.stroke_types.rate_update import RateUpdate
from nearow.stroke_rate.stroke_types.track_point import TrackPoint


__all__ = [
    "LocationFix",
    "RateUpdate",
    "TrackPoint",
]
