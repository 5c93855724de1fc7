################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for location fixes."""

from __future__ import annotations

import pytest

from nearow.stroke_rate.stroke_types.location_fix import LocationFix


def test_valid_fix() -> None:
    """Ensure a valid fix keeps its fields."""
    fix: LocationFix = LocationFix(51.5, -0.12, speed_mps=4.2, timestamp_ms=1000)
    assert fix.latitude_deg == 51.5
    assert fix.longitude_deg == -0.12
    assert fix.speed_mps == 4.2
    assert fix.timestamp_ms == 1000


@pytest.mark.parametrize(
    "kwargs",
    [
        {"latitude_deg": 91.0, "longitude_deg": 0.0},
        {"latitude_deg": 0.0, "longitude_deg": -181.0},
        {"latitude_deg": float("nan"), "longitude_deg": 0.0},
        {"latitude_deg": 0.0, "longitude_deg": 0.0, "speed_mps": -1.0},
        {"latitude_deg": 0.0, "longitude_deg": 0.0, "timestamp_ms": -5},
    ],
)
def test_invalid_fix_rejected(kwargs: dict[str, float]) -> None:
    """Ensure out-of-range fields are rejected."""
    with pytest.raises(ValueError):
        LocationFix(**kwargs)  # type: ignore[arg-type]
