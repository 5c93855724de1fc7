################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Callback interface for consumers of stroke rate results."""

from __future__ import annotations

from nearow.stroke_rate.estimation.autocorrelation import FrequencyScoreTable
from nearow.stroke_rate.stroke_types.location_fix import LocationFix
from nearow.stroke_rate.stroke_types.rate_update import RateUpdate


class StrokeRateListener:
    """
    Receives results from a rowing session.

    Callbacks run on the dispatcher thread, never on the producer or the
    scheduler. Adapters that must touch UI state are responsible for
    re-posting onto their own thread. Every callback defaults to a no-op.
    """

    def on_acceleration_reading(self, magnitude: float) -> None:
        """
        Called for each ingested sample when debug diagnostics are enabled.

        :param magnitude: Filtered acceleration magnitude in m/s^2
        """

    def on_autocorrelation_table(self, table: FrequencyScoreTable) -> None:
        """
        Called once per tick with the full per-lag score table when debug
        diagnostics are enabled.
        """

    def on_stroke_rate_update(self, update: RateUpdate) -> None:
        """
        Called when the stroke rate is recalculated.

        :param update: The tick result; ``update.smoothed_rate_spm`` is the
                       rate to display
        """

    def on_location_update(self, fix: LocationFix, total_distance_m: float) -> None:
        """
        Called when a new location fix is obtained.

        :param fix: The new fix
        :param total_distance_m: Total distance travelled this session
        """
