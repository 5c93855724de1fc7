################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Location helpers for rowing sessions."""

from nearow.stroke_rate.location.distance_tracker import DistanceTracker
from nearow.stroke_rate.location.distance_tracker import great_circle_distance_m


__all__ = ["DistanceTracker", "great_circle_distance_m"]
