################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Input filters for accelerometer readings."""

from nearow.stroke_rate.filters.ramp_filter import RampFilter
from nearow.stroke_rate.filters.ramp_filter import RampFilterError
from nearow.stroke_rate.filters.ramp_filter import magnitude


__all__ = [
    "RampFilter",
    "RampFilterError",
    "magnitude",
]
