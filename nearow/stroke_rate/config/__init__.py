################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Configuration for stroke rate estimation."""

from nearow.stroke_rate.config.stroke_rate_config import StrokeRateConfig
from nearow.stroke_rate.config.stroke_rate_config import StrokeRateConfigError
from nearow.stroke_rate.config.stroke_rate_params import StrokeRateParams
from nearow.stroke_rate.config.stroke_rate_params import StrokeRateParamsError


__all__ = [
    "StrokeRateConfig",
    "StrokeRateConfigError",
    "StrokeRateParams",
    "StrokeRateParamsError",
]
