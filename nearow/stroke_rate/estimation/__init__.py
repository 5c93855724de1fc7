################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Periodicity detection and stroke rate conversion."""

from nearow.stroke_rate.estimation.autocorrelation import AutocorrelationError
from nearow.stroke_rate.estimation.autocorrelation import AutocorrelationEstimator
from nearow.stroke_rate.estimation.autocorrelation import AutocorrelationResult
from nearow.stroke_rate.estimation.autocorrelation import FrequencyScoreTable
from nearow.stroke_rate.estimation.rate_conversion import lag_to_rate_spm
from nearow.stroke_rate.estimation.rate_conversion import min_lag_for_rate
from nearow.stroke_rate.estimation.rate_conversion import next_power_of_two
from nearow.stroke_rate.estimation.rate_conversion import sampling_rate_hz


__all__ = [
    "AutocorrelationError",
    "AutocorrelationEstimator",
    "AutocorrelationResult",
    "FrequencyScoreTable",
    "lag_to_rate_spm",
    "min_lag_for_rate",
    "next_power_of_two",
    "sampling_rate_hz",
]
