################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Stroke rate session orchestration."""

from nearow.stroke_rate.pipeline.rate_dispatcher import RateDispatcher
from nearow.stroke_rate.pipeline.stroke_rate_listener import StrokeRateListener
from nearow.stroke_rate.pipeline.stroke_rate_pipeline import StrokeRatePipeline
from nearow.stroke_rate.pipeline.stroke_rate_session import SampleWindow
from nearow.stroke_rate.pipeline.stroke_rate_session import StrokeRateSession
from nearow.stroke_rate.pipeline.stroke_rate_session import StrokeRateSessionError


__all__ = [
    "RateDispatcher",
    "SampleWindow",
    "StrokeRateListener",
    "StrokeRatePipeline",
    "StrokeRateSession",
    "StrokeRateSessionError",
]
