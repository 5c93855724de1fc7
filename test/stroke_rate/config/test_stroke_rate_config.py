################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for the stroke rate configuration wrapper."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pytest

from nearow.stroke_rate.config.stroke_rate_config import NEAROW_DIR_NAME
from nearow.stroke_rate.config.stroke_rate_config import StrokeRateConfig
from nearow.stroke_rate.config.stroke_rate_config import StrokeRateConfigError
from nearow.stroke_rate.config.stroke_rate_params import StrokeRateParams


def test_default_capacities() -> None:
    """Ensure default buffers round 500 samples up to 512."""
    config: StrokeRateConfig = StrokeRateConfig.defaults()
    assert config.accel_buffer_capacity() == 512
    assert config.rate_history_capacity() == 3
    assert config.recalculation_period_sec() == pytest.approx(1.0)
    assert config.warmup_delay_sec() == pytest.approx(3.0)
    assert not config.debug_diagnostics()


def test_capacity_is_power_of_two() -> None:
    """Ensure the buffer capacity rounds up to a power of two."""
    params: StrokeRateParams = StrokeRateParams.defaults()
    config: StrokeRateConfig = StrokeRateConfig(
        params.replace(sampling=replace(params.sampling, sample_rate_hz=100.0))
    )
    assert config.accel_buffer_capacity() == 1024


def test_invalid_params_wrapped() -> None:
    """Ensure parameter errors surface as configuration errors."""
    params: StrokeRateParams = StrokeRateParams.defaults()
    with pytest.raises(StrokeRateConfigError):
        StrokeRateConfig(params.replace(ramp=replace(params.ramp, alpha=2.0)))


def test_history_too_short_for_rate_ceiling() -> None:
    """Ensure the window must cover at least one stroke at the ceiling."""
    params: StrokeRateParams = StrokeRateParams.defaults()
    short: StrokeRateParams = params.replace(
        sampling=replace(params.sampling, history_sec=1.0),
        estimator=replace(params.estimator, max_rate_spm=20.0),
    )
    with pytest.raises(StrokeRateConfigError):
        StrokeRateConfig(short)


def test_track_path_defaults_under_home(tmp_path: Path) -> None:
    """Ensure the track log lives in the application directory."""
    config: StrokeRateConfig = StrokeRateConfig.defaults()
    assert config.track_path(home=tmp_path) == (
        tmp_path / NEAROW_DIR_NAME / "tracks.jsonl"
    )


def test_track_path_explicit_directory(tmp_path: Path) -> None:
    """Ensure an explicit storage directory wins over the home directory."""
    params: StrokeRateParams = StrokeRateParams.defaults()
    config: StrokeRateConfig = StrokeRateConfig(
        params.replace(
            storage=replace(params.storage, directory=str(tmp_path), file_name="a.jsonl")
        )
    )
    assert config.track_path(home="/unused") == tmp_path / "a.jsonl"
