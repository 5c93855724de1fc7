################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""High-level configuration wrapper for stroke rate estimation."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from pathlib import Path

from nearow.stroke_rate.config.stroke_rate_params import StrokeRateParams
from nearow.stroke_rate.config.stroke_rate_params import StrokeRateParamsError
from nearow.stroke_rate.estimation.rate_conversion import SEC_PER_MIN
from nearow.stroke_rate.estimation.rate_conversion import next_power_of_two


# Application directory created under the user's home directory
NEAROW_DIR_NAME: str = ".nearow"


class StrokeRateConfigError(Exception):
    """Raised when stroke rate configuration validation fails."""


@dataclass(frozen=True)
class StrokeRateConfig:
    """Validated parameters plus the quantities derived from them."""

    params: StrokeRateParams

    def __init__(self, params: StrokeRateParams) -> None:
        """Initialize the configuration wrapper and validate."""
        object.__setattr__(self, "params", params)
        self.validate()

    @classmethod
    def defaults(cls) -> StrokeRateConfig:
        """Return a configuration built from default parameters."""
        return cls(StrokeRateParams.defaults())

    def validate(self) -> None:
        """Validate parameter invariants and cross-namespace policies."""
        try:
            self.params.validate()
        except StrokeRateParamsError as exc:
            raise StrokeRateConfigError(str(exc)) from exc

        # The history window must hold at least two lags past the ceiling
        min_lag: float = (
            SEC_PER_MIN
            * self.params.sampling.sample_rate_hz
            / self.params.estimator.max_rate_spm
        )
        max_lag: float = self.accel_buffer_capacity() * (
            1.0 - self.params.estimator.min_overlap_ratio
        )
        if max_lag < min_lag:
            raise StrokeRateConfigError(
                "sampling.history_sec is too short to observe a stroke at "
                "estimator.max_rate_spm"
            )

    def accel_buffer_capacity(self) -> int:
        """Return the magnitude and timestamp buffer capacity.

        The nominal sample count over the history horizon, rounded up to the
        next power of two.
        """
        nominal: int = math.ceil(
            self.params.sampling.sample_rate_hz * self.params.sampling.history_sec
        )
        return next_power_of_two(nominal)

    def rate_history_capacity(self) -> int:
        """Return the number of instantaneous rates to average."""
        return self.params.scheduler.rate_history_size

    def recalculation_period_sec(self) -> float:
        return self.params.scheduler.recalculation_period_sec

    def warmup_delay_sec(self) -> float:
        return self.params.scheduler.warmup_delay_sec

    def debug_diagnostics(self) -> bool:
        return self.params.diag.debug_diagnostics

    def track_path(self, home: str | os.PathLike[str] | None = None) -> Path:
        """Return the path of the track point log."""
        directory: Path
        if self.params.storage.directory is not None:
            directory = Path(self.params.storage.directory)
        else:
            home_value: str | None
            if home is None:
                home_value = os.getenv("HOME")
            else:
                home_value = os.fspath(home)
            home_path: Path = Path(home_value) if home_value else Path(".")
            directory = home_path / NEAROW_DIR_NAME
        return directory / self.params.storage.file_name
