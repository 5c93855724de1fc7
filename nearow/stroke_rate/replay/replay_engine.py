################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Deterministic offline replay of recorded accelerometer data."""

from __future__ import annotations

import csv
import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from nearow.stroke_rate.pipeline.stroke_rate_session import StrokeRateSession
from nearow.stroke_rate.stroke_types.rate_update import RateUpdate


_LOG: logging.Logger = logging.getLogger(__name__)

# Column names of a recording, in order
CSV_COLUMNS: tuple[str, ...] = ("t_sec", "x", "y", "z")


class ReplayError(Exception):
    """Raised when replay input is malformed."""


@dataclass(frozen=True)
class AccelRecord:
    """One recorded accelerometer reading.

    Attributes:
        t_sec: Recording time in seconds, finite and non-decreasing within a
            recording
        x: Acceleration along the x axis in m/s^2
        y: Acceleration along the y axis in m/s^2
        z: Acceleration along the z axis in m/s^2
    """

    t_sec: float
    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        """Validate that every field is finite."""
        for name in CSV_COLUMNS:
            if not math.isfinite(getattr(self, name)):
                raise ReplayError(f"{name} must be finite")

    def vector(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


def load_csv(path: str | os.PathLike[str]) -> list[AccelRecord]:
    """Load a recording with ``t_sec,x,y,z`` columns and an optional header."""
    path_obj: Path = Path(os.fspath(path))
    records: list[AccelRecord] = []
    try:
        with path_obj.open("r", encoding="utf-8", newline="") as handle:
            for line_number, row in enumerate(csv.reader(handle), start=1):
                if not row or not "".join(row).strip():
                    continue
                if line_number == 1 and row[0].strip() == CSV_COLUMNS[0]:
                    continue
                if len(row) != len(CSV_COLUMNS):
                    raise ReplayError(
                        f"Line {line_number} of {path_obj} must have "
                        f"{len(CSV_COLUMNS)} columns"
                    )
                try:
                    values: list[float] = [float(cell) for cell in row]
                except ValueError as exc:
                    raise ReplayError(
                        f"Line {line_number} of {path_obj} is not numeric"
                    ) from exc
                records.append(AccelRecord(*values))
    except OSError as exc:
        raise ReplayError(f"Failed to read recording {path_obj}") from exc

    return records


class ReplayEngine:
    """
    Feed a recording through a session on the recording's own time axis.

    Ticks fire at the warm-up delay and then once per period, measured from
    the first record, exactly as the live scheduler would have fired them. A
    tick at time T sees every record stamped at or before T.
    """

    def __init__(self, session: StrokeRateSession) -> None:
        self._session: StrokeRateSession = session
        self._period_sec: float = session.config.recalculation_period_sec()
        self._warmup_delay_sec: float = session.config.warmup_delay_sec()

    def run(self, records: Iterable[AccelRecord]) -> list[RateUpdate]:
        """Replay the records and return the update produced by every tick."""
        indexed: list[tuple[int, AccelRecord]] = list(enumerate(records))
        indexed.sort(key=lambda pair: (pair[1].t_sec, pair[0]))
        ordered: list[AccelRecord] = [record for _, record in indexed]

        updates: list[RateUpdate] = []
        if not ordered:
            return updates

        t0_sec: float = ordered[0].t_sec
        next_tick_sec: float = self._warmup_delay_sec

        for record in ordered:
            t_rel_sec: float = record.t_sec - t0_sec
            while next_tick_sec < t_rel_sec:
                updates.append(self._session.estimate_rate(t_sec=next_tick_sec))
                next_tick_sec += self._period_sec
            self._session.add_accelerometer_reading(record.vector(), t_sec=t_rel_sec)

        t_end_sec: float = ordered[-1].t_sec - t0_sec
        while next_tick_sec <= t_end_sec:
            updates.append(self._session.estimate_rate(t_sec=next_tick_sec))
            next_tick_sec += self._period_sec

        _LOG.info("Replayed %d records into %d ticks", len(ordered), len(updates))

        return updates
