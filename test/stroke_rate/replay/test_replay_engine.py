################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for offline replay of recordings."""

from __future__ import annotations

import math
from pathlib import Path

import pytest

from nearow.stroke_rate.config.stroke_rate_config import StrokeRateConfig
from nearow.stroke_rate.pipeline.stroke_rate_session import StrokeRateSession
from nearow.stroke_rate.replay.replay_engine import AccelRecord
from nearow.stroke_rate.replay.replay_engine import ReplayEngine
from nearow.stroke_rate.replay.replay_engine import ReplayError
from nearow.stroke_rate.replay.replay_engine import load_csv
from nearow.stroke_rate.stroke_types.rate_update import RateUpdate


SAMPLE_RATE_HZ: float = 50.0


def _recording(duration_sec: float, period_sec: float) -> list[AccelRecord]:
    """Create a vertical stroke signal sampled at 50 Hz."""
    records: list[AccelRecord] = []
    for k in range(int(duration_sec * SAMPLE_RATE_HZ)):
        t_sec: float = k / SAMPLE_RATE_HZ
        z: float = 9.81 + 2.0 * math.sin(2.0 * math.pi * t_sec / period_sec)
        records.append(AccelRecord(t_sec=t_sec, x=0.0, y=0.0, z=z))
    return records


def _replay(records: list[AccelRecord]) -> list[RateUpdate]:
    session: StrokeRateSession = StrokeRateSession(StrokeRateConfig.defaults())
    return ReplayEngine(session).run(records)


def test_ticks_follow_recording_time() -> None:
    """Ensure ticks fire at the warm-up and then once per period."""
    updates: list[RateUpdate] = _replay(_recording(20.0, 2.0))
    assert [update.t_sec for update in updates] == pytest.approx(
        [float(t) for t in range(3, 20)]
    )


def test_recovers_stroke_rate() -> None:
    """Ensure a 2 s stroke replays as 30 strokes per minute."""
    updates: list[RateUpdate] = _replay(_recording(20.0, 2.0))
    assert updates[-1].stroke_rate_spm == pytest.approx(30.0, rel=0.03)
    assert updates[-1].smoothed_rate_spm == pytest.approx(30.0, rel=0.03)


def test_replay_is_deterministic() -> None:
    """Ensure replaying the same recording yields identical rates."""
    records: list[AccelRecord] = _recording(12.0, 2.5)
    first: list[float] = [update.smoothed_rate_spm for update in _replay(records)]
    second: list[float] = [update.smoothed_rate_spm for update in _replay(records)]
    assert first == second


def test_records_sorted_by_time() -> None:
    """Ensure out-of-order records are replayed in time order."""
    records: list[AccelRecord] = _recording(8.0, 2.0)
    expected: list[float] = [update.stroke_rate_spm for update in _replay(records)]
    shuffled: list[float] = [
        update.stroke_rate_spm for update in _replay(list(reversed(records)))
    ]
    assert shuffled == expected


def test_empty_recording() -> None:
    """Ensure an empty recording produces no ticks."""
    assert _replay([]) == []


def test_load_csv_with_header(tmp_path: Path) -> None:
    """Ensure a recording with a header row loads every record."""
    path: Path = tmp_path / "session.csv"
    path.write_text("t_sec,x,y,z\n0.0,0.1,0.2,9.8\n0.02,0.1,0.2,9.9\n", encoding="utf-8")
    records: list[AccelRecord] = load_csv(path)
    assert records == [
        AccelRecord(0.0, 0.1, 0.2, 9.8),
        AccelRecord(0.02, 0.1, 0.2, 9.9),
    ]


def test_load_csv_without_header(tmp_path: Path) -> None:
    """Ensure the header row is optional."""
    path: Path = tmp_path / "session.csv"
    path.write_text("0.0,0,0,9.8\n\n0.02,0,0,9.7\n", encoding="utf-8")
    assert len(load_csv(path)) == 2


@pytest.mark.parametrize("content", ["0.0,1.0,2.0\n", "0.0,a,0,9.8\n", "nan,0,0,9.8\n"])
def test_load_csv_rejects_bad_rows(tmp_path: Path, content: str) -> None:
    """Ensure short, non-numeric or non-finite rows are rejected."""
    path: Path = tmp_path / "session.csv"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ReplayError):
        load_csv(path)


def test_load_csv_missing_file(tmp_path: Path) -> None:
    """Ensure a missing recording is reported as a replay error."""
    with pytest.raises(ReplayError):
        load_csv(tmp_path / "missing.csv")
