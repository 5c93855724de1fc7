################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for the replay command line entry point."""

from __future__ import annotations

import math
from pathlib import Path

import pytest

from nearow.cli.stroke_rate_replay_cli import main


def _write_recording(path: Path, duration_sec: float) -> None:
    lines: list[str] = ["t_sec,x,y,z"]
    for k in range(int(duration_sec * 50.0)):
        t_sec: float = k / 50.0
        z: float = 9.81 + 2.0 * math.sin(2.0 * math.pi * t_sec / 2.0)
        lines.append(f"{t_sec:.2f},0.0,0.0,{z:.6f}")
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_prints_one_row_per_tick(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Ensure every tick is printed after the header row."""
    path: Path = tmp_path / "session.csv"
    _write_recording(path, 6.0)

    assert main([str(path), "--warmup", "1.0", "--period", "0.5"]) == 0

    rows: list[str] = capsys.readouterr().out.strip().splitlines()
    assert rows[0].startswith("t_sec,stroke_rate_spm")
    assert [row.split(",")[0] for row in rows[1:]] == [
        "1.000",
        "1.500",
        "2.000",
        "2.500",
        "3.000",
        "3.500",
        "4.000",
        "4.500",
        "5.000",
        "5.500",
    ]


def test_missing_recording_fails(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Ensure a missing file exits with an error."""
    assert main([str(tmp_path / "missing.csv")]) == 1
    assert "error:" in capsys.readouterr().err


def test_invalid_configuration_fails(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Ensure invalid options exit with an error."""
    path: Path = tmp_path / "session.csv"
    _write_recording(path, 1.0)
    assert main([str(path), "--period", "0"]) == 1
    assert "error:" in capsys.readouterr().err
