################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Append-only JSON lines storage for track points."""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path

from nearow.stroke_rate.stroke_types.track_point import TrackPoint


_LOG: logging.Logger = logging.getLogger(__name__)


class TrackStoreError(Exception):
    """Raised when reading or writing the track log fails."""


def is_jsonl_path(path: str | os.PathLike[str]) -> bool:
    """Return True if the path has a JSON lines extension."""
    suffix: str = Path(os.fspath(path)).suffix.lower()
    return suffix in {".jsonl", ".ndjson"}


class TrackStore:
    """
    Persist track points from every rowing session in a single log file.

    Each line holds one JSON-encoded ``TrackPoint``. Sessions are told apart
    by ``session_id``, allocated as one more than the largest id on record.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        if not is_jsonl_path(path):
            raise TrackStoreError("Path must end with .jsonl or .ndjson")
        self._path: Path = Path(os.fspath(path))
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def last_session_id(self) -> int | None:
        """Return the largest session id on record, if any."""
        session_ids: list[int] = [point.session_id for point in self.load()]
        return max(session_ids) if session_ids else None

    def new_session_id(self) -> int:
        """Return the id for a new session, starting at 1."""
        last_session_id: int | None = self.last_session_id()
        return 1 if last_session_id is None else last_session_id + 1

    def append(self, point: TrackPoint) -> None:
        """Append one track point to the log."""
        line: str = json.dumps(point.to_dict(), sort_keys=True)
        with self._lock:
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                with self._path.open("a", encoding="utf-8") as handle:
                    handle.write(line + "\n")
                    handle.flush()
            except OSError as exc:
                raise TrackStoreError(
                    f"Failed to append track point to {self._path}"
                ) from exc

    def load(self, session_id: int | None = None) -> list[TrackPoint]:
        """Return stored track points, optionally for one session only."""
        with self._lock:
            if not self._path.exists():
                return []
            try:
                text: str = self._path.read_text(encoding="utf-8")
            except OSError as exc:
                raise TrackStoreError(
                    f"Failed to read track points from {self._path}"
                ) from exc

        points: list[TrackPoint] = []
        for line_number, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                point: TrackPoint = TrackPoint.from_dict(json.loads(line))
            except (ValueError, KeyError, TypeError) as exc:
                raise TrackStoreError(
                    f"Malformed track point on line {line_number} of {self._path}"
                ) from exc
            if session_id is None or point.session_id == session_id:
                points.append(point)

        return points
