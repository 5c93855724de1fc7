################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Persistence of rate and location records."""

from nearow.stroke_rate.storage.track_recorder import TrackRecorder
from nearow.stroke_rate.storage.track_store import TrackStore
from nearow.stroke_rate.storage.track_store import TrackStoreError


__all__ = ["TrackRecorder", "TrackStore", "TrackStoreError"]
