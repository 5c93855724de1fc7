################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Offline replay of recorded sessions."""

from nearow.stroke_rate.replay.replay_engine import AccelRecord
from nearow.stroke_rate.replay.replay_engine import ReplayEngine
from nearow.stroke_rate.replay.replay_engine import ReplayError
from nearow.stroke_rate.replay.replay_engine import load_csv


__all__ = ["AccelRecord", "ReplayEngine", "ReplayError", "load_csv"]
