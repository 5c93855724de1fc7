################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Sample buffers for stroke rate estimation."""

from nearow.stroke_rate.buffers.ring_sample_buffer import BufferIndexError
from nearow.stroke_rate.buffers.ring_sample_buffer import EmptyBufferError
from nearow.stroke_rate.buffers.ring_sample_buffer import RingBufferError
from nearow.stroke_rate.buffers.ring_sample_buffer import RingSampleBuffer


__all__ = [
    "BufferIndexError",
    "EmptyBufferError",
    "RingBufferError",
    "RingSampleBuffer",
]
