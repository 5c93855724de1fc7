################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of Nearow
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Fixed-capacity circular buffer for scalar samples."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


_FLOAT_ARRAY = NDArray[np.float64]


class RingBufferError(Exception):
    """Raised when ring buffer operations fail."""


class EmptyBufferError(RingBufferError):
    """Raised when a value is requested from a buffer holding no samples."""


class BufferIndexError(RingBufferError, IndexError):
    """Raised when a logical index falls outside the occupied window."""


class RingSampleBuffer:
    """Store the most recent scalar samples, overwriting the oldest when full.

    Logical index 0 is the oldest value currently held and ``count() - 1`` is
    the newest. Storage is a preallocated float64 array, so pushes are O(1)
    and never allocate.

    The buffer is not synchronized. Callers sharing a buffer between threads
    must guard pushes and reads themselves.
    """

    def __init__(self, capacity: int) -> None:
        """Initialize an empty buffer with a fixed capacity."""
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise RingBufferError("Capacity must be an int")
        if capacity <= 0:
            raise RingBufferError("Capacity must be positive")
        self._capacity: int = capacity
        self._values: _FLOAT_ARRAY = np.zeros(capacity, dtype=np.float64)
        self._cursor: int = 0
        self._count: int = 0

    @property
    def capacity(self) -> int:
        """Return the fixed number of slots."""
        return self._capacity

    def __len__(self) -> int:
        """Return the number of samples stored."""
        return self._count

    def count(self) -> int:
        """Return the number of valid slots, between 0 and capacity."""
        return self._count

    def is_empty(self) -> bool:
        """Return True if the buffer holds no samples."""
        return self._count == 0

    def is_full(self) -> bool:
        """Return True once every slot has been written."""
        return self._count == self._capacity

    def clear(self) -> None:
        """Discard all samples."""
        self._values.fill(0.0)
        self._cursor = 0
        self._count = 0

    def push(self, value: float) -> None:
        """Write a sample into the cursor slot, displacing the oldest if full."""
        self._values[self._cursor] = float(value)
        self._cursor = (self._cursor + 1) % self._capacity
        if self._count < self._capacity:
            self._count += 1

    def mean(self) -> float:
        """Return the arithmetic mean of the occupied slots.

        Raises:
            EmptyBufferError: If no samples have been pushed
        """
        if self._count == 0:
            raise EmptyBufferError("Mean of an empty buffer is undefined")
        window: _FLOAT_ARRAY = self._values[: self._count]
        # Averaging offsets from one held value keeps a constant window exact
        reference: float = float(self._values[self._physical_index(0)])
        return reference + float(np.mean(window - reference))

    def oldest_value(self) -> float:
        """Return the oldest sample still held."""
        if self._count == 0:
            raise EmptyBufferError("Buffer is empty")
        return float(self._values[self._physical_index(0)])

    def newest_value(self) -> float:
        """Return the most recently pushed sample."""
        if self._count == 0:
            raise EmptyBufferError("Buffer is empty")
        return float(self._values[(self._cursor - 1) % self._capacity])

    def at(self, index: int) -> float:
        """Return the sample at a logical index, 0 being the oldest."""
        if index < 0 or index >= self._count:
            raise BufferIndexError(
                f"Index {index} out of range for {self._count} samples"
            )
        return float(self._values[self._physical_index(index)])

    def __getitem__(self, index: int) -> float:
        return self.at(index)

    def snapshot(self) -> _FLOAT_ARRAY:
        """Return a copy of the occupied window in oldest-to-newest order."""
        if self._count < self._capacity:
            return self._values[: self._count].copy()
        # Full buffer: the cursor points at the oldest slot
        return np.concatenate(
            (self._values[self._cursor :], self._values[: self._cursor])
        )

    def _physical_index(self, index: int) -> int:
        if self._count < self._capacity:
            return index
        return (self._cursor + index) % self._capacity
