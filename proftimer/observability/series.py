#!filepath: proftimer/observability/series.py
from __future__ import annotations

from typing import List

import numpy as np

DEFAULT_CAPACITY = 64


class SeriesBuffer:
    """
    Append-only float64 series with reserved capacity.

    Growth doubles the backing array; ``clear`` keeps the capacity so a
    reset key does not reallocate on the next hot loop.
    """

    __slots__ = ("_buf", "_size")

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        self._buf = np.empty(max(int(capacity), 1), dtype=np.float64)
        self._size = 0

    def __len__(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return len(self._buf)

    def append(self, value: float) -> None:
        if self._size == len(self._buf):
            self.reserve(2 * len(self._buf))
        self._buf[self._size] = value
        self._size += 1

    def reserve(self, capacity: int) -> None:
        if capacity <= len(self._buf):
            return
        grown = np.empty(capacity, dtype=np.float64)
        grown[: self._size] = self._buf[: self._size]
        self._buf = grown

    def clear(self) -> None:
        self._size = 0

    def view(self) -> np.ndarray:
        """Read-only view of the recorded values (no copy)."""
        v = self._buf[: self._size]
        v.flags.writeable = False
        return v

    def tolist(self) -> List[float]:
        return self._buf[: self._size].tolist()
