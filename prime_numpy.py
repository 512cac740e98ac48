#!/usr/bin/env python3
import math

import numpy as np

from prime_errors import AllocationError

NUMBER_DTYPE = np.uint64
NUMBER_MAX = int(np.iinfo(NUMBER_DTYPE).max)

# Safety factor applied to the Prime Number Theorem estimate
PNT_FACTOR = 1.3


def estimate_capacity(limit: int) -> int:
    """Initial buffer size for the primes <= limit: ceil(1.3 * limit / ln(limit))."""
    if limit <= 1:
        return 1
    return int(math.ceil(PNT_FACTOR * (limit / math.log(limit))))


def _zeros(size: int) -> np.ndarray:
    try:
        return np.zeros(size, dtype=NUMBER_DTYPE)
    except (MemoryError, ValueError) as exc:
        raise AllocationError(f"cannot allocate {size:,} numbers") from exc


class PrimeBuffer:
    """
    Ascending list of primes backed by a zero-filled uint64 array.

    The array starts at the capacity estimate for the limit and doubles
    whenever it is full, so the estimate never truncates the list.
    """

    def __init__(self, capacity: int = 1):
        self._data = _zeros(max(1, int(capacity)))
        self._size = 0

    @classmethod
    def for_limit(cls, limit: int) -> "PrimeBuffer":
        return cls(estimate_capacity(limit))

    @property
    def capacity(self) -> int:
        return int(self._data.size)

    @property
    def last(self) -> int:
        # Empty lists report the zero sentinel of the first cell
        if self._size == 0:
            return 0
        return int(self._data[self._size - 1])

    def append(self, number: int) -> None:
        if self._size == self._data.size:
            self._grow()
        self._data[self._size] = number
        self._size += 1

    def _grow(self) -> None:
        bigger = _zeros(self._data.size * 2)
        bigger[: self._size] = self._data[: self._size]
        self._data = bigger

    def view(self) -> np.ndarray:
        """Read-only view of the filled cells."""
        filled = self._data[: self._size]
        filled.flags.writeable = False
        return filled

    def tolist(self) -> list[int]:
        return self._data[: self._size].tolist()

    def __array__(self, dtype=None, copy=None):
        filled = self.view()
        if dtype is None or np.dtype(dtype) == filled.dtype:
            return filled.copy() if copy else filled
        if copy is False:
            raise ValueError(f"cannot convert {filled.dtype} to {np.dtype(dtype)} without a copy")
        return filled.astype(dtype)

    def __len__(self) -> int:
        return self._size

    def cells(self) -> memoryview:
        """Filled cells as a memoryview; iterating it yields plain ints."""
        return memoryview(self._data)[: self._size]

    def __iter__(self):
        return iter(self.cells())
