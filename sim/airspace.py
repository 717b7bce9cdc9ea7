"""Airspace: fixed-size linear pool of cells with first-fit window placement."""

from __future__ import annotations

import numpy as np

FREE = 0
OCCUPIED = 1

DEFAULT_CAPACITY = 20


class OutOfRangeError(IndexError):
    """Raised when a release names cells outside the airspace."""


class Airspace:
    """
    Linear airspace of `capacity` binary cells (0 free, 1 occupied).

    Cells carry no plane identity; allocate() returns only the start offset
    and the caller keeps (offset, size) to release the range later.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.cells = np.full(capacity, FREE, dtype=np.int8)

    @property
    def free_count(self) -> int:
        return int(np.count_nonzero(self.cells == FREE))

    @property
    def used_count(self) -> int:
        return self.capacity - self.free_count

    def allocate(self, size: int) -> int | None:
        """
        Reserve the lowest-offset run of `size` free cells.
        Returns the start offset, or None when no such run exists.
        """
        if size <= 0:
            raise ValueError(f"allocation size must be positive, got {size}")
        if size > self.capacity:
            return None
        # Occupied-cell count of every window [i, i+size); a zero sum is a fit.
        windows = np.lib.stride_tricks.sliding_window_view(self.cells, size)
        fits = np.flatnonzero(windows.sum(axis=1) == 0)
        if fits.size == 0:
            return None
        start = int(fits[0])
        self.cells[start : start + size] = OCCUPIED
        return start

    def deallocate(self, start: int, size: int) -> None:
        """Free cells [start, start+size). The range must lie inside the airspace."""
        if start < 0 or size <= 0 or start + size > self.capacity:
            raise OutOfRangeError(
                f"cannot release [{start}, {start + size}) from airspace of {self.capacity} cells"
            )
        self.cells[start : start + size] = FREE

    def is_safe(self, requested_size: int) -> bool:
        """
        True iff the total number of free cells covers the request.
        Contiguity is not checked, so allocate() can still fail afterwards.
        """
        return self.free_count >= requested_size

    def snapshot(self) -> np.ndarray:
        return self.cells.copy()

    def render(self) -> str:
        return " ".join("#" if c else "." for c in self.cells)

    def __repr__(self) -> str:
        return f"Airspace(capacity={self.capacity}, free={self.free_count})"
