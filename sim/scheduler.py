"""Ready set of admitted planes with emergency / fuel / shortest-landing priority."""

from __future__ import annotations

import heapq

from sim.entities import Plane


class Scheduler:
    """
    Priority scheduler over the ready set.

    Selection order: emergency planes first, then lowest fuel_level, then
    shortest landing_time. Remaining ties go to the plane first added to
    this scheduler; a plane re-queued after a delay keeps its original
    sequence number.
    """

    def __init__(self):
        self._heap: list[tuple[tuple[bool, int, int], int, Plane]] = []
        self._ready_ids: set[int] = set()
        self._sequence: dict[int, int] = {}  # plane id -> first-add order

    def add_plane(self, plane: Plane) -> None:
        if plane.id in self._ready_ids:
            raise ValueError(f"Plane {plane.id} is already in the ready set")
        seq = self._sequence.setdefault(plane.id, len(self._sequence))
        heapq.heappush(self._heap, (plane.priority_key(), seq, plane))
        self._ready_ids.add(plane.id)

    def get_next_plane(self) -> Plane | None:
        """Remove and return the highest-priority plane, or None if none are ready."""
        if not self._heap:
            return None
        _, _, plane = heapq.heappop(self._heap)
        self._ready_ids.discard(plane.id)
        return plane

    def peek(self) -> Plane | None:
        return self._heap[0][2] if self._heap else None

    def ready_planes(self) -> list[Plane]:
        """Ready planes in the order get_next_plane would return them."""
        return [p for _, _, p in sorted(self._heap)]

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, plane_id: int) -> bool:
        return plane_id in self._ready_ids
