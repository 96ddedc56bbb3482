"""Gain queues and the choice of which queue a balancing pass drains next."""

from __future__ import annotations

import heapq
import itertools
from typing import Dict, List, Optional, Sequence, Tuple


class GainQueue:
    """Max-priority queue of vertices keyed by their move gain.

    Every vertex is in the queue at most once. Keys can be changed and
    vertices removed at any time. Among equal keys the vertex inserted
    or updated first comes out first.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, int]] = []
        self._entries: Dict[int, Tuple[float, int]] = {}
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, item: int) -> bool:
        return item in self._entries

    def is_empty(self) -> bool:
        """Return whether the queue holds no vertices."""
        return not self._entries

    def insert(self, item: int, key: float) -> None:
        """Add ``item`` with priority ``key``, replacing any earlier key."""
        order = next(self._counter)
        self._entries[item] = (key, order)
        heapq.heappush(self._heap, (-key, order, item))

    def update(self, item: int, key: float) -> None:
        """Change the key of ``item`` if it is queued; otherwise do nothing."""
        if item in self._entries:
            self.insert(item, key)

    def delete(self, item: int) -> None:
        """Remove ``item`` if it is queued."""
        self._entries.pop(item, None)

    def _discard_stale(self) -> None:
        while self._heap:
            neg_key, order, item = self._heap[0]
            entry = self._entries.get(item)
            if entry is not None and entry[1] == order:
                return
            heapq.heappop(self._heap)

    def peek_top(self) -> Optional[Tuple[int, float]]:
        """Return ``(item, key)`` of the highest key without removing it."""
        self._discard_stale()
        if not self._heap:
            return None
        neg_key, _, item = self._heap[0]
        return item, -neg_key

    def get_top(self) -> Optional[Tuple[int, float]]:
        """Remove and return ``(item, key)`` of the highest key, or ``None``."""
        self._discard_stale()
        if not self._heap:
            return None
        neg_key, _, item = heapq.heappop(self._heap)
        del self._entries[item]
        return item, -neg_key


def _violation(
    part_weights: Sequence[int],
    ncon: int,
    pijbm: Sequence[float],
    ubfactors: Sequence[float],
    part: int,
    i: int,
) -> float:
    idx = part * ncon + i
    return part_weights[idx] * pijbm[idx] - ubfactors[i]


def select_queue(
    part_weights: Sequence[int],
    ncon: int,
    pijbm: Sequence[float],
    ubfactors: Sequence[float],
    queues: Sequence[GainQueue],
) -> Tuple[int, int]:
    """Pick the side and constraint whose queue to move a vertex from.

    ``queues[2 * constraint + side]`` holds the candidates. Returns
    ``(side, constraint)``, or ``(-1, -1)`` when there is nothing to move.
    """
    side, cnum = -1, -1
    best = 0.0

    # The most violated balance constraint wins; ">=" favours the later one on ties.
    for part in range(2):
        for i in range(ncon):
            value = _violation(part_weights, ncon, pijbm, ubfactors, part, i)
            if value >= best:
                best, side, cnum = value, part, i

    if side != -1:
        if queues[2 * cnum + side].is_empty():
            candidates = [i for i in range(ncon) if not queues[2 * i + side].is_empty()]
            if candidates:
                cnum = candidates[0]
                best = _violation(part_weights, ncon, pijbm, ubfactors, side, cnum)
                for i in candidates[1:]:
                    value = _violation(part_weights, ncon, pijbm, ubfactors, side, i)
                    if value > best:
                        best, cnum = value, i
        return side, cnum

    # Balanced: take the queue whose best gain is highest.
    best_gain = float("-inf")
    for part in range(2):
        for i in range(ncon):
            top = queues[2 * i + part].peek_top()
            if top is not None and (side == -1 or top[1] > best_gain):
                best_gain, side, cnum = top[1], part, i
    return side, cnum