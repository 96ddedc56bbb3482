"""Run-time control state derived from the user options."""

from __future__ import annotations

import random
from typing import List, Sequence

from .graphdata import NeighborPartInfo
from .options import Options


class Control:
    """Parsed options plus state shared across the partitioning phases."""

    def __init__(self, options: Options, ncon: int, nparts: int, is_kway: bool) -> None:
        def pick(value, default):
            return default if value is None else value

        self.op_type = 0 if is_kway else 1
        self.obj_type = int(pick(options.obj_type, 0))
        self.coarsen_type = int(pick(options.coarsen_type, 1))
        self.init_part_type = int(pick(options.init_part_type, 0))
        self.refine_type = int(pick(options.refine_type, 1 if is_kway else 0))

        self.num_constraints = ncon
        self.num_parts = nparts
        self.num_cuts = pick(options.num_cuts, 1)
        self.num_separators = pick(options.num_separators, 1)
        self.num_iter = pick(options.num_iter, 10)
        self.num_init_parts = -1
        self.seed = pick(options.seed, -1)
        self.minimize_connectivity = pick(options.minimize_connectivity, False)
        self.force_contiguous = pick(options.force_contiguous, False)
        self.compress = pick(options.compress, False)
        self.cc_order = pick(options.cc_order, False)
        self.prune_factor = pick(options.prune_factor, 0)
        self.imbalance_factor = pick(options.imbalance_factor, 30 if is_kway else 1)
        self.disable_2hop = pick(options.disable_2hop, False)
        self.debug_level = 0 if options.debug_level is None else options.debug_level.to_int()
        self.base_numbering = int(pick(options.numbering, 0))

        self.coarsen_to = 0

        tol = 1.0 + 0.001 * self.imbalance_factor + 0.0000499
        self.imbalance_tols: List[float] = [tol] * ncon
        self.target_part_weights: List[float] = [1.0 / nparts] * (nparts * ncon)
        self.max_vertex_weight: List[int] = [0] * ncon
        self.partition_ij_balance_multipliers: List[float] = []

        self.rng = random.Random(self.seed)

        self.neighbor_pool: List[NeighborPartInfo] = []
        self.neighbor_pool_pos = 0

    def init_neighbor_pool(self, capacity: int) -> None:
        """Allocate a fresh neighbour pool of ``capacity`` entries."""
        self.neighbor_pool = [NeighborPartInfo() for _ in range(capacity)]
        self.neighbor_pool_pos = 0

    def reset_neighbor_pool(self) -> None:
        """Mark the whole neighbour pool as free again."""
        self.neighbor_pool_pos = 0

    def alloc_neighbor_info(self, nnbrs: int) -> int:
        """Reserve ``min(nnbrs, num_parts)`` pool entries; return their start."""
        clamped = min(nnbrs, self.num_parts)
        pos = self.neighbor_pool_pos
        self.neighbor_pool_pos += clamped
        if self.neighbor_pool_pos > len(self.neighbor_pool):
            grow = self.neighbor_pool_pos * 2 - len(self.neighbor_pool)
            self.neighbor_pool.extend(NeighborPartInfo() for _ in range(grow))
        return pos

    def setup_2way_balance_multipliers(
        self,
        inv_total_vertex_weight: Sequence[float],
        target_part_weights2: Sequence[float],
    ) -> None:
        """Compute balance multipliers for a bisection."""
        ncon = self.num_constraints
        self.partition_ij_balance_multipliers = [
            _multiplier(inv_total_vertex_weight[j], target_part_weights2[i * ncon + j])
            for i in range(2)
            for j in range(ncon)
        ]

    def setup_kway_balance_multipliers(self, inv_total_vertex_weight: Sequence[float]) -> None:
        """Compute balance multipliers for a k-way partition."""
        ncon = self.num_constraints
        multipliers = [0.0] * (self.num_parts * ncon)
        for i in range(self.num_parts):
            for j, inv_weight in enumerate(inv_total_vertex_weight):
                idx = i * ncon + j
                multipliers[idx] = _multiplier(inv_weight, self.target_part_weights[idx])
        self.partition_ij_balance_multipliers = multipliers


def _multiplier(inv_weight: float, target: float) -> float:
    return inv_weight / target if target > 0.0 else 0.0