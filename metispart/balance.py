"""Load imbalance measures for k-way partitions."""

from __future__ import annotations

from typing import List, Sequence


def compute_load_imbalance(
    ncon: int,
    nparts: int,
    part_weights: Sequence[int],
    target_part_weights: Sequence[float],
    total_vertex_weight: Sequence[int],
) -> List[float]:
    """Return, per constraint, the largest ratio of actual to target part weight."""
    result = []
    for j in range(ncon):
        worst = 0.0
        for p in range(nparts):
            idx = p * ncon + j
            target = target_part_weights[idx] * total_vertex_weight[j]
            if target > 0.0:
                worst = max(worst, part_weights[idx] / target)
        result.append(worst)
    return result


def is_balanced(
    ncon: int,
    nparts: int,
    part_weights: Sequence[int],
    target_part_weights: Sequence[float],
    total_vertex_weight: Sequence[int],
    imbalance_tols: Sequence[float],
) -> bool:
    """Return whether every constraint is within its imbalance tolerance."""
    imbalance = compute_load_imbalance(
        ncon, nparts, part_weights, target_part_weights, total_vertex_weight
    )
    return all(lb <= tol for lb, tol in zip(imbalance, imbalance_tols))