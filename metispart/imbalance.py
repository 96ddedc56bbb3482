"""Load-imbalance measures used while balancing bisections."""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from .graphdata import GraphData


def iargmax_nrm(x: Sequence[int], y: Sequence[float]) -> int:
    """Return the index of the largest ``x[i] * y[i]``, the first one on ties."""
    best = 0
    best_value = None
    for i, (xi, yi) in enumerate(zip(x, y)):
        value = xi * yi
        if best_value is None or value > best_value:
            best, best_value = i, value
    return best


def iargmax2_nrm(x: Sequence[int], y: Sequence[float]) -> int:
    """Return the index of the second largest ``x[i] * y[i]``."""
    products = [xi * yi for xi, yi in zip(x, y)]
    if len(products) < 2:
        raise ValueError("at least two values are needed")
    if products[0] > products[1]:
        max1, max2 = 0, 1
    else:
        max1, max2 = 1, 0
    for i in range(2, len(products)):
        if products[i] > products[max1]:
            max1, max2 = i, max1
        elif products[i] > products[max2]:
            max2 = i
    return max2


def compute_load_imbalance_diff_vec(
    part_weights: Sequence[int],
    ncon: int,
    nparts: int,
    pijbm: Sequence[float],
    ubfactors: Sequence[float],
) -> Tuple[float, List[float]]:
    """Return the overall worst imbalance and the worst one per constraint.

    The imbalance of part ``p`` in constraint ``i`` is
    ``part_weights[p*ncon+i] * pijbm[p*ncon+i] - ubfactors[i]``.
    """
    diffvec: List[float] = []
    overall = -1.0
    for i in range(ncon):
        worst = max(
            part_weights[p * ncon + i] * pijbm[p * ncon + i] - ubfactors[i]
            for p in range(nparts)
        )
        diffvec.append(worst)
        if overall < worst:
            overall = worst
    return overall, diffvec


def better_balance_2way(x: Sequence[float], y: Sequence[float]) -> bool:
    """Return whether imbalance vector ``y`` is better balanced than ``x``."""
    nrm1 = sum(v * v for v in reversed(x) if v > 0.0)
    nrm2 = sum(v * v for v in reversed(y) if v > 0.0)
    return nrm2 < nrm1


def compute_load_imbalance_diff(
    graph: GraphData,
    nparts: int,
    multipliers: Sequence[float],
    imbalance_tols: Sequence[float],
) -> float:
    """Return the largest balance violation over all parts and constraints.

    A value at or below zero means the partition is balanced.
    """
    ncon = graph.num_constraints
    worst = -math.inf
    for i in range(nparts):
        for j in range(ncon):
            idx = i * ncon + j
            diff = graph.part_weights[idx] * multipliers[idx] - imbalance_tols[j]
            if diff > worst:
                worst = diff
    return worst