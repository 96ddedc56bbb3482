"""Dual graphs of meshes and node partitions induced from element partitions."""

from __future__ import annotations

from itertools import accumulate
from typing import Dict, List, Optional, Sequence, Tuple


def build_node_element_csr(
    ne: int,
    nn: int,
    element_offsets: Sequence[int],
    element_indices: Sequence[int],
) -> Tuple[List[int], List[int]]:
    """Return ``(nptr, nind)``, the elements containing each node in CSR form.

    The elements of each node are listed in increasing element order.
    """
    elements_of: List[List[int]] = [[] for _ in range(nn)]
    for i in range(ne):
        for node in element_indices[element_offsets[i] : element_offsets[i + 1]]:
            elements_of[node].append(i)

    nptr = [0, *accumulate(len(elements) for elements in elements_of)]
    nind = [element for elements in elements_of for element in elements]
    return nptr, nind


def create_graph_dual(
    ne: int,
    nn: int,
    element_offsets: Sequence[int],
    element_indices: Sequence[int],
    min_common_nodes: int,
) -> Tuple[List[int], List[int]]:
    """Return ``(xadj, adjacency)`` of the mesh's dual graph.

    Elements become vertices; two elements are adjacent when they share at
    least ``min_common_nodes`` nodes. Neighbours of an element are listed in
    the order they are first met, walking the element's nodes in order and,
    for each node, the elements containing it in increasing order.
    """
    nptr, nind = build_node_element_csr(ne, nn, element_offsets, element_indices)

    xadj = [0]
    adjacency: List[int] = []
    for i in range(ne):
        shared: Dict[int, int] = {}
        for node in element_indices[element_offsets[i] : element_offsets[i + 1]]:
            for j in nind[nptr[node] : nptr[node + 1]]:
                if j != i:
                    shared[j] = shared.get(j, 0) + 1
        adjacency.extend(j for j, count in shared.items() if count >= min_common_nodes)
        xadj.append(len(adjacency))

    return xadj, adjacency


def iargmax(x: Sequence[int]) -> int:
    """Return the index of the largest value, the first one on ties (0 if empty)."""
    best = 0
    for i in range(1, len(x)):
        if x[i] > x[best]:
            best = i
    return best


def induce_row_part_from_column_part(
    nrows: int,
    rowptr: Sequence[int],
    rowind: Sequence[int],
    cpart: Sequence[int],
    nparts: int,
    target_part_weights: Optional[Sequence[float]] = None,
) -> List[int]:
    """Derive a partition of rows (nodes) from a partition of columns (elements).

    A row whose columns all lie in one part goes to that part. Every other
    row goes to the part holding most of its columns, unless that part is
    over its target, in which case the first of its parts that is under
    target or less overweight is taken instead. Rows with no columns get -2.
    """
    part_weights = [0] * nparts
    rpart = [-1] * nrows

    if target_part_weights is not None:
        targets = [1 + int(nrows * target_part_weights[i]) for i in range(nparts)]
    else:
        targets = [1 + nrows // nparts] * nparts

    for i in range(nrows):
        start, end = rowptr[i], rowptr[i + 1]
        if start == end:
            rpart[i] = -2
            continue
        parts = {cpart[c] for c in rowind[start:end]}
        if len(parts) == 1:
            (me,) = parts
            rpart[i] = me
            part_weights[me] += 1

    for i in range(nrows):
        if rpart[i] != -1:
            continue

        counts: Dict[int, int] = {}
        for c in rowind[rowptr[i] : rowptr[i + 1]]:
            p = cpart[c]
            counts[p] = counts.get(p, 0) + 1
        neighbor_parts = list(counts)
        chosen = neighbor_parts[iargmax(list(counts.values()))]

        if part_weights[chosen] > targets[chosen]:
            excess = part_weights[chosen] - targets[chosen]
            for candidate in neighbor_parts:
                if (
                    part_weights[candidate] < targets[candidate]
                    or part_weights[candidate] - targets[candidate] < excess
                ):
                    chosen = candidate
                    break

        rpart[i] = chosen
        part_weights[chosen] += 1

    return rpart