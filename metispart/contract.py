"""Contraction of a matched graph into the next coarser level."""

from __future__ import annotations

from typing import Dict, List

from .graphdata import GraphData, setup_total_vertex_weight


def create_coarse_graph(graph: GraphData, cnum_vertices: int) -> GraphData:
    """Build the coarser graph described by ``graph.matching`` and ``graph.coarse_map``.

    Each matched pair (or self-matched vertex) becomes one coarse vertex whose
    weights are the sums of its members. Parallel edges are merged by adding
    their weights, and edges inside a pair are dropped.
    """
    ncon = graph.num_constraints

    cxadj = [0] * (cnum_vertices + 1)
    cvertex_weights = [0] * (cnum_vertices * ncon)
    cvertex_sizes = [0] * cnum_vertices
    cadjacency: List[int] = []
    cedge_weights: List[int] = []

    for v in range(graph.num_vertices):
        u = graph.matching[v]
        if u < v:
            continue

        cv = graph.coarse_map[v]
        members = (v,) if u == v else (v, u)

        for member in members:
            base = member * ncon
            for j in range(ncon):
                cvertex_weights[cv * ncon + j] += graph.vertex_weights[base + j]
            cvertex_sizes[cv] += graph.vertex_sizes[member]

        # The coarse vertex itself heads the list so internal edges fold into it.
        local_adj = [cv]
        local_wgt = [0]
        slot: Dict[int, int] = {cv: 0}
        for member in members:
            start, end = graph.xadj[member], graph.xadj[member + 1]
            for neighbor, weight in zip(
                graph.adjacency[start:end], graph.edge_weights[start:end]
            ):
                k = graph.coarse_map[neighbor]
                pos = slot.get(k)
                if pos is None:
                    slot[k] = len(local_adj)
                    local_adj.append(k)
                    local_wgt.append(weight)
                else:
                    local_wgt[pos] += weight

        # Drop the self-loop by moving the last discovered neighbour into its place.
        last_adj = local_adj.pop()
        last_wgt = local_wgt.pop()
        if local_adj:
            local_adj[0] = last_adj
            local_wgt[0] = last_wgt

        cadjacency.extend(local_adj)
        cedge_weights.extend(local_wgt)
        cxadj[cv + 1] = len(cadjacency)

    coarse = GraphData(
        num_vertices=cnum_vertices,
        num_edges=len(cadjacency),
        num_constraints=ncon,
        xadj=cxadj,
        adjacency=cadjacency,
        vertex_weights=cvertex_weights,
        vertex_sizes=cvertex_sizes,
        edge_weights=cedge_weights,
        label=[0] * cnum_vertices,
    )
    setup_total_vertex_weight(coarse)
    return coarse