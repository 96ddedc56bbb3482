"""Connectivity of the parts of a partition."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .graphdata import GraphData


def find_partition_induced_components(
    graph: GraphData, partition: Sequence[int], nparts: int
) -> List[List[List[int]]]:
    """Return, for each part, the vertex lists of its connected components."""
    visited = [False] * graph.num_vertices
    components: List[List[List[int]]] = [[] for _ in range(nparts)]

    for p, part_components in enumerate(components):
        for start, owner in enumerate(partition[: graph.num_vertices]):
            if owner != p or visited[start]:
                continue
            component = []
            stack = [start]
            visited[start] = True
            while stack:
                v = stack.pop()
                component.append(v)
                for u in graph.adjacency[graph.xadj[v] : graph.xadj[v + 1]]:
                    if not visited[u] and partition[u] == p:
                        visited[u] = True
                        stack.append(u)
            part_components.append(component)

    return components


def eliminate_components(graph: GraphData, nparts: int) -> None:
    """Move vertices of all but the largest component of each part to a neighbouring part.

    Each vertex goes to the part reached by its heaviest single edge leaving
    its current part; a vertex with no such edge stays where it is.
    """
    components = find_partition_induced_components(graph, list(graph.partition), nparts)

    for p, part_components in enumerate(components):
        if len(part_components) <= 1:
            continue

        largest = 0
        for ci, component in enumerate(part_components):
            if len(component) > len(part_components[largest]):
                largest = ci

        for ci, component in enumerate(part_components):
            if ci == largest:
                continue
            for v in component:
                best_part, best_conn = p, 0
                start, end = graph.xadj[v], graph.xadj[v + 1]
                for u, weight in zip(graph.adjacency[start:end], graph.edge_weights[start:end]):
                    other = graph.partition[u]
                    if other != p and weight > best_conn:
                        best_conn, best_part = weight, other
                if best_part != p:
                    graph.partition[v] = best_part


def compute_subdomain_graph(
    graph: GraphData, partition: Sequence[int], nparts: int
) -> Tuple[List[List[int]], List[List[int]]]:
    """Return the adjacency and edge weights between parts.

    Neighbouring parts are gathered vertex by vertex: within one vertex the
    weights of edges to the same part are added together, and each vertex
    appends its own entries to its part's lists.
    """
    sadj: List[List[int]] = [[] for _ in range(nparts)]
    swgt: List[List[int]] = [[] for _ in range(nparts)]

    for i in range(graph.num_vertices):
        me = partition[i]
        local: dict = {}
        start, end = graph.xadj[i], graph.xadj[i + 1]
        for u, weight in zip(graph.adjacency[start:end], graph.edge_weights[start:end]):
            other = partition[u]
            if other != me:
                local[other] = local.get(other, 0) + weight
        for other, weight in local.items():
            sadj[me].append(other)
            swgt[me].append(weight)

    return sadj, swgt