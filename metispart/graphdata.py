"""Internal CSR graph with partitioning state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence


@dataclass
class NeighborPartInfo:
    """Connectivity of a vertex to one neighbouring part."""

    part_id: int = 0
    external_degree: int = 0


@dataclass
class KwayCutInfo:
    """Per-vertex k-way refinement information."""

    internal_degree: int = 0
    external_degree: int = 0
    num_neighbors: int = 0
    neighbor_offset: int = 0


@dataclass
class GraphData:
    """Graph in CSR form together with the state used while partitioning it."""

    num_vertices: int = 0
    num_edges: int = 0
    num_constraints: int = 1

    xadj: List[int] = field(default_factory=list)
    adjacency: List[int] = field(default_factory=list)
    vertex_weights: List[int] = field(default_factory=list)
    vertex_sizes: List[int] = field(default_factory=list)
    edge_weights: List[int] = field(default_factory=list)

    partition: List[int] = field(default_factory=list)
    part_weights: List[int] = field(default_factory=list)
    boundary_map: List[int] = field(default_factory=list)
    boundary_list: List[int] = field(default_factory=list)
    num_boundary: int = 0
    internal_degree: List[int] = field(default_factory=list)
    external_degree: List[int] = field(default_factory=list)
    edge_cut: int = 0

    kway_refinement_info: List[KwayCutInfo] = field(default_factory=list)

    coarse_map: List[int] = field(default_factory=list)
    matching: List[int] = field(default_factory=list)

    total_vertex_weight: List[int] = field(default_factory=list)
    inv_total_vertex_weight: List[float] = field(default_factory=list)
    label: List[int] = field(default_factory=list)

    def add_to_boundary(self, v: int) -> None:
        """Append vertex ``v`` to the boundary list."""
        pos = self.num_boundary
        self.boundary_list[pos] = v
        self.boundary_map[v] = pos
        self.num_boundary += 1

    def remove_from_boundary(self, v: int) -> None:
        """Remove vertex ``v`` from the boundary list if it is on it."""
        pos = self.boundary_map[v]
        if pos == -1:
            return
        self.num_boundary -= 1
        last = self.num_boundary
        if pos != last:
            moved = self.boundary_list[last]
            self.boundary_list[pos] = moved
            self.boundary_map[moved] = pos
        self.boundary_map[v] = -1

    def alloc_2way(self) -> None:
        """Reset the arrays holding 2-way partition state."""
        n = self.num_vertices
        self.partition = [0] * n
        self.part_weights = [0] * (2 * self.num_constraints)
        self.boundary_map = [-1] * n
        self.boundary_list = [0] * n
        self.num_boundary = 0
        self.internal_degree = [0] * n
        self.external_degree = [0] * n


def setup_graph(
    ncon: int,
    xadj: Sequence[int],
    adjacency: Sequence[int],
    vertex_weights: Optional[Sequence[int]] = None,
    vertex_sizes: Optional[Sequence[int]] = None,
    edge_weights: Optional[Sequence[int]] = None,
) -> GraphData:
    """Build a :class:`GraphData` from CSR arrays, defaulting weights to one."""
    num_vertices = len(xadj) - 1
    num_edges = len(adjacency)
    graph = GraphData(
        num_vertices=num_vertices,
        num_edges=num_edges,
        num_constraints=ncon,
        xadj=list(xadj),
        adjacency=list(adjacency),
        vertex_weights=(
            list(vertex_weights) if vertex_weights is not None else [1] * (num_vertices * ncon)
        ),
        vertex_sizes=list(vertex_sizes) if vertex_sizes is not None else [1] * num_vertices,
        edge_weights=list(edge_weights) if edge_weights is not None else [1] * num_edges,
        label=list(range(num_vertices)),
    )
    setup_total_vertex_weight(graph)
    return graph


def setup_total_vertex_weight(graph: GraphData) -> None:
    """Compute per-constraint total vertex weights and their inverses."""
    ncon = graph.num_constraints
    weights = graph.vertex_weights[: graph.num_vertices * ncon]
    graph.total_vertex_weight = [sum(weights[j::ncon]) for j in range(ncon)]
    graph.inv_total_vertex_weight = [1.0 / max(total, 1) for total in graph.total_vertex_weight]