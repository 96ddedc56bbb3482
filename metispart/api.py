"""Validated graph and mesh inputs for partitioning."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .graphdata import GraphData, setup_graph
from .mesh import create_graph_dual
from .options import Options

_IDX_MAX = 2**31 - 1


class GraphError(ValueError):
    """Raised when a graph description is invalid."""


class MeshError(ValueError):
    """Raised when a mesh description is invalid."""


class Graph:
    """A graph in CSR form together with its weights and options.

    Optional inputs (``vertex_weights``, ``vertex_sizes``, ``edge_weights``,
    ``target_part_weights``, ``ubvec``) are plain attributes that default to
    ``None``; ``options`` holds the partitioning options.
    """

    def __init__(
        self,
        num_constraints: int,
        num_parts: int,
        xadj: Sequence[int],
        adjacency: Sequence[int],
    ) -> None:
        if num_constraints < 1:
            raise GraphError("the number of constraints must be at least 1")
        if num_parts < 1:
            raise GraphError("the number of parts must be at least 1")
        if len(xadj) == 0:
            raise GraphError("xadj must have at least one element")

        num_vertices = len(xadj) - 1
        if num_vertices > _IDX_MAX or len(adjacency) > _IDX_MAX:
            raise GraphError("the graph is too large")

        if any(a > b for a, b in zip(xadj, xadj[1:])):
            raise GraphError("xadj must be non-decreasing")
        if xadj[0] != 0:
            raise GraphError("xadj[0] must be 0")
        if xadj[num_vertices] != len(adjacency):
            raise GraphError("xadj[n] must equal adjacency.len()")
        if any(adj < 0 or adj >= num_vertices for adj in adjacency):
            raise GraphError("adjacency values out of range")

        self._assign(num_constraints, num_parts, xadj, adjacency)

    def _assign(
        self,
        num_constraints: int,
        num_parts: int,
        xadj: Sequence[int],
        adjacency: Sequence[int],
    ) -> None:
        self.num_constraints = num_constraints
        self.num_parts = num_parts
        self.xadj: List[int] = list(xadj)
        self.adjacency: List[int] = list(adjacency)
        self.vertex_weights: Optional[Sequence[int]] = None
        self.vertex_sizes: Optional[Sequence[int]] = None
        self.edge_weights: Optional[Sequence[int]] = None
        self.target_part_weights: Optional[Sequence[float]] = None
        self.ubvec: Optional[Sequence[float]] = None
        self.options = Options()

    @classmethod
    def unchecked(
        cls,
        num_constraints: int,
        num_parts: int,
        xadj: Sequence[int],
        adjacency: Sequence[int],
    ) -> "Graph":
        """Build a graph without validating its arrays."""
        graph = cls.__new__(cls)
        graph._assign(num_constraints, num_parts, xadj, adjacency)
        return graph

    @property
    def num_vertices(self) -> int:
        """Number of vertices in the graph."""
        return len(self.xadj) - 1

    def to_graph_data(self) -> GraphData:
        """Return the internal graph, with missing weights set to one."""
        return setup_graph(
            self.num_constraints,
            self.xadj,
            self.adjacency,
            self.vertex_weights,
            self.vertex_sizes,
            self.edge_weights,
        )

    def _key(self) -> tuple:
        return (
            self.num_constraints,
            self.num_parts,
            self.xadj,
            self.adjacency,
            self.vertex_weights,
            self.vertex_sizes,
            self.edge_weights,
            self.target_part_weights,
            self.ubvec,
            self.options,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._key() == other._key()

    def __repr__(self) -> str:
        return (
            f"Graph(num_constraints={self.num_constraints}, num_parts={self.num_parts}, "
            f"num_vertices={self.num_vertices}, num_edges={len(self.adjacency)})"
        )


class Mesh:
    """A mesh given as element-to-node lists in CSR form.

    ``nn`` is the number of nodes, ``min_common_nodes`` the number of shared
    nodes that makes two elements adjacent in the dual graph.
    """

    def __init__(
        self,
        num_parts: int,
        element_offsets: Sequence[int],
        element_indices: Sequence[int],
    ) -> None:
        if num_parts < 1:
            raise MeshError("the number of parts must be at least 1")
        if len(element_offsets) == 0:
            raise MeshError("element_offsets must have at least one element")

        ne = len(element_offsets) - 1
        if ne > _IDX_MAX or len(element_indices) > _IDX_MAX:
            raise MeshError("the mesh is too large")

        if element_offsets[0] != 0:
            raise MeshError("element_offsets[0] must be 0")
        if any(a > b for a, b in zip(element_offsets, element_offsets[1:])):
            raise MeshError("element_offsets must be non-decreasing")
        if element_offsets[ne] != len(element_indices):
            raise MeshError("element_offsets[ne] must equal element_indices.len()")

        nn = max(element_indices) + 1 if len(element_indices) else 0
        if nn < 0:
            raise MeshError("negative node indices in element_indices")

        self._assign(nn, num_parts, element_offsets, element_indices)

    def _assign(
        self,
        nn: int,
        num_parts: int,
        element_offsets: Sequence[int],
        element_indices: Sequence[int],
    ) -> None:
        self.nn = nn
        self.num_parts = num_parts
        self.min_common_nodes = 1
        self.element_offsets: List[int] = list(element_offsets)
        self.element_indices: List[int] = list(element_indices)
        self.vertex_weights: Optional[Sequence[int]] = None
        self.vertex_sizes: Optional[Sequence[int]] = None
        self.target_part_weights: Optional[Sequence[float]] = None
        self.options = Options()

    @classmethod
    def unchecked(
        cls,
        nn: int,
        num_parts: int,
        element_offsets: Sequence[int],
        element_indices: Sequence[int],
    ) -> "Mesh":
        """Build a mesh with ``nn`` nodes without validating its arrays."""
        mesh = cls.__new__(cls)
        mesh._assign(nn, num_parts, element_offsets, element_indices)
        return mesh

    @property
    def num_elements(self) -> int:
        """Number of elements in the mesh."""
        return len(self.element_offsets) - 1

    def dual_graph(self) -> Tuple[List[int], List[int]]:
        """Return ``(xadj, adjacency)`` of the mesh's dual graph."""
        return create_graph_dual(
            self.num_elements,
            self.nn,
            self.element_offsets,
            self.element_indices,
            self.min_common_nodes,
        )

    def _key(self) -> tuple:
        return (
            self.nn,
            self.num_parts,
            self.min_common_nodes,
            self.element_offsets,
            self.element_indices,
            self.vertex_weights,
            self.vertex_sizes,
            self.target_part_weights,
            self.options,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mesh):
            return NotImplemented
        return self._key() == other._key()

    def __repr__(self) -> str:
        return (
            f"Mesh(num_parts={self.num_parts}, num_elements={self.num_elements}, "
            f"nn={self.nn})"
        )