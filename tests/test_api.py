import pytest

from metispart.api import Graph, GraphError, Mesh, MeshError
from metispart.mesh import create_graph_dual
from metispart.options import ObjType


def path_graph(n):
    xadj = [0]
    adjacency = []
    for v in range(n):
        if v > 0:
            adjacency.append(v - 1)
        if v < n - 1:
            adjacency.append(v + 1)
        xadj.append(len(adjacency))
    return xadj, adjacency


TWO_TRIS = ([0, 3, 6], [0, 1, 2, 1, 3, 2])


def test_graph_num_vertices():
    xadj, adj = path_graph(5)
    graph = Graph(1, 2, xadj, adj)
    assert graph.num_vertices == 5
    assert graph.num_parts == 2


@pytest.mark.parametrize(
    "ncon,nparts,xadj,adj,message",
    [
        (0, 2, [0, 1, 2], [1, 0], "constraints"),
        (1, 0, [0, 1, 2], [1, 0], "parts"),
        (1, 2, [], [], "at least one element"),
        (1, 2, [0, 2, 1], [1, 0], "non-decreasing"),
        (1, 2, [1, 1, 2], [1, 0], "xadj[0] must be 0"),
        (1, 2, [0, 1, 3], [1, 0], "adjacency.len()"),
        (1, 2, [0, 1, 2], [1, 2], "out of range"),
        (1, 2, [0, 1, 2], [-1, 0], "out of range"),
    ],
)
def test_graph_validation_errors(ncon, nparts, xadj, adj, message):
    with pytest.raises(GraphError, match=message.replace("[", r"\[").replace("]", r"\]")
                       .replace("(", r"\(").replace(")", r"\)")):
        Graph(ncon, nparts, xadj, adj)


def test_graph_error_is_value_error():
    with pytest.raises(ValueError):
        Graph(1, 2, [0, 1, 2], [5, 0])


def test_unchecked_skips_validation():
    graph = Graph.unchecked(1, 2, [0, 1, 2], [7, 0])
    assert graph.adjacency == [7, 0]
    assert graph.num_vertices == 2


def test_unchecked_equals_checked_for_valid_input():
    xadj, adj = path_graph(4)
    assert Graph(1, 3, xadj, adj) == Graph.unchecked(1, 3, xadj, adj)


def test_to_graph_data_defaults_weights_to_one():
    xadj, adj = path_graph(4)
    data = Graph(1, 2, xadj, adj).to_graph_data()
    assert data.num_vertices == 4
    assert data.num_edges == len(adj)
    assert data.vertex_weights == [1] * 4
    assert data.edge_weights == [1] * len(adj)
    assert data.total_vertex_weight == [4]


def test_to_graph_data_uses_given_weights():
    xadj, adj = path_graph(3)
    graph = Graph(1, 2, xadj, adj)
    graph.vertex_weights = [2, 3, 5]
    graph.edge_weights = [10, 10, 20, 20]
    data = graph.to_graph_data()
    assert data.vertex_weights == [2, 3, 5]
    assert data.edge_weights == [10, 10, 20, 20]
    assert data.total_vertex_weight == [sum([2, 3, 5])]


def test_graph_options_change_equality():
    xadj, adj = path_graph(3)
    a = Graph(1, 2, xadj, adj)
    b = Graph(1, 2, xadj, adj)
    b.options.obj_type = ObjType.CUT
    assert not (a == b)


def test_mesh_basic_properties():
    offsets, indices = TWO_TRIS
    mesh = Mesh(2, offsets, indices)
    assert mesh.num_elements == 2
    assert mesh.nn == max(indices) + 1
    assert mesh.min_common_nodes == 1


def test_mesh_without_indices_has_no_nodes():
    mesh = Mesh(1, [0], [])
    assert mesh.nn == 0
    assert mesh.num_elements == 0


@pytest.mark.parametrize(
    "nparts,offsets,indices,message",
    [
        (0, [0, 3], [0, 1, 2], "parts"),
        (2, [], [], "at least one element"),
        (2, [1, 3], [0, 1, 2], "must be 0"),
        (2, [0, 3, 2], [0, 1, 2], "non-decreasing"),
        (2, [0, 2], [0, 1, 2], "must equal"),
        (2, [0, 1], [-5], "negative"),
    ],
)
def test_mesh_validation_errors(nparts, offsets, indices, message):
    with pytest.raises(MeshError, match=message):
        Mesh(nparts, offsets, indices)


def test_mesh_unchecked_keeps_given_node_count():
    offsets, indices = TWO_TRIS
    mesh = Mesh.unchecked(10, 2, offsets, indices)
    assert mesh.nn == 10
    assert mesh.num_elements == 2


def test_dual_graph_of_two_triangles():
    offsets, indices = TWO_TRIS
    xadj, adjacency = Mesh(2, offsets, indices).dual_graph()
    assert xadj == [0, 1, 2]
    assert adjacency == [1, 0]


def test_dual_graph_respects_min_common_nodes():
    offsets, indices = TWO_TRIS
    mesh = Mesh(2, offsets, indices)
    mesh.min_common_nodes = 3
    xadj, adjacency = mesh.dual_graph()
    assert adjacency == []
    assert xadj == [0, 0, 0]


def test_dual_graph_matches_create_graph_dual_and_is_symmetric():
    offsets = [0, 3, 6, 9, 12]
    indices = [0, 1, 2, 1, 3, 2, 2, 3, 4, 3, 5, 4]
    mesh = Mesh(2, offsets, indices)
    xadj, adjacency = mesh.dual_graph()
    assert (xadj, adjacency) == create_graph_dual(4, mesh.nn, offsets, indices, 1)
    edges = {
        (v, u) for v in range(4) for u in adjacency[xadj[v] : xadj[v + 1]]
    }
    assert all((u, v) in edges for v, u in edges)
    assert all(v != u for v, u in edges)


def test_dual_graph_is_a_valid_graph_input():
    offsets = [0, 3, 6, 9, 12]
    indices = [0, 1, 2, 1, 3, 2, 2, 3, 4, 3, 5, 4]
    xadj, adjacency = Mesh(2, offsets, indices).dual_graph()
    graph = Graph(1, 2, xadj, adjacency)
    assert graph.num_vertices == 4
    assert graph.to_graph_data().num_edges == len(adjacency)