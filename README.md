# metispart

Building blocks for multilevel graph and mesh partitioning: validated CSR
graphs and meshes, dual-graph construction, graph contraction, load-imbalance
measures, gain queues and partition component analysis. Pure Python, no
dependencies.

## Installation

```
pip install .
```

## Graphs

A graph is given in compressed sparse row form: `xadj` holds, for each
vertex, the offset of its neighbour list in `adjacency`.

```python
from metispart.api import Graph, GraphError

xadj = [0, 1, 2]
adjacency = [1, 0]
graph = Graph(1, 2, xadj, adjacency)   # one constraint, two parts
print(graph.num_vertices)              # 2
graph.edge_weights = [10, 10]
data = graph.to_graph_data()           # GraphData; missing weights set to one

try:
    Graph(1, 2, [0, 2], [0])
except GraphError as exc:
    print(exc)                         # xadj[n] must equal adjacency.len()
```

The constructor checks that there is at least one constraint and one part,
that `xadj` starts at 0, never decreases and ends at `len(adjacency)`, and
that every neighbour index is a valid vertex. `Graph.unchecked(...)` builds a
graph without these checks. `vertex_weights`, `vertex_sizes`,
`edge_weights`, `target_part_weights` and `ubvec` are plain attributes
defaulting to `None`; `options` is an `Options` record.

## Meshes and dual graphs

Elements are listed by `element_offsets` and `element_indices`, in the same
CSR shape. Two elements are neighbours in the dual graph when they share at
least the required number of nodes (`Mesh.min_common_nodes`, 1 by default).

```python
from metispart.api import Mesh
from metispart.mesh import create_graph_dual

offsets = [0, 3, 6]
indices = [0, 1, 2, 1, 3, 2]
mesh = Mesh(2, offsets, indices)
print(mesh.num_elements)            # 2
print(mesh.nn)                      # 4 nodes
xadj, adjacency = mesh.dual_graph()

# Shared-edge adjacency (two common nodes):
xadj, adjacency = create_graph_dual(2, 4, offsets, indices, 2)
```

Invalid meshes raise `MeshError`; `Mesh.unchecked(nn, ...)` skips the checks.
`metispart.mesh.build_node_element_csr` lists the elements of each node, and
`metispart.mesh.induce_row_part_from_column_part` derives a node partition
from an element partition, keeping the node counts of the parts balanced;
nodes that belong to no element get `-2`.

## Other pieces

- `metispart.options`: the option enums (`PType`, `ObjType`, `CType`,
  `IpType`, `RType`, `Numbering`), the `DbgLvl` flags with `to_int()` and the
  `Options` record.
- `metispart.control.Control`: resolved settings, imbalance tolerances,
  target part weights, a seeded random generator, a neighbour pool and the
  2-way and k-way balance multipliers.
- `metispart.graphdata`: `GraphData`, its boundary list helpers,
  `setup_graph` and `setup_total_vertex_weight`.
- `metispart.contract.create_coarse_graph`: contracts a graph whose
  `matching` and `coarse_map` are filled in, merging parallel edges.
- `metispart.balance` (`compute_load_imbalance`, `is_balanced`) and
  `metispart.imbalance` (`compute_load_imbalance_diff`,
  `compute_load_imbalance_diff_vec`, `better_balance_2way`, `iargmax_nrm`,
  `iargmax2_nrm`): load-imbalance measures.
- `metispart.selection`: `GainQueue`, a max-priority queue of vertices by
  gain, and `select_queue`, which picks the side and constraint a
  multi-constraint balancing pass moves from.
- `metispart.components`: connected components inside each part
  (`find_partition_induced_components`), `eliminate_components` and the
  subdomain graph (`compute_subdomain_graph`).

## What it does not do

The package holds the pieces listed above, not a complete partitioner. It
has no vertex matching or multilevel coarsening driver, no initial
partitioning, no k-way or recursive-bisection refinement and no balancing
passes; `Graph` and `Mesh` validate and hold their inputs and build dual
graphs, but do not compute a partition themselves. There is no command-line
program.

## Tests

```
pip install .[test]
pytest
```