# pathalg

Arithmetic in the path algebra of a quiver (a directed multigraph) over a
finite prime field, and Buchberger's algorithm for Groebner bases of two-sided
ideals in such algebras. Pure Python, no dependencies.

## Modules

- `pathalg.field`: `Field(p)` is GF(p), with elements held as plain integers.
  It provides `add`, `subtract`, `multiply`, `divide`, `invert`, `negate` and
  `power`. `invert(0)` raises `ZeroDivisionError`. The characteristic is
  trusted to be prime.
- `pathalg.graph`: `Graph(adjacency, vertex_labels=None, edge_labels=None)`
  builds a quiver from a square matrix of edge counts. Edges are numbered row
  by row. Default labels are `v1, v2, …` and `e1, e2, …`. A matrix that is not
  square, or labels of the wrong number, raise `ValueError`.
  `Graph.from_sparse` takes rows of `(column, count)` pairs.
  `path_label(path)` joins edge labels with `*`.
- `pathalg.path`: `Path(start_vertex, end_vertex, edges)`, together with
  `Path.vertex(v)` for trivial paths and `Path.zero()`. It also has
  `find_subword`, `find_any_subword`, `find_overlap` and `edge_id_string`.
  `Compare` holds the results of order comparisons.
- `pathalg.path_table`: `PathTable` gives each path an integer id. Id 0 is
  always the zero path.
- `pathalg.path_order`: `PathOrder(edge_weights=None, edge_order=None)`
  compares weight vectors first, when weights are given. After that it
  compares length, then edges in turn. At the first edge that differs, the
  edge with the smaller id (or the smaller rank in `edge_order`) makes the
  path *larger*.
- `pathalg.element`: `Term(coeff, path_id)` and `PAElement`, a list of terms
  sorted from the largest path down. Build elements with
  `PAElement.from_paths(path_ids, coeffs)` or `PAElement.monomial(path_id, coeff=1)`.
- `pathalg.algebra`: `PathAlgebra(graph, field, order=None)` provides:
  - `multiply_paths`, which returns a path id, or 0 when the paths do not compose;
  - `add`, `subtract`, `sum`, `negate`, `left_multiply`, `right_multiply`
    and `multiply`;
  - `power` and `power_by_squaring`;
  - `multiply_sc` and `power_sc`, which sum with a heap;
  - `one`, `make_monic`, `format_by_label`, `format_by_path_id` and
    `format_path_table`.
- `pathalg.sum_collector`: `SumCollector` adds and subtracts many elements
  through a priority queue and returns their sum from `value()`.
- `pathalg.groebner`: `is_subword`, `find_any_subword`, `find_overlaps`,
  `two_sided_multiply`, `divide` (the remainder on division by monic
  divisors), `process_overlaps`, `divide_overlap`, `OverlapInfo` and
  `buchberger(algebra, generators, maximum_size, maximum_degree=0)`.

## Example

```python
from pathalg.algebra import PathAlgebra
from pathalg.element import PAElement
from pathalg.field import Field
from pathalg.graph import Graph
from pathalg.groebner import buchberger
from pathalg.path import Path
from pathalg.path_order import PathOrder

graph = Graph([[3]], ["v"], ["x", "y", "z"])
algebra = PathAlgebra(graph, Field(101), PathOrder(edge_order=[0, 1, 2]))

x, y, z = (Path(0, 0, [e]) for e in range(3))
xy = algebra.multiply_paths(x, y)
yx = algebra.multiply_paths(y, x)

commutator = algebra.subtract(PAElement.monomial(xy), PAElement.monomial(yx))
for element in buchberger(algebra, [commutator], 10):
    print(algebra.format_by_label(element))   # e.g. "1*x*y + 100*y*x"
```

## Command line

The `pathalg` command runs one of the bundled examples over GF(101) and
prints the result:

```
pathalg [sklyanin | sklyanin-default-order | path-graph | demo] [--max-size N] [--exponent N]
```

- `sklyanin` (the default) computes the basis for the Sklyanin relations in
  x, y, z, using edge order 0, 1, 2.
- `sklyanin-default-order` computes the same basis with the default edge order.
- `path-graph` computes the basis for relations on the quiver v1 – v2 – v3.
- `demo` walks through field arithmetic, element sums and products, and
  subword search and division. It also times `power` against
  `power_by_squaring` on `x + y`.

`--max-size` stops Buchberger's algorithm once the basis holds that many
elements. A value of 0 means no limit. The defaults are 10, 10, 20 and 30.
`--exponent` sets the power that `demo` uses; the default is 16.

From Python, `pathalg.cli.sklyanin_basis(edge_order, maximum_size)` and
`pathalg.cli.path_graph_basis(maximum_size)` return `(algebra, basis)`.

## Limitations

- `buchberger` accepts `maximum_degree` but does not use it. Only
  `maximum_size`, or running out of overlaps, ends the search. The result is
  therefore not guaranteed to be a complete or reduced Groebner basis.
- Paths are not checked against the graph. A `Path` whose edges do not link up
  is accepted as given.
- The command only runs the bundled examples. It reads no input files and
  takes no user-defined relations. Use the library API for those.

## Tests

```
pip install -e .[test]
pytest
```