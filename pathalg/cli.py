"""Command-line examples: Gröbner bases of the Sklyanin and path-graph ideals."""

from __future__ import annotations

import argparse
import time
from typing import Sequence

from pathalg.algebra import PathAlgebra
from pathalg.element import PAElement
from pathalg.field import Field
from pathalg.graph import Graph
from pathalg.groebner import buchberger, divide, find_any_subword
from pathalg.path import Path
from pathalg.path_order import PathOrder

_CHARACTERISTIC = 101
_EXAMPLES = ("sklyanin", "sklyanin-default-order", "path-graph", "demo")
_DEFAULT_SIZES = {
    "sklyanin": 10,
    "sklyanin-default-order": 10,
    "path-graph": 20,
    "demo": 30,
}


def _one_vertex_algebra(vertex_label: str, order: PathOrder) -> PathAlgebra:
    """Free algebra on x, y, z: one vertex carrying three loops."""
    graph = Graph([[3]], [vertex_label], ["x", "y", "z"])
    return PathAlgebra(graph, Field(_CHARACTERISTIC), order)


def _sklyanin_generators(algebra: PathAlgebra) -> list[PAElement]:
    x, y, z = (Path(0, 0, (edge,)) for edge in range(3))
    mul = algebra.multiply_paths
    x2, y2, z2 = mul(x, x), mul(y, y), mul(z, z)
    xy, yx = mul(x, y), mul(y, x)
    xz, zx = mul(x, z), mul(z, x)
    yz, zy = mul(y, z), mul(z, y)
    return [
        PAElement.from_paths([x2, yz, zy], [1, 3, 7]),
        PAElement.from_paths([xy, yx, z2], [1, 36, 34]),
        PAElement.from_paths([xz, y2, zx], [1, 29, 87]),
    ]


def sklyanin_basis(
    edge_order: Sequence[int] | None = (0, 1, 2), maximum_size: int = 10
) -> tuple[PathAlgebra, list[PAElement]]:
    """Run Buchberger's algorithm on the Sklyanin relations over GF(101).

    Returns the algebra the computation lives in and the extended basis.
    """
    order = PathOrder(edge_order=list(edge_order) if edge_order is not None else None)
    algebra = _one_vertex_algebra("v", order)
    generators = _sklyanin_generators(algebra)
    return algebra, buchberger(algebra, generators, maximum_size)


def path_graph_basis(maximum_size: int = 20) -> tuple[PathAlgebra, list[PAElement]]:
    """Run Buchberger's algorithm on relations of the path quiver v1 - v2 - v3."""
    graph = Graph([[0, 1, 0], [1, 0, 1], [0, 1, 0]], ["v1", "v2", "v3"], ["a", "d", "b", "c"])
    algebra = PathAlgebra(graph, Field(_CHARACTERISTIC), PathOrder(edge_order=[1, 4, 2, 3]))

    path_a = Path(0, 0, (0,))
    path_b = Path(0, 0, (2,))
    path_c = Path(0, 0, (3,))
    path_d = Path(0, 0, (1,))
    mul = algebra.multiply_paths

    cdab = mul(mul(path_c, path_d), mul(path_a, path_b))
    cb = mul(path_c, path_b)
    bc = mul(path_b, path_c)
    da = mul(path_d, path_a)

    left = algebra.subtract(PAElement.monomial(cdab), PAElement.monomial(cb))
    right = algebra.subtract(PAElement.monomial(bc), PAElement.monomial(da))
    return algebra, buchberger(algebra, [left, right], maximum_size)


def _print_basis(algebra: PathAlgebra, basis: Sequence[PAElement]) -> None:
    for element in basis:
        print(algebra.format_by_label(element))


def _micros(start: float, end: float) -> int:
    return int((end - start) * 1_000_000)


def _demo(maximum_size: int, exponent: int) -> None:
    field = Field(_CHARACTERISTIC)
    a = 10
    print(f"Field element a: {a}")
    print(f"a to the power 15 in field: {field.power(a, 15)}")

    graph = Graph(
        [[1, 1, 0], [0, 1, 1], [0, 0, 1]],
        ["vertex1", "vertex2", "vertex3"],
        ["edge1", "edge2", "edge3", "edge4", "edge5"],
    )
    weighted = PathAlgebra(graph, field, PathOrder([[1], [2], [3], [2], [1]]))
    print()

    my_path = Path(0, 0, (0, 0, 0, 0, 0))
    my_path2 = Path(1, 2, (0, 1, 2, 3, 4))
    my_path3 = Path(0, 2, (0, 1, 2, 3, 4))
    weighted.add_to_path_table(my_path)

    print(graph.edge_id_string(my_path))
    print(graph.path_label(my_path))
    print(graph.path_label(my_path2))

    mult1 = weighted.multiply_paths(my_path, my_path)
    mult3 = weighted.multiply_paths(my_path, my_path3)
    monom1 = PAElement.monomial(mult1)
    monom2 = PAElement.monomial(mult1, 2)
    monom3 = PAElement.monomial(mult3)
    sum1 = weighted.add(monom1, monom2)
    sum2 = weighted.add(monom1, monom3)
    print(weighted.format_by_label(sum1))
    print(weighted.format_by_label(sum2))
    print(weighted.format_by_label(weighted.subtract(sum1, sum1)))

    algebra = _one_vertex_algebra("v0", PathOrder())
    x, y, z = (Path(0, 0, (edge,)) for edge in range(3))
    vert = Path.vertex(0)
    mul = algebra.multiply_paths

    id_x, id_y, id_z = mul(vert, x), mul(vert, y), mul(vert, z)
    id_vert = mul(vert, vert)
    id_x2, id_y2, id_z2 = mul(id_x, id_x), mul(id_y, id_y), mul(id_z, id_z)
    id_xy, id_yx = mul(id_x, id_y), mul(id_y, id_x)
    id_xz, id_zx = mul(id_x, id_z), mul(id_z, id_x)
    id_yz, id_zy = mul(id_y, id_z), mul(id_z, id_y)
    id_xyxy = mul(id_xy, id_xy)
    id_xyxyx2 = mul(id_xyxy, id_x2)
    print(f"id_vert{id_vert}")

    elt_v = PAElement.monomial(id_vert)
    elt_x2 = PAElement.monomial(id_x2)
    elt_xyxy = PAElement.monomial(id_xyxy)
    comm_x_y = algebra.subtract(PAElement.monomial(id_xy), PAElement.monomial(id_yx))
    comm_x_z = algebra.subtract(PAElement.monomial(id_xz), PAElement.monomial(id_zx))
    comm_y_z = algebra.subtract(PAElement.monomial(id_yz), PAElement.monomial(id_zy))
    to_reduce = algebra.add(elt_xyxy, PAElement.monomial(id_xyxyx2))

    sklyanin = [
        PAElement.from_paths([id_x2, id_yz, id_zy], [1, 3, 7]),
        PAElement.from_paths([id_xy, id_yx, id_z2], [1, 36, 34]),
        PAElement.from_paths([id_xz, id_y2, id_zx], [1, 29, 87]),
    ]

    _print_basis(algebra, buchberger(algebra, [comm_x_y, comm_x_z, comm_y_z], 10, 10))

    start = time.perf_counter()
    sklyanin_gb = buchberger(algebra, sklyanin, maximum_size, maximum_size)
    end = time.perf_counter()
    print(f"Duration for Sklyanin GB: {int((end - start) * 1000)}ms")
    _print_basis(algebra, sklyanin_gb)

    sum_xy = algebra.add(PAElement.monomial(id_x), PAElement.monomial(id_y))
    zero_element = PAElement.monomial(0)

    print(f"Exponent: {exponent}")
    start = time.perf_counter()
    algebra.power(sum_xy, exponent)
    end = time.perf_counter()
    plain = _micros(start, end)
    print(f"Duration for normal exponent: {plain} microseconds")
    start = time.perf_counter()
    algebra.power_by_squaring(sum_xy, exponent)
    end = time.perf_counter()
    squaring = _micros(start, end)
    print(f"Duration for powers of 2: {squaring} microseconds")
    ratio = squaring / plain if plain and squaring else 0
    print(f"Ratio (powers_of_2/normal): {ratio}")

    print(algebra.format_by_label(elt_v))
    print(algebra.format_by_path_id(elt_v))
    print(algebra.format_by_label(sum_xy))
    print(algebra.format_by_path_id(sum_xy))
    print(algebra.format_by_path_id(elt_x2))
    print(algebra.format_by_path_id(zero_element))
    print(f"one: {algebra.format_by_label(algebra.one())}")

    for subs, word in (([id_x], id_xy), ([id_y], id_xy), ([id_x2, id_yx], id_xyxy)):
        position, index = find_any_subword(algebra, subs, word)
        print(f"{position} {index}")

    print(algebra.format_by_label(divide(algebra, [comm_x_y], elt_xyxy)))
    print(algebra.format_by_label(divide(algebra, [comm_x_y], to_reduce)))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pathalg",
        description="Compute Gröbner bases of ideals in path algebras over GF(101).",
    )
    parser.add_argument("example", nargs="?", default="sklyanin", choices=_EXAMPLES)
    parser.add_argument(
        "--max-size",
        type=int,
        default=None,
        help="stop once the basis holds this many elements (0: no limit)",
    )
    parser.add_argument(
        "--exponent", type=int, default=16, help="power of x + y used by the demo"
    )
    args = parser.parse_args(argv)

    maximum_size = args.max_size if args.max_size is not None else _DEFAULT_SIZES[args.example]
    if maximum_size < 0:
        parser.error("--max-size must be non-negative")
    if args.exponent < 0:
        parser.error("--exponent must be non-negative")

    if args.example == "demo":
        _demo(maximum_size, args.exponent)
        return 0

    if args.example == "path-graph":
        algebra, basis = path_graph_basis(maximum_size)
    else:
        print()
        print("Generating sklyGens")
        edge_order = None if args.example == "sklyanin-default-order" else (0, 1, 2)
        algebra, basis = sklyanin_basis(edge_order, maximum_size)
    _print_basis(algebra, basis)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())