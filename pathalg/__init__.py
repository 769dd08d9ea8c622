"""Path algebras of quivers over finite prime fields and their Groebner bases."""

__version__ = "0.1.0"
__all__ = [
    "field",
    "path",
    "path_table",
    "path_order",
    "element",
    "graph",
    "sum_collector",
    "algebra",
    "groebner",
    "cli",
]