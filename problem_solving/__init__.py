"""Independent textbook algorithm exercises.

The package groups three self-contained katas that share no state:

* :mod:`problem_solving.trees` – range queries over balanced search trees.
* :mod:`problem_solving.sets` – multiset intersection of integer collections.
* :mod:`problem_solving.combinatorics` – Pascal's triangle rendering.

Each module ships a ``main`` entry point usable through ``python -m``.
"""

from .combinatorics import format_pascal_triangle, pascal_row, print_pascal_triangle
from .sets import MultisetInputError, intersect_multisets
from .trees import InvalidRangeError, RangeQueryEngine, TreeNode, query_range

__all__ = [
    "InvalidRangeError",
    "MultisetInputError",
    "RangeQueryEngine",
    "TreeNode",
    "format_pascal_triangle",
    "intersect_multisets",
    "pascal_row",
    "print_pascal_triangle",
    "query_range",
]
