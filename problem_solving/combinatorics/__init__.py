"""Combinatorial sequences and their console renderings."""

from .pascal_triangle import (
    DEFAULT_PAD,
    format_pascal_triangle,
    pascal_row,
    pascal_rows,
    print_pascal_triangle,
)

__all__ = [
    "DEFAULT_PAD",
    "format_pascal_triangle",
    "pascal_row",
    "pascal_rows",
    "print_pascal_triangle",
]
