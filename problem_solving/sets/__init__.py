"""Set and multiset algorithms."""

from .multiset_intersection import (
    MultisetInputError,
    intersect_multisets,
    multiset_frequencies,
)

__all__ = [
    "MultisetInputError",
    "intersect_multisets",
    "multiset_frequencies",
]
