"""Binary search tree model and range query engine."""

from .binary_tree import (
    TreeNode,
    build_balanced_tree,
    build_tree_from_level_order,
    is_balanced,
    iter_keys_in_order,
    level_order_traversal,
    render_tree,
)
from .range_search import (
    InvalidRangeError,
    RangeQueryEngine,
    RangeQueryProfile,
    find_split_node,
    profile_range_query,
    query_range,
)

__all__ = [
    "InvalidRangeError",
    "RangeQueryEngine",
    "RangeQueryProfile",
    "TreeNode",
    "build_balanced_tree",
    "build_tree_from_level_order",
    "find_split_node",
    "is_balanced",
    "iter_keys_in_order",
    "level_order_traversal",
    "profile_range_query",
    "query_range",
    "render_tree",
]
