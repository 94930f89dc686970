"""Binary search tree model and inspection helpers.

The range query engine in :mod:`problem_solving.trees.range_search` consumes
trees that are built ahead of time and never mutated. This module provides the
node type together with the helpers used to build, inspect and render such
trees in tests and command line demonstrations:

* ``TreeNode`` – a ``@dataclass`` holding an integer key and optional children.
* ``build_tree_from_level_order`` – constructs a tree from a level-order
  sequence containing ``None`` sentinels.
* ``build_balanced_tree`` – median-split construction of a height-balanced
  search tree from sorted keys.
* ``is_balanced`` / ``render_tree`` / ``level_order_traversal`` /
  ``iter_keys_in_order`` – inspection utilities.

Traversals that may run over large or skewed trees use explicit stacks so that
tree depth is never bounded by the interpreter's recursion limit.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, Iterator, List, Optional, Sequence, Tuple


@dataclass(slots=True)
class TreeNode:
    """Vertex of a binary search tree keyed by integers."""

    key: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    def __post_init__(self) -> None:
        if not isinstance(self.key, int) or isinstance(self.key, bool):
            raise TypeError("TreeNode key must be an integer")


BalanceResult = tuple[bool, int]


def _check_height(node: Optional[TreeNode]) -> BalanceResult:
    """Return a tuple indicating whether *node* is balanced and its height."""

    if node is None:
        return True, 0

    left_balanced, left_height = _check_height(node.left)
    if not left_balanced:
        return False, left_height + 1

    right_balanced, right_height = _check_height(node.right)
    if not right_balanced:
        return False, right_height + 1

    balanced = abs(left_height - right_height) <= 1
    return balanced, max(left_height, right_height) + 1


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Return ``True`` when *root* is a height-balanced binary tree."""

    balanced, _ = _check_height(root)
    return balanced


def render_tree(root: Optional[TreeNode]) -> str:
    """Render *root* level-by-level, marking missing nodes with ``·``.

    The renderer stops once the next level would contain only placeholders.
    """

    if root is None:
        return "<empty>"

    lines: List[str] = []
    queue: Deque[Optional[TreeNode]] = deque([root])

    while queue:
        level_nodes: List[str] = []
        next_level_has_real_node = False
        for _ in range(len(queue)):
            node = queue.popleft()
            if node is None:
                level_nodes.append("·")
                queue.extend((None, None))
                continue

            level_nodes.append(str(node.key))
            queue.append(node.left)
            queue.append(node.right)
            if node.left is not None or node.right is not None:
                next_level_has_real_node = True

        lines.append(" ".join(level_nodes))
        if not next_level_has_real_node:
            break

    return "\n".join(lines)


def _make_node(value: object) -> TreeNode:
    if not isinstance(value, int):
        raise TypeError("Level-order values must be integers or None")
    return TreeNode(value)


def build_tree_from_level_order(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Construct a binary tree from a level-order sequence.

    ``None`` entries mark missing children. An empty sequence, or one whose
    first entry is ``None``, yields the empty tree.
    """

    iterator = iter(values)
    first = next(iterator, None)
    if first is None:
        return None

    root = _make_node(first)
    queue: Deque[TreeNode] = deque([root])

    while queue:
        node = queue.popleft()
        try:
            left_value = next(iterator)
        except StopIteration:
            break
        if left_value is not None:
            node.left = _make_node(left_value)
            queue.append(node.left)

        try:
            right_value = next(iterator)
        except StopIteration:
            break
        if right_value is not None:
            node.right = _make_node(right_value)
            queue.append(node.right)

    return root


def build_balanced_tree(sorted_keys: Sequence[int]) -> Optional[TreeNode]:
    """Build a height-balanced search tree from ascending *sorted_keys*.

    The median of every slice becomes the subtree root, so the resulting tree
    satisfies the search ordering (duplicates included) and has minimal
    height. ``ValueError`` is raised when the keys are not sorted.
    """

    keys = list(sorted_keys)
    for previous, current in zip(keys, keys[1:]):
        if current < previous:
            raise ValueError("keys must be sorted in ascending order")
    if not keys:
        return None

    def _slice_root(low: int, high: int) -> TreeNode:
        return TreeNode(keys[(low + high) // 2])

    root = _slice_root(0, len(keys) - 1)
    # Each entry is (node, low, high) for the slice the node was taken from.
    pending: List[Tuple[TreeNode, int, int]] = [(root, 0, len(keys) - 1)]
    while pending:
        node, low, high = pending.pop()
        mid = (low + high) // 2
        if low <= mid - 1:
            node.left = _slice_root(low, mid - 1)
            pending.append((node.left, low, mid - 1))
        if mid + 1 <= high:
            node.right = _slice_root(mid + 1, high)
            pending.append((node.right, mid + 1, high))
    return root


def level_order_traversal(root: Optional[TreeNode]) -> List[Optional[int]]:
    """Return the tree's level-order traversal including ``None`` sentinels."""

    if root is None:
        return []
    result: List[Optional[int]] = []
    queue: Deque[Optional[TreeNode]] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            result.append(None)
            continue
        result.append(node.key)
        queue.append(node.left)
        queue.append(node.right)
    while result and result[-1] is None:
        result.pop()
    return result


def iter_keys_in_order(root: Optional[TreeNode]) -> Iterator[int]:
    """Yield the keys of *root* in ascending (in-order) sequence."""

    stack: List[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.key
        node = node.right


__all__ = [
    "TreeNode",
    "build_balanced_tree",
    "build_tree_from_level_order",
    "is_balanced",
    "iter_keys_in_order",
    "level_order_traversal",
    "render_tree",
]
