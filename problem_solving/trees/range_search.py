"""Range queries over balanced binary search trees.

To report every key inside the closed interval ``[x1, x2]`` the query first
searches for both bounds at once. At some vertex, the *split vertex*, the two
search paths diverge. From there:

* the walk towards ``x1`` reports, for every vertex on the path whose key is at
  least ``x1``, the entire right subtree of that vertex;
* the walk towards ``x2`` reports, for every vertex on the path whose key is at
  most ``x2``, the entire left subtree of that vertex.

Those subtrees are known to lie inside the interval, so they are collected
without comparing keys. A query therefore touches ``O(log n + k)`` vertices on
a balanced tree holding ``n`` keys with ``k`` keys reported.

The public API:

* ``query_range`` – returns the set of distinct keys inside the interval.
* ``find_split_node`` – exposes the split-point search on its own.
* ``profile_range_query`` – runs a query while counting visited vertices.
* ``RangeQueryEngine`` – read-only wrapper bundling a root with the helpers.
* ``main`` – CLI entry point for ad-hoc queries.

Boundary walks are loops and subtree collection uses an explicit stack, so
skewed trees do not run into the recursion limit.
"""

from __future__ import annotations

from dataclasses import dataclass
import argparse
import logging
import time
from typing import FrozenSet, Iterable, List, Optional, Sequence, Set

from .binary_tree import TreeNode, build_balanced_tree, render_tree

logger = logging.getLogger(__name__)


class InvalidRangeError(ValueError):
    """Raised when a range query receives ``x1 >= x2``."""


@dataclass(frozen=True)
class RangeQueryProfile:
    """Instrumentation captured for a single range query."""

    low: int
    high: int
    keys: FrozenSet[int]
    split_key: Optional[int]
    visited: int
    elapsed_seconds: float

    def sorted_keys(self) -> List[int]:
        """Return the reported keys in ascending order."""

        return sorted(self.keys)


class _RangeCollector:
    """Accumulates reported keys and counts vertex visits for one query."""

    __slots__ = ("low", "high", "keys", "visited")

    def __init__(self, low: int, high: int) -> None:
        self.low = low
        self.high = high
        self.keys: Set[int] = set()
        self.visited = 0

    def contains(self, key: int) -> bool:
        return self.low <= key <= self.high

    def report_if_inside(self, node: TreeNode) -> None:
        self.visited += 1
        if self.contains(node.key):
            self.keys.add(node.key)

    def collect_subtree(self, root: Optional[TreeNode]) -> None:
        """Add every key below *root* without range checks."""

        stack: List[TreeNode] = [root] if root is not None else []
        while stack:
            node = stack.pop()
            self.visited += 1
            self.keys.add(node.key)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)

    def walk_lower_boundary(self, node: Optional[TreeNode]) -> None:
        """Follow the search path towards ``low`` below the split vertex."""

        while node is not None:
            self.report_if_inside(node)
            if node.key >= self.low:
                self.collect_subtree(node.right)
                node = node.left
            else:
                node = node.right

    def walk_upper_boundary(self, node: Optional[TreeNode]) -> None:
        """Follow the search path towards ``high`` below the split vertex."""

        while node is not None:
            self.report_if_inside(node)
            if node.key <= self.high:
                self.collect_subtree(node.left)
                node = node.right
            else:
                node = node.left


def _validate_range(x1: int, x2: int) -> None:
    for label, bound in (("x1", x1), ("x2", x2)):
        if not isinstance(bound, int) or isinstance(bound, bool):
            raise TypeError(f"{label} must be an integer")
    if x1 >= x2:
        raise InvalidRangeError(
            f"Range error: x1 must be less than x2 (received x1={x1}, x2={x2})"
        )


def _descend_to_split(
    root: Optional[TreeNode], x1: int, x2: int, collector: Optional[_RangeCollector] = None
) -> Optional[TreeNode]:
    node = root
    while node is not None:
        if collector is not None:
            collector.visited += 1
        if x1 < node.key and x2 < node.key:
            node = node.left
        elif x1 > node.key and x2 > node.key:
            node = node.right
        else:
            break
    return node


def find_split_node(root: Optional[TreeNode], x1: int, x2: int) -> Optional[TreeNode]:
    """Return the last vertex shared by the search paths to *x1* and *x2*.

    ``None`` is returned when the tree is empty or when the interval falls
    between two adjacent keys without touching any vertex.
    """

    _validate_range(x1, x2)
    return _descend_to_split(root, x1, x2)


def _run_query(root: Optional[TreeNode], x1: int, x2: int) -> tuple[_RangeCollector, Optional[TreeNode]]:
    _validate_range(x1, x2)
    collector = _RangeCollector(x1, x2)
    split = _descend_to_split(root, x1, x2, collector)
    if split is None:
        logger.debug("No split vertex for [%d, %d]; result is empty", x1, x2)
        return collector, None

    logger.debug("Split vertex for [%d, %d] holds key %d", x1, x2, split.key)
    # The split vertex was already counted during the descent.
    if collector.contains(split.key):
        collector.keys.add(split.key)
    collector.walk_lower_boundary(split.left)
    collector.walk_upper_boundary(split.right)
    logger.debug(
        "Range [%d, %d] reported %d keys after %d visits",
        x1,
        x2,
        len(collector.keys),
        collector.visited,
    )
    return collector, split


def query_range(root: Optional[TreeNode], x1: int, x2: int) -> Set[int]:
    """Return the distinct keys of *root* lying in the closed interval ``[x1, x2]``.

    Parameters
    ----------
    root:
        Root of a balanced binary search tree, or ``None`` for the empty tree.
    x1, x2:
        Interval bounds, both inclusive. ``x1`` must be strictly less than
        ``x2``.

    Raises
    ------
    InvalidRangeError
        If ``x1 >= x2``. The check happens before the tree is touched.
    TypeError
        If either bound is not an integer.

    Returns
    -------
    set[int]
        A new set owned by the caller. Duplicate keys in the tree appear once.
    """

    collector, _ = _run_query(root, x1, x2)
    return collector.keys


def profile_range_query(root: Optional[TreeNode], x1: int, x2: int) -> RangeQueryProfile:
    """Run :func:`query_range` and capture visit counts and wall-clock time."""

    start = time.perf_counter()
    collector, split = _run_query(root, x1, x2)
    elapsed = time.perf_counter() - start
    return RangeQueryProfile(
        low=x1,
        high=x2,
        keys=frozenset(collector.keys),
        split_key=None if split is None else split.key,
        visited=collector.visited,
        elapsed_seconds=elapsed,
    )


class RangeQueryEngine:
    """Read-only range query facade over a prebuilt search tree."""

    __slots__ = ("root",)

    def __init__(self, root: Optional[TreeNode] = None) -> None:
        if root is not None and not isinstance(root, TreeNode):
            raise TypeError("root must be a TreeNode or None")
        self.root = root

    @classmethod
    def from_sorted_keys(cls, keys: Sequence[int]) -> "RangeQueryEngine":
        """Build a balanced tree from ascending *keys* and wrap it."""

        return cls(build_balanced_tree(keys))

    def query(self, x1: int, x2: int) -> Set[int]:
        return query_range(self.root, x1, x2)

    def profile(self, x1: int, x2: int) -> RangeQueryProfile:
        return profile_range_query(self.root, x1, x2)

    def split_key(self, x1: int, x2: int) -> Optional[int]:
        node = find_split_node(self.root, x1, x2)
        return None if node is None else node.key

    def __len__(self) -> int:
        count = 0
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(child for child in (node.left, node.right) if child is not None)
        return count


def _default_keys() -> List[int]:
    """Return the keys used by the CLI when none are supplied."""

    return [5, 3, 8, 1, 4, 7, 9]


def _parse_keys(payload: str) -> List[int]:
    return [int(item) for item in payload.split(",") if item.strip()]


def _format_keys(keys: Iterable[int]) -> str:
    return "[" + ", ".join(str(key) for key in sorted(keys)) + "]"


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point reporting the keys of a balanced tree inside an interval."""

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--keys",
        type=str,
        default=None,
        help=(
            "Comma separated integer keys. They are sorted and arranged into a "
            "balanced search tree. Defaults to 5,3,8,1,4,7,9."
        ),
    )
    parser.add_argument("--low", type=int, default=4, help="Inclusive lower bound x1")
    parser.add_argument("--high", type=int, default=8, help="Inclusive upper bound x2")
    parser.add_argument(
        "--render",
        action="store_true",
        help="Print the tree level by level before the query result.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    if args.keys is None:
        keys = _default_keys()
    else:
        try:
            keys = _parse_keys(args.keys)
        except ValueError as exc:
            logger.error("Failed to parse keys: %s", exc)
            return 1

    engine = RangeQueryEngine.from_sorted_keys(sorted(keys))
    if args.render:
        print(render_tree(engine.root))

    try:
        profile = engine.profile(args.low, args.high)
    except InvalidRangeError as exc:
        logger.error("Invalid query: %s", exc)
        return 1

    logger.info(
        "Visited %d of %d vertices in %.6fs",
        profile.visited,
        len(engine),
        profile.elapsed_seconds,
    )
    print(f"Keys in [{args.low}, {args.high}]: {_format_keys(profile.keys)}")
    return 0


__all__ = [
    "InvalidRangeError",
    "RangeQueryEngine",
    "RangeQueryProfile",
    "find_split_node",
    "main",
    "profile_range_query",
    "query_range",
]


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
