"""Command line demonstration of range queries over a balanced search tree.

This script exposes a small harness around
``problem_solving.trees.range_search`` so the query behaviour can be exercised
directly from the command line. Running the module prints each demo tree
level by level, followed by the interval that was queried and the keys that
were reported.

The heavy lifting lives in ``range_search``; here we only orchestrate the
pre-defined demo inputs and emit human-readable status lines.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Iterator, List, Optional

from problem_solving.trees.binary_tree import (
    TreeNode,
    build_tree_from_level_order,
    render_tree,
)
from problem_solving.trees.range_search import query_range


@dataclass(frozen=True)
class DemoCase:
    """Container describing a tree, an interval and the expected keys."""

    name: str
    values: Iterable[Optional[int]]
    low: int
    high: int
    expected_keys: FrozenSet[int]

    def build(self) -> Optional[TreeNode]:
        """Materialise the tree associated with this demo case."""

        return build_tree_from_level_order(self.values)


def _iter_demo_cases() -> Iterator[DemoCase]:
    """Yield the built-in demonstration cases."""

    yield DemoCase(
        name="Balanced",
        values=[5, 3, 8, 1, 4, 7, 9],
        low=4,
        high=8,
        expected_keys=frozenset({4, 5, 7, 8}),
    )
    yield DemoCase(
        name="Disjoint",
        values=[5, 3, 8, 1, 4, 7, 9],
        low=10,
        high=20,
        expected_keys=frozenset(),
    )


def _format_report(case: DemoCase, tree: Optional[TreeNode]) -> List[str]:
    """Return formatted output lines for *case* and its *tree*."""

    found = query_range(tree, case.low, case.high)
    if found != case.expected_keys:
        raise RuntimeError(
            "Demo case expectation mismatch:"
            f" {case.name} expected {sorted(case.expected_keys)}"
            f" but received {sorted(found)}"
        )

    header = f"{case.name} tree query [{case.low}, {case.high}]: {sorted(found)}"
    return [header, render_tree(tree)]


def main() -> None:
    """Execute the demonstration flow for all configured cases."""

    for case in _iter_demo_cases():
        tree = case.build()
        for line in _format_report(case, tree):
            print(line)
        print()  # Spacer between cases


if __name__ == "__main__":
    main()
