"""Tests for the balanced search tree range query engine."""

from __future__ import annotations

from typing import Optional

import pytest

from problem_solving.trees.binary_tree import (
    TreeNode,
    build_balanced_tree,
    build_tree_from_level_order,
    level_order_traversal,
)
from problem_solving.trees.range_search import (
    InvalidRangeError,
    RangeQueryEngine,
    RangeQueryProfile,
    find_split_node,
    main,
    profile_range_query,
    query_range,
)


REFERENCE_LEVEL_ORDER = [5, 3, 8, 1, 4, 7, 9]


@pytest.fixture()
def reference_tree() -> Optional[TreeNode]:
    return build_tree_from_level_order(REFERENCE_LEVEL_ORDER)


def _right_chain(size: int) -> TreeNode:
    root = TreeNode(0)
    node = root
    for key in range(1, size):
        node.right = TreeNode(key)
        node = node.right
    return root


def _left_chain(size: int) -> TreeNode:
    root = TreeNode(size - 1)
    node = root
    for key in range(size - 2, -1, -1):
        node.left = TreeNode(key)
        node = node.left
    return root


def test_query_range_reference_scenario(reference_tree: Optional[TreeNode]) -> None:
    assert query_range(reference_tree, 4, 8) == {4, 5, 7, 8}


@pytest.mark.parametrize(
    "low,high,expected",
    [
        (1, 3, {1, 3}),
        (2, 6, {3, 4, 5}),
        (7, 9, {7, 8, 9}),
        (0, 100, {1, 3, 4, 5, 7, 8, 9}),
        (-5, 0, set()),
        (10, 20, set()),
        (5, 6, {5}),
        (9, 10, {9}),
    ],
)
def test_query_range_reports_closed_interval(
    reference_tree: Optional[TreeNode], low: int, high: int, expected: set[int]
) -> None:
    assert query_range(reference_tree, low, high) == expected


def test_query_range_empty_tree_returns_empty_set() -> None:
    assert query_range(None, -10, 10) == set()


@pytest.mark.parametrize("low,high", [(4, 4), (8, 4)])
def test_query_range_rejects_invalid_interval(
    reference_tree: Optional[TreeNode], low: int, high: int
) -> None:
    with pytest.raises(InvalidRangeError):
        query_range(reference_tree, low, high)
    with pytest.raises(InvalidRangeError):
        query_range(None, low, high)


def test_invalid_range_error_is_value_error() -> None:
    with pytest.raises(ValueError, match="x1 must be less than x2"):
        query_range(None, 3, 1)


def test_query_range_rejects_non_integer_bounds(reference_tree: Optional[TreeNode]) -> None:
    with pytest.raises(TypeError):
        query_range(reference_tree, 1.5, 4)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        query_range(reference_tree, False, 4)


def test_query_range_collapses_duplicate_keys() -> None:
    root = build_balanced_tree([2, 2, 2, 3, 5, 5, 8])
    assert query_range(root, 2, 5) == {2, 3, 5}


def test_query_range_returns_fresh_set(reference_tree: Optional[TreeNode]) -> None:
    first = query_range(reference_tree, 1, 9)
    first.clear()
    assert query_range(reference_tree, 1, 9) == {1, 3, 4, 5, 7, 8, 9}


def test_query_range_does_not_mutate_tree(reference_tree: Optional[TreeNode]) -> None:
    query_range(reference_tree, 2, 8)
    assert level_order_traversal(reference_tree) == REFERENCE_LEVEL_ORDER


@pytest.mark.parametrize(
    "low,high,expected_key",
    [
        (4, 8, 5),
        (1, 3, 3),
        (2, 3, 3),
        (7, 9, 8),
        (0, 2, 1),
    ],
)
def test_find_split_node_returns_last_common_ancestor(
    reference_tree: Optional[TreeNode], low: int, high: int, expected_key: int
) -> None:
    node = find_split_node(reference_tree, low, high)
    assert node is not None
    assert node.key == expected_key


def test_find_split_node_returns_none_outside_tree(reference_tree: Optional[TreeNode]) -> None:
    assert find_split_node(reference_tree, 10, 20) is None
    assert find_split_node(None, 1, 2) is None
    with pytest.raises(InvalidRangeError):
        find_split_node(reference_tree, 2, 2)


def test_profile_range_query_counts_visits(reference_tree: Optional[TreeNode]) -> None:
    profile = profile_range_query(reference_tree, 4, 8)
    assert isinstance(profile, RangeQueryProfile)
    assert profile.keys == frozenset({4, 5, 7, 8})
    assert profile.sorted_keys() == [4, 5, 7, 8]
    assert profile.split_key == 5
    # 5 (split), 3 and 4 (lower walk), 8, 7 and 9 (upper walk).
    assert profile.visited == 6
    assert profile.elapsed_seconds >= 0.0


def test_profile_range_query_without_split() -> None:
    profile = profile_range_query(None, 1, 2)
    assert profile.keys == frozenset()
    assert profile.split_key is None
    assert profile.visited == 0


def test_narrow_query_visits_logarithmic_number_of_vertices() -> None:
    root = build_balanced_tree(list(range(4096)))
    profile = profile_range_query(root, 2000, 2003)
    assert profile.keys == frozenset({2000, 2001, 2002, 2003})
    assert profile.visited < 60


def test_wide_query_visits_every_vertex_once() -> None:
    root = build_balanced_tree(list(range(1000)))
    profile = profile_range_query(root, -1, 1000)
    assert profile.keys == frozenset(range(1000))
    assert profile.visited == 1000


@pytest.mark.parametrize("builder", [_right_chain, _left_chain])
def test_query_range_handles_deep_skewed_trees(builder) -> None:
    root = builder(5_000)
    assert query_range(root, -1, 5_000) == set(range(5_000))
    assert query_range(root, 4_990, 4_999) == set(range(4_990, 5_000))
    assert query_range(root, 10, 12) == {10, 11, 12}


def test_range_query_engine_wraps_tree() -> None:
    engine = RangeQueryEngine.from_sorted_keys([1, 3, 4, 5, 7, 8, 9])
    assert len(engine) == 7
    assert engine.query(4, 8) == {4, 5, 7, 8}
    assert engine.split_key(7, 9) == 8
    assert engine.profile(4, 8).visited == 6


def test_range_query_engine_empty_tree() -> None:
    engine = RangeQueryEngine()
    assert len(engine) == 0
    assert engine.query(0, 1) == set()
    assert engine.split_key(0, 1) is None
    with pytest.raises(InvalidRangeError):
        engine.query(1, 0)


def test_range_query_engine_rejects_non_nodes() -> None:
    with pytest.raises(TypeError):
        RangeQueryEngine([1, 2, 3])  # type: ignore[arg-type]


def test_cli_reports_default_query(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["Keys in [4, 8]: [4, 5, 7, 8]"]


def test_cli_renders_tree(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--keys", "9,7,8,1,3,4,5", "--low", "1", "--high", "3", "--render"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["5", "3 8", "1 4 7 9", "Keys in [1, 3]: [1, 3]"]


def test_cli_rejects_invalid_interval(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--low", "8", "--high", "4"]) == 1
    assert capsys.readouterr().out == ""


def test_cli_rejects_unparsable_keys() -> None:
    assert main(["--keys", "1,two,3"]) == 1
