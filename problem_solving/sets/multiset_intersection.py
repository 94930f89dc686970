"""Intersection of several integer multisets.

Given ``m`` collections of integers that may contain repeated values, the
intersection keeps every value that appears in all of them, repeated the
minimum number of times it occurs in any single collection. For example
``{1,2,2,3,4}``, ``{2,2,3,5,6}`` and ``{1,3,2,2,6}`` intersect to
``{2,2,3}``.

The solver builds a frequency mapping of the first collection and shrinks it
against the frequency mapping of each subsequent collection, stopping early
once nothing is left. The work is linear in the total input size.
"""

from __future__ import annotations

from collections import Counter
import argparse
import logging
from typing import Iterable, List, Sequence

logger = logging.getLogger(__name__)


class MultisetInputError(ValueError):
    """Raised when the multiset intersection receives invalid collections."""


def multiset_frequencies(collection: Iterable[int]) -> Counter[int]:
    """Return the occurrence count of every value in *collection*."""

    frequencies: Counter[int] = Counter()
    for item in collection:
        if not isinstance(item, int) or isinstance(item, bool):
            raise MultisetInputError(
                f"multisets must contain integers, received {item!r}"
            )
        frequencies[item] += 1
    return frequencies


def intersect_multisets(*collections: Iterable[int]) -> List[int]:
    """Return the multiset intersection of *collections*.

    Values are grouped together and ordered by their first occurrence in the
    first collection, which keeps the output deterministic. Every collection is
    validated, even when the running intersection is already empty.

    Raises
    ------
    MultisetInputError
        If no collection is supplied or a collection holds a non-integer.
    """

    if not collections:
        raise MultisetInputError("at least one multiset is required")

    frequencies = [multiset_frequencies(collection) for collection in collections]
    runner = frequencies[0]
    for index, other in enumerate(frequencies[1:], start=1):
        if not runner:
            break
        runner = runner & other
        logger.debug(
            "After multiset %d the intersection holds %d distinct values",
            index,
            len(runner),
        )

    return list(runner.elements())


def _default_multisets() -> List[List[int]]:
    """Return the reference collections used by the CLI."""

    return [
        [1, 2, 2, 2, 2, 3, 2, 4],
        [2, 2, 2, 3, 5, 6],
        [1, 3, 2, 2, 2, 6, 1, 1, 1, 1],
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point printing the intersection of the supplied multisets."""

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--set",
        dest="sets",
        action="append",
        default=None,
        metavar="VALUES",
        help=(
            "Comma separated integers forming one multiset. Repeat the option "
            "for every multiset. Defaults to the built-in reference sets."
        ),
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    if args.sets is None:
        multisets = _default_multisets()
    else:
        try:
            multisets = [
                [int(item) for item in payload.split(",") if item.strip()]
                for payload in args.sets
            ]
        except ValueError as exc:
            parser.error(f"Failed to parse integer payloads: {exc}")

    try:
        intersection = intersect_multisets(*multisets)
    except MultisetInputError as exc:  # pragma: no cover - CLI guard
        logger.error("Failed to intersect multisets: %s", exc)
        return 1

    logger.info("Intersected %d multisets", len(multisets))
    print(intersection)
    return 0


__all__ = [
    "MultisetInputError",
    "intersect_multisets",
    "main",
    "multiset_frequencies",
]


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
