"""Pascal's triangle generation and aligned console rendering.

Each row is computed on its own from the identity
``C(n, k) = C(n, k - 1) * (n - k + 1) / k`` starting at ``C(n, 0) = 1``, so no
previous row has to be kept around.

The renderer reproduces a fixed-width layout: every number occupies ``pad + 1``
columns and each row is indented by ``pad // 2 + 1`` columns less than the row
above it, which lines the rows up as a triangle in a monospaced font as long
as no coefficient has more digits than ``pad``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterator, List, Optional, Sequence, TextIO

logger = logging.getLogger(__name__)

DEFAULT_PAD = 7


def _validate_count(count: int, label: str = "count") -> None:
    if not isinstance(count, int) or isinstance(count, bool):
        raise TypeError(f"{label} must be an integer")
    if count < 0:
        raise ValueError(f"{label} must be non-negative")


def _validate_pad(pad: int) -> None:
    if not isinstance(pad, int) or isinstance(pad, bool):
        raise TypeError("pad must be an integer")
    if pad <= 0 or pad % 2 == 0:
        raise ValueError("pad must be a positive odd integer")


def pascal_row(n: int) -> List[int]:
    """Return the binomial coefficients ``C(n, 0) .. C(n, n)``."""

    _validate_count(n, "n")
    row = [1]
    for k in range(1, n + 1):
        row.append(row[-1] * (n - k + 1) // k)
    return row


def pascal_rows(count: int) -> Iterator[List[int]]:
    """Yield the first *count* rows of the triangle."""

    _validate_count(count)
    for n in range(count):
        yield pascal_row(n)


def format_pascal_triangle(count: int, *, pad: int = DEFAULT_PAD) -> List[str]:
    """Return the first *count* rows formatted as aligned text lines."""

    _validate_count(count)
    _validate_pad(pad)

    step_width = pad // 2 + 1
    indent = (count - 1) * step_width
    lines: List[str] = []
    for row in pascal_rows(count):
        parts = [" " * indent] if indent > 0 else []
        indent -= step_width
        for value in row:
            parts.append(str(value))
            # Extra digits eat into the gap that follows the number.
            extra_digits = len(str(value)) - 1
            if extra_digits < pad:
                parts.append(" " * (pad - extra_digits))
        lines.append("".join(parts))

    logger.debug("Formatted %d Pascal rows with pad %d", count, pad)
    return lines


def print_pascal_triangle(
    count: int, *, stream: Optional[TextIO] = None, pad: int = DEFAULT_PAD
) -> None:
    """Write the first *count* rows of Pascal's triangle to *stream*.

    *stream* defaults to :data:`sys.stdout`. Nothing is written when *count*
    is zero.
    """

    target = sys.stdout if stream is None else stream
    for line in format_pascal_triangle(count, pad=pad):
        target.write(line + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point printing Pascal's triangle."""

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--rows",
        type=int,
        default=10,
        help="Number of triangle rows to print (default: 10)",
    )
    parser.add_argument(
        "--pad",
        type=int,
        default=DEFAULT_PAD,
        help="Odd number of spaces reserved between numbers (default: 7)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        print_pascal_triangle(args.rows, pad=args.pad)
    except ValueError as exc:
        logger.error("Failed to print Pascal's triangle: %s", exc)
        return 1
    return 0


__all__ = [
    "DEFAULT_PAD",
    "format_pascal_triangle",
    "main",
    "pascal_row",
    "pascal_rows",
    "print_pascal_triangle",
]


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
