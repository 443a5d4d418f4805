"""Count placements that fit into runs of zeros."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator


def _zero_runs(values: Iterable[int]) -> Iterator[int]:
    """Length of the zero run closed by each non-zero value and by the end."""
    length = 0
    for value in values:
        if value == 0:
            length += 1
        else:
            yield length
            length = 0
    yield length


def count_placements(values: Iterable[int], k: int) -> int:
    """Sum over zero runs of length at least k of (length + 1) // (k + 1)."""
    if k < 0:
        raise ValueError("k must be non-negative")
    return sum((run + 1) // (k + 1) for run in _zero_runs(values) if run >= k)


def main(argv: list[str] | None = None) -> int:
    """Read test cases of n, k and n values; print the count for each."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default="-")
    args = parser.parse_args(argv)
    with args.input as stream:
        tokens = iter(stream.read().split())
    for _ in range(int(next(tokens))):
        n, k = int(next(tokens)), int(next(tokens))
        values = [int(next(tokens)) for _ in range(n)]
        print(count_placements(values, k))
    return 0


if __name__ == "__main__":
    sys.exit(main())