"""Decide whether the tallest tower can be reached before the water rises."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


def can_reach_top(heights: Sequence[int], start: int) -> bool:
    """Whether climbing from tower ``start`` (zero-based) reaches the tallest tower.

    Towers taller than the start are visited in increasing order of height;
    each jump costs the height difference in time, and the time spent must
    never exceed the height of the tower being left.
    """
    if not 0 <= start < len(heights):
        raise IndexError("start index out of range")
    current = heights[start]
    elapsed = 0
    for height in sorted({h for h in heights if h > current}):
        elapsed += height - current
        if elapsed > current:
            return False
        current = height
    return True


def main(argv: list[str] | None = None) -> int:
    """Read test cases of n, k and n heights; print YES or NO for each."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default="-")
    args = parser.parse_args(argv)
    with args.input as stream:
        tokens = iter(stream.read().split())
    for _ in range(int(next(tokens))):
        n, k = int(next(tokens)), int(next(tokens))
        heights = [int(next(tokens)) for _ in range(n)]
        print("YES" if can_reach_top(heights, k - 1) else "NO")
    return 0


if __name__ == "__main__":
    sys.exit(main())