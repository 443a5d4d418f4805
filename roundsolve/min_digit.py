"""Smallest decimal digit of each number in a batch of test cases."""

from __future__ import annotations

import argparse
import sys


def min_digit(n: int) -> int:
    """Smallest decimal digit of a non-negative integer."""
    if n < 0:
        raise ValueError("n must be non-negative")
    smallest = n % 10
    while n:
        n, digit = divmod(n, 10)
        smallest = min(smallest, digit)
    return smallest


def main(argv: list[str] | None = None) -> int:
    """Read a count and that many numbers; print the smallest digit of each."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default="-")
    args = parser.parse_args(argv)
    with args.input as stream:
        tokens = iter(stream.read().split())
    for _ in range(int(next(tokens))):
        print(min_digit(int(next(tokens))))
    return 0


if __name__ == "__main__":
    sys.exit(main())