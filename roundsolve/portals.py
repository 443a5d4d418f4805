"""Collect coins by stepping through overlapping portals in order."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from dataclasses import dataclass


class DisjointSet:
    """Union-find over the integers 0 .. n-1 with union by size."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self._parent = list(range(n))
        self._size = [1] * n

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, x: int) -> int:
        """Representative of the set holding x, compressing the path on the way."""
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of x and y; False when they were already one set."""
        x, y = self.find(x), self.find(y)
        if x == y:
            return False
        if self._size[y] > self._size[x]:
            x, y = y, x
        self._size[x] += self._size[y]
        self._parent[y] = x
        return True

    def size(self, x: int) -> int:
        """Number of elements in the set holding x."""
        return self._size[self.find(x)]


@dataclass(frozen=True, order=True)
class Portal:
    """A portal usable while holding between ``left`` and ``right`` coins."""

    left: int
    right: int
    value: int


def max_coins(start: int, portals: Iterable[Portal]) -> int:
    """Most coins reachable from ``start`` taking portals by (left, right) order."""
    coins = start
    for portal in sorted(portals, key=lambda p: (p.left, p.right)):
        if portal.left <= coins <= portal.right:
            coins = max(coins, portal.value)
    return coins


def main(argv: list[str] | None = None) -> int:
    """Read test cases of n, k and n portals l r value; print the best total."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default="-")
    args = parser.parse_args(argv)
    with args.input as stream:
        tokens = iter(stream.read().split())
    for _ in range(int(next(tokens))):
        n, k = int(next(tokens)), int(next(tokens))
        portals = [
            Portal(int(next(tokens)), int(next(tokens)), int(next(tokens)))
            for _ in range(n)
        ]
        print(max_coins(k, portals))
    return 0


if __name__ == "__main__":
    sys.exit(main())