"""Maintain the weight of edges joining differently coloured tree vertices."""

from __future__ import annotations

import argparse
import math
import sys
from collections import defaultdict
from collections.abc import Iterable, Sequence


class ColoredTree:
    """A weighted tree with vertex colours, supporting recolouring queries.

    ``cost`` is the total weight of edges whose endpoints differ in colour.
    Vertices of high degree keep per-colour weight sums of their neighbours so
    that a recolouring never scans more than about the square root of n edges.
    """

    def __init__(
        self, colors: Sequence[int], edges: Iterable[tuple[int, int, int]]
    ) -> None:
        self._colors = list(colors)
        n = len(self._colors)
        self._adjacent: list[list[tuple[int, int]]] = [[] for _ in range(n)]
        self._cost = 0
        for u, v, weight in edges:
            if not (0 <= u < n and 0 <= v < n):
                raise IndexError("edge endpoint out of range")
            self._adjacent[u].append((v, weight))
            self._adjacent[v].append((u, weight))
            if self._colors[u] != self._colors[v]:
                self._cost += weight
        self._threshold = math.isqrt(n) + 5
        self._heavy_sums: dict[int, defaultdict[int, int]] = {}
        self._heavy_neighbours: list[list[tuple[int, int]]] = [[] for _ in range(n)]
        for vertex, neighbours in enumerate(self._adjacent):
            if len(neighbours) >= self._threshold:
                sums: defaultdict[int, int] = defaultdict(int)
                for other, weight in neighbours:
                    sums[self._colors[other]] += weight
                    self._heavy_neighbours[other].append((vertex, weight))
                self._heavy_sums[vertex] = sums

    @property
    def cost(self) -> int:
        """Total weight of edges joining vertices of different colours."""
        return self._cost

    @property
    def colors(self) -> tuple[int, ...]:
        """Current colour of every vertex."""
        return tuple(self._colors)

    def recolor(self, vertex: int, color: int) -> int:
        """Give ``vertex`` a new colour and return the updated cost."""
        if not 0 <= vertex < len(self._colors):
            raise IndexError("vertex out of range")
        old = self._colors[vertex]
        if old == color:
            return self._cost
        sums = self._heavy_sums.get(vertex)
        if sums is not None:
            self._cost += sums[old] - sums[color]
        else:
            for other, weight in self._adjacent[vertex]:
                if self._colors[other] == old:
                    self._cost += weight
                elif self._colors[other] == color:
                    self._cost -= weight
        self._colors[vertex] = color
        for heavy, weight in self._heavy_neighbours[vertex]:
            heavy_sums = self._heavy_sums[heavy]
            heavy_sums[old] -= weight
            heavy_sums[color] += weight
        return self._cost


def main(argv: list[str] | None = None) -> int:
    """Read test cases of a tree and recolour queries; print the cost after each."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default="-")
    args = parser.parse_args(argv)
    with args.input as stream:
        tokens = iter(stream.read().split())
    for _ in range(int(next(tokens))):
        n, q = int(next(tokens)), int(next(tokens))
        colors = [int(next(tokens)) for _ in range(n)]
        edges = [
            (int(next(tokens)) - 1, int(next(tokens)) - 1, int(next(tokens)))
            for _ in range(n - 1)
        ]
        tree = ColoredTree(colors, edges)
        for _ in range(q):
            vertex, color = int(next(tokens)) - 1, int(next(tokens))
            print(tree.recolor(vertex, color))
    return 0


if __name__ == "__main__":
    sys.exit(main())