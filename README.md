# roundsolve

Solvers for five problems from one programming contest round, plus a set of
number theory helpers. Each solver is a plain function and also a command
that reads the contest input format and prints one answer per test case.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

Every command reads whitespace-separated tokens from the file named as its
only argument, or from standard input when no file (or `-`) is given. The
first token is the number of test cases.

| Command | Input per test case | Output per test case |
| --- | --- | --- |
| `roundsolve-min-digit` | `n` | smallest decimal digit of `n` |
| `roundsolve-zero-runs` | `n k`, then `n` values | sum of `(len + 1) // (k + 1)` over zero runs of length at least `k` |
| `roundsolve-climb` | `n k`, then `n` heights (`k` is 1-based) | `YES` or `NO` |
| `roundsolve-portals` | `n k`, then `n` lines `l r value` | most coins reachable from `k` |
| `roundsolve-tree-colors` | `n q`, `n` colours, `n - 1` edges `u v weight` (1-based), then `q` queries `vertex colour` (1-based vertex) | the cost after each query, one per line |

Example:

```
printf '2\n123\n907\n' | roundsolve-min-digit
```

prints

```
1
0
```

## Library use

```python
from roundsolve.min_digit import min_digit
from roundsolve.zero_runs import count_placements
from roundsolve.climb import can_reach_top
from roundsolve.portals import Portal, max_coins, DisjointSet
from roundsolve.tree_colors import ColoredTree

min_digit(907)                              # 0
count_placements([0, 0, 0, 1, 0], 1)        # 3
can_reach_top([5, 3, 2, 6], 2)              # True
max_coins(1, [Portal(1, 2, 5)])             # 5
```

- `can_reach_top(heights, start)` takes a zero-based start index. Taller
  towers are visited in increasing order of height; each jump costs the
  height difference, and the total time must never exceed the height of the
  tower being left. An out-of-range start raises `IndexError`.
- `max_coins(start, portals)` goes through the portals sorted by
  `(left, right)` and takes a portal's `value` whenever the current count
  lies in `[left, right]` and the value is larger.
- `DisjointSet(n)` is a union-find over `0 .. n-1` with `find(x)`,
  `union(x, y)` (returns `False` if already joined), `size(x)` and `len()`.
- `ColoredTree(colors, edges)` takes colours and zero-based edges
  `(u, v, weight)`. Its `cost` property is the total weight of edges whose
  endpoints differ in colour, `colors` gives the current colours, and
  `recolor(vertex, color)` updates a vertex and returns the new cost.
  High-degree vertices keep per-colour weight sums so that a query does not
  scan all their edges.

### Number theory

`roundsolve.numtheory` provides, with `MOD = 1_000_000_007`:

- `is_probable_prime(n)`: deterministic Miller–Rabin, exact for 64-bit values
- `is_prime(n)`: trial division over `6k ± 1`
- `sieve(n)`: list of prime flags for `0..n` (`n >= 1`, else `ValueError`)
- `prime_factors(n)`: distinct prime factors in increasing order
- `multiplicity(n, d)`: how many times `d` divides `n`
- `ext_gcd(a, b)`: returns `(g, x, y)` with `a*x + b*y == g`
- `lcm(a, b)`
- `mod_pow(a, p, m=INF)`: `a**p % m`, where `INF = 2 * 10**18`; `p == 0` gives 1
- `mod_add`, `mod_sub`, `mod_mul`, `mod_div`: arithmetic modulo `MOD`
  (`mod_div` uses Fermat's inverse)
- `factorials(n)`: the first `n` factorials `0!, 1!, ...` modulo `MOD`
- `solve_linear_2var(a1, b1, c1, a2, b2, c2)`: integer solution `(x, y)` of
  two linear equations, `None` when there is no integer solution; a zero
  determinant or zero `a1` raises `ZeroDivisionError`

These helpers are library functions only; there is no command for them.