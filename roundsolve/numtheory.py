"""Number-theory helpers: primality, factorisation, gcd and modular arithmetic."""

from __future__ import annotations

import math

MOD = 10**9 + 7
INF = 2 * 10**18

_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _tmod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _tdiv(a, b)


def _is_composite_witness(n: int, a: int, d: int, s: int) -> bool:
    x = pow(a, d, n)
    if x in (1, n - 1):
        return False
    for _ in range(1, s):
        x = x * x % n
        if x == n - 1:
            return False
    return True


def is_probable_prime(n: int) -> bool:
    """Deterministic Miller-Rabin test, exact for all 64-bit integers."""
    if n < 2:
        return False
    d, r = n - 1, 0
    while d % 2 == 0:
        d //= 2
        r += 1
    for a in _WITNESSES:
        if n == a:
            return True
        if _is_composite_witness(n, a, d, r):
            return False
    return True


def is_prime(n: int) -> bool:
    """Primality by trial division over numbers of the form 6k +/- 1."""
    if n < 2:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    return not any(n % i == 0 or n % (i + 2) == 0 for i in range(5, n // 2 + 1, 6))


def sieve(n: int) -> list[bool]:
    """Return a list whose entry i tells whether i is prime, for 0 <= i <= n."""
    if n < 1:
        raise ValueError("sieve needs n >= 1")
    flags = [True] * (n + 1)
    flags[0] = flags[1] = False
    i = 2
    while i * i <= n:
        if flags[i]:
            flags[i * i :: i] = [False] * len(range(i * i, n + 1, i))
        i += 1
    return flags


def prime_factors(n: int) -> list[int]:
    """Distinct prime factors of n in increasing order."""
    if n < 1:
        raise ValueError("prime_factors needs a positive integer")
    factors = []
    if n % 2 == 0:
        factors.append(2)
        while n % 2 == 0:
            n //= 2
    i = 3
    while i * i <= n:
        if n % i == 0:
            factors.append(i)
            while n % i == 0:
                n //= i
        i += 2
    if n > 2:
        factors.append(n)
    return factors


def multiplicity(n: int, d: int) -> int:
    """How many times d divides n."""
    if d in (0, 1, -1):
        raise ValueError("divisor must not be 0, 1 or -1")
    if n == 0:
        raise ValueError("zero is divisible by every divisor without limit")
    count = 0
    while _tmod(n, d) == 0:
        n = _tdiv(n, d)
        count += 1
    return count


def ext_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return (g, x, y) with a*x + b*y == g, g the gcd of a and b."""
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        q = _tdiv(old_r, r)
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def lcm(a: int, b: int) -> int:
    """Least common multiple of a and b."""
    g, _, _ = ext_gcd(a, b)
    return _tdiv(a * b, g)


def mod_pow(a: int, p: int, m: int = INF) -> int:
    """a to the power p modulo m; a zero exponent always gives 1."""
    if p < 0:
        raise ValueError("exponent must be non-negative")
    if p == 0:
        return 1
    return pow(a, p, m)


def mod_add(a: int, b: int) -> int:
    """(a + b) modulo MOD."""
    return (a % MOD + b % MOD) % MOD


def mod_sub(a: int, b: int) -> int:
    """(a - b) modulo MOD."""
    return (a % MOD - b % MOD + MOD) % MOD


def mod_mul(a: int, b: int) -> int:
    """(a * b) modulo MOD."""
    return (a % MOD) * (b % MOD) % MOD


def mod_div(a: int, b: int) -> int:
    """a divided by b modulo MOD, using Fermat's inverse of b."""
    return mod_mul(a, mod_pow(b, MOD - 2, MOD))


def factorials(n: int) -> list[int]:
    """The first n factorials 0!, 1!, ... modulo MOD."""
    if n < 0:
        raise ValueError("n must be non-negative")
    table = [1, 1]
    for i in range(2, n):
        table.append(mod_mul(i, table[-1]))
    return table[:n]


def solve_linear_2var(
    a1: int, b1: int, c1: int, a2: int, b2: int, c2: int
) -> tuple[int, int] | None:
    """Integer solution of a1*X + b1*Y = c1, a2*X + b2*Y = c2, or None."""
    numerator = c1 * a2 - c2 * a1
    determinant = b1 * a2 - b2 * a1
    if determinant == 0:
        raise ZeroDivisionError("the system has no unique solution")
    if _tmod(numerator, determinant):
        return None
    y = _tdiv(numerator, determinant)
    rest = c1 - b1 * y
    if a1 == 0:
        raise ZeroDivisionError("a1 must be non-zero")
    if _tmod(rest, a1):
        return None
    return _tdiv(rest, a1), y


__all__ = [
    "MOD",
    "INF",
    "is_probable_prime",
    "is_prime",
    "sieve",
    "prime_factors",
    "multiplicity",
    "ext_gcd",
    "lcm",
    "mod_pow",
    "mod_add",
    "mod_sub",
    "mod_mul",
    "mod_div",
    "factorials",
    "solve_linear_2var",
]