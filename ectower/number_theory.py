#!/usr/bin/env python3

# Copyright (C) 2026 The ectower developers
#
# This file is part of ectower. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectower including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Number theory and modular arithmetic functions on plain integers.

Implementations originally from
https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
and
https://codereview.stackexchange.com/questions/43210/tonelli-shanks-algorithm-implementation-of-prime-modular-square-root/43267
with the following modifications:

* type annotated python3
* NonInvertibleError for missing inverses
* n-th roots of unity
"""

from math import gcd
from typing import List, Tuple

from ectower.exceptions import (
    ECTowerRuntimeError,
    ECTowerValueError,
    NonInvertibleError,
)
from ectower.utils import int_repr

# bases for the Miller-Rabin test:
# deterministic for n < 3.3 * 10^24, probabilistic above
_MR_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)


def is_prime(n: int) -> bool:
    "Return True if n is a (probable) prime, using the Miller-Rabin test."

    if n < 2:
        return False
    for p in _MR_BASES:
        if n % p == 0:
            return n == p

    # n - 1 = d * 2^s with d odd
    d, s = n - 1, 0
    while d & 1 == 0:
        d >>= 1
        s += 1

    for a in _MR_BASES:
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = x * x % n
            if x == n - 1:
                break
        else:
            return False
    return True


def prime_factors(n: int) -> List[int]:
    "Return the sorted distinct prime factors of n, by trial division."

    if n < 1:
        raise ECTowerValueError(f"not a positive integer: {n}")
    factors: List[int] = []
    d = 2
    while d * d <= n:
        if n % d == 0:
            factors.append(d)
            while n % d == 0:
                n //= d
        d += 1 if d == 2 else 2
    if n > 1:
        factors.append(n)
    return factors


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) such that a*x + b*y = g = gcd(x, y).

    based on Extended Euclidean Algorithm, see
    https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
    """

    x0, x1, y0, y1 = 0, 1, 1, 0
    while a != 0:
        q, b, a = b // a, a, b % a
        y0, y1 = y1, y0 - q * y1
        x0, x1 = x1, x0 - q * x1
    return b, x0, y0


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m). m does not have to be a prime.

    Based on Extended Euclidean Algorithm, see:
    https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
    """

    a %= m
    g, x, _ = xgcd(a, m)
    if g == 1:
        return x % m
    raise NonInvertibleError(f"No inverse for {int_repr(a)} mod {int_repr(m)}")


def legendre_symbol(a: int, p: int) -> int:
    """Compute the Legendre symbol a|p using Euler's criterion.

    p is a prime, a is relatively prime to p (if p divides a,
    then a|p = 0).
    It returns 1 if a has a square root modulo p, -1 otherwise.
    """

    ls = pow(a, p >> 1, p)
    return -1 if ls == p - 1 else ls


def mod_sqrt(a: int, p: int) -> int:
    """Return a quadratic residue (mod p) of a; p must be a prime.

    Solve the equation:
        x^2 = a mod p

    and return x. Note that p - x is also a root.

    If a simple solution is not available for p,
    then the Tonelli-Shanks algorithm is used.
    """

    a %= p

    if p % 4 == 3:
        # inverse candidate is pow(a, (p + 1) // 4, p)
        r = pow(a, (p >> 2) + 1, p)
    elif p % 8 == 5:
        # inverse candidate is pow(a, (p + 3) // 8, p)
        r = pow(a, (p >> 3) + 1, p)
        if r * r % p == a:
            return r
        # another inverse candidate
        r = r * pow(2, p >> 2, p) % p
    else:
        return tonelli(a, p)

    if r * r % p != a:
        raise ECTowerValueError(f"no root for {int_repr(a)} mod {int_repr(p)}")
    return r


def tonelli(a: int, p: int) -> int:
    """Return a quadratic residue (mod p) of a; p must be a prime.

    The Tonelli-Shanks algorithm is used.
    """

    a %= p
    if a == 0 or p == 2:
        return a

    # Check solution existence for an odd prime p
    if legendre_symbol(a, p) != 1:
        raise ECTowerValueError(f"no root for {int_repr(a)} mod {int_repr(p)}")

    # Factor p-1 on the form q * 2^s (with q odd)
    q, s = p - 1, 0
    while q & 1 == 0:
        s += 1
        q >>= 1
    if s == 1:
        return pow(a, (p + 1) // 4, p)

    # Select a z which is a quadratic non residue modulo p
    z = 1
    while legendre_symbol(z, p) != -1:
        z += 1
    c = pow(z, q, p)
    r = pow(a, (q + 1) // 2, p)
    t = pow(a, q, p)
    while t != 1:
        # Find the lowest i such that t^(2^i) = 1
        t2i = t
        for i in range(1, s):
            t2i = t2i * t2i % p
            if t2i == 1:
                # Update next value to iterate
                b = pow(c, 1 << (s - i - 1), p)
                r = (r * b) % p
                c = (b * b) % p
                t = (t * c) % p
                s = i
                break

    return r


def primitive_root_of_unity(n: int, p: int) -> int:
    """Return a primitive n-th root of unity mod the prime p.

    It exists only if n divides p - 1.
    The smallest candidate g = 2, 3, ... is used,
    so that the result is deterministic.
    """

    if n < 1:
        raise ECTowerValueError(f"non positive n: {n}")
    if (p - 1) % n != 0:
        err_msg = f"no primitive {n}-th root of unity mod {int_repr(p)}"
        raise ECTowerValueError(err_msg)
    if n == 1:
        return 1

    factors = prime_factors(n)
    for g in range(2, p):
        z = pow(g, (p - 1) // n, p)
        # z^n = 1; z is primitive if no z^(n/r) is 1
        if all(pow(z, n // r, p) != 1 for r in factors):
            return z
    # unreachable for a prime p
    raise ECTowerRuntimeError(f"not a prime: {int_repr(p)}")


def roots_of_unity(n: int, p: int) -> List[int]:
    """Return all the n-th roots of unity mod the prime p, sorted.

    They are the gcd(n, p-1)-th roots of unity,
    i.e. the powers of a primitive gcd(n, p-1)-th root.
    """

    if n < 1:
        raise ECTowerValueError(f"non positive n: {n}")
    m = gcd(n, p - 1)
    z = primitive_root_of_unity(m, p)
    roots = [1]
    for _ in range(m - 1):
        roots.append(roots[-1] * z % p)
    return sorted(roots)
