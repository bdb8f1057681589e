# -----------------------------------------------------------------------------
#  factorization.py
#  Prime factorization, reconstruction and display formatting
# -----------------------------------------------------------------------------

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

import gmpy2
from sympy import factorint

from primegraph.runtime import CFG
from primegraph.utility import UserInputError


class PrimeFactor(NamedTuple):
    prime: int
    exponent: int


# The factorization of 1. Prime 1 is not a prime: it stands for the
# multiplicative identity (the colorless node).
SENTINEL = PrimeFactor(1, 1)

_SUPERSCRIPTS = str.maketrans("0123456789", "⁰¹²³⁴⁵⁶⁷⁸⁹")


def check_bit_length(n: int) -> int:
    """
    Refuse integers longer than FACTORING.BITLEN_CAP bits (0 disables the cap).
    Applied where a user types an integer, never inside the graph operations.
    """
    cap = int(CFG("FACTORING.BITLEN_CAP", 256))
    if cap > 0 and n.bit_length() > cap:
        raise UserInputError(
            f"number has {n.bit_length()} bits, more than FACTORING.BITLEN_CAP "
            f"({cap}). Increase the cap in the profile."
        )
    return n


def _trial_factor(n: int) -> list[PrimeFactor]:
    """Plain trial division: 2 first, then odd divisors up to √(remaining value)."""
    out: list[PrimeFactor] = []
    count = 0
    while n % 2 == 0:
        n //= 2
        count += 1
    if count:
        out.append(PrimeFactor(2, count))

    d = 3
    while d * d <= n:
        count = 0
        while n % d == 0:
            n //= d
            count += 1
        if count:
            out.append(PrimeFactor(d, count))
        d += 2

    # Whatever survives the loop is itself prime
    if n > 1:
        out.append(PrimeFactor(n, 1))
    return out


def factorize(n: int) -> list[PrimeFactor]:
    """
    Factor a non-negative integer into (prime, exponent) pairs, ascending by prime.

    - factorize(0) == []           (0 has no factorization)
    - factorize(1) == [(1, 1)]     (the sentinel)

    The engine is chosen by FACTORING.METHOD ("sympy" or "trial"); both give
    the same result. No size limit here: see check_bit_length for user input.
    """
    n = int(n)
    if n < 0:
        raise ValueError(f"cannot factor a negative number: {n}")
    if n == 0:
        return []
    if n == 1:
        return [SENTINEL]

    if CFG("FACTORING.METHOD", "sympy") == "trial":
        return _trial_factor(n)
    return [PrimeFactor(int(p), int(e)) for p, e in sorted(factorint(n).items())]


def reconstruct_number(factors: Iterable[PrimeFactor | tuple[int, int]]) -> int:
    """Product of p**e over the factors; the empty factorization is 0."""
    factors = list(factors)
    if not factors:
        return 0
    acc = gmpy2.mpz(1)
    for p, e in factors:
        acc *= gmpy2.mpz(p) ** int(e)
    return int(acc)


def superscript(n: int) -> str:
    return str(n).translate(_SUPERSCRIPTS)


def format_factorization(factors: Iterable[PrimeFactor | tuple[int, int]]) -> str:
    """
    Render factors in the given order as '5¹ × 3² × 2³', skipping the sentinel.
    Empty → "0"; sentinel only → "1".
    """
    factors = list(factors)
    if not factors:
        return "0"
    parts = [f"{p}{superscript(e)}" for p, e in factors if p != 1]
    return " × ".join(parts) if parts else "1"


def by_prime_descending(factors: Iterable[PrimeFactor]) -> list[PrimeFactor]:
    return sorted(factors, key=lambda f: f.prime, reverse=True)
