# primes.py
from __future__ import annotations

from sympy import isprime, primerange


def is_prime(n: int) -> bool:
    return n >= 2 and bool(isprime(n))


def primes_up_to(limit: int) -> list[int]:
    """All primes p with 2 <= p <= limit."""
    if limit < 2:
        return []
    return [int(p) for p in primerange(2, int(limit) + 1)]
