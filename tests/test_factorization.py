# tests/test_factorization.py
"""
Tests for the prime factorization engine.

Run: pytest -v
"""

from __future__ import annotations

import pytest

from primegraph.factorization import (
    SENTINEL,
    PrimeFactor,
    check_bit_length,
    factorize,
    format_factorization,
    reconstruct_number,
    superscript,
)
from primegraph.primes import is_prime, primes_up_to
from primegraph.runtime import APPLY
from primegraph.utility import UserInputError

FACTOR_CASES = [
    (2,    [(2, 1)]),
    (12,   [(2, 2), (3, 1)]),
    (97,   [(97, 1)]),
    (360,  [(2, 3), (3, 2), (5, 1)]),
    (1694, [(2, 1), (7, 1), (11, 2)]),
    (1024, [(2, 10)]),
    (2**61 - 1, [(2**61 - 1, 1)]),
    (600851475143, [(71, 1), (839, 1), (1471, 1), (6857, 1)]),
]


@pytest.mark.parametrize("n,expected", FACTOR_CASES, ids=[str(n) for n, _ in FACTOR_CASES])
def test_factorize_ascending(n, expected):
    assert factorize(n) == [PrimeFactor(p, e) for p, e in expected]


def test_factorize_zero_and_one():
    assert factorize(0) == []
    assert factorize(1) == [SENTINEL]
    assert SENTINEL == (1, 1)


def test_factorize_negative_rejected():
    with pytest.raises(ValueError):
        factorize(-6)


def test_trial_division_agrees_with_sympy():
    expected = {n: factorize(n) for n in range(2, 600)}
    APPLY({"FACTORING": {"METHOD": "trial"}})
    for n, fac in expected.items():
        assert factorize(n) == fac, n


def test_bitlen_cap_refuses_big_typed_numbers():
    APPLY({"FACTORING": {"BITLEN_CAP": 16}})
    assert check_bit_length(2**16 - 1) == 2**16 - 1
    with pytest.raises(UserInputError):
        check_bit_length(2**20)


def test_factorize_ignores_bitlen_cap():
    APPLY({"FACTORING": {"BITLEN_CAP": 16}})
    assert factorize(2**20) == [(2, 20)]
    assert factorize(3**200) == [(3, 200)]


def test_bitlen_cap_zero_disables():
    APPLY({"FACTORING": {"BITLEN_CAP": 0}})
    assert check_bit_length(2**1000) == 2**1000


@pytest.mark.parametrize("n", [0, 1, 2, 17, 360, 1694, 10**12 + 39])
def test_reconstruct_inverts_factorize(n):
    assert reconstruct_number(factorize(n)) == n


def test_reconstruct_conventions():
    assert reconstruct_number([]) == 0
    assert reconstruct_number([SENTINEL]) == 1
    assert reconstruct_number([(3, 2), (2, 1)]) == 18
    assert type(reconstruct_number([(2, 100)])) is int
    assert reconstruct_number([(2, 100)]) == 2**100


FORMAT_CASES = [
    ([], "0"),
    ([(1, 1)], "1"),
    ([(2, 1)], "2¹"),
    ([(3, 2), (2, 1)], "3² × 2¹"),
    ([(1, 1), (5, 3)], "5³"),
    ([(2, 12)], "2¹²"),
]


@pytest.mark.parametrize("factors,text", FORMAT_CASES, ids=[t for _, t in FORMAT_CASES])
def test_format_factorization(factors, text):
    assert format_factorization(factors) == text


def test_superscript_digits():
    assert superscript(1234567890) == "¹²³⁴⁵⁶⁷⁸⁹⁰"


def test_prime_helpers():
    assert primes_up_to(1) == []
    assert primes_up_to(30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
    assert is_prime(13)
    assert not is_prime(1)
    assert not is_prime(91)
