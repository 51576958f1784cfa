import io
import math
import random
from itertools import combinations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from algokit.number_theory import (
    PrimeSieve,
    complement,
    count_triples,
    extended_gcd,
    factor_signature,
    factorize,
    gcd,
    is_prime,
    main,
    mod_pow,
    pollard_rho,
)

SIEVE = PrimeSieve(10_000)


def _naive_prime(n):
    return n >= 2 and all(n % d for d in range(2, math.isqrt(n) + 1))


def _is_perfect_power(value, z):
    root = round(value ** (1 / z))
    return any((root + d) ** z == value for d in (-1, 0, 1) if root + d >= 0)


def test_sieve_agrees_with_trial_division():
    assert [n for n in range(200) if SIEVE.is_prime(n)] == [
        n for n in range(200) if _naive_prime(n)
    ]


def test_sieve_smallest_factor_divides():
    for n in range(2, 2000):
        p = SIEVE.smallest_factor(n)
        assert n % p == 0 and _naive_prime(p)


def test_sieve_rejects_out_of_range():
    with pytest.raises(ValueError):
        SIEVE.is_prime(10_001)
    with pytest.raises(ValueError):
        SIEVE.smallest_factor(1)


def test_extended_gcd_worked_example():
    assert extended_gcd(25, 18) == (1, -5, 7)


@given(st.integers(0, 10**12), st.integers(0, 10**12))
def test_extended_gcd_bezout(a, b):
    d, x, y = extended_gcd(a, b)
    assert d == gcd(a, b) == math.gcd(a, b)
    assert a * x + b * y == d


@given(st.integers(0, 10**9), st.integers(0, 200), st.integers(2, 10**9))
def test_mod_pow_matches_builtin(a, x, m):
    assert mod_pow(a, x, m) == pow(a, x, m)


def test_mod_pow_zero_exponent_and_negative():
    assert mod_pow(7, 0, 1) == 1
    with pytest.raises(ValueError):
        mod_pow(2, -1, 5)


@pytest.mark.parametrize("use_sieve", [True, False])
def test_is_prime_small_range(use_sieve):
    sieve = SIEVE if use_sieve else None
    assert [n for n in range(500) if is_prime(n, sieve)] == [
        n for n in range(500) if _naive_prime(n)
    ]


def test_is_prime_large_values():
    assert is_prime(1_000_000_007)
    assert is_prime(2**61 - 1)
    assert not is_prime(1_000_000_007 * 998_244_353)


def test_pollard_rho_semiprime():
    n = 1_000_000_007 * 998_244_353
    d = pollard_rho(n, random.Random(1))
    assert d in (1_000_000_007, 998_244_353)


def test_pollard_rho_rejects_prime():
    with pytest.raises(ValueError):
        pollard_rho(97)


@settings(max_examples=60)
@given(st.integers(1, 10**13))
def test_factorize_round_trip(n):
    for sieve in (None, SIEVE):
        factors = factorize(n, sieve)
        assert math.prod(p**e for p, e in factors.items()) == n
        assert all(is_prime(p) for p in factors)
        assert list(factors) == sorted(factors)


def test_factorize_rejects_zero():
    with pytest.raises(ValueError):
        factorize(0)


def test_factor_signature_format():
    assert factor_signature({2: 3, 3: 1}, 2) == "1*2^1*3^1"
    assert factor_signature({5: 4}, 2) == "1"


def test_complement_completes_power():
    factors = {2: 3, 3: 1, 7: 6}
    comp = complement(factors, 3)
    assert 7 not in comp
    for p, e in comp.items():
        assert (factors[p] + e) % 3 == 0


def test_count_triples_cube():
    assert count_triples([2, 8, 4], 3, SIEVE) == 1


@settings(max_examples=40)
@given(st.lists(st.integers(1, 60), max_size=8), st.integers(1, 4))
def test_count_triples_matches_brute_force(numbers, z):
    expected = sum(
        1 for a, b, c in combinations(numbers, 3) if _is_perfect_power(a * b * c, z)
    )
    assert count_triples(numbers, z, SIEVE) == expected


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 3\n2 8 4\n"))
    assert main(["--sieve-limit", "100"]) == 0
    assert capsys.readouterr().out.strip() == "1"


def test_main_rejects_short_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 2\n1 2\n"))
    with pytest.raises(SystemExit):
        main(["--sieve-limit", "100"])