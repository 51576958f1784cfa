"""Prime sieving, primality testing, factorisation and modular arithmetic."""

from __future__ import annotations

import argparse
import random
import sys
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence

_MILLER_BASES = (2, 325, 9375, 28178, 450775, 9780504, 1795265022)
DEFAULT_SIEVE_LIMIT = 2_000_000


class PrimeSieve:
    """Linear sieve recording the primes and smallest prime factors up to a limit."""

    def __init__(self, limit: int) -> None:
        if limit < 1:
            raise ValueError("sieve limit must be positive")
        self.limit = limit
        smallest = [0] * (limit + 1)
        primes: list[int] = []
        for i in range(2, limit + 1):
            if smallest[i] == 0:
                smallest[i] = i
                primes.append(i)
            for p in primes:
                prod = p * i
                if prod > limit:
                    break
                smallest[prod] = p
                if i % p == 0:
                    break
        self._smallest = smallest
        self.primes = primes

    def _check(self, n: int) -> None:
        if n > self.limit:
            raise ValueError(f"{n} exceeds sieve limit {self.limit}")

    def is_prime(self, n: int) -> bool:
        """Return whether ``n`` (at most the limit) is prime."""
        self._check(n)
        return n >= 2 and self._smallest[n] == n

    def smallest_factor(self, n: int) -> int:
        """Return the smallest prime factor of ``n``, for 2 <= n <= limit."""
        self._check(n)
        if n < 2:
            raise ValueError("smallest factor is defined for n >= 2")
        return self._smallest[n]


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(d, x, y)`` with ``d = gcd(a, b) = a*x + b*y``."""
    x0, y0, x1, y1 = 1, 0, 0, 1
    while b:
        q = a // b
        a, b = b, a - q * b
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    return a, x0, y0


def mod_pow(a: int, x: int, mod: int) -> int:
    """Return ``a ** x % mod`` by repeated squaring; ``x`` of 0 gives 1."""
    if x < 0:
        raise ValueError("exponent must not be negative")
    if x == 0:
        return 1
    return pow(a, x, mod)


def is_prime(n: int, sieve: PrimeSieve | None = None) -> bool:
    """Deterministic Miller-Rabin for 64-bit ``n``, using ``sieve`` when it covers ``n``."""
    if n < 2:
        return False
    if sieve is not None and n <= sieve.limit:
        return sieve.is_prime(n)
    if n % 2 == 0:
        return n == 2
    u, t = n - 1, 0
    while u % 2 == 0:
        u //= 2
        t += 1
    for a in _MILLER_BASES:
        x = pow(a, u, n)
        if x in (0, 1, n - 1):
            continue
        for i in range(1, t + 1):
            x = x * x % n
            if x == n - 1 and i != t:
                x = 1
                break
            if x == 1:
                return False
        if x != 1:
            return False
    return True


def pollard_rho(n: int, rng: random.Random | None = None) -> int:
    """Return a non-trivial factor of the composite ``n``."""
    if n < 4 or is_prime(n):
        raise ValueError(f"{n} is not composite")
    rng = rng if rng is not None else random.Random()
    while True:
        factor = _rho_attempt(n, rng.randint(1, n - 1))
        if 1 < factor < n:
            return factor


def _rho_attempt(n: int, c: int) -> int:
    left = right = 0
    k = 1
    while True:
        prod = 1
        for i in range(1, k + 1):
            right = (right * right + c) % n
            prod = prod * abs(right - left) % n
            if i % 127 == 0:
                d = gcd(prod, n)
                if d > 1:
                    return d
        d = gcd(prod, n)
        if d > 1:
            return d
        k <<= 1
        left = right


def factorize(n: int, sieve: PrimeSieve | None = None) -> dict[int, int]:
    """Return the prime factorisation of ``n`` as ``{prime: exponent}`` in prime order."""
    if n < 1:
        raise ValueError("only positive integers can be factorised")
    factors: Counter[int] = Counter()
    rng = random.Random()
    pending = [n]
    while pending:
        m = pending.pop()
        if m == 1:
            continue
        if sieve is not None and m <= sieve.limit:
            while m > 1:
                p = sieve.smallest_factor(m)
                m //= p
                factors[p] += 1
        elif is_prime(m, sieve):
            factors[m] += 1
        else:
            d = pollard_rho(m, rng)
            pending.extend((m // d, d))
    return dict(sorted(factors.items()))


def factor_signature(factors: Mapping[int, int], z: int) -> str:
    """Text key of the exponents reduced modulo ``z``, like ``1*2^1*3^2``."""
    parts = ["1"]
    for p, e in sorted(factors.items()):
        reduced = e % z
        if reduced:
            parts.append(f"{p}^{reduced}")
    return "*".join(parts)


def complement(factors: Mapping[int, int], z: int) -> dict[int, int]:
    """Exponents that would lift each prime to a multiple of ``z``."""
    return {
        p: z - e % z for p, e in sorted(factors.items()) if e % z
    }


def count_triples(
    numbers: Sequence[int], z: int, sieve: PrimeSieve | None = None
) -> int:
    """Count unordered triples of distinct positions whose product is a perfect ``z``-th power."""
    if z < 1:
        raise ValueError("z must be positive")
    factored = [factorize(x, sieve) for x in numbers]
    signatures = [factor_signature(f, z) for f in factored]
    tally = Counter(signatures)
    total = 0
    for i, fi in enumerate(factored):
        for j in range(i + 1, len(factored)):
            combined = Counter(fi)
            combined.update(factored[j])
            wanted = factor_signature(complement(combined, z), z)
            count = tally.get(wanted, 0)
            count -= wanted == signatures[i]
            count -= wanted == signatures[j]
            total += count
    return total // 3


def _read_ints(tokens: Iterable[str]) -> list[int]:
    try:
        return [int(t) for t in tokens]
    except ValueError as exc:
        raise SystemExit(f"invalid integer input: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n z`` and ``n`` numbers from standard input and print the triple count."""
    parser = argparse.ArgumentParser(
        description="Count triples whose product is a perfect z-th power."
    )
    parser.add_argument(
        "--sieve-limit", type=int, default=DEFAULT_SIEVE_LIMIT,
        help="upper bound of the prime sieve",
    )
    args = parser.parse_args(argv)
    values = _read_ints(sys.stdin.read().split())
    if len(values) < 2:
        raise SystemExit("expected n and z")
    n, z = values[0], values[1]
    numbers = values[2:2 + n]
    if len(numbers) != n:
        raise SystemExit(f"expected {n} numbers, got {len(numbers)}")
    sieve = PrimeSieve(args.sieve_limit)
    print(count_triples(numbers, z, sieve))
    return 0