"""Primality, prime factorisation and counts of distinct prime factors."""

from __future__ import annotations

from collections.abc import Iterable
from math import isqrt
from typing import Optional

MAX_VALUES = 1000


def is_prime(n: int) -> bool:
    """Return True if ``n`` has exactly two positive divisors."""
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0:
        return False
    return all(n % d for d in range(3, isqrt(n) + 1, 2))


def next_prime(prime: int, limit: int) -> Optional[int]:
    """Return the smallest prime greater than ``prime`` and not above ``limit``,
    or None if there is none."""
    candidate = prime + 1
    while candidate <= limit:
        if is_prime(candidate):
            return candidate
        candidate += 1
    return None


def prime_factors(n: int) -> list[int]:
    """Return the prime factors of ``n`` in ascending order, with repeats.

    Numbers below 2 have no factors.
    """
    factors: list[int] = []
    divisor = 2
    while n >= 2:
        if is_prime(n):
            factors.append(n)
            break
        if n % divisor == 0:
            factors.append(divisor)
            n //= divisor
        else:
            found = next_prime(divisor, n)
            if found is None:
                break
            divisor = found
    return factors


def count_distinct_prime_factors(n: int) -> int:
    """Return how many different primes divide ``n``."""
    factors = prime_factors(n)
    if not factors:
        raise ValueError(f"{n} has no prime factors")
    return len(set(factors))


def distinct_prime_factor_counts(values: Iterable[int]) -> list[int]:
    """Count the distinct prime factors of each of 1 to 1000 values."""
    items = list(values)
    if not 1 <= len(items) <= MAX_VALUES:
        raise ValueError(f"expected between 1 and {MAX_VALUES} values, got {len(items)}")
    return [count_distinct_prime_factors(value) for value in items]