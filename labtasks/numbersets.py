"""Sorting the integers of a range into multiples of three, primes and composites."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Classification:
    """The numbers of a range grouped by kind."""

    multiples_of_three: frozenset[int]
    primes: frozenset[int]
    composites: frozenset[int]


def is_prime(n: int) -> bool:
    """Return whether n is a prime number."""
    if n <= 1:
        return False
    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True


def classify_range(start: int, stop: int) -> Classification:
    """Classify every integer from start to stop, both included.

    Numbers above one that are not prime count as composite.
    """
    numbers = range(start, stop + 1)
    primes = frozenset(n for n in numbers if is_prime(n))
    return Classification(
        multiples_of_three=frozenset(n for n in numbers if n % 3 == 0),
        primes=primes,
        composites=frozenset(n for n in numbers if n > 1 and n not in primes),
    )


def format_numbers(numbers: Iterable[int]) -> str:
    """Return the numbers in ascending order, separated by single spaces."""
    return " ".join(str(n) for n in sorted(numbers))