"""
Reference prime generators.

Responsibility: independent answers to check the odd sieve against.
Nothing here is tuned; clarity over speed.
"""

from math import isqrt
from typing import List

import numpy as np


def is_prime(n: int) -> bool:
    """Trial division by every d in 2..isqrt(n)."""
    if n < 2:
        return False
    for d in range(2, isqrt(n) + 1):
        if n % d == 0:
            return False
    return True


def primes_by_trial_division(bound: int) -> List[int]:
    """Return all primes <= bound by testing each integer separately."""
    return [n for n in range(2, bound + 1) if is_prime(n)]


def prime_flags_upto(N: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Classic sieve over every index, even ones included.

    Parameters
    ----------
    N : int
        Upper bound (inclusive). Must be >= 0.

    Returns
    -------
    np.ndarray
        Boolean array of length N+1.
    """
    flags = np.ones(N + 1, dtype=bool)
    flags[:2] = False
    for p in range(2, isqrt(N) + 1):
        if flags[p]:
            flags[p*p::p] = False
    return flags


def primes_upto(N: int) -> List[int]:
    """Return all primes <= N from the classic sieve."""
    if N < 2:
        return []
    return np.nonzero(prime_flags_upto(N))[0].tolist()
