"""
Odd-only Sieve of Eratosthenes.

Responsibility: prime generation only. No verification, no timing.

Even numbers > 2 are never prime, so 2 is emitted up front and the sieve
only ever reads or writes odd indices:
- candidates i = 3, 5, 7, ... while i*i <= bound
- multiples of i marked from i*i in steps of 2i (odd multiples only)

Two storage layouts are provided:
- primes_up_to: flags indexed directly by value, length bound+1
- primes_up_to_compact: flags for odd values only, length (bound-1)//2

Index mapping for the compact layout:
- Slot i   → 2i + 3
- Odd n    → (n - 3) // 2

For n=3: slot 0 ✓
For n=9: slot 3 ✓
"""

import operator
from math import isqrt
from typing import List

import numpy as np


def index_to_odd(i: int) -> int:
    """Convert compact slot to the odd number it stands for."""
    return 2 * i + 3


def odd_to_index(n: int) -> int:
    """Convert odd number n >= 3 to its compact slot."""
    if n < 3 or n % 2 == 0:
        raise ValueError(f"{n} is not an odd number >= 3")
    return (n - 3) // 2


def odd_composite_flags(bound: int) -> np.ndarray:
    """
    Mark odd composites up to bound.

    Parameters
    ----------
    bound : int
        Upper bound (inclusive). Must be >= 0.

    Returns
    -------
    np.ndarray
        Boolean array of length bound+1. flags[k] is True iff k is an odd
        composite. Even indices are left False and carry no meaning.
    """
    flags = np.zeros(bound + 1, dtype=bool)

    # isqrt keeps the loop condition exact for any int
    for i in range(3, isqrt(bound) + 1, 2):
        if not flags[i]:
            flags[i * i::2 * i] = True

    return flags


def primes_up_to(bound: int) -> List[int]:
    """
    Return all primes <= bound in ascending order.

    Parameters
    ----------
    bound : int
        Upper bound (inclusive). Any integer; values below 2 give [].

    Returns
    -------
    List[int]
        Ascending list of primes.

    Raises
    ------
    TypeError
        If bound is not an integer.
    """
    bound = operator.index(bound)
    if bound < 2:
        return []

    flags = odd_composite_flags(bound)

    primes = [2]
    odd_primes = np.flatnonzero(~flags[3::2]) * 2 + 3
    primes.extend(odd_primes.tolist())
    return primes


def primes_up_to_compact(bound: int) -> List[int]:
    """
    Same result as primes_up_to, with half the flag storage.

    Only odd values 3, 5, 7, ... are stored; see the module docstring for
    the slot mapping.
    """
    bound = operator.index(bound)
    if bound < 2:
        return []

    size = (bound - 1) // 2  # odd values in [3, bound]
    flags = np.zeros(size, dtype=bool)

    for i in range(3, isqrt(bound) + 1, 2):
        if not flags[odd_to_index(i)]:
            # consecutive slots are 2 apart in value, so a step of 2i is i slots
            flags[odd_to_index(i * i)::i] = True

    primes = [2]
    primes.extend((np.flatnonzero(~flags) * 2 + 3).tolist())
    return primes
