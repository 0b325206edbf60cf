"""
Tests for the reference generators the odd sieve is checked against.
"""

import numpy as np
import pytest

from oddsieve.reference import is_prime, primes_by_trial_division, prime_flags_upto, primes_upto


SMALL_PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]
SMALL_COMPOSITES = [4, 6, 8, 9, 10, 12, 14, 15, 16, 18, 20, 21, 22, 24, 25]


class TestIsPrime:

    def test_small_primes(self):
        for p in SMALL_PRIMES:
            assert is_prime(p)

    def test_small_composites(self):
        for n in SMALL_COMPOSITES:
            assert not is_prime(n)

    @pytest.mark.parametrize("n", [-7, 0, 1])
    def test_below_two(self, n):
        assert not is_prime(n)


class TestReferenceSieves:

    def test_trial_division_to_fifty(self):
        assert primes_by_trial_division(50) == SMALL_PRIMES

    def test_classic_flags(self):
        flags = prime_flags_upto(50)
        assert flags.dtype == bool
        assert len(flags) == 51
        assert np.nonzero(flags)[0].tolist() == SMALL_PRIMES

    @pytest.mark.parametrize("N", [0, 1])
    def test_classic_flags_tiny(self, N):
        assert not prime_flags_upto(N).any()

    def test_references_agree(self):
        for N in range(-2, 400):
            assert primes_upto(N) == primes_by_trial_division(N), f"N={N}"

    def test_prime_count(self):
        """There should be 25 primes <= 100."""
        assert len(primes_upto(100)) == 25
