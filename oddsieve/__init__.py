"""
Odd-only Sieve of Eratosthenes.
"""

from .sieve import primes_up_to, primes_up_to_compact

__all__ = ['primes_up_to', 'primes_up_to_compact']
