#!/usr/bin/env python3
"""
Verify the odd-only sieve produces identical results to the references.

Compares, for each configured bound:
1. primes_up_to (direct-index flags)
2. primes_up_to_compact (odd-only flags)
3. primes_upto (classic full sieve)
4. Trial division (small bounds only)

Then times each sieve at a single larger bound.

Usage:
    python -m oddsieve.verify
    python -m oddsieve.verify --config config/custom.yaml
    python -m oddsieve.verify --bound 1e7
"""

import argparse
import sys
import time
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Dict

import yaml

from .reference import primes_by_trial_division, primes_upto
from .sieve import primes_up_to, primes_up_to_compact

DEFAULT_CONFIG = Path(__file__).parent / 'config' / 'default.yaml'

SIEVES = {
    'odd': primes_up_to,
    'compact': primes_up_to_compact,
    'classic': primes_upto,
}


def load_config(path) -> dict:
    """Load a YAML config, checking the keys this script needs."""
    with open(path) as f:
        config = yaml.safe_load(f)

    for key in ('bounds', 'trial_limit', 'benchmark_bound'):
        if key not in config:
            raise ValueError(f"Config {path} is missing '{key}'")
    return config


def verify_bound(bound: int, trial_limit: int, verbose: bool = True) -> bool:
    """Check every implementation agrees at one bound."""
    expected = primes_up_to(bound)

    results = {name: fn(bound) for name, fn in SIEVES.items()}
    if bound <= trial_limit:
        results['trial'] = primes_by_trial_division(bound)

    ok = True
    for name, got in results.items():
        if got != expected:
            ok = False
            if verbose:
                only_other = sorted(set(got) - set(expected))[:10]
                only_odd = sorted(set(expected) - set(got))[:10]
                print(f"  ✗ N={bound:,}: '{name}' disagrees "
                      f"(only in {name}: {only_other}, only in odd: {only_odd})")

    # Ordering is not covered by comparing against the references alone
    if any(a >= b for a, b in zip(expected, expected[1:])):
        ok = False
        if verbose:
            print(f"  ✗ N={bound:,}: result is not strictly ascending")

    if verbose and ok:
        checked = ', '.join(results)
        print(f"  ✓ N={bound:,}: {len(expected):,} primes ({checked})")

    return ok


def parse_bound(text: str) -> int:
    """Parse a --bound value. Scientific notation is accepted only when exact."""
    try:
        value = Decimal(text)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid bound: {text!r}")
    if not value.is_finite() or value != value.to_integral_value():
        raise argparse.ArgumentTypeError(f"bound must be an integer: {text!r}")
    return int(value)


def benchmark(bound: int, verbose: bool = True) -> Dict[str, float]:
    """Time each sieve once at bound."""
    timings = {}
    for name, fn in SIEVES.items():
        t0 = time.time()
        fn(bound)
        timings[name] = time.time() - t0

    if verbose:
        print(f"\n=== Timing at N={bound:,} ===")
        for name, seconds in timings.items():
            print(f"  {name:<8} {seconds:>8.3f}s")

    return timings


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Verify odd-only sieve correctness')
    parser.add_argument('--config', type=str, default=str(DEFAULT_CONFIG),
                        help='Path to config file')
    parser.add_argument('--bound', type=parse_bound, default=None,
                        help='Check a single bound instead of the configured list')
    parser.add_argument('--no-benchmark', action='store_true', help='Skip timing')
    parser.add_argument('--quiet', action='store_true', help='Only report the outcome')
    args = parser.parse_args(argv)

    config = load_config(args.config)
    bounds = [args.bound] if args.bound is not None else config['bounds']
    verbose = not args.quiet

    if verbose:
        print("Odd Sieve Verification")
        print("=" * 50)

    all_ok = True
    for bound in bounds:
        all_ok &= verify_bound(int(bound), config['trial_limit'], verbose)

    if not args.no_benchmark:
        benchmark(int(config['benchmark_bound']), verbose)

    print("\n" + "=" * 50)
    if all_ok:
        print("✓ All verifications passed!")
        return 0

    print("✗ Some verifications failed!")
    return 1


if __name__ == '__main__':
    sys.exit(main())
