#!/usr/bin/env python3
"""
Verify the SPF table against trial division.

Builds the table for the configured N, then checks a random sample of
n in [1, N] for primality, factorization round-trip, divisor sets and
coprimality.

Usage:
    python run_verify.py
    python run_verify.py --config config/custom.yaml
    python run_verify.py --N 100000
"""

import argparse
import math
import sys
import time

import numpy as np

from prime_factor_sieve import SmallestPrimeFactorTable, load_config
from prime_factor_sieve.config import validate_config


def trial_divisors(n: int) -> set:
    """Divisors of n by trial division up to sqrt(n)."""
    divs = set()
    for d in range(1, math.isqrt(n) + 1):
        if n % d == 0:
            divs.add(d)
            divs.add(n // d)
    return divs


def verify_primality(table: SmallestPrimeFactorTable, sample: np.ndarray,
                     verbose: bool = True) -> bool:
    """is_prime(n) must agree with trial division."""
    errors = 0
    for n in sample:
        n = int(n)
        if n < 2:
            continue
        expected = len(trial_divisors(n)) == 2
        if table.is_prime(n) != expected:
            errors += 1
            if errors <= 5:
                print(f"    MISMATCH is_prime({n}): table={not expected}, trial={expected}")

    if verbose:
        print(f"  {'✓' if errors == 0 else '✗'} primality: {errors} errors")
    return errors == 0


def verify_factorizations(table: SmallestPrimeFactorTable, sample: np.ndarray,
                          verbose: bool = True) -> bool:
    """Product of p^m must rebuild n, with primes increasing."""
    errors = 0
    for n in sample:
        n = int(n)
        pairs = list(table.prime_factors(n))
        product = 1
        for p, m in pairs:
            product *= p ** m
        primes = [p for p, _ in pairs]
        ok = (product == n
              and primes == sorted(set(primes))
              and all(m >= 1 for _, m in pairs))
        if not ok:
            errors += 1
            if errors <= 5:
                print(f"    MISMATCH prime_factors({n}) = {pairs}")

    if verbose:
        print(f"  {'✓' if errors == 0 else '✗'} factorization round-trip: {errors} errors")
    return errors == 0


def verify_divisors(table: SmallestPrimeFactorTable, sample: np.ndarray,
                    verbose: bool = True) -> bool:
    """factors(n) must be the trial-division divisor set, counted by factors_count."""
    errors = 0
    counts = table.factors_count_array(sample) if len(sample) else []
    for n, batch_count in zip(sample, counts):
        n = int(n)
        divs = list(table.factors(n))
        expected = trial_divisors(n)
        count = table.factors_count(n)
        if set(divs) != expected or len(divs) != len(expected) \
                or count != len(expected) or batch_count != count:
            errors += 1
            if errors <= 5:
                print(f"    MISMATCH factors({n}): got {len(divs)}, expected {len(expected)}")

    if verbose:
        print(f"  {'✓' if errors == 0 else '✗'} divisors: {errors} errors")
    return errors == 0


def verify_coprime(table: SmallestPrimeFactorTable, sample: np.ndarray,
                   verbose: bool = True) -> bool:
    """coprime(a, b) must agree with math.gcd on consecutive sample pairs."""
    errors = 0
    for a, b in zip(sample[:-1], sample[1:]):
        a, b = int(a), int(b)
        expected = math.gcd(a, b) == 1
        if table.coprime(a, b) != expected:
            errors += 1
            if errors <= 5:
                print(f"    MISMATCH coprime({a}, {b}): expected {expected}")

    if verbose:
        print(f"  {'✓' if errors == 0 else '✗'} coprimality: {errors} errors")
    return errors == 0


def main():
    parser = argparse.ArgumentParser(description='Verify the SPF table')
    parser.add_argument('--config', type=str, default='config/default.yaml',
                        help='Path to config file')
    parser.add_argument('--N', type=int, default=None,
                        help='Override the configured bound')
    args = parser.parse_args()

    config = load_config(args.config)
    if args.N is not None:
        config['N'] = args.N
        validate_config(config)

    print("=" * 60)
    print("SPF Table Verification")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  N = {config['N']:,}")
    print(f"  checked = {config['checked']}")
    print(f"  sample_size = {config['sample_size']:,}")
    print(f"  seed = {config['seed']}")
    print()

    t0 = time.time()
    table = SmallestPrimeFactorTable.from_config(config)
    print(f"Table built in {time.time() - t0:.2f}s")

    if table.limit < 1:
        print("Nothing to verify for N < 1")
        return 0

    rng = np.random.default_rng(config['seed'])
    sample = rng.integers(1, table.limit + 1, size=config['sample_size'], dtype=np.int64)

    print("-" * 60)
    t0 = time.time()
    results = [
        verify_primality(table, sample),
        verify_factorizations(table, sample),
        verify_divisors(table, sample),
        verify_coprime(table, sample),
    ]
    print(f"   Completed in {time.time() - t0:.1f}s")

    print("=" * 60)
    if all(results):
        print("ALL CHECKS PASSED")
        return 0
    print("VERIFICATION FAILED")
    return 1


if __name__ == '__main__':
    sys.exit(main())
