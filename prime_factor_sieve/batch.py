"""
Batch factorization kernels.

Compute per-number statistics for a whole array of integers in one
compiled loop instead of one Python call per number.

SPF uses spf[p] = p for primes (see sieve.py). All numbers must lie in
[0, len(spf) - 1]; the kernels do not bounds-check.
"""

import numpy as np
from numba import njit


@njit
def omega_kernel(numbers, spf):
    """Count distinct prime factors for each number (0 for n <= 1)."""
    results = np.zeros(numbers.shape[0], dtype=np.int64)

    for i in range(numbers.shape[0]):
        n = np.int64(numbers[i])
        if n <= 1:
            continue
        count = 0
        prev = 0
        while n > 1:
            p = np.int64(spf[n])
            if p != prev:
                count += 1
                prev = p
            n //= p
        results[i] = count

    return results


@njit
def big_omega_kernel(numbers, spf):
    """Count prime factors with multiplicity for each number (0 for n <= 1)."""
    results = np.zeros(numbers.shape[0], dtype=np.int64)

    for i in range(numbers.shape[0]):
        n = np.int64(numbers[i])
        count = 0
        while n > 1:
            n //= np.int64(spf[n])
            count += 1
        results[i] = count

    return results


@njit
def factors_count_kernel(numbers, spf):
    """Number of positive divisors for each number (d(1) = 1)."""
    results = np.ones(numbers.shape[0], dtype=np.int64)

    for i in range(numbers.shape[0]):
        n = np.int64(numbers[i])
        total = 1
        while n > 1:
            p = np.int64(spf[n])
            m = 0
            while n % p == 0:
                n //= p
                m += 1
            total *= m + 1
        results[i] = total

    return results
