"""
Smallest prime factor sieve.

Responsibility: building the SPF array, nothing else.
Queries over the array live in table.py and batch.py.

Convention: spf[p] = p for primes, spf[0] = spf[1] = 0 (never read).
"""

import numpy as np
from numba import njit

# Table entries are uint32, so the bound must fit the 32-bit unsigned range.
MAX_BOUND = 2**32 - 1


@njit
def _fill_spf(spf):
    """Fill a zeroed SPF array in place."""
    N = spf.shape[0] - 1
    for i in range(2, N + 1):
        if spf[i] != 0:  # composite, already marked by a smaller prime
            continue
        for j in range(i, N + 1, i):
            if spf[j] == 0:
                spf[j] = i


def spf_sieve(N: int) -> np.ndarray:
    """
    Compute smallest prime factor for all integers up to N.

    Parameters
    ----------
    N : int
        Upper bound (inclusive). Must lie in [0, MAX_BOUND].

    Returns
    -------
    np.ndarray
        uint32 array of length N+1 where spf[i] is the smallest prime
        factor of i for i >= 2. spf[p] = p for primes; spf[0] and spf[1]
        are left at 0.

    Raises
    ------
    ValueError
        If N is outside [0, MAX_BOUND].
    MemoryError
        If numpy cannot allocate the array.
    """
    N = int(N)
    if N < 0 or N > MAX_BOUND:
        raise ValueError(f"N={N} is outside [0, {MAX_BOUND}]")

    spf = np.zeros(N + 1, dtype=np.uint32)
    if N >= 2:
        _fill_spf(spf)
    return spf


def prime_flags_from_spf(spf: np.ndarray) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    A number n >= 2 is prime iff spf[n] == n.
    """
    flags = np.zeros(len(spf), dtype=bool)
    if len(spf) > 2:
        flags[2:] = spf[2:] == np.arange(2, len(spf), dtype=spf.dtype)
    return flags
