"""
Smallest prime factor table.

Responsibility: answering factorization queries for n <= N from a
precomputed SPF array. The array is built once and never written again.

Argument ranges are a caller contract. By default they are checked with
`assert` only, so `python -O` skips the checks entirely; pass
`checked=True` to always validate and raise ValueError instead.
"""

import time
from typing import Any, Dict, Iterator, List, Tuple

import numpy as np

from .batch import big_omega_kernel, factors_count_kernel, omega_kernel
from .cursor import PrimeFactorCursor
from .sieve import prime_flags_from_spf, spf_sieve

# Block length used when scanning the table for primes.
PRIME_SCAN_BLOCK = 1 << 16


class SmallestPrimeFactorTable:
    """
    Precomputed smallest prime factors for 0..N.

    Parameters
    ----------
    N : int
        Upper bound (inclusive), at most 2**32 - 1.
    checked : bool
        Always validate query arguments (ValueError) instead of relying
        on assertions.
    verbose : bool
        Print build timing and prime count.
    """

    def __init__(self, N: int, checked: bool = False, verbose: bool = False):
        t0 = time.time()
        spf = spf_sieve(N)
        spf.flags.writeable = False

        self._spf = spf
        self.limit = int(N)
        self.checked = checked

        if verbose:
            print(f"    Built SPF table for N={self.limit:,} in {time.time() - t0:.2f}s "
                  f"({spf.nbytes / 1e6:.1f}MB, {self.prime_count():,} primes)")

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "SmallestPrimeFactorTable":
        """Build from a mapping as returned by config.load_config."""
        return cls(config["N"],
                   checked=config.get("checked", False),
                   verbose=config.get("verbose", False))

    @property
    def table(self) -> np.ndarray:
        """Read-only SPF array of length N+1."""
        return self._spf

    def __len__(self) -> int:
        return len(self._spf)

    def __repr__(self) -> str:
        return f"SmallestPrimeFactorTable(N={self.limit}, checked={self.checked})"

    def _require(self, n: int, lo: int):
        if self.checked:
            if not lo <= n <= self.limit:
                raise ValueError(f"n={n} is outside [{lo}, {self.limit}]")
        else:
            assert lo <= n <= self.limit, f"n={n} is outside [{lo}, {self.limit}]"

    def _require_array(self, numbers) -> np.ndarray:
        numbers = np.asarray(numbers, dtype=np.int64)
        if numbers.size:
            lo, hi = int(numbers.min()), int(numbers.max())
            if self.checked:
                if lo < 1 or hi > self.limit:
                    raise ValueError(f"values span [{lo}, {hi}], outside [1, {self.limit}]")
            else:
                assert lo >= 1 and hi <= self.limit, \
                    f"values span [{lo}, {hi}], outside [1, {self.limit}]"
        return numbers

    # ========== Primes ==========

    def is_prime(self, n: int) -> bool:
        """True iff n is prime. Requires 2 <= n <= N."""
        self._require(n, 2)
        return int(self._spf[n]) == n

    def smallest_prime_factor(self, n: int) -> int:
        """Smallest prime dividing n. Requires 2 <= n <= N."""
        self._require(n, 2)
        return int(self._spf[n])

    def primes(self) -> Iterator[int]:
        """
        Yield every prime <= N in increasing order.

        The table is scanned lazily, one block at a time.
        """
        spf = self._spf
        size = len(spf)
        for start in range(2, size, PRIME_SCAN_BLOCK):
            stop = min(start + PRIME_SCAN_BLOCK, size)
            block = spf[start:stop]
            hits = np.nonzero(block == np.arange(start, stop, dtype=spf.dtype))[0]
            for offset in hits:
                yield start + int(offset)

    def prime_flags(self) -> np.ndarray:
        """Boolean array of length N+1, True at primes."""
        return prime_flags_from_spf(self._spf)

    def prime_count(self) -> int:
        """Number of primes <= N."""
        return int(np.count_nonzero(self.prime_flags()))

    # ========== Factorization ==========

    def prime_factors(self, n: int) -> PrimeFactorCursor:
        """
        Lazy (prime, multiplicity) pairs of n, primes increasing.

        Parameters
        ----------
        n : int
            Integer to factor, 1 <= n <= N. n = 1 yields nothing.

        Returns
        -------
        PrimeFactorCursor
            Iterator over (prime, multiplicity) pairs. Each pair costs
            one table lookup per division; clone() gives an independent
            cursor at the same position.
        """
        self._require(n, 1)
        return PrimeFactorCursor(self._spf, n)

    def factors_count(self, n: int) -> int:
        """Number of positive divisors of n."""
        total = 1
        for _, m in self.prime_factors(n):
            total *= m + 1
        return total

    def factors(self, n: int) -> Iterator[int]:
        """
        Yield every positive divisor of n exactly once, in no fixed order.

        Divisors are produced one at a time by counting through the
        exponent of each prime, like an odometer.

        Parameters
        ----------
        n : int
            Integer whose divisors to enumerate, 1 <= n <= N.

        Returns
        -------
        Iterator[int]
            Generator of divisors; yields factors_count(n) values in total.
        """
        pairs = list(self.prime_factors(n))
        return _iter_divisors(pairs)

    def omega(self, n: int) -> int:
        """Count distinct prime factors of n."""
        return sum(1 for _ in self.prime_factors(n))

    def big_omega(self, n: int) -> int:
        """Count prime factors of n with multiplicity."""
        return sum(m for _, m in self.prime_factors(n))

    def coprime(self, a: int, b: int) -> bool:
        """
        True iff gcd(a, b) == 1.

        Walks both factorizations in step, like a sorted merge, and stops
        at the first shared prime.

        Parameters
        ----------
        a, b : int
            Integers to compare, each in [1, N].

        Returns
        -------
        bool
            False if some prime divides both a and b, True otherwise.
        """
        fa = self.prime_factors(a)
        fb = self.prime_factors(b)
        pa = next(fa, None)
        pb = next(fb, None)

        while pa is not None and pb is not None:
            if pa[0] == pb[0]:
                return False
            if pa[0] < pb[0]:
                pa = next(fa, None)
            else:
                pb = next(fb, None)
        return True

    # ========== Batch ==========

    def omega_array(self, numbers) -> np.ndarray:
        """Distinct prime factor counts for an array of n in [1, N]."""
        return omega_kernel(self._require_array(numbers), self._spf)

    def big_omega_array(self, numbers) -> np.ndarray:
        """Prime factor counts with multiplicity for an array of n in [1, N]."""
        return big_omega_kernel(self._require_array(numbers), self._spf)

    def factors_count_array(self, numbers) -> np.ndarray:
        """Divisor counts for an array of n in [1, N]."""
        return factors_count_kernel(self._require_array(numbers), self._spf)


def _iter_divisors(pairs: List[Tuple[int, int]]) -> Iterator[int]:
    """Enumerate divisors from (prime, multiplicity) pairs."""
    k = len(pairs)
    exponents = [0] * k
    powers = [1] * k  # powers[i] == pairs[i][0] ** exponents[i]
    divisor = 1

    while True:
        yield divisor

        i = 0
        while i < k:
            p, m = pairs[i]
            if exponents[i] < m:
                exponents[i] += 1
                powers[i] *= p
                divisor *= p
                break
            # Digit rolls over: drop p^m and carry into the next prime
            divisor //= powers[i]
            exponents[i] = 0
            powers[i] = 1
            i += 1
        else:
            return
