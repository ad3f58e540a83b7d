"""
Tests for SPF (smallest prime factor) array conventions.

The table relies on:
- spf[p] = p for primes
- spf[0] = spf[1] = 0 (sentinels, never read by queries)
- spf[n] is the least prime dividing n for n >= 2
"""

import numpy as np
import pytest

from prime_factor_sieve.sieve import MAX_BOUND, prime_flags_from_spf, spf_sieve


# Known small primes for testing
SMALL_PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]
SMALL_COMPOSITES = [4, 6, 8, 9, 10, 12, 14, 15, 16, 18, 20, 21, 22, 24, 25]


def brute_spf(n: int) -> int:
    """Smallest prime factor by trial division."""
    d = 2
    while d * d <= n:
        if n % d == 0:
            return d
        d += 1
    return n


class TestSpfSieveSentinel:
    """Test that spf_sieve uses spf[p] = p for primes."""

    def test_primes_have_spf_equal_to_self(self):
        """Primes should have spf[p] = p."""
        N = 100
        spf = spf_sieve(N)

        for p in SMALL_PRIMES:
            assert spf[p] == p, f"spf[{p}] should be {p}, got {spf[p]}"

    def test_composites_have_spf_less_than_self(self):
        """For composites, 0 < spf[n] < n."""
        N = 100
        spf = spf_sieve(N)

        for n in SMALL_COMPOSITES:
            assert 0 < spf[n] < n, f"spf[{n}] should be in (0, {n}), got {spf[n]}"

    def test_spf_zero_and_one(self):
        """spf[0] and spf[1] stay at the unset value 0."""
        spf = spf_sieve(10)
        assert spf[0] == 0
        assert spf[1] == 0

    def test_dtype_and_length(self):
        spf = spf_sieve(50)
        assert spf.dtype == np.uint32
        assert len(spf) == 51


class TestSpfSieveValues:
    """Cross-check every entry against trial division."""

    def test_matches_trial_division(self):
        N = 2000
        spf = spf_sieve(N)

        for n in range(2, N + 1):
            assert spf[n] == brute_spf(n), f"SPF mismatch at {n}: {spf[n]} vs {brute_spf(n)}"

    def test_spf_divides_and_is_prime(self):
        N = 500
        spf = spf_sieve(N)

        for n in range(2, N + 1):
            p = int(spf[n])
            assert n % p == 0
            assert spf[p] == p, f"spf[{n}] = {p} is not prime"

    @pytest.mark.parametrize("N", [0, 1, 2, 3])
    def test_tiny_bounds(self, N):
        spf = spf_sieve(N)
        assert len(spf) == N + 1
        for n in range(2, N + 1):
            assert spf[n] == n


class TestSpfSieveBounds:
    """Bounds outside the 32-bit unsigned range are rejected."""

    def test_negative_bound(self):
        with pytest.raises(ValueError):
            spf_sieve(-1)

    def test_bound_above_uint32(self):
        with pytest.raises(ValueError):
            spf_sieve(MAX_BOUND + 1)


class TestPrimeFlags:
    """Test that prime flags are consistent with the SPF array."""

    def test_prime_flags_match_known_primes(self):
        flags = prime_flags_from_spf(spf_sieve(100))

        for p in SMALL_PRIMES:
            assert flags[p], f"{p} should be prime"
        for n in SMALL_COMPOSITES:
            assert not flags[n], f"{n} should not be prime"

        assert not flags[0]
        assert not flags[1]

    def test_zero_sentinel_check_gives_no_primes(self):
        """
        Checking (spf == 0) finds no primes with this convention;
        only the sentinels 0 and 1 are zero.
        """
        spf = spf_sieve(100)

        wrong_prime_count = np.sum(spf[2:] == 0)
        right_prime_count = np.sum(prime_flags_from_spf(spf))

        assert wrong_prime_count == 0
        assert right_prime_count == 25, "There should be 25 primes <= 100"

    def test_tiny_arrays(self):
        assert prime_flags_from_spf(spf_sieve(0)).tolist() == [False]
        assert prime_flags_from_spf(spf_sieve(2)).tolist() == [False, False, True]


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
