"""
Lazy prime factorization cursor over a shared SPF array.
"""

from typing import Iterator, Tuple

import numpy as np


class PrimeFactorCursor:
    """
    Iterator over the (prime, multiplicity) pairs of one integer.

    Holds a reference to the SPF array and its own remainder, so any
    number of cursors can walk the same array independently. Primes come
    out strictly increasing; the cursor is exhausted once the remainder
    reaches 1.
    """

    __slots__ = ("_spf", "_remainder")

    def __init__(self, spf: np.ndarray, n: int):
        self._spf = spf
        self._remainder = int(n)

    @property
    def remainder(self) -> int:
        """Cofactor not yet consumed."""
        return self._remainder

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        return self

    def __next__(self) -> Tuple[int, int]:
        n = self._remainder
        if n == 1:
            raise StopIteration

        spf = self._spf
        p = int(spf[n])
        count = 1
        n //= p
        # spf[1] == 0, so the loop stops once p is fully divided out of n=p^k
        while spf[n] == p:
            n //= p
            count += 1

        self._remainder = n
        return p, count

    def clone(self) -> "PrimeFactorCursor":
        """Independent cursor at the same position."""
        return PrimeFactorCursor(self._spf, self._remainder)

    __copy__ = clone

    def __repr__(self) -> str:
        return f"PrimeFactorCursor(remainder={self._remainder})"
