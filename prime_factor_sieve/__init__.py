"""
Smallest prime factor table for fast repeated factorization of n <= N.
"""

from .config import DEFAULT_CONFIG, load_config
from .cursor import PrimeFactorCursor
from .sieve import MAX_BOUND, prime_flags_from_spf, spf_sieve
from .table import SmallestPrimeFactorTable

__all__ = [
    "DEFAULT_CONFIG",
    "MAX_BOUND",
    "PrimeFactorCursor",
    "SmallestPrimeFactorTable",
    "load_config",
    "prime_flags_from_spf",
    "spf_sieve",
]
