"""Ceiling square roots, trial-division primality and next-prime search."""

from nextprime.primes import U64_MAX, integer_ceil_sqrt, is_prime, next_prime
from nextprime.verify import check_regressions, run_verification, verify_range

__all__ = [
    "U64_MAX",
    "integer_ceil_sqrt",
    "is_prime",
    "next_prime",
    "verify_range",
    "check_regressions",
    "run_verification",
]
