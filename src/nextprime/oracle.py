"""Brute-force reference implementations.

Deliberately naive: linear scans with no shortcuts. Only meant for small n,
where they serve as ground truth for the functions in nextprime.primes.
"""


def ceil_sqrt_oracle(n: int) -> int:
    """Smallest r with r * r >= n, found by counting up from 0."""
    r = 0
    while r * r < n:
        r += 1
    return r


def is_prime_oracle(n: int) -> bool:
    """Check primality by dividing by every integer in [2, n).

    Args:
        n: Number to check.

    Returns:
        True if n is prime, False otherwise.
    """
    if n < 2:
        return False
    for d in range(2, n):
        if n % d == 0:
            return False
    return True


def next_prime_oracle(n: int) -> int:
    """Find the next prime >= n by stepping one at a time."""
    while not is_prime_oracle(n):
        n += 1
    return n
