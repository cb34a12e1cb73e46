"""Integer square roots and trial-division primes.

- integer_ceil_sqrt(n): smallest r with r*r >= n
- is_prime(n): trial division by odd d <= integer_ceil_sqrt(n)
- next_prime(n): smallest prime p >= n

All inputs are unsigned 64-bit values. Python integers never wrap, so the
squaring step in the binary search cannot overflow.
"""

U64_MAX = 2**64 - 1


def _check_u64(n: int) -> None:
    """Validate that n is an unsigned 64-bit integer.

    Args:
        n: Value to check.

    Raises:
        TypeError: If n is not an int (bool is rejected too).
        ValueError: If n is negative or larger than U64_MAX.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"Invalid input: expected int, got {type(n).__name__}.")
    if n < 0 or n > U64_MAX:
        raise ValueError(f"Invalid input: {n}. Must be in [0, 2**64 - 1].")


def _ceil_sqrt(n: int) -> int:
    if n == 0:
        return 0

    low, high = 1, n
    mid = (low + high) // 2
    while low < high:
        mid = (low + high) // 2
        square = mid * mid
        if square == n:
            return mid
        elif square > n:
            high = mid - 1
        else:
            low = mid + 1

    if mid * mid == n:
        return mid
    # The search can stop one below the ceiling (e.g. n=5 ends on high=2)
    if high * high < n:
        return high + 1
    return high


def _is_prime(n: int) -> bool:
    if n == 2 or n == 3:
        return True
    if n % 2 == 0 or n <= 1:
        return False
    for divisor in range(3, _ceil_sqrt(n) + 1, 2):
        if n % divisor == 0:
            return False
    return True


def integer_ceil_sqrt(n: int) -> int:
    """Compute the ceiling of the square root of n by binary search.

    Time complexity: O(log n).

    Args:
        n: Unsigned 64-bit integer.

    Returns:
        The smallest integer r such that r * r >= n.

    Raises:
        TypeError: If n is not an int.
        ValueError: If n is outside [0, 2**64 - 1].
    """
    _check_u64(n)
    return _ceil_sqrt(n)


def is_prime(n: int) -> bool:
    """Check if a number is prime by trial division.

    Time complexity: O(sqrt(n)).

    Args:
        n: Unsigned 64-bit integer.

    Returns:
        True if n is prime, False otherwise.

    Raises:
        TypeError: If n is not an int.
        ValueError: If n is outside [0, 2**64 - 1].
    """
    _check_u64(n)
    return _is_prime(n)


def next_prime(n: int, *, return_iters: bool = False) -> int | tuple[int, int]:
    """Find the next prime number >= n.

    Expected cost is O(sqrt(n)) per candidate over O(log n) candidates.

    There is no prime in [2**64 - 58, 2**64 - 1]. For those inputs the
    search walks past U64_MAX and returns the first prime above it.
    That result is itself outside the u64 domain, so passing it back to
    next_prime raises ValueError and idempotence does not hold there.

    Args:
        n: Starting number (unsigned 64-bit integer).
        return_iters: If True, also return how many candidates were tested.

    Returns:
        The smallest prime >= n, or (prime, iters) if return_iters is set.

    Raises:
        TypeError: If n is not an int.
        ValueError: If n is outside [0, 2**64 - 1].
    """
    _check_u64(n)
    if n <= 2:
        return (2, 0) if return_iters else 2
    if n % 2 == 0:
        n += 1

    iters = 1
    while not _is_prime(n):
        n += 2
        iters += 1
    return (n, iters) if return_iters else n
