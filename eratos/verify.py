"""
Trial division cross-check for sieve output.

Independent of the sieve: every n is tested on its own, so a bug in the
elimination loop cannot hide in both implementations.
"""

import numpy as np
from numba import njit, prange


@njit
def is_prime_trial(n: int) -> bool:
    """Trial division by 2 and odd d with d*d <= n."""
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0:
        return False
    d = 3
    while d * d <= n:
        if n % d == 0:
            return False
        d += 2
    return True


@njit(parallel=True)
def trial_division_flags(limit: int) -> np.ndarray:
    """Boolean array of length limit+1, flags[i] True iff i is prime."""
    flags = np.zeros(limit + 1, dtype=np.bool_)
    for i in prange(limit + 1):
        flags[i] = is_prime_trial(i)
    return flags


def verify_flags(flags: np.ndarray, limit: int) -> int:
    """
    Compare sieve flags against trial division.

    Parameters
    ----------
    flags : np.ndarray
        Sieved boolean array of length limit+1.
    limit : int
        Upper bound (inclusive).

    Returns
    -------
    int
        Number of indices where the two disagree (0 means correct).
    """
    expected = trial_division_flags(limit)
    return int(np.count_nonzero(flags[:limit + 1] != expected))
