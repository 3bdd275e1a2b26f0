"""
Sieve of Eratosthenes engine.

Responsibility: building and reading the primality flags. No parsing,
no prompting, no output formatting.

The flag array is owned by a single Sieve instance for one run:

    uninitialized -> allocated -> sieved -> consumed -> released

Transitions only move forward. Reads are legal once the array is sieved.
"""

from math import isqrt
from typing import Iterator, Optional

import numpy as np

from .errors import AllocationError, InvalidLimit, SieveStateError

# Largest accepted limit (platform unsigned int)
MAX_LIMIT = int(np.iinfo(np.uint32).max)

# Engine states
UNINITIALIZED = 'uninitialized'
ALLOCATED = 'allocated'
SIEVED = 'sieved'
CONSUMED = 'consumed'
RELEASED = 'released'

STATES = [UNINITIALIZED, ALLOCATED, SIEVED, CONSUMED, RELEASED]

# Indices scanned per step when iterating primes
_CHUNK = 1 << 16


def validate_limit(value) -> int:
    """
    Parse and range-check a limit supplied by the user.

    Parameters
    ----------
    value : int or str
        Candidate limit. Strings may carry surrounding whitespace.

    Returns
    -------
    int
        The limit, guaranteed to satisfy 2 <= limit <= MAX_LIMIT.

    Raises
    ------
    InvalidLimit
        If value is not an integer or is out of range.
    """
    message = f"Limit must be between 2 and {MAX_LIMIT}"

    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            raise InvalidLimit(message) from None
    elif isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise InvalidLimit(message)

    limit = int(value)
    if limit < 2 or limit > MAX_LIMIT:
        raise InvalidLimit(message)
    return limit


def sieve_bound(limit: int) -> int:
    """Largest candidate that can still eliminate anything: floor(sqrt(limit))."""
    return isqrt(limit)


def allocate(limit: int) -> np.ndarray:
    """
    Allocate the flag array for limit.

    Parameters
    ----------
    limit : int
        Upper bound (inclusive), 2 <= limit <= MAX_LIMIT.

    Returns
    -------
    np.ndarray
        Boolean array of length limit+1, all True except indices 0 and 1.

    Raises
    ------
    InvalidLimit
        If limit is below 2 or above MAX_LIMIT.
    AllocationError
        If the host cannot materialize the array.
    """
    limit = validate_limit(limit)
    try:
        flags = np.ones(limit + 1, dtype=bool)
    except (MemoryError, ValueError) as e:
        raise AllocationError(
            f"Memory allocation failed for {limit + 1:,} flags") from e
    flags[0] = flags[1] = False
    return flags


def mark_composites(flags: np.ndarray, limit: int) -> None:
    """
    Clear the flag of every composite up to limit, in place.

    Each prime p <= isqrt(limit) clears p*p, p*p + p, ... up to limit.
    Smaller multiples of p have a smaller prime factor and are already
    cleared. Running this twice leaves the flags unchanged.

    Parameters
    ----------
    flags : np.ndarray
        Array returned by allocate(limit).
    limit : int
        Upper bound (inclusive).
    """
    if limit >= len(flags):
        raise IndexError(f"limit {limit} outside flag array of length {len(flags)}")

    bound = sieve_bound(limit)
    for p in range(2, bound + 1):
        if flags[p]:
            flags[p*p:limit + 1:p] = False


def iterate_primes(flags: np.ndarray, limit: int) -> Iterator[int]:
    """
    Yield primes 2..limit in ascending order.

    Scans the flags in fixed-size chunks so no full list of primes is
    built. Does not modify flags; call again to restart.
    """
    for start in range(2, limit + 1, _CHUNK):
        for p in _chunk_primes(flags, start, min(start + _CHUNK, limit + 1)):
            yield int(p)


def _chunk_primes(flags: np.ndarray, start: int, stop: int) -> np.ndarray:
    """Primes in [start, stop) as a new array; holds no view of flags."""
    return np.flatnonzero(flags[start:stop]) + start


def release(sieve: 'Sieve') -> None:
    """Release the sieve's backing storage."""
    sieve.release()


def prime_flags_upto(N: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Boolean array of length N+1.
    """
    flags = allocate(N)
    mark_composites(flags, N)
    return flags


def primes_upto(N: int) -> np.ndarray:
    """
    Return array of all primes <= N.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Array of primes.
    """
    flags = prime_flags_upto(N)
    return np.nonzero(flags)[0]


def marking_operations(limit: int) -> int:
    """
    Count the flag writes mark_composites performs for limit.

    Prime p clears (limit - p*p) // p + 1 entries, so the total is the sum
    of that over primes p <= isqrt(limit). Grows as O(N log log N).
    """
    bound = sieve_bound(limit)
    if bound < 2:
        return 0
    small_primes = primes_upto(bound).astype(np.int64)
    return int(((limit - small_primes * small_primes) // small_primes + 1).sum())


class Sieve:
    """
    Single-use sieve engine for one limit.

    Use as a context manager so the flag array is released on every exit
    path:

        with Sieve(100) as sieve:
            for p in sieve.primes():
                ...

    Entering the context allocates and sieves.
    """

    def __init__(self, limit: int):
        self.limit = limit
        self.flags: Optional[np.ndarray] = None
        self.state = UNINITIALIZED

    def __repr__(self):
        return f"Sieve(limit={self.limit}, state={self.state!r})"

    def _require(self, *states):
        if self.state not in states:
            raise SieveStateError(
                f"sieve is {self.state}, expected {' or '.join(states)}")

    def _advance(self, state: str) -> None:
        # States only move forward through STATES
        if STATES.index(state) < STATES.index(self.state):
            raise SieveStateError(f"sieve cannot go from {self.state} back to {state}")
        self.state = state

    def allocate(self) -> 'Sieve':
        self._require(UNINITIALIZED)
        self.flags = allocate(self.limit)
        self.limit = len(self.flags) - 1
        self._advance(ALLOCATED)
        return self

    def mark_composites(self) -> 'Sieve':
        self._require(ALLOCATED)
        mark_composites(self.flags, self.limit)
        self._advance(SIEVED)
        return self

    def primes(self) -> Iterator[int]:
        """
        Lazy ascending primes. Each call starts a fresh pass.

        The iterator reads through the engine, so releasing the sieve
        stops it with SieveStateError.
        """
        self._require(SIEVED, CONSUMED)
        self._advance(CONSUMED)
        return self._walk()

    def _walk(self) -> Iterator[int]:
        for start in range(2, self.limit + 1, _CHUNK):
            self._require(CONSUMED)
            for p in _chunk_primes(self.flags, start, min(start + _CHUNK, self.limit + 1)):
                self._require(CONSUMED)
                yield int(p)

    def is_prime(self, n: int) -> bool:
        self._require(SIEVED, CONSUMED)
        if n < 0 or n > self.limit:
            raise IndexError(f"{n} outside sieved range [0, {self.limit}]")
        return bool(self.flags[n])

    def count(self) -> int:
        """Number of primes <= limit."""
        self._require(SIEVED, CONSUMED)
        return int(np.count_nonzero(self.flags))

    def release(self) -> None:
        if self.state == RELEASED:
            raise SieveStateError("sieve already released")
        self.flags = None
        self._advance(RELEASED)

    def __enter__(self) -> 'Sieve':
        if self.state == UNINITIALIZED:
            self.allocate()
        try:
            if self.state == ALLOCATED:
                self.mark_composites()
        except BaseException:
            self.release()
            raise
        return self

    def __exit__(self, exc_type, exc, tb):
        if self.state != RELEASED:
            self.release()
        return False
