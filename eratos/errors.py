"""
Exception types.

Responsibility: the failure modes of a sieve run, nothing else.
"""


class EratosError(Exception):
    """Base class for all errors raised by eratos."""


class AllocationError(EratosError, MemoryError):
    """The flag array for the requested limit could not be created."""


class InvalidLimit(EratosError, ValueError):
    """Limit is not an integer in [2, MAX_LIMIT]."""


class SieveStateError(EratosError, RuntimeError):
    """A sieve operation was called outside its legal state."""


class ConfigError(EratosError, ValueError):
    """Malformed or unreadable configuration file."""
