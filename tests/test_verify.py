"""
Tests for the trial division cross-check.
"""

import numpy as np
import pytest

from eratos.sieve import prime_flags_upto
from eratos.verify import is_prime_trial, trial_division_flags, verify_flags


SMALL_PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]
SMALL_COMPOSITES = [4, 6, 8, 9, 10, 12, 14, 15, 16, 18, 20, 21, 22, 24, 25, 49]


class TestIsPrimeTrial:

    def test_small_primes(self):
        for p in SMALL_PRIMES:
            assert is_prime_trial(p), f"{p} should be prime"

    def test_small_composites(self):
        for n in SMALL_COMPOSITES:
            assert not is_prime_trial(n), f"{n} should not be prime"

    def test_zero_and_one(self):
        assert not is_prime_trial(0)
        assert not is_prime_trial(1)


class TestTrialDivisionFlags:

    def test_matches_sieve(self):
        """Sieve and trial division give identical flags."""
        N = 20_000
        assert np.array_equal(trial_division_flags(N), prime_flags_upto(N))

    def test_layout(self):
        flags = trial_division_flags(10)
        assert flags.dtype == np.bool_
        assert len(flags) == 11


class TestVerifyFlags:

    def test_correct_sieve(self):
        assert verify_flags(prime_flags_upto(1000), 1000) == 0

    def test_detects_corruption(self):
        flags = prime_flags_upto(1000)
        flags[9] = True
        flags[97] = False
        assert verify_flags(flags, 1000) == 2


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
