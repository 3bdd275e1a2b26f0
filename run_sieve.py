#!/usr/bin/env python3
"""
Sieve of Eratosthenes runner.

Usage:
    python run_sieve.py -n 100
    python run_sieve.py -n 100 -f primes.csv
    python run_sieve.py --config config/default.yaml
"""

import sys

from eratos.cli import main


if __name__ == '__main__':
    sys.exit(main())
