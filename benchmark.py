#!/usr/bin/env python3
"""
Benchmark the sieve across limits.

Reports time to allocate, mark and iterate, the prime count, and the
number of flag writes against N log log N.

Usage:
    python benchmark.py                 # 1e4 .. 1e7
    python benchmark.py --N 1e6 1e8
"""

import argparse
import math
import time

from eratos.sieve import Sieve, marking_operations


def benchmark(N: int) -> dict:
    """Time one sieve run for limit N."""
    sieve = Sieve(N)

    t0 = time.time()
    sieve.allocate()
    t_alloc = time.time() - t0

    t0 = time.time()
    sieve.mark_composites()
    t_mark = time.time() - t0

    t0 = time.time()
    count = sum(1 for _ in sieve.primes())
    t_iter = time.time() - t0

    sieve.release()

    marks = marking_operations(N)
    return {
        'N': N,
        'primes': count,
        'marks': marks,
        'ratio': marks / (N * math.log(math.log(N))),
        'alloc': t_alloc,
        'mark': t_mark,
        'iter': t_iter,
    }


def main():
    parser = argparse.ArgumentParser(description='Benchmark the sieve')
    parser.add_argument('--N', type=float, nargs='+',
                        default=[1e4, 1e5, 1e6, 1e7],
                        help='Limits to benchmark')
    args = parser.parse_args()

    print("=" * 72)
    print("Sieve of Eratosthenes benchmark")
    print("=" * 72)
    print(f"{'N':>14} {'primes':>11} {'marks':>13} {'marks/NloglogN':>15} "
          f"{'alloc':>7} {'mark':>7} {'iter':>7}")

    for N in args.N:
        r = benchmark(int(N))
        print(f"{r['N']:>14,} {r['primes']:>11,} {r['marks']:>13,} {r['ratio']:>15.3f} "
              f"{r['alloc']:>6.2f}s {r['mark']:>6.2f}s {r['iter']:>6.2f}s")


if __name__ == '__main__':
    main()
