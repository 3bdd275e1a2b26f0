"""
Output of prime sequences.

Responsibility: turning a sequence of primes into text. These functions
only read the sequence they are given.
"""

import sys
from pathlib import Path
from typing import Iterable, TextIO, Union


def print_primes(primes: Iterable[int], file: TextIO = None, sep: str = ' ') -> int:
    """
    Console printer: primes on one line, separated by sep.

    Writes one value at a time, so memory does not grow with the number
    of primes. Returns the number of values written.
    """
    if file is None:
        file = sys.stdout
    count = 0
    for p in primes:
        if count:
            file.write(sep)
        file.write(str(p))
        count += 1
    file.write('\n')
    return count


def write_primes_csv(path: Union[str, Path], primes: Iterable[int]) -> int:
    """
    Write primes to path as a single comma separated line.

    For limit 10 the file holds exactly ``2,3,5,7\\n``.

    Parameters
    ----------
    path : str or Path
        Output file. Overwritten if it exists.
    primes : iterable of int
        Primes in the order they should appear.

    Returns
    -------
    int
        Number of values written.
    """
    with open(path, 'w') as f:
        return print_primes(primes, file=f, sep=',')


def check_csv_name(path: Union[str, Path]) -> bool:
    """True if the file name ends with .csv."""
    return str(path).endswith('.csv')
