"""
Command-line runner.

Reads the limit and output file from options, the config file or
interactive prompts, runs one sieve and prints or writes the primes.

Usage:
    python run_sieve.py -n 100
    python run_sieve.py -n 100 -f output.csv
    python run_sieve.py --config config/default.yaml
"""

import argparse
import sys
import time
from typing import List, Optional

from .config import load_config
from .errors import AllocationError, ConfigError, InvalidLimit
from .output import check_csv_name, print_primes, write_primes_csv
from .sieve import MAX_LIMIT, Sieve, validate_limit
from .verify import verify_flags

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def _error(message: str) -> None:
    print(message, file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='eratos',
        description='Generate all primes up to a limit with the Sieve of Eratosthenes.',
        epilog='Example: eratos -f output.csv -n 100 writes the primes up to 100 to output.csv',
    )
    parser.add_argument('-n', '--limit', type=str, default=None,
                        help=f'Upper limit for prime generation (between 2 and {MAX_LIMIT})')
    parser.add_argument('-f', '--file', type=str, default=None,
                        help='Output CSV file. When omitted the primes go to standard output')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to YAML config file')
    parser.add_argument('--no-prompt', action='store_true',
                        help='Never ask for missing values interactively')
    parser.add_argument('--verify', action='store_true',
                        help='Cross-check the sieve against trial division')
    parser.add_argument('--timing', action='store_true',
                        help='Report time spent sieving and writing')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        _error(str(e))
        return EXIT_FAILURE

    limit = args.limit if args.limit is not None else config['limit']
    output = args.file if args.file is not None else config['output']
    prompt = config['prompt'] and not args.no_prompt
    verify = args.verify or config['verify']

    if limit is None:
        if not prompt:
            _error("No limit given. Use -n or set 'limit' in the config file.")
            return EXIT_FAILURE
        try:
            limit = input("Please enter an upper limit for prime number generation "
                          f"(between 2 and {MAX_LIMIT}): ")
        except EOFError:
            _error("Invalid input. Program aborted.")
            return EXIT_FAILURE

    try:
        limit = validate_limit(limit)
    except InvalidLimit as e:
        _error(str(e))
        print("Program aborted due to invalid limit.")
        return EXIT_FAILURE

    if output is None and prompt:
        try:
            output = input("Enter filename for output file (*.csv) or <enter> for screenprint: ")
        except EOFError:
            output = None
    if output is not None:
        output = str(output).strip() or None

    if output is not None and not check_csv_name(output):
        _error(f"Warning: Output file name should end with .csv. Using {output} instead.")

    start = time.time()
    try:
        with Sieve(limit) as sieve:
            if args.timing:
                print(f"Sieved {limit + 1:,} flags in {time.time() - start:.3f}s")

            if verify:
                mismatches = verify_flags(sieve.flags, sieve.limit)
                if mismatches:
                    _error(f"Verification failed: {mismatches:,} flags disagree with trial division")
                    return EXIT_FAILURE
                print(f"Verified {sieve.count():,} primes against trial division")

            start = time.time()
            if output is not None:
                try:
                    write_primes_csv(output, sieve.primes())
                except OSError:
                    _error(f"Failed to open file {output} for writing")
                    return EXIT_FAILURE
                print(f"Sieve written to {output}")
            else:
                print(f"Prime numbers up to {limit}:")
                print_primes(sieve.primes())
            if args.timing:
                print(f"Output in {time.time() - start:.3f}s")
    except AllocationError as e:
        _error(str(e))
        return EXIT_FAILURE

    print("Program completed successfully.")
    return EXIT_SUCCESS
