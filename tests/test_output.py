"""
Tests for the console and CSV writers.
"""

import io

import pytest

from eratos.output import check_csv_name, print_primes, write_primes_csv
from eratos.sieve import Sieve


class TestPrintPrimes:
    """Console printer."""

    def test_prints_one_line(self, capsys):
        print_primes([2, 3, 5, 7])
        assert capsys.readouterr().out == "2 3 5 7\n"

    def test_explicit_stream(self):
        buf = io.StringIO()
        assert print_primes([2, 3], file=buf) == 2
        assert buf.getvalue() == "2 3\n"

    def test_empty(self):
        buf = io.StringIO()
        assert print_primes([], file=buf) == 0
        assert buf.getvalue() == "\n"

    def test_custom_separator(self):
        buf = io.StringIO()
        print_primes([2, 3, 5], file=buf, sep=",")
        assert buf.getvalue() == "2,3,5\n"

    def test_writes_each_value_before_pulling_the_next(self):
        """The printer streams: nothing is buffered up from the sequence."""
        buf = io.StringIO()
        seen = []

        def tracking():
            for p in [2, 3, 5, 7]:
                if seen:
                    assert buf.getvalue().endswith(str(seen[-1])), \
                        f"{seen[-1]} not written before {p} was requested"
                seen.append(p)
                yield p

        print_primes(tracking(), file=buf)
        assert buf.getvalue() == "2 3 5 7\n"

    def test_large_sequence_one_write_per_value(self):
        """Output goes out value by value, never as one joined string."""
        writes = []

        class Recorder:
            def write(self, text):
                writes.append(text)

        with Sieve(100_000) as sieve:
            count = print_primes(sieve.primes(), file=Recorder())
        assert count == 9592
        assert max(len(w) for w in writes) <= 6


class TestWritePrimesCsv:
    """CSV writer."""

    def test_limit_ten_exact_text(self, tmp_path):
        """Primes up to 10 are written as 2,3,5,7 and one newline."""
        path = tmp_path / "primes.csv"
        with Sieve(10) as sieve:
            count = write_primes_csv(path, sieve.primes())
        assert path.read_text() == "2,3,5,7\n"
        assert count == 4

    def test_single_value(self, tmp_path):
        path = tmp_path / "two.csv"
        write_primes_csv(path, [2])
        assert path.read_text() == "2\n"

    def test_empty_sequence(self, tmp_path):
        path = tmp_path / "empty.csv"
        assert write_primes_csv(path, []) == 0
        assert path.read_text() == "\n"

    def test_overwrites_existing(self, tmp_path):
        path = tmp_path / "primes.csv"
        path.write_text("old contents\nmore\n")
        write_primes_csv(str(path), [2, 3])
        assert path.read_text() == "2,3\n"

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(OSError):
            write_primes_csv(tmp_path / "nope" / "primes.csv", [2])

    def test_hundred(self, tmp_path):
        path = tmp_path / "primes.csv"
        with Sieve(100) as sieve:
            write_primes_csv(path, sieve.primes())
        text = path.read_text()
        assert text.endswith("89,97\n")
        assert text.count("\n") == 1
        assert len(text.strip().split(",")) == 25


class TestCheckCsvName:

    def test_csv_suffix(self):
        assert check_csv_name("out.csv")
        assert check_csv_name("dir/out.csv")

    def test_other_suffix(self):
        assert not check_csv_name("out.txt")
        assert not check_csv_name("out")
        assert not check_csv_name("out.CSV")


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
