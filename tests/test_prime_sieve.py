import pytest

from parlab.prime_sieve import main, sieve


def test_primes_below_thirty():
    assert sieve(30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


def test_prime_count_below_hundred():
    assert len(sieve(100)) == 25


def test_smallest_limits():
    assert sieve(3) == [2]
    assert sieve(2) == []
    assert sieve(0) == []


@pytest.mark.parametrize("limit", [10, 50, 200])
def test_results_are_increasing_and_below_limit(limit):
    primes = sieve(limit)
    assert primes == sorted(set(primes))
    assert all(2 <= p < limit for p in primes)


def test_no_prime_divides_another():
    primes = sieve(150)
    divisible = [
        (p, q) for i, p in enumerate(primes) for q in primes[i + 1 :] if q % p == 0
    ]
    assert divisible == []
    assert primes[0] == 2
    assert primes[-1] == 149


def test_larger_limit_extends_smaller():
    small = sieve(40)
    large = sieve(80)
    assert large[: len(small)] == small


def test_main_prints_each_prime(capsys):
    assert main(["12"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Siever: 2 is a prime number."
    assert len(lines) == len(sieve(12))