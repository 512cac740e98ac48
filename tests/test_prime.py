from __future__ import annotations

import numpy as np
import pytest

from prime import build_prime_buffer, build_prime_list, ceil_sqrt, is_prime
from prime_numpy import NUMBER_MAX


def _reference_is_prime(n: int) -> bool:
    # Trial division by every integer, no known primes involved.
    if n < 2:
        return False
    return all(n % d for d in range(2, int(n**0.5) + 1))


def _reference_primes(limit: int) -> list[int]:
    return [n for n in range(limit + 1) if _reference_is_prime(n)]


REFERENCE_10000 = _reference_primes(10_000)


@pytest.mark.parametrize("n, expected", [(0, 0), (1, 1), (2, 2), (4, 2), (5, 3), (9, 3), (10, 4), (25, 5)])
def test_ceil_sqrt(n: int, expected: int) -> None:
    assert ceil_sqrt(n) == expected


@pytest.mark.parametrize("n, expected", [(0, False), (1, False), (2, True), (3, True), (4, False), (5, True)])
def test_small_values_ignore_known_primes(n: int, expected: bool) -> None:
    assert is_prime(n, []) is expected


def test_oracle_agrees_with_reference_up_to_10000() -> None:
    for n in range(10_001):
        known = [p for p in REFERENCE_10000 if p < n]
        assert is_prime(n, known) is _reference_is_prime(n), n


def test_oracle_stops_at_ceil_sqrt() -> None:
    # 49 = 7 * 7: 7 is exactly ceil(sqrt(49)) and must be tried.
    assert is_prime(49, [2, 3, 5, 7]) is False
    # Primes above the bound are never tried as divisors.
    assert is_prime(11, [2, 3, 5, 11]) is True


def test_oracle_accepts_numpy_arrays() -> None:
    known = np.array([2, 3, 5, 7, 11, 13], dtype=np.uint64)
    assert is_prime(169, known) is False
    assert is_prime(167, known) is True


def test_oracle_handles_large_numbers() -> None:
    # Largest prime below 2**32 and a square of a prime near 2**16.
    known = _reference_primes(65_537)
    assert is_prime(4_294_967_291, known) is True
    assert is_prime(65_537 * 65_537, known) is False


def test_build_prime_list_ten() -> None:
    assert build_prime_list(10) == [2, 3, 5, 7]


@pytest.mark.parametrize("limit", [0, 1])
def test_build_prime_list_empty(limit: int) -> None:
    assert build_prime_list(limit) == []


@pytest.mark.parametrize("limit", [2, 3, 5, 6, 100, 7919, 10_000])
def test_build_prime_list_matches_reference(limit: int) -> None:
    primes = build_prime_list(limit)
    assert primes == _reference_primes(limit)
    assert all(a < b for a, b in zip(primes, primes[1:]))


def test_build_prime_buffer_exposes_last() -> None:
    primes = build_prime_buffer(30)
    assert len(primes) == 10
    assert primes.last == 29


@pytest.mark.parametrize("limit", [-1, NUMBER_MAX])
def test_build_prime_list_rejects_out_of_range(limit: int) -> None:
    with pytest.raises(ValueError):
        build_prime_list(limit)


def _known_then_fail(*primes: int):
    # Yields the given primes, then fails if the scan asks for more.
    yield from primes
    raise AssertionError("scan went past the point where it should stop")


def test_oracle_stops_at_first_divisor() -> None:
    assert is_prime(10, _known_then_fail(2)) is False
    assert is_prime(35, _known_then_fail(2, 3, 5)) is False


def test_oracle_stops_at_first_prime_above_bound() -> None:
    # ceil(sqrt(11)) == 4, so 5 ends the scan.
    assert is_prime(11, _known_then_fail(2, 3, 5)) is True


def test_oracle_accepts_buffer_cells() -> None:
    primes = build_prime_buffer(13)
    assert is_prime(169, primes.cells()) is False
    assert is_prime(167, primes) is True
