#!/usr/bin/env python3
import math

from prime_numpy import NUMBER_MAX, PrimeBuffer


def ceil_sqrt(number: int) -> int:
    root = math.isqrt(number)
    return root if root * root == number else root + 1


def is_prime(candidate: int, known_primes) -> bool:
    """
    Decide primality of 'candidate' by trial division with 'known_primes'.

    'known_primes' must be ascending and hold every prime up to
    ceil(sqrt(candidate)); nothing checks this. Values up to 5 are answered
    without looking at the list.
    """
    if candidate <= 5:
        return candidate in (2, 3, 5)

    bound = ceil_sqrt(candidate)
    for p in known_primes:
        # Primes above the bound cannot divide the candidate
        if p > bound:
            break
        if candidate % p == 0:
            return False
    return True


def build_prime_buffer(limit: int) -> PrimeBuffer:
    """Test every integer 0..limit against the primes found so far."""
    if not 0 <= limit < NUMBER_MAX:
        raise ValueError(f"limit must be in [0, {NUMBER_MAX}), got {limit}")

    primes = PrimeBuffer.for_limit(limit)
    for candidate in range(limit + 1):
        if is_prime(candidate, primes.cells()):
            primes.append(candidate)
    return primes


def build_prime_list(limit: int) -> list[int]:
    """All primes <= limit in increasing order."""
    return build_prime_buffer(limit).tolist()
