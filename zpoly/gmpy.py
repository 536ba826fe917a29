"""This module collects all gmpy2 functions used by zpoly.

Integer exponentiation and factoring into distinct primes are also provided,
as needed for Rabin's irreducibility test.
"""

import logging
from gmpy2 import version, mpz, is_prime, next_prime, invert

logging.debug(f'Load gmpy2 version {version()}')

__all__ = ['mpz', 'is_prime', 'next_prime', 'invert', 'ipow', 'prime_factors']


def ipow(b, e):
    """Return b**e for integer b and nonnegative integer e."""
    if e < 0:
        raise ValueError('negative exponent')

    return int(mpz(b)**e)


def prime_factors(x):
    """Return the set of distinct prime factors of positive integer x.

    E.g., prime_factors(12) == {2, 3} and prime_factors(1) == set().
    """
    if x <= 0:
        raise ValueError('positive number required')

    factors = set()
    p = 2
    while p * p <= x:
        if x % p == 0:
            factors.add(int(p))
            while x % p == 0:
                x //= p
            if is_prime(x):
                break

        p = next_prime(p)
    if x > 1:
        factors.add(int(x))
    return factors
