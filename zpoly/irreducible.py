"""Irreducibility testing and irreducible polynomials over GF(p).

Function is_reducible() implements Rabin's test. A polynomial f of degree n
over GF(p) is irreducible if and only if

    f divides x^(p^n) - x, and
    gcd(f, x^(p^(n/r)) - x) = 1 for every prime divisor r of n.

The gcd conditions are checked first, as each one can only reject f. The
powers x^(p^m) are computed modulo f by repeated squaring, never as
polynomials of degree p^m.

Function find_irreducible_polynomial() samples random polynomials of the
requested degree until one passes the test. About one in every n polynomials
of degree n is irreducible, so the expected number of trials is O(n).

Progress is reported through the logging module. Pass verbose=True, or set
ZPOLY_VERBOSE=1 (see command line option --verbose), to get these reports at
level INFO instead of DEBUG.
"""

import os
import random
import logging
from zpoly import gmpy as gmpy2
from zpoly.polynomial import Polynomial
from zpoly.rings import RingKind
from zpoly.euclid import gcd
from zpoly.errors import (NullOperand, InvalidDegree, InvalidCharacteristic, UnsupportedRing,
                          UnsupportedCharacteristic)


def _log(verbose):
    if verbose is None:
        verbose = os.getenv('ZPOLY_VERBOSE') == '1'
    return logging.info if verbose else logging.debug


def _frobenius_test(f, q):
    """Return remainder of x^q - x modulo f, for deg f >= 2."""
    x = Polynomial(f.characteristic, {1: 1})
    return x.powmod(q, f) - x


def is_reducible(f, verbose=None):
    """Test polynomial f over GF(p) for reducibility using Rabin's test.

    Polynomials of degree at most 1 are not considered reducible.
    """
    if f is None:
        raise NullOperand('polynomial expected, got None')

    if not isinstance(f, Polynomial):
        raise TypeError(f'polynomial expected, got {type(f).__name__}')

    if f.ring.kind is RingKind.INTEGERS:
        raise UnsupportedCharacteristic('irreducibility test not supported for characteristic 0')

    n = f.degree()
    if n <= 1:
        return False

    if not f.ring.is_field:
        raise UnsupportedRing(f'irreducibility test not supported over {f.ring}')

    log = _log(verbose)
    p = f.characteristic
    log(f'Checking if {f} is irreducible over {f.ring}')
    for r in sorted(gmpy2.prime_factors(n)):
        q = gmpy2.ipow(p, n // r)
        log(f'    Checking polynomial x^{q} - x')
        g = _frobenius_test(f, q)
        if gcd(f, g).degree() != 0:
            return True

    q = gmpy2.ipow(p, n)
    log(f'    Checking polynomial x^{q} - x')
    return bool(_frobenius_test(f, q))


def is_irreducible(f, verbose=None):
    """Test polynomial f over GF(p) for irreducibility.

    Constant polynomials are neither reducible nor irreducible.
    """
    if f is not None and isinstance(f, Polynomial) and f.degree() <= 0:
        return False

    return not is_reducible(f, verbose=verbose)


def random_polynomial(characteristic, degree, rng=None):
    """Random polynomial of given degree over Z/nZ with nonzero constant term.

    For degree 0, a random nonzero constant is returned.
    """
    if characteristic < 2:
        raise InvalidCharacteristic(f'characteristic {characteristic} is smaller than 2')

    if degree < 0:
        raise InvalidDegree(f'negative degree {degree}')

    if rng is None:
        rng = random.Random()
    p = characteristic
    f = Polynomial(p)
    f.add_term(rng.randint(1, p-1), degree)
    for e in range(degree-1, 0, -1):
        f.add_term(rng.randrange(p), e)  # NB: zero coefficients are not stored
    if degree:
        f.add_term(rng.randint(1, p-1), 0)
    return f


def find_irreducible_polynomial(characteristic, degree, verbose=None, rng=None):
    """Return a random irreducible polynomial of given degree over GF(characteristic).

    The random source rng defaults to a fresh random.Random() instance.
    Degrees above 20 or so will take considerable time.
    """
    if characteristic < 2:
        raise InvalidCharacteristic(f'characteristic {characteristic} is smaller than 2')

    if degree < 0:
        raise InvalidDegree(f'negative degree {degree}')

    if rng is None:
        rng = random.Random()
    log = _log(verbose)
    tries = 0
    while True:
        tries += 1
        log(f'Try {tries}')
        f = random_polynomial(characteristic, degree, rng)
        if not is_reducible(f, verbose=verbose):
            log(f'Total amount of tries: {tries}')
            return f
