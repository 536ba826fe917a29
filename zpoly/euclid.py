"""Greatest common divisors of polynomials by Euclid's algorithm.

The gcd is unique only up to multiplication by a unit of the coefficient
ring, and no normalization is done: the result is the last nonzero remainder.
Use Polynomial.monic() to normalize gcds over GF(p).

Over Z the computation fails with NonIntegralResult as soon as a remainder
would need fractional coefficients, which is the common case unless one
operand divides the other or the remainders happen to stay monic.
"""

from zpoly.polynomial import Polynomial
from zpoly.errors import NullOperand, IncompatibleRing


def gcd(a, b):
    """Greatest common divisor of polynomials a and b."""
    if a is None or b is None:
        raise NullOperand('polynomial expected, got None')

    if not (isinstance(a, Polynomial) and isinstance(b, Polynomial)):
        raise TypeError('polynomials expected')

    if a.characteristic != b.characteristic:
        raise IncompatibleRing(f'characteristic {a.characteristic} differs from {b.characteristic}')

    if a.degree() < b.degree():
        a, b = b, a
    # deg a >= deg b
    while b:
        a, b = b, a.divide(b).remainder
    return a.copy()
