"""This module provides the coefficient rings for polynomials.

The ring of integers Z has characteristic 0, and the ring Z/nZ of integers
modulo n has characteristic n. The kind of ring determines which operations
are available: Z/pZ = GF(p) for prime p is a field and supports everything,
long division over Z only succeeds when no fractions are needed, and for
composite n coefficients are merely kept reduced modulo n.
"""

import enum
import functools
from zpoly import gmpy as gmpy2
from zpoly.errors import InvalidCharacteristic, UnsupportedRing


class RingKind(enum.Enum):
    """Kind of coefficient ring."""

    INTEGERS = 'Z'
    PRIME_FIELD = 'GF(p)'
    COMPOSITE = 'Z/nZ'


class Ring:
    """Coefficient ring of given characteristic.

    Use function ring() to obtain instances, which are unique per characteristic.
    """

    __slots__ = 'characteristic', 'kind'

    def __init__(self, characteristic):
        if not isinstance(characteristic, int):
            raise TypeError('int required for characteristic')

        if characteristic < 0:
            raise InvalidCharacteristic(f'negative characteristic {characteristic}')

        self.characteristic = characteristic
        if characteristic == 0:
            self.kind = RingKind.INTEGERS
        elif gmpy2.is_prime(characteristic):
            self.kind = RingKind.PRIME_FIELD
        else:
            self.kind = RingKind.COMPOSITE

    @property
    def is_field(self):
        return self.kind is RingKind.PRIME_FIELD

    def reduce(self, c):
        """Return canonical representative of integer c in this ring."""
        n = self.characteristic
        if n:
            c %= n
        return c

    def invert(self, c):
        """Return inverse of nonzero c modulo prime characteristic."""
        if not self.is_field:
            raise UnsupportedRing(f'no inverses guaranteed in {self}')

        return int(gmpy2.invert(c, self.characteristic))

    def __repr__(self):
        n = self.characteristic
        if self.kind is RingKind.INTEGERS:
            return 'Z'

        if self.kind is RingKind.PRIME_FIELD:
            return f'GF({n})'

        return f'Z/{n}Z'


@functools.cache
def ring(characteristic):
    """Return ring of given characteristic (0 for the integers)."""
    return Ring(characteristic)
